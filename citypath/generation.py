"""Random world generation: cities joined by streets of random length.

Every new city is joined to the previously added city, which keeps the
world connected, and, once at least two earlier cities exist, to one more
random earlier city other than the previous one.
"""

from __future__ import annotations

import random
from typing import Optional

from citypath.logging import get_logger
from citypath.model.graph import CityGraph

logger = get_logger(__name__)


def generate_cities(
    total_cities: int,
    min_street_length: int = 1,
    max_street_length: int = 1,
    seed: Optional[int] = None,
) -> CityGraph:
    """Generate a connected graph of ``total_cities`` cities named ``"0"``, ``"1"``, ...

    Args:
        total_cities: Number of cities; at least 1.
        min_street_length: Smallest street length (inclusive, non-negative).
        max_street_length: Largest street length (inclusive).
        seed: Optional seed for reproducible worlds.

    Returns:
        CityGraph: The generated world.

    Raises:
        ValueError: On a non-positive city count or an invalid length range.
    """
    if total_cities < 1:
        raise ValueError(f"total_cities must be at least 1, got {total_cities}")
    if min_street_length < 0:
        raise ValueError(
            f"min_street_length must be non-negative, got {min_street_length}"
        )
    if min_street_length > max_street_length:
        raise ValueError(
            "max_street_length must be greater than or equal to min_street_length"
        )

    rng = random.Random(seed)
    graph = CityGraph()
    last_added = graph.add_city("0")

    for i in range(1, total_cities):
        new_city = graph.add_city(str(i))
        graph.add_street(
            new_city, last_added, rng.randint(min_street_length, max_street_length)
        )
        # Earlier cities other than last_added occupy handles 0 .. i - 2
        if i > 1:
            random_city = graph.city(rng.randrange(i - 1))
            graph.add_street(
                new_city,
                random_city,
                rng.randint(min_street_length, max_street_length),
            )
        last_added = new_city

    logger.debug(
        "Generated %d cities and %d streets", len(graph), len(graph.streets)
    )
    return graph
