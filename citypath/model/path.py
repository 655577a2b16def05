"""Lightweight representation of a route through the city graph.

``Path`` stores an ordered, non-empty sequence of cities from start to end.
Helpers expose the endpoints, total cost, and a check of the adjacency
invariant (each consecutive pair joined by a street).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from citypath.model.graph import City
from citypath.types.base import Cost


def _min_street_length(a: City, b: City) -> Optional[int]:
    """Return the shortest street length joining ``a`` and ``b``, or None."""
    best: Optional[int] = None
    for neighbor, street in a.neighbors():
        if neighbor is b and (best is None or street.length < best):
            best = street.length
    return best


@dataclass(frozen=True)
class Path:
    """A single route between two cities.

    Attributes:
        cities: Cities to traverse, in order, including start and end.
    """

    cities: Tuple[City, ...]

    def __init__(self, cities: Sequence[City]) -> None:
        cities = tuple(cities)
        if not cities:
            raise ValueError("Path must contain at least one city")
        object.__setattr__(self, "cities", cities)

    @property
    def start(self) -> City:
        """Return the first city in the path."""
        return self.cities[0]

    @property
    def end(self) -> City:
        """Return the last city in the path."""
        return self.cities[-1]

    def __getitem__(self, idx: int) -> City:
        return self.cities[idx]

    def __iter__(self) -> Iterator[City]:
        return iter(self.cities)

    def __len__(self) -> int:
        return len(self.cities)

    def __str__(self) -> str:
        """Render as ``[A,B,C]`` using city names."""
        return "[" + ",".join(city.name for city in self.cities) + "]"

    def cost(self) -> Cost:
        """Return the total length of the path.

        Each hop uses the shortest of the parallel streets joining the pair.

        Returns:
            Sum of hop lengths; 0 for a single-city path.

        Raises:
            ValueError: If a consecutive pair is not joined by any street.
        """
        total = 0
        for a, b in zip(self.cities, self.cities[1:]):
            length = _min_street_length(a, b)
            if length is None:
                raise ValueError(f"No street joins '{a.name}' and '{b.name}'")
            total += length
        return total

    def is_connected(self) -> bool:
        """Return True if every consecutive pair is joined by a street."""
        return all(
            _min_street_length(a, b) is not None
            for a, b in zip(self.cities, self.cities[1:])
        )
