"""Floyd-Warshall all-pairs shortest paths over a dense distance matrix.

Initialization builds ``dist`` and ``next`` matrices from direct streets
(parallel streets collapse to the shortest one) and runs the ``k, i, j``
relaxation. Rows are relaxed with numpy. Improved cells count towards
``init_yield_count``, but yields and cancellation checks happen at most once
per relaxed row. Queries follow ``next[current, end]`` from the start city.
"""

from __future__ import annotations

from time import perf_counter
from typing import Dict, List

import numpy as np

from citypath.algorithms.base import CooperativeYield
from citypath.algorithms.matrix import (
    UNREACHABLE,
    MatrixPathFinder,
    empty_matrices,
    index_cities,
)
from citypath.exceptions import InvalidCityError
from citypath.logging import get_logger
from citypath.model.graph import City
from citypath.model.path import Path
from citypath.types.base import PathfindingAlgorithm

logger = get_logger(__name__)


def direct_neighbor_index(city: City, neighbor: City, index: Dict[City, int]) -> int:
    """Return the index of ``neighbor``, which must be among the indexed cities."""
    j = index.get(neighbor)
    if j is None:
        raise InvalidCityError(
            f"City '{city.name}' has a street to '{neighbor.name}', "
            "which is not among the cities being initialized"
        )
    return j


class FloydWarshallPathFinder(MatrixPathFinder):
    """Floyd-Warshall algorithm. Requires ``initialize``."""

    algorithm = PathfindingAlgorithm.FLOYD_WARSHALL

    async def _precompute(self, cities: List[City], yielder: CooperativeYield) -> None:
        started = perf_counter()
        n = len(cities)
        index = index_cities(cities)
        dist, nxt = empty_matrices(n)

        for city in cities:
            i = index[city]
            for neighbor, street in city.neighbors():
                j = direct_neighbor_index(city, neighbor, index)
                if street.length < dist[i, j]:
                    dist[i, j] = street.length
                    nxt[i, j] = j

        await yielder.checkpoint()

        for k in range(n):
            row_k = dist[k]
            for i in range(n):
                through_k = dist[i, k]
                if i == k or through_k >= UNREACHABLE:
                    continue
                candidate = through_k + row_k
                improved = candidate < dist[i]
                count = int(np.count_nonzero(improved))
                if count:
                    dist[i, improved] = candidate[improved]
                    nxt[i, improved] = nxt[i, k]
                    await yielder.tick(count)

        self._publish(cities, index, dist, nxt)
        logger.debug(
            "Floyd-Warshall matrices for %d cities computed in %.3f s",
            n,
            perf_counter() - started,
        )

    def _search(self, start: City, end: City) -> Path:
        i, j = self._indices(start, end)
        path = [start]
        current = i
        while current != j:
            current = int(self._next[current, j])
            path.append(self._cities[current])
        return Path(path)
