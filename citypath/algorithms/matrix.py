"""Shared state for all-pairs path finders backed by dense numpy matrices.

Cities are assigned contiguous indices in the order given to ``initialize``.
``dist[i, j]`` holds the shortest distance and ``next[i, j]`` a routing
entry whose meaning depends on the algorithm (successor for Floyd-Warshall,
predecessor for Johnson). Unreachable cells hold ``UNREACHABLE`` in ``dist``
and ``NO_CITY`` in ``next``.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np

from citypath.algorithms.base import PathFinder
from citypath.config import PathfindingConfig
from citypath.exceptions import InvalidCityError, NoPathError, NotInitializedError
from citypath.model.graph import City
from citypath.types.base import INFINITY, Cost

#: Half the largest int64, so two sentinels can be summed without overflow.
UNREACHABLE = np.iinfo(np.int64).max // 2

#: Marker for an unset routing entry.
NO_CITY = -1


def index_cities(cities: List[City]) -> Dict[City, int]:
    """Map each city to its position in ``cities``."""
    return {city: i for i, city in enumerate(cities)}


def empty_matrices(n: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(dist, next)`` for ``n`` cities with nothing reachable yet."""
    dist = np.full((n, n), UNREACHABLE, dtype=np.int64)
    np.fill_diagonal(dist, 0)
    nxt = np.full((n, n), NO_CITY, dtype=np.int64)
    return dist, nxt


class MatrixPathFinder(PathFinder):
    """Base for path finders that precompute all-pairs matrices."""

    requires_initialization = True

    def __init__(self, config: Optional[PathfindingConfig] = None) -> None:
        super().__init__(config)
        self._cities: List[City] = []
        self._index: Dict[City, int] = {}
        self._dist: np.ndarray = np.zeros((0, 0), dtype=np.int64)
        self._next: np.ndarray = np.zeros((0, 0), dtype=np.int64)

    def _publish(
        self,
        cities: List[City],
        index: Dict[City, int],
        dist: np.ndarray,
        nxt: np.ndarray,
    ) -> None:
        self._cities = cities
        self._index = index
        self._dist = dist
        self._next = nxt

    def _indices(self, start: City, end: City) -> Tuple[int, int]:
        """Return matrix indices for a connected pair.

        Raises:
            InvalidCityError: If either city was not part of ``initialize``.
            NoPathError: If the pair is not connected.
        """
        i = self._index.get(start)
        j = self._index.get(end)
        if i is None or j is None:
            raise InvalidCityError("Start or end city is not in the graph")
        if i != j and self._next[i, j] == NO_CITY:
            raise NoPathError(f"No path exists between {start.name} and {end.name}")
        return i, j

    def distance_between(self, start: City, end: City) -> Cost:
        """Return the precomputed shortest distance, or infinity if unreachable.

        Raises:
            NotInitializedError: If ``initialize`` has not completed.
            InvalidCityError: If either city was not part of ``initialize``.
        """
        if not self._initialized:
            raise NotInitializedError(
                f"{self.algorithm.name} path finder has not been initialized"
            )
        i = self._index.get(start)
        j = self._index.get(end)
        if i is None or j is None:
            raise InvalidCityError("Start or end city is not in the graph")
        value = int(self._dist[i, j])
        return INFINITY if value >= UNREACHABLE else value
