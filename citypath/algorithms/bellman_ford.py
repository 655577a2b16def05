"""Bellman-Ford restricted to the part of the graph reachable from the start.

Every street is relaxed in both directions on each pass. After at most
``|reachable| - 1`` passes one more pass runs; any improvement at that point
means a negative-weight cycle, which can only arise if a street length was
changed after construction.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Set

from citypath.algorithms.base import PathFinder, reconstruct_path
from citypath.exceptions import NegativeCycleError
from citypath.model.graph import City, Street
from citypath.model.path import Path
from citypath.types.base import INFINITY, Cost, PathfindingAlgorithm


def reachable_cities(origin: City) -> Set[City]:
    """Breadth-first set of cities reachable from ``origin``, itself included."""
    visited = {origin}
    queue = deque([origin])
    while queue:
        city = queue.popleft()
        for neighbor, _ in city.neighbors():
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


def _relax(
    street: Street,
    distances: Dict[City, Cost],
    previous: Dict[City, City],
) -> bool:
    """Relax ``street`` in both directions. Return True if a distance improved."""
    u, v = street.cities
    updated = False
    if distances[u] + street.length < distances[v]:
        distances[v] = distances[u] + street.length
        previous[v] = u
        updated = True
    if distances[v] + street.length < distances[u]:
        distances[u] = distances[v] + street.length
        previous[u] = v
        updated = True
    return updated


class BellmanFordPathFinder(PathFinder):
    """Bellman-Ford algorithm. Needs no initialization."""

    algorithm = PathfindingAlgorithm.BELLMAN_FORD

    def _search(self, start: City, end: City) -> Path:
        cities = reachable_cities(start)

        # Distinct streets among reachable cities, in first-seen order
        streets: List[Street] = list(
            dict.fromkeys(street for city in cities for street in city.streets)
        )

        distances: Dict[City, Cost] = {city: INFINITY for city in cities}
        previous: Dict[City, City] = {}
        distances[start] = 0

        for _ in range(len(cities) - 1):
            updated = False
            for street in streets:
                if _relax(street, distances, previous):
                    updated = True
            if not updated:
                break

        for street in streets:
            u, v = street.cities
            if (
                distances[u] + street.length < distances[v]
                or distances[v] + street.length < distances[u]
            ):
                raise NegativeCycleError("Graph contains a negative-weight cycle")

        return reconstruct_path(previous, start, end)
