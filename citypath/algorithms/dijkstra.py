"""Dijkstra's single-source shortest path with early exit at the target."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List

from citypath.algorithms.base import PathFinder, reconstruct_path
from citypath.model.graph import City
from citypath.model.path import Path
from citypath.types.base import Cost, PathfindingAlgorithm
from citypath.types.dto import CityScore


class DijkstraPathFinder(PathFinder):
    """Dijkstra's algorithm. Needs no initialization."""

    algorithm = PathfindingAlgorithm.DIJKSTRA

    def _search(self, start: City, end: City) -> Path:
        distances: Dict[City, Cost] = {start: 0}
        previous: Dict[City, City] = {}
        queue: List[CityScore] = [CityScore(start, 0)]

        while queue:
            current = heappop(queue)
            city = current.city
            # Superseded entry: a shorter distance was pushed later
            if current.score > distances[city]:
                continue
            if city is end:
                break

            for neighbor, street in city.neighbors():
                updated = current.score + street.length
                if neighbor not in distances or updated < distances[neighbor]:
                    distances[neighbor] = updated
                    previous[neighbor] = city
                    heappush(queue, CityScore(neighbor, updated))

        return reconstruct_path(previous, start, end)
