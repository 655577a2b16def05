"""A* search guided by the ALT (A*, Landmarks, Triangle inequality) heuristic.

Initialization picks landmark cities and records the shortest distance from
each landmark to every city it reaches. For any landmark ``L`` the triangle
inequality gives ``|d(L, b) - d(L, a)| <= d(a, b)``, so the maximum over all
landmarks is an admissible (and consistent) lower bound used to rank the A*
queue.

Landmark selection favours well-connected cities: the ``max(1, N // factor)``
cities with the most incident streets, ties kept in input order.
"""

from __future__ import annotations

from heapq import heappop, heappush
from time import perf_counter
from typing import Callable, Dict, List, Optional, Tuple

from citypath.algorithms.base import CooperativeYield, PathFinder, reconstruct_path
from citypath.config import PathfindingConfig
from citypath.logging import get_logger
from citypath.model.graph import City
from citypath.model.path import Path
from citypath.types.base import Cost, PathfindingAlgorithm
from citypath.types.dto import CityScore

logger = get_logger(__name__)

Heuristic = Callable[[City, City], Cost]


def _zero_heuristic(a: City, b: City) -> Cost:
    return 0


def single_source_shortest_paths(
    source: City,
    heuristic: Heuristic = _zero_heuristic,
    target: Optional[City] = None,
) -> Tuple[Dict[City, Cost], Dict[City, City]]:
    """Heuristic-guided Dijkstra from ``source``.

    Args:
        source: City to search from.
        heuristic: Lower bound ``h(city, target)``; zero turns this into
            plain Dijkstra.
        target: Optional city; the search stops once it is popped. Without
            a target every reachable city is settled.

    Returns:
        Tuple of (distances, previous) maps over the cities reached.
    """
    goal = target if target is not None else source
    g_score: Dict[City, Cost] = {source: 0}
    came_from: Dict[City, City] = {}
    queue: List[CityScore] = [CityScore(source, heuristic(source, goal))]

    while queue:
        entry = heappop(queue)
        current = entry.city
        current_g = g_score[current]
        # Superseded entry: g improved after this one was pushed
        if entry.score > current_g + heuristic(current, goal):
            continue
        if target is not None and current is target:
            break

        for neighbor, street in current.neighbors():
            tentative_g = current_g + street.length
            if neighbor not in g_score or tentative_g < g_score[neighbor]:
                came_from[neighbor] = current
                g_score[neighbor] = tentative_g
                f_score = tentative_g + heuristic(neighbor, goal)
                heappush(queue, CityScore(neighbor, f_score))

    return g_score, came_from


class AStarPathFinder(PathFinder):
    """A* with landmark heuristic. Requires ``initialize``."""

    algorithm = PathfindingAlgorithm.A_STAR
    requires_initialization = True

    def __init__(self, config: Optional[PathfindingConfig] = None) -> None:
        super().__init__(config)
        self.landmarks: List[City] = []
        self.landmark_distances: Dict[City, Dict[City, Cost]] = {}

    async def _precompute(self, cities: List[City], yielder: CooperativeYield) -> None:
        started = perf_counter()
        landmark_count = self.config.landmark_count(len(cities))
        landmarks = sorted(cities, key=lambda c: c.degree, reverse=True)[
            :landmark_count
        ]
        logger.debug(
            "Selecting %d landmark(s) among %d cities", landmark_count, len(cities)
        )

        await yielder.checkpoint()

        distances: Dict[City, Dict[City, Cost]] = {}
        for landmark in landmarks:
            distances[landmark], _ = single_source_shortest_paths(landmark)
            await yielder.tick(len(distances[landmark]))

        self.landmarks = landmarks
        self.landmark_distances = distances
        logger.debug("Landmark tables computed in %.3f s", perf_counter() - started)

    def heuristic(self, a: City, b: City) -> Cost:
        """ALT lower bound on the distance between ``a`` and ``b``.

        Landmarks that do not reach both cities contribute nothing.
        """
        if a is b or a is None or b is None:
            return 0

        best: Cost = 0
        for landmark in self.landmarks:
            table = self.landmark_distances[landmark]
            dist_a = table.get(a)
            dist_b = table.get(b)
            if dist_a is None or dist_b is None:
                continue
            estimate = abs(dist_b - dist_a)
            if estimate > best:
                best = estimate
        return best

    def _search(self, start: City, end: City) -> Path:
        _, came_from = single_source_shortest_paths(start, self.heuristic, end)
        return reconstruct_path(came_from, start, end)
