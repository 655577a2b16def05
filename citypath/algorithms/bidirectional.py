"""Bidirectional Dijkstra: two search fronts that stop at their first collision.

One front searches from the start, the other from the end. Each round
expands one city per front (forward first). A front stops the search as
soon as it pops a city the other front has already visited; that city is
used as the join point.

Notes:
    The first collision is accepted as final. Textbook bidirectional
    Dijkstra additionally tracks the best ``dist_f(u) + w + dist_b(v)`` seen
    so far and stops only when the two queue minima exceed it. That check is
    not performed here, so on some weighted graphs the returned path can be
    longer than the shortest one.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Set

from citypath.algorithms.base import PathFinder
from citypath.exceptions import NoPathError
from citypath.model.graph import City
from citypath.model.path import Path
from citypath.types.base import Cost, PathfindingAlgorithm
from citypath.types.dto import CityScore


class SearchFront:
    """Search state for one side of the bidirectional search."""

    def __init__(self, origin: City) -> None:
        self.origin = origin
        self.distances: Dict[City, Cost] = {origin: 0}
        self.previous: Dict[City, City] = {}
        self.visited: Set[City] = set()
        self.queue: List[CityScore] = [CityScore(origin, 0)]

    def pop(self) -> Optional[CityScore]:
        """Pop the minimum live entry, discarding superseded ones."""
        while self.queue:
            entry = heappop(self.queue)
            if entry.score <= self.distances[entry.city]:
                return entry
        return None

    def step(self, other: SearchFront) -> Optional[City]:
        """Expand one city. Return it if the other front already visited it."""
        entry = self.pop()
        if entry is None:
            return None

        city = entry.city
        if city in self.visited:
            return None
        self.visited.add(city)

        if city in other.visited:
            return city

        for neighbor, street in city.neighbors():
            updated = self.distances[city] + street.length
            if neighbor not in self.distances or updated < self.distances[neighbor]:
                self.distances[neighbor] = updated
                self.previous[neighbor] = city
                heappush(self.queue, CityScore(neighbor, updated))
        return None

    def chain_to_origin(self, city: City) -> List[City]:
        """Cities from ``city`` back to this front's origin, inclusive."""
        chain = [city]
        while city is not self.origin:
            city = self.previous[city]
            chain.append(city)
        return chain


class BidirectionalDijkstraPathFinder(PathFinder):
    """Dijkstra's algorithm run from both ends. Needs no initialization."""

    algorithm = PathfindingAlgorithm.DIJKSTRA_BIDIRECTIONAL

    def _search(self, start: City, end: City) -> Path:
        forward = SearchFront(start)
        backward = SearchFront(end)

        meeting: Optional[City] = None
        while forward.queue and backward.queue:
            meeting = forward.step(backward)
            if meeting is not None:
                break
            meeting = backward.step(forward)
            if meeting is not None:
                break

        if meeting is None:
            raise NoPathError(f"No path exists between {start.name} and {end.name}")

        head = forward.chain_to_origin(meeting)
        head.reverse()
        tail = backward.chain_to_origin(meeting)
        return Path(head + tail[1:])
