"""Johnson's all-pairs shortest paths: potentials, reweighting, per-source Dijkstra.

Initialization:
  1. A synthetic source joined to every city by a zero-length edge is added
     to a temporary edge list (never to the graph itself).
  2. Bellman-Ford from the synthetic source yields a potential ``h[v]`` per
     city.
  3. Each street is reweighted once, ``w' = w + h[u] - h[v]``, and the value
     is stored for both directions of the undirected street. Parallel streets
     keep the smallest reweighted length.
  4. Dijkstra runs from every city over the reweighted dense matrix. True
     distances are ``g[v] + h[v] - h[src]`` and ``next[src, v]`` keeps the
     Dijkstra predecessor of ``v``.

Queries walk predecessors from the end back to the start.
"""

from __future__ import annotations

from heapq import heappop, heappush
from time import perf_counter
from typing import Dict, List, Tuple

import numpy as np

from citypath.algorithms.base import CooperativeYield
from citypath.algorithms.floyd_warshall import direct_neighbor_index
from citypath.algorithms.matrix import (
    NO_CITY,
    UNREACHABLE,
    MatrixPathFinder,
    empty_matrices,
    index_cities,
)
from citypath.exceptions import NoPathError
from citypath.logging import get_logger
from citypath.model.graph import City
from citypath.model.path import Path
from citypath.types.base import INFINITY, Cost, PathfindingAlgorithm

logger = get_logger(__name__)

Edge = Tuple[int, int, int]


def street_edges(cities: List[City], index: Dict[City, int]) -> List[Edge]:
    """Distinct streets among ``cities`` as ``(u, v, length)`` index triples."""
    streets = dict.fromkeys(street for city in cities for street in city.streets)
    edges: List[Edge] = []
    for street in streets:
        u = direct_neighbor_index(street.second, street.first, index)
        v = direct_neighbor_index(street.first, street.second, index)
        edges.append((u, v, street.length))
    return edges


async def compute_potentials(
    n: int, edges: List[Edge], yielder: CooperativeYield
) -> List[int]:
    """Bellman-Ford from a synthetic source (index ``n``) linked to every city.

    Returns:
        Potential ``h[v]`` for each of the ``n`` real cities.
    """
    source = n
    all_edges = edges + [(source, v, 0) for v in range(n)]
    potential: List[Cost] = [INFINITY] * (n + 1)
    potential[source] = 0

    for _ in range(n):
        updated = False
        for u, v, length in all_edges:
            if potential[u] + length < potential[v]:
                potential[v] = potential[u] + length
                updated = True
            if potential[v] + length < potential[u]:
                potential[u] = potential[v] + length
                updated = True
            await yielder.tick()
        if not updated:
            break

    return [int(p) for p in potential[:n]]


def reweight(n: int, edges: List[Edge], h: List[int]) -> np.ndarray:
    """Dense matrix of reweighted lengths; ``UNREACHABLE`` where no street."""
    weights = np.full((n, n), UNREACHABLE, dtype=np.int64)
    for u, v, length in edges:
        w_prime = length + h[u] - h[v]
        if w_prime < weights[u, v]:
            weights[u, v] = w_prime
        if w_prime < weights[v, u]:
            weights[v, u] = w_prime
    return weights


class JohnsonPathFinder(MatrixPathFinder):
    """Johnson's algorithm. Requires ``initialize``."""

    algorithm = PathfindingAlgorithm.JOHNSON

    async def _precompute(self, cities: List[City], yielder: CooperativeYield) -> None:
        started = perf_counter()
        n = len(cities)
        index = index_cities(cities)
        edges = street_edges(cities, index)

        h = await compute_potentials(n, edges, yielder)
        weights = reweight(n, edges, h)
        await yielder.checkpoint()

        dist, nxt = empty_matrices(n)
        for src in range(n):
            g_score: List[Cost] = [INFINITY] * n
            prev: List[int] = [NO_CITY] * n
            g_score[src] = 0
            queue: List[Tuple[Cost, int]] = [(0, src)]

            while queue:
                score, u = heappop(queue)
                if score > g_score[u]:
                    continue
                row = weights[u]
                for v in np.flatnonzero(row < UNREACHABLE):
                    v = int(v)
                    tentative = score + int(row[v])
                    if tentative < g_score[v]:
                        g_score[v] = tentative
                        prev[v] = u
                        heappush(queue, (tentative, v))
                await yielder.tick()

            for v in range(n):
                if g_score[v] != INFINITY:
                    dist[src, v] = g_score[v] + h[v] - h[src]
                    nxt[src, v] = prev[v]

        self._publish(cities, index, dist, nxt)
        logger.debug(
            "Johnson matrices for %d cities (%d streets) computed in %.3f s",
            n,
            len(edges),
            perf_counter() - started,
        )

    def _search(self, start: City, end: City) -> Path:
        i, j = self._indices(start, end)
        path = [end]
        current = j
        while current != i:
            predecessor = int(self._next[i, current])
            if predecessor == NO_CITY:
                raise NoPathError("Path reconstruction failed due to missing predecessor")
            current = predecessor
            path.append(self._cities[current])
        path.reverse()
        return Path(path)
