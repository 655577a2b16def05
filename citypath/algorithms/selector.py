"""Map an algorithm identifier to a fresh path finder instance."""

from __future__ import annotations

from typing import Optional, Union

from citypath.algorithms.astar import AStarPathFinder
from citypath.algorithms.base import PathFinder
from citypath.algorithms.bellman_ford import BellmanFordPathFinder
from citypath.algorithms.bidirectional import BidirectionalDijkstraPathFinder
from citypath.algorithms.dijkstra import DijkstraPathFinder
from citypath.algorithms.floyd_warshall import FloydWarshallPathFinder
from citypath.algorithms.johnson import JohnsonPathFinder
from citypath.config import PathfindingConfig
from citypath.types.base import PathfindingAlgorithm


def create_path_finder(
    algorithm: Union[PathfindingAlgorithm, str],
    config: Optional[PathfindingConfig] = None,
) -> PathFinder:
    """Create a new path finder for ``algorithm``.

    Args:
        algorithm: Algorithm member, or its name (see
            ``PathfindingAlgorithm.from_string``).
        config: Optional tuning; defaults to the global ``PATHFINDING_CONFIG``.

    Returns:
        PathFinder: A new, independent instance.

    Raises:
        ValueError: If a string does not name an algorithm.
        NotImplementedError: If no path finder exists for ``algorithm``.
    """
    if isinstance(algorithm, str):
        algorithm = PathfindingAlgorithm.from_string(algorithm)

    match algorithm:
        case PathfindingAlgorithm.DIJKSTRA:
            return DijkstraPathFinder(config)
        case PathfindingAlgorithm.A_STAR:
            return AStarPathFinder(config)
        case PathfindingAlgorithm.BELLMAN_FORD:
            return BellmanFordPathFinder(config)
        case PathfindingAlgorithm.FLOYD_WARSHALL:
            return FloydWarshallPathFinder(config)
        case PathfindingAlgorithm.JOHNSON:
            return JohnsonPathFinder(config)
        case PathfindingAlgorithm.DIJKSTRA_BIDIRECTIONAL:
            return BidirectionalDijkstraPathFinder(config)
        case _:
            raise NotImplementedError(
                f"No path finder has been implemented for algorithm {algorithm!r}."
            )
