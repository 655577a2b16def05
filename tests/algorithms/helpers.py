import asyncio

from citypath.algorithms import PathFinder, create_path_finder
from citypath.model.graph import CityGraph
from citypath.types.base import PathfindingAlgorithm

ALL_ALGORITHMS = list(PathfindingAlgorithm)

PRECOMPUTE_ALGORITHMS = [
    PathfindingAlgorithm.A_STAR,
    PathfindingAlgorithm.FLOYD_WARSHALL,
    PathfindingAlgorithm.JOHNSON,
]

# Bidirectional search accepts its first collision and may return a longer path
EXACT_ALGORITHMS = [
    a for a in ALL_ALGORITHMS if a != PathfindingAlgorithm.DIJKSTRA_BIDIRECTIONAL
]


def prepared(algorithm: PathfindingAlgorithm, graph: CityGraph) -> PathFinder:
    finder = create_path_finder(algorithm)
    asyncio.run(finder.initialize(graph.cities))
    return finder
