"""Shortest-path algorithms behind the common ``PathFinder`` contract."""

from citypath.algorithms.astar import AStarPathFinder
from citypath.algorithms.base import CooperativeYield, PathFinder
from citypath.algorithms.bellman_ford import BellmanFordPathFinder
from citypath.algorithms.bidirectional import BidirectionalDijkstraPathFinder
from citypath.algorithms.dijkstra import DijkstraPathFinder
from citypath.algorithms.floyd_warshall import FloydWarshallPathFinder
from citypath.algorithms.johnson import JohnsonPathFinder
from citypath.algorithms.selector import create_path_finder

__all__ = [
    "PathFinder",
    "CooperativeYield",
    "create_path_finder",
    "DijkstraPathFinder",
    "BidirectionalDijkstraPathFinder",
    "AStarPathFinder",
    "BellmanFordPathFinder",
    "FloydWarshallPathFinder",
    "JohnsonPathFinder",
]
