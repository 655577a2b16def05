"""citypath: shortest paths between cities joined by streets.

citypath models an undirected, weighted graph of cities and streets and
offers six interchangeable shortest-path algorithms behind one
``PathFinder`` contract.

Primary API:
    CityGraph, City, Street - Graph model
    Path - Query result
    create_path_finder() - Select an algorithm by identifier
    PathfindingAlgorithm - Algorithm identifiers
    generate_cities() - Random connected worlds

Example:
    import asyncio
    from citypath import CityGraph, PathfindingAlgorithm, create_path_finder

    graph = CityGraph()
    a, b, c = graph.add_cities("A", "B", "C")
    graph.add_street(a, b, 2)
    graph.add_street(b, c, 3)

    finder = create_path_finder(PathfindingAlgorithm.JOHNSON)
    asyncio.run(finder.initialize(graph.cities))
    path = finder.find_path_between(a, c)  # [A,B,C], cost 5
"""

from __future__ import annotations

from citypath import cli, logging
from citypath._version import __version__
from citypath.algorithms import PathFinder, create_path_finder
from citypath.config import PATHFINDING_CONFIG, PathfindingConfig
from citypath.exceptions import (
    InvalidCityError,
    NegativeCycleError,
    NoPathError,
    NotInitializedError,
    PathfindingError,
)
from citypath.generation import generate_cities
from citypath.lib.nx import CityMap, from_networkx, to_networkx
from citypath.model import City, CityGraph, Path, Street
from citypath.types.base import PathfindingAlgorithm

__all__ = [
    # Version
    "__version__",
    # Model
    "City",
    "CityGraph",
    "Street",
    "Path",
    # Path finding
    "PathFinder",
    "PathfindingAlgorithm",
    "create_path_finder",
    # Configuration
    "PathfindingConfig",
    "PATHFINDING_CONFIG",
    # Errors
    "PathfindingError",
    "InvalidCityError",
    "NotInitializedError",
    "NoPathError",
    "NegativeCycleError",
    # Generation
    "generate_cities",
    # Library integrations (NetworkX)
    "CityMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
