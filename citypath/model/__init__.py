"""City graph model package.

Defines the graph primitives used by every path finder: ``City`` nodes,
undirected ``Street`` edges, the ``CityGraph`` that owns them, and the
``Path`` result type.
"""

from citypath.model.graph import City, CityGraph, Street
from citypath.model.path import Path

__all__ = [
    "City",
    "CityGraph",
    "Street",
    "Path",
]
