"""Shared types: cost aliases, the algorithm enum, and priority keys."""

from citypath.types.base import INFINITY, Cost, PathfindingAlgorithm

__all__ = ["Cost", "INFINITY", "PathfindingAlgorithm"]
