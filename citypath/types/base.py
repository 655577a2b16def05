"""Base aliases and enums shared by the path finders."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Numeric path cost (sum of street lengths).
Cost = Union[int, float]

#: Distance assigned to cities that have not been reached.
INFINITY = float("inf")


class PathfindingAlgorithm(IntEnum):
    """Shortest-path algorithms available through ``create_path_finder``."""

    DIJKSTRA = 0
    A_STAR = 1
    BELLMAN_FORD = 2
    FLOYD_WARSHALL = 3
    JOHNSON = 4
    DIJKSTRA_BIDIRECTIONAL = 5

    @classmethod
    def from_string(cls, value: str) -> "PathfindingAlgorithm":
        """Parse a string into a PathfindingAlgorithm enum value.

        Dashes and spaces are treated as underscores, so ``"floyd-warshall"``
        and ``"A_STAR"`` are both accepted. ``"astar"`` is accepted as an alias.

        Args:
            value: Case-insensitive algorithm name.

        Returns:
            The corresponding PathfindingAlgorithm member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if key == "ASTAR":
            key = "A_STAR"
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid algorithm '{value}'. Valid values are: {valid}"
            ) from None
