"""Path finder contract shared by every shortest-path algorithm.

A ``PathFinder`` is used in two phases:

1. ``await finder.initialize(cities)`` once per graph. Algorithms without a
   precompute treat this as a no-op and always report ``initialized``.
   Precompute-heavy algorithms yield to the event loop at fixed work
   intervals and abort with ``asyncio.CancelledError`` when cancelled,
   leaving ``initialized`` False.
2. ``finder.find_path_between(start, end)`` any number of times. Queries are
   synchronous and reuse the precomputed state.

Argument checks common to all algorithms live in ``find_path_between``;
subclasses implement ``_search`` for the non-trivial case.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Protocol

from citypath.config import PATHFINDING_CONFIG, PathfindingConfig
from citypath.exceptions import InvalidCityError, NoPathError, NotInitializedError
from citypath.model.graph import City
from citypath.model.path import Path
from citypath.types.base import PathfindingAlgorithm


class CancelEvent(Protocol):
    """Anything exposing ``is_set()``, such as ``asyncio.Event``."""

    def is_set(self) -> bool: ...


class CooperativeYield:
    """Work counter that yields to the event loop every ``interval`` units.

    At every yield point the optional cancel event is checked. A set event
    raises ``asyncio.CancelledError``, the same signal a cancelled task
    receives from ``asyncio.sleep``.
    """

    def __init__(self, interval: int, cancel_event: Optional[CancelEvent] = None):
        self.interval = interval
        self.cancel_event = cancel_event
        self._pending = 0

    def check(self) -> None:
        """Raise ``asyncio.CancelledError`` if cancellation was requested."""
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise asyncio.CancelledError("path finder initialization cancelled")

    async def checkpoint(self) -> None:
        """Yield once (when yielding is enabled) and check for cancellation."""
        if self.interval > 0:
            await asyncio.sleep(0)
        self.check()

    async def tick(self, units: int = 1) -> None:
        """Record ``units`` of work, yielding once the interval is reached."""
        if self.interval <= 0:
            return
        self._pending += units
        if self._pending >= self.interval:
            # Keep the remainder for the next cycle
            self._pending %= self.interval
            await self.checkpoint()


class PathFinder(ABC):
    """Base class for the shortest-path algorithms."""

    #: Algorithm implemented by the subclass.
    algorithm: PathfindingAlgorithm

    #: Whether ``initialize`` must complete before queries.
    requires_initialization: bool = False

    def __init__(self, config: Optional[PathfindingConfig] = None) -> None:
        self.config = config if config is not None else PATHFINDING_CONFIG
        self._initialized = not self.requires_initialization

    @property
    def initialized(self) -> bool:
        """True once queries can be answered."""
        return self._initialized

    async def initialize(
        self,
        cities: Iterable[City],
        cancel_event: Optional[CancelEvent] = None,
    ) -> None:
        """Precompute algorithm state for ``cities``.

        Args:
            cities: Every city of the graph.
            cancel_event: Optional event; when set, precompute aborts at the
                next yield point.

        Raises:
            InvalidCityError: If ``cities`` is None.
            asyncio.CancelledError: If cancelled during precompute.
        """
        if cities is None:
            raise InvalidCityError("Cities cannot be None")
        if not self.requires_initialization:
            return

        self._initialized = False
        yielder = CooperativeYield(self.config.init_yield_count, cancel_event)
        await self._precompute(list(cities), yielder)
        self._initialized = True

    async def _precompute(self, cities: List[City], yielder: CooperativeYield) -> None:
        """Build and publish precomputed state. Overridden by precompute algorithms."""

    def find_path_between(self, start: City, end: City) -> Path:
        """Find a shortest path from ``start`` to ``end``.

        Args:
            start: City to start at.
            end: City to end at.

        Returns:
            Path: Ordered cities from ``start`` to ``end`` inclusive.

        Raises:
            NotInitializedError: If the algorithm needs ``initialize`` first.
            InvalidCityError: If either city is None, or unknown to the
                precomputed state.
            NoPathError: If the cities are not connected.
        """
        if not self._initialized:
            raise NotInitializedError(
                f"{self.algorithm.name} path finder has not been initialized"
            )
        if start is None:
            raise InvalidCityError("Starting city cannot be None")
        if end is None:
            raise InvalidCityError("Ending city cannot be None")
        if start is end:
            return Path((start,))
        return self._search(start, end)

    @abstractmethod
    def _search(self, start: City, end: City) -> Path:
        """Search for a path between two distinct cities."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(initialized={self._initialized})"


def reconstruct_path(previous: Dict[City, City], start: City, end: City) -> Path:
    """Walk a predecessor map from ``end`` back to ``start``.

    Raises:
        NoPathError: If ``end`` was never reached from ``start``.
    """
    if end not in previous:
        raise NoPathError(f"No path exists between {start.name} and {end.name}")

    reversed_path = [end]
    current = end
    while current is not start:
        current = previous[current]
        reversed_path.append(current)
    reversed_path.reverse()
    return Path(reversed_path)
