"""Exceptions raised by citypath path finders."""


class PathfindingError(Exception):
    """Base exception for shortest-path failures."""


class InvalidCityError(PathfindingError, ValueError):
    """Raised when a city argument is missing or does not fit the operation."""


class NotInitializedError(PathfindingError, RuntimeError):
    """Raised when a query needs precomputed state that does not exist yet."""


class NoPathError(PathfindingError, RuntimeError):
    """Raised when start and end are not connected."""


class NegativeCycleError(PathfindingError, RuntimeError):
    """Raised when relaxation still improves a distance after the final pass."""
