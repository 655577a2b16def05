"""Configuration classes for citypath components."""

from dataclasses import dataclass


@dataclass
class PathfindingConfig:
    """Tuning knobs for precompute-heavy path finders."""

    # Number of cities per landmark for the ALT heuristic
    landmark_factor: int = 10

    # Units of precompute work between cooperative yields (0 disables yielding)
    init_yield_count: int = 10

    def landmark_count(self, total_cities: int) -> int:
        """Return how many landmarks to select for ``total_cities`` cities."""
        if self.landmark_factor <= 0:
            return max(1, total_cities)
        return max(1, total_cities // self.landmark_factor)


# Global configuration instance
PATHFINDING_CONFIG = PathfindingConfig()
