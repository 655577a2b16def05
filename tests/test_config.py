"""Test the configuration module functionality."""

from citypath.config import PATHFINDING_CONFIG, PathfindingConfig


def test_pathfinding_config_defaults():
    config = PathfindingConfig()

    assert config.landmark_factor == 10
    assert config.init_yield_count == 10


def test_landmark_count_scales_with_cities():
    config = PathfindingConfig()

    assert config.landmark_count(100) == 10
    assert config.landmark_count(25) == 2
    assert config.landmark_count(1000) == 100


def test_landmark_count_never_below_one():
    config = PathfindingConfig()

    assert config.landmark_count(0) == 1
    assert config.landmark_count(9) == 1


def test_non_positive_factor_uses_every_city():
    assert PathfindingConfig(landmark_factor=0).landmark_count(12) == 12
    assert PathfindingConfig(landmark_factor=-3).landmark_count(0) == 1


def test_custom_factor():
    assert PathfindingConfig(landmark_factor=4).landmark_count(10) == 2


def test_global_config_instance():
    assert isinstance(PATHFINDING_CONFIG, PathfindingConfig)
    assert PATHFINDING_CONFIG.landmark_factor == 10
