import pytest

from citypath.algorithms import (
    AStarPathFinder,
    BellmanFordPathFinder,
    BidirectionalDijkstraPathFinder,
    DijkstraPathFinder,
    FloydWarshallPathFinder,
    JohnsonPathFinder,
    create_path_finder,
)
from citypath.config import PATHFINDING_CONFIG, PathfindingConfig
from citypath.types.base import PathfindingAlgorithm


@pytest.mark.parametrize(
    "algorithm, expected",
    [
        (PathfindingAlgorithm.DIJKSTRA, DijkstraPathFinder),
        (PathfindingAlgorithm.A_STAR, AStarPathFinder),
        (PathfindingAlgorithm.BELLMAN_FORD, BellmanFordPathFinder),
        (PathfindingAlgorithm.FLOYD_WARSHALL, FloydWarshallPathFinder),
        (PathfindingAlgorithm.JOHNSON, JohnsonPathFinder),
        (
            PathfindingAlgorithm.DIJKSTRA_BIDIRECTIONAL,
            BidirectionalDijkstraPathFinder,
        ),
    ],
)
def test_each_identifier_maps_to_its_finder(algorithm, expected):
    finder = create_path_finder(algorithm)
    assert type(finder) is expected
    assert finder.algorithm == algorithm


def test_instances_are_fresh():
    first = create_path_finder(PathfindingAlgorithm.JOHNSON)
    second = create_path_finder(PathfindingAlgorithm.JOHNSON)
    assert first is not second


def test_enum_values_are_stable():
    assert [a.value for a in PathfindingAlgorithm] == [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("dijkstra", PathfindingAlgorithm.DIJKSTRA),
        ("AStar", PathfindingAlgorithm.A_STAR),
        ("a_star", PathfindingAlgorithm.A_STAR),
        ("Floyd-Warshall", PathfindingAlgorithm.FLOYD_WARSHALL),
        ("dijkstra_bidirectional", PathfindingAlgorithm.DIJKSTRA_BIDIRECTIONAL),
    ],
)
def test_names_are_parsed(name, expected):
    assert PathfindingAlgorithm.from_string(name) == expected
    assert create_path_finder(name).algorithm == expected


def test_unknown_name_raises_value_error():
    with pytest.raises(ValueError, match="Invalid algorithm"):
        PathfindingAlgorithm.from_string("dfs")


def test_unknown_identifier_is_not_implemented():
    with pytest.raises(NotImplementedError):
        create_path_finder(42)


def test_config_is_passed_through():
    config = PathfindingConfig(landmark_factor=2, init_yield_count=0)
    assert create_path_finder(PathfindingAlgorithm.A_STAR, config).config is config
    default = create_path_finder(PathfindingAlgorithm.DIJKSTRA)
    assert default.config is PATHFINDING_CONFIG
