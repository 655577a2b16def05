"""Compare every algorithm against NetworkX on random worlds."""

import random

import networkx as nx
import pytest

from citypath.generation import generate_cities
from citypath.lib.nx import to_networkx
from citypath.types.base import PathfindingAlgorithm

from tests.algorithms.helpers import ALL_ALGORITHMS, EXACT_ALGORITHMS, prepared


def _sample_pairs(graph, count, seed):
    rng = random.Random(seed)
    cities = graph.cities
    return [(rng.choice(cities), rng.choice(cities)) for _ in range(count)]


@pytest.fixture(params=[(25, 1, 1, 0), (40, 1, 20, 1), (60, 5, 500, 2)])
def random_world(request):
    total, low, high, seed = request.param
    graph = generate_cities(total, low, high, seed=seed)
    lengths = dict(
        nx.all_pairs_dijkstra_path_length(to_networkx(graph), weight="length")
    )
    return graph, lengths


@pytest.mark.parametrize("algorithm", EXACT_ALGORITHMS)
def test_costs_match_networkx(algorithm, random_world):
    graph, lengths = random_world
    finder = prepared(algorithm, graph)

    for start, end in _sample_pairs(graph, 40, seed=algorithm.value):
        path = finder.find_path_between(start, end)
        assert path.start is start
        assert path.end is end
        assert path.cost() == lengths[start.index][end.index]


@pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
def test_every_hop_is_a_street(algorithm, random_world):
    graph, _ = random_world
    finder = prepared(algorithm, graph)

    for start, end in _sample_pairs(graph, 40, seed=99):
        path = finder.find_path_between(start, end)
        assert path.is_connected()
        assert len(set(path)) == len(path)


def test_bidirectional_never_beats_the_optimum(random_world):
    graph, lengths = random_world
    finder = prepared(PathfindingAlgorithm.DIJKSTRA_BIDIRECTIONAL, graph)

    for start, end in _sample_pairs(graph, 60, seed=5):
        cost = finder.find_path_between(start, end).cost()
        assert cost >= lengths[start.index][end.index]


def test_matrix_distances_match_networkx(random_world):
    graph, lengths = random_world
    floyd = prepared(PathfindingAlgorithm.FLOYD_WARSHALL, graph)
    johnson = prepared(PathfindingAlgorithm.JOHNSON, graph)

    for start in graph.cities[::4]:
        for end in graph:
            expected = lengths[start.index][end.index]
            assert floyd.distance_between(start, end) == expected
            assert johnson.distance_between(start, end) == expected
