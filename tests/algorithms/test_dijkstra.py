from citypath.algorithms.dijkstra import DijkstraPathFinder
from citypath.model.graph import CityGraph


def test_longer_hop_count_wins_when_shorter():
    g = CityGraph()
    a, b, c, d = g.add_cities("A", "B", "C", "D")
    g.add_street(a, d, 10)
    g.add_street(a, b, 1)
    g.add_street(b, c, 1)
    g.add_street(c, d, 1)

    path = DijkstraPathFinder().find_path_between(a, d)
    assert list(path) == [a, b, c, d]
    assert path.cost() == 3


def test_improved_distance_replaces_earlier_estimate():
    # C is first reached through the long street, then improved via B.
    g = CityGraph()
    a, b, c, d = g.add_cities("A", "B", "C", "D")
    g.add_street(a, c, 9)
    g.add_street(a, b, 1)
    g.add_street(b, c, 1)
    g.add_street(c, d, 1)

    path = DijkstraPathFinder().find_path_between(a, d)
    assert list(path) == [a, b, c, d]


def test_zero_length_streets_are_allowed():
    g = CityGraph()
    a, b, c = g.add_cities("A", "B", "C")
    g.add_street(a, b, 0)
    g.add_street(b, c, 0)

    path = DijkstraPathFinder().find_path_between(a, c)
    assert list(path) == [a, b, c]
    assert path.cost() == 0
