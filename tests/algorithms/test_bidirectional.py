from citypath.algorithms.bidirectional import (
    BidirectionalDijkstraPathFinder,
    SearchFront,
)
from citypath.algorithms.dijkstra import DijkstraPathFinder


def test_first_collision_is_accepted_even_when_longer(detour):
    s, u, v, w, t = detour.cities

    path = BidirectionalDijkstraPathFinder().find_path_between(s, t)
    assert list(path) == [s, u, t]
    assert path.cost() == 6

    # Plain Dijkstra finds the cheaper detour
    assert DijkstraPathFinder().find_path_between(s, t).cost() == 5


def test_meeting_node_joins_both_chains(chain):
    a, b, c = chain.cities
    path = BidirectionalDijkstraPathFinder().find_path_between(a, c)
    assert path.start is a
    assert path.end is c
    assert path.is_connected()


def test_search_front_skips_superseded_entries(parallel_streets):
    a, b, _ = parallel_streets.cities
    front = SearchFront(a)
    other = SearchFront(b)

    assert front.step(other) is None
    assert front.distances[b] == 2
    # Both the 5 and the 2 entry for B were pushed; only the live one pops
    entry = front.pop()
    assert entry.city is b and entry.score == 2
    assert front.pop() is None


def test_step_reports_city_visited_by_other_front(chain):
    a, b, c = chain.cities
    forward = SearchFront(a)
    backward = SearchFront(c)

    assert forward.step(backward) is None  # visits A
    assert backward.step(forward) is None  # visits C
    assert forward.step(backward) is None  # visits B
    assert backward.step(forward) is b


def test_chain_to_origin(chain):
    a, b, c = chain.cities
    front = SearchFront(a)
    while front.queue:
        front.step(SearchFront(c))
    assert front.chain_to_origin(c) == [c, b, a]
