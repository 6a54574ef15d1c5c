import pytest
from hypothesis import given
from hypothesis import strategies as st

from graphwalk.bellman_ford import bellman_ford, count_shortest_paths


@st.composite
def weighted_graphs(draw):
    n = draw(st.integers(min_value=1, max_value=7))
    edges = draw(
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 20)),
            max_size=14,
        )
    )
    source = draw(st.integers(0, n - 1))
    return n, edges, source


NEGATIVE_EDGE = [(0, 1, 4), (0, 2, 1), (2, 1, -2)]
NEGATIVE_CYCLE = [(0, 1, 1), (1, 2, -1), (2, 1, -1)]
DIAMOND = [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1)]


def test_negative_edge_without_cycle():
    result = bellman_ford(3, NEGATIVE_EDGE)
    assert not result.has_negative_cycle
    assert result.distances[1] == -1
    assert result.path_to(1) == [0, 2, 1]


def test_negative_cycle_is_detected():
    result = bellman_ford(3, NEGATIVE_CYCLE)
    assert result.has_negative_cycle is True
    counted = count_shortest_paths(3, NEGATIVE_CYCLE)
    assert counted.has_negative_cycle is True
    assert result.distances[0] == 0


def test_path_into_negative_cycle_raises():
    result = bellman_ford(3, NEGATIVE_CYCLE)
    with pytest.raises(ValueError):
        result.path_to(1)


def test_unreachable_vertex():
    result = bellman_ford(3, [(0, 1, 5)])
    assert result.distances[2] is None
    assert result.parents[2] is None
    with pytest.raises(ValueError):
        result.path_to(2)


def test_path_to_rejects_unknown_vertex():
    result = bellman_ford(2, [(0, 1, 5)])
    with pytest.raises(ValueError):
        result.path_to(7)


@pytest.mark.parametrize("func", [bellman_ford, count_shortest_paths])
def test_edge_outside_graph_raises(func):
    with pytest.raises(ValueError):
        func(2, [(0, 2, 1)])


@pytest.mark.parametrize("func", [bellman_ford, count_shortest_paths])
def test_source_outside_graph_raises(func):
    with pytest.raises(ValueError):
        func(2, [(0, 1, 1)], source=3)


def test_diamond_has_two_shortest_paths():
    result = count_shortest_paths(4, DIAMOND)
    assert result.path_counts[3] == 2
    assert result.path_counts[1] == result.path_counts[2] == result.path_counts[0]


@given(weighted_graphs())
def test_nonnegative_weights_satisfy_triangle_inequality(graph):
    n, edges, source = graph
    result = bellman_ford(n, edges, source)
    assert not result.has_negative_cycle
    assert result.distances[source] == 0
    for u, v, w in edges:
        if result.distances[u] is not None:
            assert result.distances[v] is not None
            assert result.distances[v] <= result.distances[u] + w


@given(weighted_graphs())
def test_paths_realise_their_distances(graph):
    n, edges, source = graph
    result = bellman_ford(n, edges, source)
    for v in range(n):
        if result.distances[v] is None:
            continue
        path = result.path_to(v)
        assert path[0] == source
        assert path[-1] == v
        for a, b in zip(path, path[1:]):
            assert any(
                x == a and y == b and result.distances[b] == result.distances[a] + w
                for x, y, w in edges
            )


@given(weighted_graphs())
def test_counting_agrees_with_plain_run(graph):
    n, edges, source = graph
    plain = bellman_ford(n, edges, source)
    counted = count_shortest_paths(n, edges, source)
    assert counted.distances == plain.distances
    assert counted.has_negative_cycle == plain.has_negative_cycle
    assert counted.path_counts[source] == 1
    for v in range(n):
        if counted.distances[v] is None:
            assert counted.path_counts[v] == 0
        else:
            assert counted.path_counts[v] >= 1