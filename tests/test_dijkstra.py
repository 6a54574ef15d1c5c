import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from graphwalk.bellman_ford import bellman_ford
from graphwalk.dijkstra import (
    ShortestPaths,
    build_weighted_adjacency,
    count_shortest_paths,
    dijkstra,
    dijkstra_heap,
    most_reliable_paths,
)
from graphwalk.floyd_warshall import floyd_warshall


@st.composite
def positive_graphs(draw):
    n = draw(st.integers(min_value=1, max_value=6))
    edges = draw(
        st.lists(
            st.tuples(
                st.integers(0, n - 1), st.integers(0, n - 1), st.integers(1, 9)
            ),
            max_size=12,
        )
    )
    return n, edges


@st.composite
def probability_graphs(draw):
    n = draw(st.integers(min_value=1, max_value=6))
    edges = draw(
        st.lists(
            st.tuples(
                st.integers(0, n - 1),
                st.integers(0, n - 1),
                st.sampled_from([0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0]),
            ),
            max_size=12,
        )
    )
    return n, edges


def _min_weights(edges):
    best = {}
    for u, v, w in edges:
        if (u, v) not in best or w < best[(u, v)]:
            best[(u, v)] = w
    return best


@given(positive_graphs())
def test_scan_agrees_with_bellman_ford(graph):
    n, edges = graph
    result = dijkstra(build_weighted_adjacency(n, edges))
    assert result.distances == bellman_ford(n, edges).distances


@given(positive_graphs())
def test_heap_agrees_with_scan(graph):
    n, edges = graph
    adjacency = build_weighted_adjacency(n, edges)
    assert dijkstra_heap(adjacency).distances == dijkstra(adjacency).distances


@given(positive_graphs())
def test_paths_follow_edges_and_sum_to_distance(graph):
    n, edges = graph
    weights = _min_weights(edges)
    result = dijkstra(build_weighted_adjacency(n, edges))
    for vertex, distance in enumerate(result.distances):
        if distance is None:
            continue
        path = result.path_to(vertex)
        assert path[0] == 0 and path[-1] == vertex
        assert sum(weights[(a, b)] for a, b in zip(path, path[1:])) == distance


@given(positive_graphs())
def test_counts_agree_with_floyd_warshall(graph):
    n, edges = graph
    counted = count_shortest_paths(build_weighted_adjacency(n, edges))
    table = floyd_warshall(n, edges)
    for vertex in range(1, n):
        assert counted.path_counts[vertex] == table.path_counts[0][vertex]
    assert counted.distances == table.distances[0]


def test_diamond_has_two_shortest_paths():
    adjacency = build_weighted_adjacency(4, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1)])
    result = count_shortest_paths(adjacency)
    assert result.path_counts[3] == 2
    assert result.path_counts[0] == 1


def test_unreachable_vertex_has_no_distance():
    result = dijkstra(build_weighted_adjacency(3, [(0, 1, 4)]))
    assert result.distances[2] is None
    assert result.distances[1] == 4
    with pytest.raises(ValueError):
        result.path_to(2)
    with pytest.raises(ValueError):
        result.path_to(7)


def test_source_path_is_itself():
    result = dijkstra_heap(build_weighted_adjacency(2, [(0, 1, 3)]), source=1)
    assert result.path_to(1) == [1]
    assert result.distances[0] is None


def test_undirected_adjacency_stores_both_directions():
    assert build_weighted_adjacency(2, [(0, 1, 4)], directed=False) == [[(1, 4)], [(0, 4)]]
    assert build_weighted_adjacency(2, [(0, 1, 4)]) == [[(1, 4)], []]


def test_invalid_inputs_raise():
    with pytest.raises(ValueError):
        build_weighted_adjacency(2, [(0, 5, 1)])
    with pytest.raises(ValueError):
        build_weighted_adjacency(-1, [])
    with pytest.raises(ValueError):
        dijkstra([[]], source=3)
    with pytest.raises(ValueError):
        count_shortest_paths([[]], source=-1)


def test_single_edge_reliability():
    result = most_reliable_paths(build_weighted_adjacency(2, [(0, 1, 0.5)]))
    assert result.distances == [1.0, 0.5]
    assert isinstance(result, ShortestPaths)


def test_two_reliable_hops_beat_one_weak_edge():
    adjacency = build_weighted_adjacency(3, [(0, 2, 0.5), (0, 1, 0.9), (1, 2, 0.9)])
    result = most_reliable_paths(adjacency)
    assert result.path_to(2) == [0, 1, 2]
    assert math.isclose(result.distances[2], 0.81)


def test_reliability_rejects_weights_outside_unit_interval():
    with pytest.raises(ValueError):
        most_reliable_paths(build_weighted_adjacency(2, [(0, 1, 1.5)]))


@given(probability_graphs())
def test_reliability_invariants(graph):
    n, edges = graph
    result = most_reliable_paths(build_weighted_adjacency(n, edges))
    assert result.distances[0] == 1.0
    for u, v, p in edges:
        ru = result.distances[u]
        if ru is not None and ru * p > 0:
            assert result.distances[v] is not None
            assert result.distances[v] >= ru * p - 1e-12
    for vertex, value in enumerate(result.distances):
        if value is None:
            continue
        assert 0 < value <= 1
        path = result.path_to(vertex)
        product = 1.0
        for a, b in zip(path, path[1:]):
            product *= max(p for u, v, p in edges if (u, v) == (a, b))
        assert math.isclose(product, value)