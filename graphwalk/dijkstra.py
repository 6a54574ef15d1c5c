"""Dijkstra-style single-source searches over weighted adjacency lists.

A weighted graph is a sequence of neighbour lists: ``adjacency[v]`` holds
``(neighbour, weight)`` pairs for the edges leaving ``v``.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Union

from graphwalk.traversal import reconstruct_path

Weight = Union[int, float]
WeightedEdge = tuple[int, int, Weight]
WeightedAdjacency = Sequence[Sequence[tuple[int, Weight]]]


@dataclass(frozen=True)
class ShortestPaths:
    """Result of a single-source search.

    ``distances[v]`` is None where ``v`` was never reached. For
    :func:`most_reliable_paths` the distances are reliabilities (products of
    edge probabilities). ``path_counts`` is filled only by
    :func:`count_shortest_paths`.
    """

    source: int
    distances: list[Weight | None]
    parents: list[int | None]
    path_counts: list[int] = field(default_factory=list)

    def path_to(self, destination: int) -> list[int]:
        """Return the vertices on the best path from the source to ``destination``.

        Raises ValueError if ``destination`` is not a vertex, is unreachable,
        or its parent links loop.
        """
        if not 0 <= destination < len(self.distances):
            raise ValueError(f"destination {destination} is not a vertex of the graph")
        if self.distances[destination] is None:
            raise ValueError(f"vertex {destination} is not reachable from {self.source}")
        return reconstruct_path(self.parents, destination)


def build_weighted_adjacency(
    vertex_count: int, edges: Iterable[WeightedEdge], directed: bool = True
) -> list[list[tuple[int, Weight]]]:
    """Build weighted neighbour lists from ``(u, v, weight)`` edges.

    Undirected edges are stored in both directions. Raises ValueError for a
    negative vertex count or an endpoint outside the graph.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    adjacency: list[list[tuple[int, Weight]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"edge ({u}, {v}) names vertex {vertex} outside the graph")
        adjacency[u].append((v, weight))
        if not directed:
            adjacency[v].append((u, weight))
    return adjacency


def _check_source(adjacency: WeightedAdjacency, source: int) -> None:
    if not 0 <= source < len(adjacency):
        raise ValueError(f"source {source} is not a vertex of the graph")


def _next_vertex(
    distances: Sequence[Weight | None], visited: Sequence[bool], *, maximise: bool
) -> int | None:
    """Pick the unvisited reached vertex with the best value; lowest index wins ties."""
    best: int | None = None
    best_value: Weight | None = None
    for vertex, (value, seen) in enumerate(zip(distances, visited)):
        if seen or value is None:
            continue
        if best_value is None or (value > best_value if maximise else value < best_value):
            best, best_value = vertex, value
    return best


def _scan(adjacency: WeightedAdjacency, source: int, *, count_paths: bool) -> ShortestPaths:
    _check_source(adjacency, source)
    size = len(adjacency)
    distances: list[Weight | None] = [None] * size
    parents: list[int | None] = [None] * size
    counts = [0] * size
    visited = [False] * size
    distances[source] = 0
    counts[source] = 1
    while (node := _next_vertex(distances, visited, maximise=False)) is not None:
        visited[node] = True
        base = distances[node]
        assert base is not None
        for neighbour, weight in adjacency[node]:
            candidate = base + weight
            current = distances[neighbour]
            if current is None or current > candidate:
                distances[neighbour] = candidate
                parents[neighbour] = node
                counts[neighbour] = counts[node]
            elif count_paths and current == candidate:
                counts[neighbour] += counts[node]
    return ShortestPaths(
        source=source,
        distances=distances,
        parents=parents,
        path_counts=counts if count_paths else [],
    )


def dijkstra(adjacency: WeightedAdjacency, source: int = 0) -> ShortestPaths:
    """Shortest distances from ``source`` by repeatedly scanning for the closest vertex.

    Weights are expected to be non-negative; with negative weights the
    distances are not guaranteed to be shortest.
    """
    return _scan(adjacency, source, count_paths=False)


def dijkstra_heap(adjacency: WeightedAdjacency, source: int = 0) -> ShortestPaths:
    """Shortest distances from ``source`` using a binary-heap priority queue."""
    _check_source(adjacency, source)
    size = len(adjacency)
    distances: list[Weight | None] = [None] * size
    parents: list[int | None] = [None] * size
    distances[source] = 0
    heap: list[tuple[Weight, int]] = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist != distances[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = dist + weight
            current = distances[neighbour]
            if current is None or current > candidate:
                distances[neighbour] = candidate
                parents[neighbour] = node
                heapq.heappush(heap, (candidate, neighbour))
    return ShortestPaths(source=source, distances=distances, parents=parents)


def count_shortest_paths(adjacency: WeightedAdjacency, source: int = 0) -> ShortestPaths:
    """Shortest distances from ``source`` together with the number of shortest paths."""
    return _scan(adjacency, source, count_paths=True)


def most_reliable_paths(adjacency: WeightedAdjacency, source: int = 0) -> ShortestPaths:
    """Find, for each vertex, the path from ``source`` with the greatest product of weights.

    Weights are probabilities and must lie in ``[0, 1]``; otherwise
    ValueError is raised. The source has reliability 1.
    """
    _check_source(adjacency, source)
    for node, neighbours in enumerate(adjacency):
        for neighbour, weight in neighbours:
            if not 0 <= weight <= 1:
                raise ValueError(
                    f"edge ({node}, {neighbour}) has weight {weight} outside [0, 1]"
                )
    size = len(adjacency)
    reliability: list[Weight | None] = [None] * size
    parents: list[int | None] = [None] * size
    visited = [False] * size
    reliability[source] = 1.0
    while (node := _next_vertex(reliability, visited, maximise=True)) is not None:
        visited[node] = True
        base = reliability[node]
        assert base is not None
        for neighbour, weight in adjacency[node]:
            candidate = base * weight
            current = reliability[neighbour]
            if (current is None and candidate > 0) or (
                current is not None and current < candidate
            ):
                reliability[neighbour] = candidate
                parents[neighbour] = node
    return ShortestPaths(source=source, distances=reliability, parents=parents)