"""Floyd-Warshall all-pairs shortest paths with path counting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

Weight = Union[int, float]
Edge = tuple[int, int, Weight]


@dataclass(frozen=True)
class AllPairs:
    """Distances, shortest-path counts and predecessors between every pair of vertices.

    ``distances[i][j]`` is None where ``j`` is unreachable from ``i``.
    ``parents[i][j]`` is the vertex before ``j`` on the shortest path from ``i``.
    Vertices in ``skipped`` were never used as intermediate vertices.
    """

    distances: list[list[Weight | None]]
    path_counts: list[list[int]]
    parents: list[list[int | None]]
    skipped: frozenset[int]

    def path(self, source: int, destination: int) -> list[int]:
        """Return the vertices on the shortest path from ``source`` to ``destination``.

        Raises ValueError for vertices outside the graph, an unreachable
        destination, or predecessor links that loop through a negative cycle.
        """
        size = len(self.distances)
        for vertex in (source, destination):
            if not 0 <= vertex < size:
                raise ValueError(f"vertex {vertex} is not in the graph")
        if source == destination:
            return [source]
        if self.distances[source][destination] is None:
            raise ValueError(f"vertex {destination} is not reachable from {source}")
        route = [destination]
        current = destination
        while current != source:
            previous = self.parents[source][current]
            if previous is None or len(route) > size:
                raise ValueError(f"no well-defined path from {source} to {destination}")
            route.append(previous)
            current = previous
        route.reverse()
        return route

    def has_negative_cycle(self) -> bool:
        """Report whether any vertex lies on a negative cycle."""
        return bool(self.negative_cycle_vertices())

    def negative_cycle_vertices(self) -> list[int]:
        """Return the vertices whose distance to themselves is negative."""
        return [
            vertex
            for vertex, row in enumerate(self.distances)
            if (d := row[vertex]) is not None and d < 0
        ]


def floyd_warshall(
    vertex_count: int, edges: Iterable[Edge], skip: Iterable[int] = ()
) -> AllPairs:
    """Compute all-pairs shortest distances over ``(u, v, weight)`` edges.

    Vertices listed in ``skip`` are never used as intermediate vertices.
    Parallel edges keep the lightest weight; equally light ones each count
    as a separate path. Raises ValueError for vertices outside the graph.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    skipped = frozenset(skip)
    for vertex in skipped:
        if not 0 <= vertex < vertex_count:
            raise ValueError(f"skipped vertex {vertex} is not in the graph")

    size = vertex_count
    dist: list[list[Weight | None]] = [[None] * size for _ in range(size)]
    counts = [[0] * size for _ in range(size)]
    parents: list[list[int | None]] = [[None] * size for _ in range(size)]
    for vertex in range(size):
        dist[vertex][vertex] = 0

    for u, v, w in edges:
        for vertex in (u, v):
            if not 0 <= vertex < size:
                raise ValueError(f"edge ({u}, {v}) names vertex {vertex} outside the graph")
        current = dist[u][v]
        if u == v:
            if current is None or w < current:
                dist[u][v] = w
            continue
        if current is None or w < current:
            dist[u][v] = w
            counts[u][v] = 1
            parents[u][v] = u
        elif w == current:
            counts[u][v] += 1

    for k in range(size):
        if k in skipped:
            continue
        for j in range(size):
            dkj = dist[k][j]
            if dkj is None:
                continue
            for i in range(size):
                dik = dist[i][k]
                if dik is None:
                    continue
                candidate = dik + dkj
                dij = dist[i][j]
                if dij is None or dij > candidate:
                    dist[i][j] = candidate
                    counts[i][j] = counts[i][k] * counts[k][j]
                    parents[i][j] = parents[k][j]
                elif dij == candidate and i != j:
                    counts[i][j] += counts[i][k] * counts[k][j]

    return AllPairs(distances=dist, path_counts=counts, parents=parents, skipped=skipped)