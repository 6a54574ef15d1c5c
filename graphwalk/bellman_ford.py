"""Bellman-Ford single-source shortest paths over weighted edge lists."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from graphwalk.traversal import reconstruct_path

Weight = Union[int, float]
Edge = tuple[int, int, Weight]


@dataclass(frozen=True)
class BellmanFordResult:
    """Distances and shortest-path tree found by Bellman-Ford.

    ``distances[v]`` is None where ``v`` is unreachable. ``path_counts`` is
    filled only by :func:`count_shortest_paths`.
    """

    source: int
    distances: list[Weight | None]
    parents: list[int | None]
    has_negative_cycle: bool
    path_counts: list[int] = field(default_factory=list)

    def path_to(self, destination: int) -> list[int]:
        """Return the vertices of the shortest path from the source to ``destination``.

        Raises ValueError if ``destination`` is unreachable or its parent
        links run into a negative cycle.
        """
        if not 0 <= destination < len(self.distances):
            raise ValueError(f"destination {destination} is not a vertex of the graph")
        if self.distances[destination] is None:
            raise ValueError(f"vertex {destination} is not reachable from {self.source}")
        return reconstruct_path(self.parents, destination)


def _validated(vertex_count: int, edges: Iterable[Edge], source: int) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    if not 0 <= source < vertex_count:
        raise ValueError(f"source {source} is not a vertex of the graph")
    edge_list = [(u, v, w) for u, v, w in edges]
    for u, v, _ in edge_list:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"edge ({u}, {v}) names vertex {vertex} outside the graph")
    return edge_list


def _still_relaxable(distances: list[Weight | None], edges: list[Edge]) -> bool:
    for u, v, w in edges:
        du = distances[u]
        if du is None:
            continue
        dv = distances[v]
        if dv is None or dv > du + w:
            return True
    return False


def bellman_ford(vertex_count: int, edges: Iterable[Edge], source: int = 0) -> BellmanFordResult:
    """Compute shortest distances from ``source`` over ``(u, v, weight)`` edges.

    Negative weights are allowed; a negative cycle reachable from the source
    sets ``has_negative_cycle``.
    """
    edge_list = _validated(vertex_count, edges, source)
    distances: list[Weight | None] = [None] * vertex_count
    parents: list[int | None] = [None] * vertex_count
    distances[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for u, v, w in edge_list:
            du = distances[u]
            if du is None:
                continue
            dv = distances[v]
            if dv is None or dv > du + w:
                distances[v] = du + w
                parents[v] = u
                changed = True
        if not changed:
            break
    return BellmanFordResult(
        source=source,
        distances=distances,
        parents=parents,
        has_negative_cycle=_still_relaxable(distances, edge_list),
    )


def count_shortest_paths(
    vertex_count: int, edges: Iterable[Edge], source: int = 0
) -> BellmanFordResult:
    """Run Bellman-Ford while counting shortest paths to each vertex.

    Within a pass, an edge that ties a distance adds its tail's count only if
    that distance was lowered earlier in the same pass.
    """
    edge_list = _validated(vertex_count, edges, source)
    distances: list[Weight | None] = [None] * vertex_count
    parents: list[int | None] = [None] * vertex_count
    counts = [0] * vertex_count
    distances[source] = 0
    counts[source] = 1
    for _ in range(vertex_count - 1):
        updated = [False] * vertex_count
        for u, v, w in edge_list:
            du = distances[u]
            if du is None:
                continue
            candidate = du + w
            dv = distances[v]
            if dv is None or dv > candidate:
                distances[v] = candidate
                parents[v] = u
                counts[v] = counts[u]
                updated[v] = True
            elif dv == candidate and updated[v]:
                counts[v] += counts[u]
        if not any(updated):
            break
    return BellmanFordResult(
        source=source,
        distances=distances,
        parents=parents,
        has_negative_cycle=_still_relaxable(distances, edge_list),
        path_counts=counts,
    )