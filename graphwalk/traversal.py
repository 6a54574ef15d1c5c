"""Breadth- and depth-first traversals of adjacency-list graphs.

A graph is a sequence of neighbour lists: ``adjacency[v]`` holds the vertices
that ``v`` has an edge to. Vertices are the integers ``0 .. len(adjacency) - 1``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Adjacency = Sequence[Sequence[int]]


def build_adjacency(
    vertex_count: int, edges: Iterable[tuple[int, int]], directed: bool = False
) -> list[list[int]]:
    """Build neighbour lists from ``(u, v)`` edges.

    Undirected edges are stored in both directions. Raises ValueError for a
    negative vertex count or an edge endpoint outside the graph.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"edge ({u}, {v}) names vertex {vertex} outside the graph")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def _check_source(adjacency: Adjacency, source: int) -> None:
    if not 0 <= source < len(adjacency):
        raise ValueError(f"source {source} is not a vertex of the graph")


def _bfs_walk(adjacency: Adjacency, source: int) -> Iterator[tuple[int, int | None, int]]:
    """Yield ``(vertex, parent, depth)`` in breadth-first order."""
    _check_source(adjacency, source)
    visited = [False] * len(adjacency)
    visited[source] = True
    queue: deque[tuple[int, int | None, int]] = deque([(source, None, 0)])
    while queue:
        node, parent, depth = queue.popleft()
        yield node, parent, depth
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append((neighbour, node, depth + 1))


def _dfs_walk(adjacency: Adjacency, source: int) -> Iterator[tuple[int, int | None]]:
    """Yield ``(vertex, parent)`` in depth-first preorder."""
    _check_source(adjacency, source)
    visited = [False] * len(adjacency)
    visited[source] = True
    yield source, None
    stack = [(source, iter(adjacency[source]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                yield neighbour, node
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()


def bfs(adjacency: Adjacency, source: int = 0) -> list[int]:
    """Return the vertices reachable from ``source`` in breadth-first order."""
    return [node for node, _, _ in _bfs_walk(adjacency, source)]


def dfs(adjacency: Adjacency, source: int = 0) -> list[int]:
    """Return the vertices reachable from ``source`` in depth-first preorder."""
    return [node for node, _ in _dfs_walk(adjacency, source)]


def bfs_tree(
    adjacency: Adjacency, source: int = 0
) -> tuple[list[int | None], list[int | None]]:
    """Return ``(distances, parents)`` of the breadth-first tree from ``source``.

    Distances count edges; unreached vertices have distance and parent None,
    and so does the parent of ``source``.
    """
    distances: list[int | None] = [None] * len(adjacency)
    parents: list[int | None] = [None] * len(adjacency)
    for node, parent, depth in _bfs_walk(adjacency, source):
        distances[node] = depth
        parents[node] = parent
    return distances, parents


def dfs_tree(adjacency: Adjacency, source: int = 0) -> list[int | None]:
    """Return the parent of each vertex in the depth-first tree from ``source``.

    The source and unreached vertices have parent None.
    """
    parents: list[int | None] = [None] * len(adjacency)
    for node, parent in _dfs_walk(adjacency, source):
        parents[node] = parent
    return parents


def node_levels(adjacency: Adjacency, source: int = 0) -> list[int | None]:
    """Return each vertex's level below ``source``; None where unreached."""
    distances, _ = bfs_tree(adjacency, source)
    return distances


def _postorder(adjacency: Adjacency, source: int, *, reject_cycles: bool) -> list[int]:
    _check_source(adjacency, source)
    new, active, done = 0, 1, 2
    state = [new] * len(adjacency)
    state[source] = active
    finished: list[int] = []
    stack = [(source, iter(adjacency[source]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if state[neighbour] == active and reject_cycles:
                raise ValueError(f"a cycle through vertex {neighbour} is reachable from {source}")
            if state[neighbour] == new:
                state[neighbour] = active
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()
            state[node] = done
            finished.append(node)
    return finished


def longest_path_lengths(adjacency: Adjacency, source: int = 0) -> list[int | None]:
    """Return the length in edges of the longest path from ``source`` to each vertex.

    The graph reachable from ``source`` must be acyclic; a reachable cycle
    raises ValueError. Unreached vertices get None.
    """
    order = _postorder(adjacency, source, reject_cycles=True)
    lengths: list[int | None] = [None] * len(adjacency)
    lengths[source] = 0
    for node in reversed(order):
        base = lengths[node]
        assert base is not None
        for neighbour in adjacency[node]:
            current = lengths[neighbour]
            if current is None or base + 1 > current:
                lengths[neighbour] = base + 1
    return lengths


def topological_sort(adjacency: Adjacency, source: int = 0) -> list[int]:
    """Return the vertices reachable from ``source`` in topological order.

    The order is reversed depth-first finishing order, so every edge between
    listed vertices points forward when the reachable graph is acyclic.
    """
    order = _postorder(adjacency, source, reject_cycles=False)
    order.reverse()
    return order


def reconstruct_path(parents: Sequence[int | None], destination: int) -> list[int]:
    """Follow parent links from ``destination`` and return the path root first.

    Raises ValueError if the parent links loop back on themselves.
    """
    if not 0 <= destination < len(parents):
        raise ValueError(f"destination {destination} is not a vertex of the graph")
    path = [destination]
    seen = {destination}
    while (parent := parents[path[-1]]) is not None:
        if parent in seen:
            raise ValueError(f"parent links form a cycle through vertex {parent}")
        seen.add(parent)
        path.append(parent)
    path.reverse()
    return path