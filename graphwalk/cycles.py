"""Cycle detection in undirected and directed graphs.

Graphs are adjacency lists: ``adjacency[v]`` holds the neighbours of vertex ``v``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Adjacency = Sequence[Sequence[int]]


def has_cycle_undirected_bfs(adjacency: Adjacency, start: int = 0) -> bool:
    """Report whether the component of ``start`` contains a cycle, using BFS."""
    visited = [False] * len(adjacency)
    visited[start] = True
    queue: deque[tuple[int, int]] = deque([(start, -1)])
    while queue:
        node, parent = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour == parent:
                continue
            if visited[neighbour]:
                return True
            visited[neighbour] = True
            queue.append((neighbour, node))
    return False


def has_cycle_undirected_dfs(adjacency: Adjacency, start: int = 0) -> bool:
    """Report whether the component of ``start`` contains a cycle, using DFS."""
    visited = [False] * len(adjacency)
    visited[start] = True
    stack = [(start, -1, iter(adjacency[start]))]
    while stack:
        node, parent, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour == parent:
                continue
            if visited[neighbour]:
                return True
            visited[neighbour] = True
            stack.append((neighbour, node, iter(adjacency[neighbour])))
            break
        else:
            stack.pop()
    return False


def kahn_order(adjacency: Adjacency) -> list[int]:
    """Return vertices in Kahn's topological order.

    Vertices on or behind a cycle never reach in-degree zero and are left out.
    """
    in_degree = [0] * len(adjacency)
    for neighbours in adjacency:
        for target in neighbours:
            in_degree[target] += 1
    order = [v for v, degree in enumerate(in_degree) if degree == 0]
    queue = deque(order)
    while queue:
        node = queue.popleft()
        for target in adjacency[node]:
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)
                order.append(target)
    return order


def has_cycle_directed(adjacency: Adjacency) -> bool:
    """Report whether the directed graph contains a cycle."""
    return len(kahn_order(adjacency)) != len(adjacency)