"""Graph traversal, shortest-path, cycle detection, searching and sorting algorithms."""

__version__ = "0.1.0"

__all__ = [
    "searching",
    "sorting",
    "cycles",
    "traversal",
    "bellman_ford",
    "dijkstra",
    "floyd_warshall",
]