# graphwalk

Textbook graph, searching and sorting algorithms on plain Python lists.
It has no runtime dependencies.

Vertices are the integers `0 .. n-1`. An adjacency structure is a list of neighbour
lists. A weighted adjacency structure is a list of `(neighbour, weight)` lists.
Edge lists are sequences of `(u, v)` or `(u, v, w)` tuples. Where a vertex is
unreachable, distances and parents are `None`. Vertex numbers outside the graph raise
`ValueError`.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Modules

- `graphwalk.searching` works on sorted sequences:
  - `binary_search` returns an index or `None`.
  - `first_occurrence` and `last_occurrence` raise `ValueError` when the key is absent.
  - `count_occurrences` returns 0 when the key is absent.
- `graphwalk.sorting`:
  - `insertion_sort`, `binary_insertion_sort`, `quick_sort`, `merge_sort` and
    `three_way_merge_sort` each return a new list and leave the input unchanged.
    `quick_sort` and `merge_sort` take an optional `key`, for example
    `quick_sort(items, key=digit_sum)`.
  - `quick_sort_median` returns the lower median. It raises `ValueError` on empty input.
  - `digit_sum` returns the sum of an integer's decimal digits. The sum carries the
    integer's sign.
- `graphwalk.cycles`:
  - `has_cycle_undirected_bfs` and `has_cycle_undirected_dfs` check the component of a
    start vertex.
  - `kahn_order` returns Kahn's topological order. Vertices that lie on a cycle, or
    that can be reached only through one, are left out.
  - `has_cycle_directed` reports whether a directed graph has a cycle.
- `graphwalk.traversal`:
  - `build_adjacency` builds an adjacency structure. Undirected is the default.
  - `bfs` and `dfs` return the visiting order.
  - `bfs_tree` returns a `(distances, parents)` tuple. `dfs_tree` returns the parents.
  - `node_levels` gives each vertex's level below the source.
  - `longest_path_lengths` gives longest path lengths from the source. It raises
    `ValueError` when a cycle can be reached.
  - `topological_sort` returns the vertices reachable from a source, ordered by reversed
    depth-first finishing time.
  - `reconstruct_path` follows parent links and returns the path, root first.
- `graphwalk.bellman_ford`:
  - `bellman_ford` returns a frozen `BellmanFordResult` with `distances`, `parents` and
    `has_negative_cycle`. Its `path_to(destination)` method rebuilds a path.
  - `count_shortest_paths` does the same and also fills `path_counts`.
- `graphwalk.dijkstra`:
  - `build_weighted_adjacency` builds a weighted adjacency structure. Directed is the
    default.
  - Each of the searches below returns a frozen `ShortestPaths`, which has
    `path_to(destination)`.
  - `dijkstra` finds shortest distances by scanning for the closest unvisited vertex.
  - `dijkstra_heap` finds the same distances with a binary heap.
  - `count_shortest_paths` also fills `path_counts`.
  - `most_reliable_paths` maximises the product of edge weights. The weights must lie
    in `[0, 1]`.
  - The distances are shortest only for non-negative weights.
- `graphwalk.floyd_warshall`:
  - `floyd_warshall(vertex_count, edges, skip=())` returns a frozen `AllPairs` with
    `distances`, `path_counts`, `parents` and `skipped`.
  - Vertices in `skip` are never used as intermediate vertices.
  - `AllPairs.path(source, destination)` rebuilds a path.
  - `has_negative_cycle()` and `negative_cycle_vertices()` report vertices whose
    distance to themselves is negative.

## Example

```python
from graphwalk.traversal import build_adjacency, bfs_tree, reconstruct_path
from graphwalk.dijkstra import build_weighted_adjacency, dijkstra
from graphwalk.floyd_warshall import floyd_warshall

adjacency = build_adjacency(5, [(0, 1), (0, 2), (1, 3), (3, 4)], directed=False)
distances, parents = bfs_tree(adjacency, 0)
print(distances)                            # [0, 1, 1, 2, 3]
print(reconstruct_path(parents, 4))         # [0, 1, 3, 4]

weighted = build_weighted_adjacency(3, [(0, 1, 4), (0, 2, 1), (2, 1, 2)], directed=True)
result = dijkstra(weighted, 0)
print(result.distances)                     # [0, 3, 1]
print(result.path_to(1))                    # [0, 2, 1]

pairs = floyd_warshall(3, [(0, 1, 4), (0, 2, 1), (2, 1, 2)])
print(pairs.path(0, 1))                     # [0, 2, 1]
print(pairs.has_negative_cycle())           # False
```

## What it does not do

graphwalk is a library only. It has no command-line program. It does not read graphs
from standard input or from files, and it prints nothing. The caller builds the vertex
counts, edge lists and adjacency structures in Python and reads the results from the
returned values.

## Running the tests

```
pytest
```