# graphtrees

Undirected, weighted graphs on vertices `0 .. n-1`, and the classic algorithms
that turn them into trees. All of it is plain Python with no dependencies.

## Modules

- `graphtrees.graph` – `Graph`, `Neighbor` and `GraphError`
- `graphtrees.algorithms` – `bfs`, `dfs`, `dijkstra`, `prim`, `kruskal`
- `graphtrees.boundedqueue` – `BoundedQueue`, `QueueOverflowError`, `QueueEmptyError`
- `graphtrees.minheap` – `MinHeap`, `HeapOverflowError`
- `graphtrees.unionfind` – `UnionFind`
- `graphtrees.cli` – the `graphtrees` command

## Installation

```
pip install .
```

## Graphs

```python
from graphtrees.graph import Graph

g = Graph(3)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 2)
print(g.num_vertices)        # 3
print(g.neighbors(1))        # (Neighbor(vertex=2, weight=2), Neighbor(vertex=0, weight=1))
print(sorted(g.edges()))     # [(0, 1, 1), (1, 2, 2)]
g.print_graph()
```

which prints

```
Vertex 0: -> (1, w=1)
Vertex 1: -> (2, w=2) -> (0, w=1)
Vertex 2: -> (1, w=2)
```

- `Graph(vertices)` needs at least one vertex.
- `add_edge(source, target, weight=1)` adds the edge in both directions; each
  vertex lists its newest edge first.
- `remove_edge(source, target)` removes it from both directions.
- `neighbors(vertex)` returns a tuple of `Neighbor(vertex, weight)` entries.
- `edges()` yields every undirected edge once as `(u, v, weight)` with `u <= v`.
- `format()` returns the adjacency-list text; `print_graph(file=None)` writes it
  to a stream, standard output by default.

An out-of-range vertex, a graph with no vertices, or removing an edge that is not
there raises `GraphError`, a subclass of `ValueError`.

## Algorithms

```python
from graphtrees.graph import Graph
from graphtrees.algorithms import bfs, dfs, dijkstra, prim, kruskal

g = Graph(4)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 2)
g.add_edge(0, 2, 10)
g.add_edge(2, 3, 1)

print(sorted(dijkstra(g, 0).edges()))   # [(0, 1, 1), (1, 2, 2), (2, 3, 1)]
print(sorted(kruskal(g).edges()))       # [(0, 1, 1), (1, 2, 2), (2, 3, 1)]
```

Every algorithm returns a new `Graph` with the same number of vertices that holds
only the tree edges.

- `bfs(graph, start)` and `dfs(graph, start)` – search trees rooted at `start`,
  visiting neighbours in adjacency-list order.
- `dijkstra(graph, start)` – shortest-path tree; each tree edge carries the
  difference of the two vertices' distances.
- `prim(graph)` – minimum spanning tree grown from vertex 0.
- `kruskal(graph)` – minimum spanning forest, edges taken in order of weight.

An invalid `start` raises `GraphError`, and so does a negative edge weight met
by `dijkstra` or `prim`.

## Building blocks

- `BoundedQueue(capacity)` – FIFO queue with `enqueue`, `dequeue`, `is_empty`
  and `len()`. Enqueuing into a full queue raises `QueueOverflowError`;
  dequeuing from an empty one raises `QueueEmptyError`.
- `MinHeap(capacity)` – indexed min-heap of `(vertex, dist)` pairs with
  `insert`, `extract_min`, `decrease_key`, `get_dist`, `contains` (also the
  `in` operator), `is_empty` and `len()`. Inserting into a full heap raises
  `HeapOverflowError`; `extract_min` on an empty heap raises `IndexError`;
  `decrease_key` and `get_dist` on a vertex not in the heap raise `KeyError`.
- `UnionFind(size)` – disjoint sets over `0 .. size-1` with `find` (path
  compression) and `unite` (union by rank). An element out of range raises
  `IndexError`.

## Command line

```
graphtrees
```

This builds a six-vertex sample graph and prints it, then prints its BFS and DFS
trees from vertex 0, its Dijkstra tree from vertex 0, and its Prim and Kruskal
minimum spanning trees. It takes no options besides `--help`.

## What it does not do

Graphs are built in code only: there is no reading or writing of graph files,
and the command always works on its built-in sample graph. Graphs are
undirected with integer weights; there is no directed-graph support.

## Tests

```
pip install .[test]
pytest
```