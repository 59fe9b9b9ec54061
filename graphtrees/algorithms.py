"""Spanning-tree and traversal algorithms over :class:`Graph`."""

from __future__ import annotations

from typing import Iterator

from .boundedqueue import BoundedQueue
from .graph import Graph, GraphError, Neighbor
from .minheap import MinHeap
from .unionfind import UnionFind

_INFINITY = 10**9


def _check_start(graph: Graph, start: int) -> int:
    n = graph.num_vertices
    if n <= 0:
        raise GraphError("Graph is empty.")
    if not 0 <= start < n:
        raise GraphError("this is not a valid start")
    return n


def bfs(graph: Graph, start: int) -> Graph:
    """Return the breadth-first search tree of ``graph`` rooted at ``start``."""
    n = _check_start(graph, start)
    tree = Graph(n)
    visited = [False] * n
    queue = BoundedQueue(n)
    queue.enqueue(start)
    visited[start] = True
    while not queue.is_empty():
        current = queue.dequeue()
        for neighbor in graph.neighbors(current):
            if not visited[neighbor.vertex]:
                visited[neighbor.vertex] = True
                tree.add_edge(current, neighbor.vertex, neighbor.weight)
                queue.enqueue(neighbor.vertex)
    return tree


def dfs(graph: Graph, start: int) -> Graph:
    """Return the depth-first search tree of ``graph`` rooted at ``start``."""
    n = _check_start(graph, start)
    tree = Graph(n)
    visited = [False] * n
    visited[start] = True
    stack: list[tuple[int, Iterator[Neighbor]]] = [
        (start, iter(graph.neighbors(start)))
    ]
    while stack:
        current, pending = stack[-1]
        for neighbor in pending:
            if not visited[neighbor.vertex]:
                visited[neighbor.vertex] = True
                tree.add_edge(current, neighbor.vertex, neighbor.weight)
                stack.append(
                    (neighbor.vertex, iter(graph.neighbors(neighbor.vertex)))
                )
                break
        else:
            stack.pop()
    return tree


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the shortest-path tree from ``start``.

    Raises :class:`GraphError` when a negative edge weight is met.
    """
    n = _check_start(graph, start)
    dist = [_INFINITY] * n
    parent: list[int | None] = [None] * n
    dist[start] = 0
    queue = MinHeap(n)
    for vertex, distance in enumerate(dist):
        queue.insert(vertex, distance)

    while not queue.is_empty():
        u = queue.extract_min()
        for neighbor in graph.neighbors(u):
            v, w = neighbor.vertex, neighbor.weight
            if w < 0:
                raise GraphError("Dijkstra does not support negative edge weights")
            if v in queue and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parent[v] = u
                queue.decrease_key(v, dist[v])

    tree = Graph(n)
    for vertex, up in enumerate(parent):
        if up is not None:
            tree.add_edge(vertex, up, dist[vertex] - dist[up])
    return tree


def prim(graph: Graph) -> Graph:
    """Return a minimum spanning tree built with Prim's algorithm from vertex 0.

    Raises :class:`GraphError` when a negative edge weight is met.
    """
    n = graph.num_vertices
    if n <= 0:
        raise GraphError("Graph is empty")
    key = [_INFINITY] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    key[0] = 0
    queue = MinHeap(n)
    for vertex, value in enumerate(key):
        queue.insert(vertex, value)

    while not queue.is_empty():
        u = queue.extract_min()
        in_tree[u] = True
        for neighbor in graph.neighbors(u):
            v, w = neighbor.vertex, neighbor.weight
            if w < 0:
                raise GraphError("Prim does not support negative edge weights")
            if not in_tree[v] and w < key[v]:
                key[v] = w
                parent[v] = u
                queue.decrease_key(v, w)

    mst = Graph(n)
    for vertex in range(1, n):
        up = parent[vertex]
        if up is not None:
            mst.add_edge(vertex, up, key[vertex])
    return mst


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest built with Kruskal's algorithm."""
    n = graph.num_vertices
    if n <= 0:
        raise GraphError("Graph is empty.")
    candidates = [
        (u, neighbor.vertex, neighbor.weight)
        for u in range(n)
        for neighbor in graph.neighbors(u)
        if u < neighbor.vertex
    ]
    candidates.sort(key=lambda edge: edge[2])

    sets = UnionFind(n)
    mst = Graph(n)
    for u, v, w in candidates:
        if sets.find(u) != sets.find(v):
            sets.unite(u, v)
            mst.add_edge(u, v, w)
    return mst