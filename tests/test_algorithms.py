import pytest

from graphtrees.algorithms import bfs, dfs, dijkstra, kruskal, prim
from graphtrees.graph import Graph, GraphError


def edge_set(graph):
    return {frozenset((u, v)) for u, v, _ in graph.edges()}


def weighted_edges(graph):
    return {(frozenset((u, v)), w) for u, v, w in graph.edges()}


def total_weight(graph):
    return sum(w for _, _, w in graph.edges())


def make_graph(n, edges):
    g = Graph(n)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


def sample_graph():
    return make_graph(
        6,
        [(0, 1, 4), (0, 2, 3), (1, 2, 1), (1, 3, 2), (2, 3, 4), (3, 4, 2), (4, 5, 6)],
    )


def pairs(*items):
    return {frozenset(p) for p in items}


def test_bfs_tree():
    g = make_graph(5, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 4, 1)])
    assert edge_set(bfs(g, 0)) == pairs((0, 1), (0, 2), (1, 3), (2, 4))


def test_dfs_tree():
    g = make_graph(5, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 4, 1)])
    assert edge_set(dfs(g, 0)) == pairs((0, 1), (1, 3), (0, 2), (2, 4))


def test_dijkstra_tree():
    g = make_graph(4, [(0, 1, 1), (1, 2, 2), (0, 2, 10), (2, 3, 1)])
    assert edge_set(dijkstra(g, 0)) == pairs((0, 1), (1, 2), (2, 3))


def test_prim_tree():
    g = make_graph(4, [(0, 1, 1), (1, 2, 4), (2, 3, 2), (0, 3, 5)])
    assert edge_set(prim(g)) == pairs((0, 1), (1, 2), (2, 3))


def test_kruskal_tree():
    g = make_graph(4, [(0, 1, 1), (1, 2, 4), (2, 3, 2), (0, 3, 5)])
    assert edge_set(kruskal(g)) == pairs((0, 1), (1, 2), (2, 3))


@pytest.mark.parametrize("algorithm", [bfs, dfs, dijkstra])
@pytest.mark.parametrize("start", [-1, 6, 100])
def test_invalid_start_raises(algorithm, start):
    with pytest.raises(GraphError):
        algorithm(sample_graph(), start)


@pytest.mark.parametrize("algorithm", [bfs, dfs, dijkstra])
def test_rooted_trees_span_connected_graph(algorithm):
    g = sample_graph()
    tree = algorithm(g, 3)
    assert tree.num_vertices == g.num_vertices
    assert len(list(tree.edges())) == g.num_vertices - 1
    assert weighted_edges(tree) <= weighted_edges(g)


@pytest.mark.parametrize("algorithm", [prim, kruskal])
def test_mst_spans_connected_graph(algorithm):
    g = sample_graph()
    tree = algorithm(g)
    assert len(list(tree.edges())) == g.num_vertices - 1
    assert weighted_edges(tree) <= weighted_edges(g)


def test_prim_and_kruskal_agree_on_weight():
    g = sample_graph()
    assert total_weight(prim(g)) == total_weight(kruskal(g))


def test_mst_not_heavier_than_other_spanning_trees():
    g = sample_graph()
    best = total_weight(kruskal(g))
    for start in range(g.num_vertices):
        assert best <= total_weight(bfs(g, start))
        assert best <= total_weight(dfs(g, start))


def test_bfs_only_reaches_component():
    g = make_graph(5, [(0, 1, 1), (1, 2, 1), (3, 4, 1)])
    assert edge_set(bfs(g, 0)) == pairs((0, 1), (1, 2))
    assert edge_set(dfs(g, 3)) == pairs((3, 4))


def test_dfs_follows_path():
    g = make_graph(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (0, 3, 1)])
    tree = dfs(g, 0)
    # Newest edge first: 0 -> 3 -> 2 -> 1.
    assert edge_set(tree) == pairs((0, 3), (3, 2), (2, 1))


def test_dfs_handles_deep_graph():
    n = 5000
    g = make_graph(n, [(i, i + 1, 1) for i in range(n - 1)])
    assert len(list(dfs(g, 0).edges())) == n - 1


def test_dijkstra_prefers_cheaper_indirect_path():
    g = make_graph(4, [(0, 1, 1), (1, 2, 2), (0, 2, 10), (2, 3, 1)])
    tree = dijkstra(g, 0)
    assert frozenset((0, 2)) not in edge_set(tree)
    assert weighted_edges(tree) <= weighted_edges(g)


def test_dijkstra_rejects_negative_weight():
    g = make_graph(3, [(0, 1, 2), (1, 2, -1)])
    with pytest.raises(GraphError):
        dijkstra(g, 0)


def test_prim_rejects_negative_weight():
    g = make_graph(3, [(0, 1, 2), (1, 2, -1)])
    with pytest.raises(GraphError):
        prim(g)


def test_kruskal_accepts_negative_weight():
    g = make_graph(3, [(0, 1, 2), (1, 2, -1), (0, 2, 5)])
    assert edge_set(kruskal(g)) == pairs((0, 1), (1, 2))


def test_kruskal_forest_on_disconnected_graph():
    g = make_graph(5, [(0, 1, 3), (1, 2, 1), (0, 2, 2), (3, 4, 7)])
    assert edge_set(kruskal(g)) == pairs((1, 2), (0, 2), (3, 4))


def test_single_vertex_trees_are_empty():
    g = Graph(1)
    for tree in (bfs(g, 0), dfs(g, 0), dijkstra(g, 0), prim(g), kruskal(g)):
        assert tree.num_vertices == 1
        assert list(tree.edges()) == []


def test_input_graph_is_unchanged():
    g = sample_graph()
    before = g.format()
    bfs(g, 0)
    dfs(g, 0)
    dijkstra(g, 0)
    prim(g)
    kruskal(g)
    assert g.format() == before