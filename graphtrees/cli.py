"""Command that runs every algorithm on a sample graph and prints the trees."""

from __future__ import annotations

import argparse
from typing import Sequence

from .algorithms import bfs, dfs, dijkstra, kruskal, prim
from .graph import Graph


def build_sample_graph() -> Graph:
    """Return the six-vertex demonstration graph."""
    graph = Graph(6)
    for source, target, weight in (
        (0, 1, 4),
        (0, 2, 3),
        (1, 2, 1),
        (1, 3, 2),
        (2, 3, 4),
        (3, 4, 2),
        (4, 5, 6),
    ):
        graph.add_edge(source, target, weight)
    return graph


def _print_title(title: str) -> None:
    print(f"\n=== {title} ===")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample graph followed by each algorithm's tree."""
    parser = argparse.ArgumentParser(
        description="Show BFS, DFS, Dijkstra, Prim and Kruskal trees of a sample graph."
    )
    parser.parse_args(argv)

    graph = build_sample_graph()
    sections = (
        ("Original Graph", graph),
        ("BFS Tree from vertex 0", bfs(graph, 0)),
        ("DFS Tree from vertex 0", dfs(graph, 0)),
        ("Dijkstra Tree from vertex 0", dijkstra(graph, 0)),
        ("Prim MST", prim(graph)),
        ("Kruskal MST", kruskal(graph)),
    )
    for title, tree in sections:
        _print_title(title)
        tree.print_graph()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())