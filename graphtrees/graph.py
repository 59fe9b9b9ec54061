"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, TextIO


class GraphError(ValueError):
    """Raised for invalid graph construction or edge operations."""


@dataclass(frozen=True)
class Neighbor:
    """One entry of a vertex's adjacency list."""

    vertex: int
    weight: int


class Graph:
    """An undirected graph with integer edge weights.

    Each vertex keeps its neighbours with the most recently added edge first.
    """

    def __init__(self, vertices: int) -> None:
        if vertices <= 0:
            raise GraphError("Graph must have at least one vertex.")
        self._adjacency: list[list[Neighbor]] = [[] for _ in range(vertices)]

    @property
    def num_vertices(self) -> int:
        """Number of vertices in the graph."""
        return len(self._adjacency)

    def _check_vertex(self, *vertices: int) -> None:
        if any(not 0 <= v < len(self._adjacency) for v in vertices):
            raise GraphError("Invalid vertex index.")

    def add_edge(self, source: int, target: int, weight: int = 1) -> None:
        """Add an undirected edge between two vertices."""
        self._check_vertex(source, target)
        self._adjacency[source].insert(0, Neighbor(target, weight))
        self._adjacency[target].insert(0, Neighbor(source, weight))

    def _remove_from_list(self, source: int, target: int) -> None:
        entries = self._adjacency[source]
        for index, neighbor in enumerate(entries):
            if neighbor.vertex == target:
                del entries[index]
                return
        raise GraphError("Edge does not exist.")

    def remove_edge(self, source: int, target: int) -> None:
        """Remove the edge between two vertices in both directions."""
        self._check_vertex(source, target)
        self._remove_from_list(source, target)
        self._remove_from_list(target, source)

    def neighbors(self, vertex: int) -> tuple[Neighbor, ...]:
        """Return the neighbours of a vertex, newest edge first."""
        self._check_vertex(vertex)
        return tuple(self._adjacency[vertex])

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield each undirected edge once as (u, v, weight) with u <= v."""
        for u, entries in enumerate(self._adjacency):
            pending_loop = False
            for neighbor in entries:
                if neighbor.vertex > u:
                    yield u, neighbor.vertex, neighbor.weight
                elif neighbor.vertex == u:
                    # A self-loop is stored twice in its own list.
                    if pending_loop:
                        yield u, u, neighbor.weight
                    pending_loop = not pending_loop

    def format(self) -> str:
        """Render the adjacency lists, one line per vertex."""
        lines = []
        for vertex, entries in enumerate(self._adjacency):
            parts = "".join(f" -> ({n.vertex}, w={n.weight})" for n in entries)
            lines.append(f"Vertex {vertex}:{parts}\n")
        return "".join(lines)

    def print_graph(self, file: TextIO | None = None) -> None:
        """Write the adjacency lists to a stream (standard output by default)."""
        print(self.format(), end="", file=file if file is not None else sys.stdout)