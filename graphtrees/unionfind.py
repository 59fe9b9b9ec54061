"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the elements ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("Size cannot be negative.")
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, element: int) -> None:
        if not 0 <= element < len(self._parent):
            raise IndexError(f"Element out of range: {element}")

    def find(self, element: int) -> int:
        """Return the representative of the set holding ``element``."""
        self._check(element)
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def unite(self, first: int, second: int) -> None:
        """Merge the sets holding the two elements."""
        root_a = self.find(first)
        root_b = self.find(second)
        if root_a == root_b:
            return
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1