"""Indexed binary min-heap of vertices keyed by distance."""

from __future__ import annotations

from dataclasses import dataclass


class HeapOverflowError(OverflowError):
    """Raised when inserting into a full heap."""


@dataclass
class _Node:
    vertex: int
    dist: int


class MinHeap:
    """A min-heap of (vertex, distance) pairs supporting decrease-key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("Heap capacity cannot be negative.")
        self._capacity = capacity
        self._heap: list[_Node] = []
        self._pos: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._pos

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[heap[i].vertex] = i
        self._pos[heap[j].vertex] = j

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0 and heap[i].dist < heap[(i - 1) // 2].dist:
            parent = (i - 1) // 2
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            smallest = i
            if left < size and heap[left].dist < heap[smallest].dist:
                smallest = left
            if right < size and heap[right].dist < heap[smallest].dist:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def insert(self, vertex: int, dist: int) -> None:
        """Insert a vertex with the given distance."""
        if len(self._heap) >= self._capacity:
            raise HeapOverflowError("Heap overflow!")
        self._heap.append(_Node(vertex, dist))
        index = len(self._heap) - 1
        self._pos[vertex] = index
        self._sift_up(index)

    def is_empty(self) -> bool:
        """Return True if the heap holds no vertices."""
        return not self._heap

    def extract_min(self) -> int:
        """Remove and return the vertex with the smallest distance."""
        if not self._heap:
            raise IndexError("extract from an empty heap")
        top = self._heap[0]
        last = self._heap.pop()
        del self._pos[top.vertex]
        if self._heap:
            self._heap[0] = last
            self._pos[last.vertex] = 0
            self._sift_down(0)
        return top.vertex

    def decrease_key(self, vertex: int, new_dist: int) -> None:
        """Lower the distance of a vertex that is in the heap."""
        if vertex not in self._pos:
            raise KeyError(f"Vertex not found in heap: {vertex}")
        index = self._pos[vertex]
        self._heap[index].dist = new_dist
        self._sift_up(index)

    def contains(self, vertex: int) -> bool:
        """Return True if the vertex is currently in the heap."""
        return vertex in self

    def get_dist(self, vertex: int) -> int:
        """Return the current distance of a vertex in the heap."""
        if vertex not in self._pos:
            raise KeyError(f"Vertex not found in heap: {vertex}")
        return self._heap[self._pos[vertex]].dist