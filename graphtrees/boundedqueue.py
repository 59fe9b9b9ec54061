"""First-in first-out queue with a fixed capacity."""

from __future__ import annotations

from collections import deque


class QueueOverflowError(OverflowError):
    """Raised when enqueuing into a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class BoundedQueue:
    """A FIFO queue of integers that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("Queue capacity cannot be negative.")
        self._capacity = capacity
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._items

    def enqueue(self, value: int) -> None:
        """Add a value at the back of the queue."""
        if len(self._items) >= self._capacity:
            raise QueueOverflowError("Queue overflow!")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise QueueEmptyError("Queue is empty")
        return self._items.popleft()