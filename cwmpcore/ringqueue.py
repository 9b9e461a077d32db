"""Bounded FIFO queue laid out as a ring buffer."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class QueueFullError(Exception):
    """Raised when putting into a full queue."""


class QueueEmptyError(Exception):
    """Raised when reading from an empty queue."""


class RingQueue:
    """A ring queue created with ``size`` slots.

    One slot always stays unused to tell a full ring from an empty one, so the
    queue holds at most ``size - 1`` items.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._items: deque[Any] = deque()

    @property
    def capacity(self) -> int:
        """Largest number of items the queue can hold."""
        return self.size - 1

    def put(self, data: Any) -> None:
        """Add ``data`` at the tail."""
        if self.is_full():
            raise QueueFullError(f"queue holds at most {self.capacity} items")
        self._items.append(data)

    def get(self) -> Any:
        """Remove and return the item at the head."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the item at the head without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield items from head to tail without removing them."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"RingQueue(size={self.size}, items={list(self._items)!r})"