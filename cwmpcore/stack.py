"""Bounded LIFO stack."""

from __future__ import annotations

from typing import Any


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class StackEmptyError(Exception):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A stack created with ``size`` slots; it holds at most ``size - 1`` items."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self.size - 1

    def push(self, data: Any) -> None:
        if self.is_full():
            raise StackFullError(f"stack holds at most {self.capacity} items")
        self._items.append(data)

    def pop(self) -> Any:
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(size={self.size}, items={self._items!r})"