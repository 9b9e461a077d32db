"""Fixed-capacity list whose items occupy numbered slots."""

from __future__ import annotations

from typing import Any, Iterator

_EMPTY = object()


class ListFullError(Exception):
    """Raised when every slot of a FixedList is taken."""


class FixedList:
    """A list with a fixed number of slots.

    New items go into the first free slot, so a slot freed by a removal is
    reused before later slots. Items are numbered in slot order, counting
    only occupied slots.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._slots: list[Any] = [_EMPTY] * size

    @property
    def size(self) -> int:
        """Total number of slots."""
        return len(self._slots)

    def _occupied(self) -> Iterator[int]:
        return (slot for slot, item in enumerate(self._slots) if item is not _EMPTY)

    def _slot_of(self, num: int) -> int:
        if num >= 0:
            for position, slot in enumerate(self._occupied()):
                if position == num:
                    return slot
        raise IndexError(f"member {num} out of range")

    def append(self, data: Any) -> int:
        """Store ``data`` in the first free slot and return that slot."""
        for slot, item in enumerate(self._slots):
            if item is _EMPTY:
                self._slots[slot] = data
                return slot
        raise ListFullError(f"all {self.size} slots are in use")

    def remove(self, data: Any) -> None:
        """Free the first slot holding an item equal to ``data``."""
        for slot in self._occupied():
            if self._slots[slot] == data:
                self._slots[slot] = _EMPTY
                return
        raise ValueError(f"{data!r} not in list")

    def remove_by_num(self, num: int) -> Any:
        """Free the ``num``-th occupied slot and return its item."""
        slot = self._slot_of(num)
        data = self._slots[slot]
        self._slots[slot] = _EMPTY
        return data

    def find_by_num(self, num: int) -> Any:
        """Return the item of the ``num``-th occupied slot."""
        return self._slots[self._slot_of(num)]

    def replace(self, num: int, data: Any) -> None:
        """Overwrite the item of the ``num``-th occupied slot."""
        self._slots[self._slot_of(num)] = data

    def clear(self) -> None:
        self._slots = [_EMPTY] * self.size

    def __len__(self) -> int:
        return sum(1 for _ in self._occupied())

    def __iter__(self) -> Iterator[Any]:
        for slot in self._occupied():
            yield self._slots[slot]

    def __repr__(self) -> str:
        return f"FixedList(size={self.size}, items={list(self)!r})"