"""Fixed-capacity key/value store kept in numbered slots."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from cwmpcore.fixedlist import FixedList

Key = Union[str, bytes, bytearray, memoryview]
Value = Union[str, bytes, bytearray, memoryview, None]

SHOW_HEADER = "---------------- keyvalue show ----------------"
VOID_VALUE = "[void]"


class KeyValueFullError(Exception):
    """Raised when a KeyValueStore already holds as many items as it has slots."""


def _key_bytes(key: Key) -> bytes:
    """Byte form of a key; text keys carry a trailing NUL terminator."""
    if isinstance(key, str):
        raw = key.encode("utf-8") + b"\0"
    elif isinstance(key, (bytes, bytearray, memoryview)):
        raw = bytes(key)
    else:
        raise TypeError(f"unsupported key type {type(key).__name__}")
    if not raw:
        raise ValueError("key must not be empty")
    return raw


def _normalize_value(value: Value) -> Value:
    """Check a value's type; an empty byte string counts as no value."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        return raw if raw else None
    raise TypeError(f"unsupported value type {type(value).__name__}")


def _byte_len(data: Value) -> int:
    if data is None:
        return 0
    if isinstance(data, str):
        return len(data.encode("utf-8")) + 1
    return len(bytes(data))


def _display(data: Union[Key, Value]) -> str:
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", errors="replace").rstrip("\0")


@dataclass
class KeyValueItem:
    """One stored pair; ``value`` is None when the key carries no value."""

    key: Key
    value: Value = None

    @property
    def key_bytes(self) -> bytes:
        return _key_bytes(self.key)

    @property
    def key_len(self) -> int:
        """Length of the key in bytes, terminator included for text."""
        return len(self.key_bytes)

    @property
    def value_len(self) -> int:
        """Length of the value in bytes, terminator included for text."""
        return _byte_len(self.value)

    @property
    def has_value(self) -> bool:
        return self.value is not None


class KeyValueStore:
    """A store of at most ``size`` pairs with unique keys.

    Pairs sit in the first free slot, so a slot freed by a removal is reused
    before later ones. Keys are compared by their bytes; a text key stands for
    its UTF-8 encoding followed by a NUL byte.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._items = FixedList(size)

    @property
    def size(self) -> int:
        return self._items.size

    def _find(self, raw: bytes) -> Optional[Tuple[int, KeyValueItem]]:
        for num, item in enumerate(self._items):
            if item.key_bytes == raw:
                return num, item
        return None

    def set(self, key: Key, value: Value = None) -> None:
        """Add ``key`` or replace its pair.

        The capacity check comes first, so even a replacement fails once the
        store is full.
        """
        raw = _key_bytes(key)
        value = _normalize_value(value)
        if len(self._items) >= self.size:
            raise KeyValueFullError(f"store holds at most {self.size} items")
        new_item = KeyValueItem(key, value)
        found = self._find(raw)
        if found is None:
            self._items.append(new_item)
        else:
            self._items.replace(found[0], new_item)

    def get(self, key: Key) -> Value:
        """Return the value under ``key``.

        Raises KeyError if the key is absent or was stored without a value.
        """
        found = self._find(_key_bytes(key))
        if found is None or not found[1].has_value:
            raise KeyError(key)
        return found[1].value

    def get_item(self, key: Key) -> KeyValueItem:
        """Return the whole pair stored under ``key``; raises KeyError if absent."""
        found = self._find(_key_bytes(key))
        if found is None:
            raise KeyError(key)
        return found[1]

    def remove(self, key: Key) -> None:
        """Delete ``key``; raises KeyError if absent."""
        found = self._find(_key_bytes(key))
        if found is None:
            raise KeyError(key)
        self._items.remove_by_num(found[0])

    def clear(self) -> None:
        self._items.clear()

    def show(self) -> str:
        """Print every pair and return the printed text."""
        lines = [SHOW_HEADER]
        for item in self._items:
            if item.has_value:
                lines.append(
                    f"key:{_display(item.key)} keyLen:{item.key_len} keyEn:1 "
                    f"value:{_display(item.value)} valueLen:{item.value_len} valueEn:1"
                )
            else:
                lines.append(
                    f"key:{_display(item.key)} keyLen:{item.key_len} keyEn:1 "
                    f"value:{VOID_VALUE} valueLen:0 valueEn:0"
                )
        text = "\n".join(lines) + "\n"
        sys.stdout.write(text)
        return text

    def __contains__(self, key: Key) -> bool:
        return self._find(_key_bytes(key)) is not None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Key]:
        for item in self._items:
            yield item.key

    def __repr__(self) -> str:
        pairs = {item.key: item.value for item in self._items}
        return f"KeyValueStore(size={self.size}, items={pairs!r})"