"""Open-addressing string-keyed hash table with linear probing."""

from __future__ import annotations

from typing import Any, Iterator

HASH_OFFSET = 10041405866739416012
DEFAULT_CAPACITY = 16 * 1024
_PRIME = 32 - 1
_MASK = (1 << 64) - 1


class TableFullError(RuntimeError):
    """Raised when a new key cannot be placed because every slot is taken."""


def string_hash(text: str) -> int:
    """Return the 64-bit polynomial hash of ``text`` (UTF-8, signed bytes)."""
    total = HASH_OFFSET
    factor = 1
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        total = (total + signed * factor) & _MASK
        factor = (factor * _PRIME) & _MASK
    return total


class HashTable:
    """Fixed-capacity table; iteration follows slot order."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._slots: list[tuple[str, Any] | None] = [None] * capacity
        self._count = 0

    def _locate(self, key: str) -> tuple[int | None, bool]:
        """Return the slot holding ``key`` or the first free slot on its probe path."""
        start = string_hash(key) % self._capacity
        for offset in range(self._capacity):
            index = (start + offset) % self._capacity
            slot = self._slots[index]
            if slot is None:
                return index, False
            if slot[0] == key:
                return index, True
        return None, False

    def __getitem__(self, key: str) -> Any:
        if not isinstance(key, str) or not key:
            raise KeyError(key)
        index, found = self._locate(key)
        if not found:
            raise KeyError(key)
        return self._slots[index][1]

    def __setitem__(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise TypeError("keys must be strings")
        if not key:
            raise ValueError("keys must not be empty")
        index, found = self._locate(key)
        if index is None:
            raise TableFullError(f"no free slot for key {key!r}")
        if not found:
            self._count += 1
        self._slots[index] = (key, value)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        return self._locate(key)[1]

    def __iter__(self) -> Iterator[str]:
        return (slot[0] for slot in self._slots if slot is not None)

    def __len__(self) -> int:
        return self._count

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(key, value)`` pairs in slot order."""
        return (slot for slot in self._slots if slot is not None)

    def setdefault(self, key: str, default: Any) -> Any:
        """Return the value for ``key``, storing ``default`` first if it is absent."""
        if key in self:
            return self[key]
        self[key] = default
        return default