"""A separately chained hash table keyed by integers."""

from __future__ import annotations

from typing import Any


class HashTable:
    """Maps integer keys to values using ``key % size`` slots with chaining."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._slots: list[list[tuple[int, Any]]] = [[] for _ in range(size)]

    def _slot(self, key: int) -> list[tuple[int, Any]]:
        return self._slots[key % self._size]

    def get(self, key: int) -> Any:
        """Return the value for ``key``, or ``None`` if it is absent."""
        for stored_key, value in self._slot(key):
            if stored_key == key:
                return value
        return None

    def set(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        chain = self._slot(key)
        for position, (stored_key, _) in enumerate(chain):
            if stored_key == key:
                chain[position] = (key, value)
                return
        chain.append((key, value))

    def __getitem__(self, key: int) -> Any:
        for stored_key, value in self._slot(key):
            if stored_key == key:
                return value
        raise KeyError(key)

    def __setitem__(self, key: int, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return any(stored_key == key for stored_key, _ in self._slot(key))