"""A fixed-capacity cache that evicts the least recently used entry."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LruCache(Generic[K, V]):
    """Key-value cache holding at most ``capacity`` entries."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._data: "OrderedDict[K, V]" = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> Optional[V]:
        """Return the value for ``key`` and mark it most recent, or None."""
        if key not in self._data:
            return None
        self._data.move_to_end(key)
        return self._data[key]

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        if key in self._data:
            self._data.move_to_end(key)
        elif len(self._data) == self._capacity:
            self._data.popitem(last=False)
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)