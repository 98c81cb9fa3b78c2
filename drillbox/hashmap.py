"""An open-addressing hash map with linear probing and backward-shift deletion."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Hashable, Iterable, Iterator, Optional, Tuple, Union

DEFAULT_CAPACITY = 8

_Slot = Optional[Tuple[Any, Any]]


def _nearest_power_of_two(number: int) -> int:
    result = 1
    while result < number:
        result <<= 1
    return result


class HashMap(MutableMapping):
    """A mapping stored in one flat table of slots.

    Keys are placed at ``hasher(key) % capacity`` and probe forward to the
    next free slot. The table doubles once it is half full. Removing a key
    shifts the following entries back, so no tombstones are left behind.
    With a ``default_factory``, reading a missing key stores and returns a
    fresh default value.
    """

    def __init__(
        self,
        items: Union[Mapping, Iterable[Tuple[Any, Any]]] = (),
        capacity: int = DEFAULT_CAPACITY,
        hasher: Callable[[Any], int] = hash,
        default_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._hasher = hasher
        self.default_factory = default_factory
        self._capacity = max(2, _nearest_power_of_two(capacity))
        self._slots: list[_Slot] = [None] * self._capacity
        self._size = 0
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.insert(key, value)

    @property
    def hasher(self) -> Callable[[Any], int]:
        """The function used to hash keys."""
        return self._hasher

    @property
    def capacity(self) -> int:
        """The number of slots in the table."""
        return self._capacity

    def _home(self, key: Hashable) -> int:
        return self._hasher(key) % self._capacity

    def _probe(self, key: Hashable) -> int:
        index = self._home(key)
        while True:
            slot = self._slots[index]
            if slot is None or slot[0] == key:
                return index
            index = (index + 1) % self._capacity

    def insert(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        index = self._probe(key)
        if self._slots[index] is None:
            self._size += 1
        self._slots[index] = (key, value)
        if self._size >= self._capacity // 2:
            self.rehash()

    def erase(self, key: Hashable) -> bool:
        """Remove ``key``; return False if it was not present."""
        hole = self._probe(key)
        if self._slots[hole] is None:
            return False
        self._slots[hole] = None
        self._size -= 1
        index = (hole + 1) % self._capacity
        while (slot := self._slots[index]) is not None:
            from_home = (index - self._home(slot[0])) % self._capacity
            if from_home >= (index - hole) % self._capacity:
                self._slots[hole] = slot
                self._slots[index] = None
                hole = index
            index = (index + 1) % self._capacity
        return True

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` or ``default``; never inserts."""
        slot = self._slots[self._probe(key)]
        return default if slot is None else slot[1]

    def clear(self) -> None:
        """Remove every entry and shrink back to the default capacity."""
        self._capacity = DEFAULT_CAPACITY
        self._slots = [None] * self._capacity
        self._size = 0

    def rehash(self) -> None:
        """Double the table and place every entry again."""
        entries = [slot for slot in self._slots if slot is not None]
        self._capacity *= 2
        self._slots = [None] * self._capacity
        self._size = 0
        for key, value in entries:
            self.insert(key, value)

    def bucket(self, key: Hashable) -> int:
        """Return the slot index holding ``key``, or -1 if it is absent."""
        index = self._probe(key)
        return -1 if self._slots[index] is None else index

    def items(self) -> Iterator[Tuple[Any, Any]]:  # type: ignore[override]
        """Yield ``(key, value)`` pairs in slot order."""
        return (slot for slot in self._slots if slot is not None)

    def __getitem__(self, key: Hashable) -> Any:
        slot = self._slots[self._probe(key)]
        if slot is not None:
            return slot[1]
        if self.default_factory is None:
            raise KeyError(key)
        value = self.default_factory()
        self.insert(key, value)
        return value

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: Hashable) -> None:
        if not self.erase(key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return self._slots[self._probe(key)] is not None

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"HashMap({{{body}}})"