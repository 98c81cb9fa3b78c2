"""A list of strings whose copies share storage until one of them writes."""

from __future__ import annotations

import weakref
from typing import Iterable, Iterator, List


class _Storage:
    __slots__ = ("items", "owners")

    def __init__(self, items: List[str]) -> None:
        self.items = items
        self.owners: "weakref.WeakSet[CowVector]" = weakref.WeakSet()


class CowVector:
    """A copy-on-write vector of strings.

    ``copy`` shares the underlying storage; the first write through a vector
    whose storage is shared gives it a private copy. Reads never copy.
    """

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._attach(_Storage(list(items)))

    def _attach(self, storage: _Storage) -> None:
        self._storage = storage
        storage.owners.add(self)

    def _own(self) -> None:
        if len(self._storage.owners) > 1:
            self._storage.owners.discard(self)
            self._attach(_Storage(list(self._storage.items)))

    def copy(self) -> "CowVector":
        """Return a vector that shares this one's storage."""
        clone = CowVector.__new__(CowVector)
        clone._attach(self._storage)
        return clone

    __copy__ = copy

    def __len__(self) -> int:
        return len(self._storage.items)

    def __getitem__(self, index: int) -> str:
        return self._storage.items[index]

    def __setitem__(self, index: int, value: str) -> None:
        self._storage.items[index]  # validate before detaching
        self._own()
        self._storage.items[index] = value

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage.items)

    def resize(self, size: int) -> None:
        """Truncate to ``size`` items or pad with empty strings."""
        if size < 0:
            raise ValueError("size must not be negative")
        self._own()
        items = self._storage.items
        del items[size:]
        items.extend([""] * (size - len(items)))

    def back(self) -> str:
        """Return the last item."""
        if not self._storage.items:
            raise IndexError("back of an empty vector")
        return self._storage.items[-1]

    def append(self, value: str) -> None:
        """Add ``value`` at the end."""
        self._own()
        self._storage.items.append(value)

    def ref_count(self) -> int:
        """Return how many vectors share this one's storage."""
        return len(self._storage.owners)

    def __repr__(self) -> str:
        return f"CowVector({self._storage.items!r})"