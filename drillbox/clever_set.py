"""A set that picks its storage from what the element type supports."""

from __future__ import annotations

import enum
from bisect import bisect_left
from typing import Any, Dict, List


class _Storage(enum.Enum):
    HASHED = "hashed"
    ORDERED = "ordered"
    IDENTITY = "identity"


def _defines(cls: type, name: str) -> bool:
    attr = getattr(cls, name, None)
    return attr is not None and attr is not getattr(object, name, None)


_KINDS: Dict[type, _Storage] = {}


def _storage_for(cls: type) -> _Storage:
    kind = _KINDS.get(cls)
    if kind is None:
        orderable = _defines(cls, "__lt__") or _defines(cls, "__gt__")
        comparable = _defines(cls, "__eq__") or _defines(cls, "__ne__") or orderable
        hashable = cls.__hash__ is not None and cls.__hash__ is not object.__hash__
        if hashable and comparable:
            kind = _Storage.HASHED
        elif orderable:
            kind = _Storage.ORDERED
        else:
            kind = _Storage.IDENTITY
        _KINDS[cls] = kind
    return kind


def _equal(a: Any, b: Any) -> bool:
    cls = type(a)
    if _defines(cls, "__eq__"):
        return bool(a == b)
    if _defines(cls, "__ne__"):
        return not a != b
    if _defines(cls, "__lt__"):
        return not a < b and not b < a
    return not a > b and not b > a


class CleverSet:
    """A set of values stored by hash, by order, or by identity.

    Values whose type defines its own hash and some comparison are kept in a
    hash table, compared with ``==`` or an equality derived from ``!=``, ``<``
    or ``>``. Values that are only ordered are kept sorted. Anything else is
    stored by identity, so equal but distinct objects are all kept.
    """

    def __init__(self) -> None:
        self._hashed: Dict[int, List[Any]] = {}
        self._ordered: List[Any] = []
        self._identity: Dict[int, Any] = {}
        self._size = 0

    def _ordered_index(self, value: Any) -> tuple[int, bool]:
        index = bisect_left(self._ordered, value)
        present = index < len(self._ordered) and not value < self._ordered[index]
        return index, present

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if an equal value is already present."""
        kind = _storage_for(type(value))
        if kind is _Storage.HASHED:
            bucket = self._hashed.setdefault(hash(value), [])
            if any(_equal(item, value) for item in bucket):
                return False
            bucket.append(value)
        elif kind is _Storage.ORDERED:
            index, present = self._ordered_index(value)
            if present:
                return False
            self._ordered.insert(index, value)
        else:
            if id(value) in self._identity:
                return False
            self._identity[id(value)] = value
        self._size += 1
        return True

    def erase(self, value: Any) -> bool:
        """Remove ``value``; return False if it was not present."""
        kind = _storage_for(type(value))
        if kind is _Storage.HASHED:
            key = hash(value)
            bucket = self._hashed.get(key, [])
            position = next((i for i, item in enumerate(bucket) if _equal(item, value)), None)
            if position is None:
                return False
            del bucket[position]
            if not bucket:
                del self._hashed[key]
        elif kind is _Storage.ORDERED:
            index, present = self._ordered_index(value)
            if not present:
                return False
            del self._ordered[index]
        else:
            if self._identity.pop(id(value), None) is None:
                return False
        self._size -= 1
        return True

    def find(self, value: Any) -> bool:
        """Return True if ``value`` is in the set."""
        kind = _storage_for(type(value))
        if kind is _Storage.HASHED:
            return any(_equal(item, value) for item in self._hashed.get(hash(value), ()))
        if kind is _Storage.ORDERED:
            return self._ordered_index(value)[1]
        return id(value) in self._identity

    def __contains__(self, value: Any) -> bool:
        return self.find(value)

    def __len__(self) -> int:
        return self._size