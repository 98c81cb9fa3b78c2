"""A doubly linked list whose links live inside the items themselves."""

from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, TypeVar


class ListHook:
    """Base class for objects that can be linked into an IntrusiveList.

    An item belongs to at most one list at a time.
    """

    _owner: Optional["IntrusiveList[Any]"] = None
    _prev: Optional["ListHook"] = None
    _next: Optional["ListHook"] = None

    def is_linked(self) -> bool:
        """Return True if the item is in a list."""
        return self._owner is not None

    def unlink(self) -> None:
        """Remove the item from its list, if any."""
        if self._owner is not None:
            self._owner._detach(self)


T = TypeVar("T", bound=ListHook)


class IntrusiveList(Generic[T]):
    """A list that links items in place and never copies them.

    Used as a context manager, it unlinks every item on exit.
    """

    def __init__(self) -> None:
        self._head: Optional[T] = None
        self._tail: Optional[T] = None
        self._size = 0

    def _detach(self, item: ListHook) -> None:
        if item._prev is None:
            self._head = item._next  # type: ignore[assignment]
        else:
            item._prev._next = item._next
        if item._next is None:
            self._tail = item._prev  # type: ignore[assignment]
        else:
            item._next._prev = item._prev
        item._owner = item._prev = item._next = None
        self._size -= 1

    @staticmethod
    def _check_free(item: ListHook) -> None:
        if item._owner is not None:
            raise ValueError("item is already linked into a list")

    def _unlink_all(self) -> None:
        for item in self:
            self._detach(item)

    def push_back(self, item: T) -> None:
        """Link ``item`` at the back."""
        self._check_free(item)
        item._owner = self
        item._prev = self._tail
        item._next = None
        if self._tail is None:
            self._head = item
        else:
            self._tail._next = item
        self._tail = item
        self._size += 1

    def push_front(self, item: T) -> None:
        """Link ``item`` at the front."""
        self._check_free(item)
        item._owner = self
        item._next = self._head
        item._prev = None
        if self._head is None:
            self._tail = item
        else:
            self._head._prev = item
        self._head = item
        self._size += 1

    def pop_back(self) -> T:
        """Unlink and return the back item."""
        item = self.back()
        self._detach(item)
        return item

    def pop_front(self) -> T:
        """Unlink and return the front item."""
        item = self.front()
        self._detach(item)
        return item

    def front(self) -> T:
        """Return the front item."""
        if self._head is None:
            raise IndexError("front of an empty list")
        return self._head

    def back(self) -> T:
        """Return the back item."""
        if self._tail is None:
            raise IndexError("back of an empty list")
        return self._tail

    def is_empty(self) -> bool:
        """Return True if no item is linked."""
        return self._size == 0

    def _walk(self, start: Optional[ListHook]) -> Iterator[T]:
        node = start
        while node is not None:
            following = node._next
            yield node  # type: ignore[misc]
            node = following

    def iter_from(self, item: T) -> Iterator[T]:
        """Iterate from ``item`` to the back; ``item`` must be in this list."""
        if item._owner is not self:
            raise ValueError("item is not in this list")
        return self._walk(item)

    def take(self, other: "IntrusiveList[T]") -> None:
        """Move every item of ``other`` into this list, leaving ``other`` empty.

        Items already in this list are unlinked first.
        """
        if other is self:
            return
        self._unlink_all()
        for item in other:
            item._owner = self
        self._head, self._tail, self._size = other._head, other._tail, other._size
        other._head = other._tail = None
        other._size = 0

    def __iter__(self) -> Iterator[T]:
        return self._walk(self._head)

    def __len__(self) -> int:
        return self._size

    def __enter__(self) -> "IntrusiveList[T]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._unlink_all()