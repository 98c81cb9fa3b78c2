"""A double-ended queue stored in fixed-size blocks."""

from __future__ import annotations

from itertools import chain, islice
from typing import Any, Iterable, Iterator, List

BLOCK_SIZE = 128


class Deque:
    """A deque whose items live in blocks of ``BLOCK_SIZE`` slots.

    Items never move once stored, so neighbours inside a block stay adjacent.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._blocks: List[List[Any]] = []
        self._front = 0
        self._size = 0
        for item in items:
            self.append(item)

    def _locate(self, index: int) -> tuple[int, int]:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("deque index out of range")
        return divmod(self._front + index, BLOCK_SIZE)

    def __getitem__(self, index: int) -> Any:
        block, offset = self._locate(index)
        return self._blocks[block][offset]

    def __setitem__(self, index: int, value: Any) -> None:
        block, offset = self._locate(index)
        self._blocks[block][offset] = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return islice(chain.from_iterable(self._blocks), self._front, self._front + self._size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add ``value`` at the back."""
        end = self._front + self._size
        if end == len(self._blocks) * BLOCK_SIZE:
            self._blocks.append([0] * BLOCK_SIZE)
        block, offset = divmod(end, BLOCK_SIZE)
        self._blocks[block][offset] = value
        self._size += 1

    def appendleft(self, value: Any) -> None:
        """Add ``value`` at the front."""
        if self._front == 0:
            self._blocks.insert(0, [0] * BLOCK_SIZE)
            self._front = BLOCK_SIZE
        self._front -= 1
        self._blocks[0][self._front] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the back item."""
        if not self._size:
            raise IndexError("pop from an empty deque")
        block, offset = divmod(self._front + self._size - 1, BLOCK_SIZE)
        value = self._blocks[block][offset]
        self._size -= 1
        if offset == 0:
            self._blocks.pop()
        if not self._size:
            self.clear()
        return value

    def popleft(self) -> Any:
        """Remove and return the front item."""
        if not self._size:
            raise IndexError("pop from an empty deque")
        value = self._blocks[0][self._front]
        self._front += 1
        self._size -= 1
        if self._front == BLOCK_SIZE:
            del self._blocks[0]
            self._front = 0
        if not self._size:
            self.clear()
        return value

    def clear(self) -> None:
        """Remove every item."""
        self._blocks = []
        self._front = 0
        self._size = 0

    def swap(self, other: "Deque") -> None:
        """Exchange contents with ``other``."""
        self._blocks, other._blocks = other._blocks, self._blocks
        self._front, other._front = other._front, self._front
        self._size, other._size = other._size, self._size

    def copy(self) -> "Deque":
        """Return an independent copy."""
        return Deque(self)

    __copy__ = copy