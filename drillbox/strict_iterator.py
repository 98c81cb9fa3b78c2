"""A bidirectional cursor over a sequence that refuses to leave its bounds."""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

T = TypeVar("T")


class StrictIterator(Generic[T]):
    """Cursor over ``sequence``; position ``len(sequence)`` is the end."""

    __slots__ = ("_sequence", "_position")

    def __init__(self, sequence: Sequence[T], position: int = 0) -> None:
        if not 0 <= position <= len(sequence):
            raise IndexError("position out of range")
        self._sequence = sequence
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    def advance(self) -> None:
        """Move one step right; raises IndexError at the end."""
        if self._position == len(self._sequence):
            raise IndexError("out of range (right)")
        self._position += 1

    def retreat(self) -> None:
        """Move one step left; raises IndexError at the start."""
        if self._position == 0:
            raise IndexError("out of range (left)")
        self._position -= 1

    def value(self) -> T:
        """Return the current item; raises IndexError at the end."""
        if self._position == len(self._sequence):
            raise IndexError("dereferencing end of sequence")
        return self._sequence[self._position]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, StrictIterator):
            return NotImplemented
        return self._sequence is other._sequence and self._position == other._position

    def __repr__(self) -> str:
        return f"StrictIterator(position={self._position}, length={len(self._sequence)})"


def make_strict(sequence: Sequence[T], position: int = 0) -> StrictIterator[T]:
    """Create a strict cursor over ``sequence`` at ``position``."""
    return StrictIterator(sequence, position)