"""Left folds and a few folding helpers."""

from __future__ import annotations

import functools
from typing import Any, Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")
A = TypeVar("A")


def fold(iterable: Iterable[T], init: A, func: Callable[[A, T], A]) -> A:
    """Combine the items left to right, starting from ``init``."""
    return functools.reduce(func, iterable, init)


def concat(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Return a new list holding the items of ``a`` followed by those of ``b``."""
    return [*a, *b]


class Length:
    """Fold step that counts the items it sees and keeps the accumulator."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self, acc: A, item: Any) -> A:
        self.count += 1
        return acc