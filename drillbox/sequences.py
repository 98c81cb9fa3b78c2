"""Lazy numeric ranges, pairwise zipping and grouping of equal neighbours."""

from __future__ import annotations

from itertools import count, groupby, takewhile
from typing import Any, Iterable, Iterator, List, Tuple, TypeVar

A = TypeVar("A")
B = TypeVar("B")


def numeric_range(*args: Any) -> Iterator[Any]:
    """Yield ``start, start + step, ...`` while the value is below ``stop``.

    Called as ``numeric_range(stop)``, ``numeric_range(start, stop)`` or
    ``numeric_range(start, stop, step)``. Works for any numbers; a negative
    step yields nothing.
    """
    if len(args) == 1:
        start, stop, step = 0, args[0], 1
    elif len(args) == 2:
        start, stop, step = args[0], args[1], 1
    elif len(args) == 3:
        start, stop, step = args
    else:
        raise TypeError(f"numeric_range expected 1 to 3 arguments, got {len(args)}")
    if step == 0:
        raise ValueError("step must not be zero")
    return takewhile(lambda value: value < stop, count(start, step))


def zip_shortest(first: Iterable[A], second: Iterable[B]) -> Iterator[Tuple[A, B]]:
    """Pair up items of both iterables, stopping at the shorter one."""
    return zip(first, second)


def group(iterable: Iterable[A]) -> Iterator[List[A]]:
    """Yield runs of consecutive equal items as lists."""
    return (list(run) for _, run in groupby(iterable))