"""Move cursors by the cheapest means they offer, and clear what can be cleared."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Any


def advance(iterator: Any, n: int) -> Any:
    """Move ``iterator`` by ``n`` steps and return it.

    Integers are positions and are offset directly. Objects supporting ``+=``
    are moved in one operation. Objects with ``advance`` and ``retreat``
    methods are stepped one at a time in either direction. Plain iterators
    are consumed and can only move forward.
    """
    if isinstance(iterator, int):
        return iterator + n
    if hasattr(type(iterator), "__iadd__"):
        iterator += n
        return iterator
    forward = getattr(iterator, "advance", None)
    backward = getattr(iterator, "retreat", None)
    if callable(forward) and callable(backward):
        step = forward if n > 0 else backward
        for _ in range(abs(n)):
            step()
        return iterator
    if isinstance(iterator, Iterator):
        if n < 0:
            raise ValueError("cannot move a forward-only iterator backwards")
        next(islice(iterator, n, n), None)
        return iterator
    raise TypeError(f"cannot advance an object of type {type(iterator).__name__}")


def clear(obj: Any) -> None:
    """Call ``obj.clear()`` if it has one; otherwise leave ``obj`` alone."""
    method = getattr(obj, "clear", None)
    if callable(method):
        method()