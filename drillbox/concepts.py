"""Run-time checks for predicate and indexable objects."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_NONE_ANNOTATIONS = (None, type(None), "None")


def is_predicate(func: Any, value: Any) -> bool:
    """Return True if ``func(value)`` returns exactly a bool.

    The call is made; a TypeError from it counts as not being a predicate.
    """
    if not callable(func):
        return False
    try:
        result = func(value)
    except TypeError:
        return False
    return isinstance(result, bool)


def is_indexable(obj: Any) -> bool:
    """Return True if ``obj`` can be subscripted by integer position.

    Sequences qualify; mappings qualify when all their keys are integers;
    other objects qualify when their ``__getitem__`` is not declared to
    return None.
    """
    if isinstance(obj, Sequence):
        return True
    if isinstance(obj, Mapping):
        return all(isinstance(key, int) for key in obj)
    getitem = getattr(type(obj), "__getitem__", None)
    if getitem is None:
        return False
    annotations = getattr(getitem, "__annotations__", None) or {}
    if "return" not in annotations:
        return True
    return annotations["return"] not in _NONE_ANNOTATIONS