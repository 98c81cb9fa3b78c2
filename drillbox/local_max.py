"""Find the first local maximum of a sequence."""

from __future__ import annotations

from itertools import islice
from typing import Any, Sequence


def local_max(items: Sequence[Any]) -> int:
    """Return the index of the first local maximum, or ``len(items)`` if none.

    An item is a local maximum if it is strictly greater than each neighbour
    it has. Only ``<`` is used to compare items.
    """
    size = len(items)
    if size < 2:
        return 0
    if items[1] < items[0]:
        return 0
    triples = zip(items, islice(items, 1, None), islice(items, 2, None))
    for index, (left, middle, right) in enumerate(triples, start=1):
        if left < middle and right < middle:
            return index
    if items[-2] < items[-1]:
        return size - 1
    return size