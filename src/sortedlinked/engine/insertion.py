from __future__ import annotations

from typing import Iterable, TypeVar

from ..ordering import Compare
from ..storage import Storage

T = TypeVar("T")


def insertion_index(storage: Storage[T], cmp: Compare, value: T) -> int:
    """Position of the first element strictly greater than ``value``.

    Returns ``len(storage)`` when nothing is greater, so a value equal to an
    existing run lands after the last member of that run.
    """
    for index, existing in enumerate(storage):
        if cmp(existing, value) > 0:
            return index
    return len(storage)


def is_ordered(values: Iterable[T], cmp: Compare) -> bool:
    it = iter(values)
    try:
        prev = next(it)
    except StopIteration:
        return True
    for cur in it:
        if cmp(prev, cur) > 0:
            return False
        prev = cur
    return True
