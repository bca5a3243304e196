"""Neighbour checks for position-addressed mutations.

Only the element(s) directly next to the target slot are compared. None of
these functions mutate anything; the list calls them before touching its
storage so a rejected call, or a policy that raises, leaves it unchanged.
"""
from __future__ import annotations

from typing import TypeVar

from ..errors import IndexOutOfRange
from ..ordering import Compare
from ..storage import Storage

T = TypeVar("T")


def check_insert_index(index: int, size: int) -> None:
    if not 0 <= index <= size:
        raise IndexOutOfRange(index, size)


def check_replace_index(index: int, size: int) -> None:
    if not 0 <= index < size:
        raise IndexOutOfRange(index, size)


def is_less_or_equal(cmp: Compare, one: T, other: T) -> bool:
    return cmp(one, other) <= 0


def fits_between(storage: Storage[T], cmp: Compare, index: int, low: T, high: T) -> bool:
    """Can a run spanning ``low``..``high`` be spliced in at ``index``?

    A single element is the run ``(value, value)``.
    """
    size = len(storage)
    if index > 0 and not is_less_or_equal(cmp, storage.get(index - 1), low):
        return False
    return index == size or is_less_or_equal(cmp, high, storage.get(index))


def fits_in_place(storage: Storage[T], cmp: Compare, index: int, value: T) -> bool:
    # the current occupant is leaving, so the right neighbour is index + 1
    size = len(storage)
    if index > 0 and not is_less_or_equal(cmp, storage.get(index - 1), value):
        return False
    return index == size - 1 or is_less_or_equal(cmp, value, storage.get(index + 1))
