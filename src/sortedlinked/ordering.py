from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], int]


def natural_order(one: Any, other: Any) -> int:
    if one < other:
        return -1
    if other < one:
        return 1
    return 0


def nulls_first(cmp: Compare) -> Compare:
    def compare(one: Optional[Any], other: Optional[Any]) -> int:
        if one is None:
            return 0 if other is None else -1
        if other is None:
            return 1
        return cmp(one, other)

    compare.__name__ = f"nulls_first({getattr(cmp, '__name__', 'cmp')})"
    return compare


def nulls_last(cmp: Compare) -> Compare:
    def compare(one: Optional[Any], other: Optional[Any]) -> int:
        if one is None:
            return 0 if other is None else 1
        if other is None:
            return -1
        return cmp(one, other)

    compare.__name__ = f"nulls_last({getattr(cmp, '__name__', 'cmp')})"
    return compare


def case_insensitive_order(one: str, other: str) -> int:
    # character by character: each pair is folded upper then lower, so
    # "ß" stays distinct from "ss" while "a" and "A" tie
    for c1, c2 in zip(one, other):
        if c1 == c2:
            continue
        u1, u2 = c1.upper(), c2.upper()
        if u1 == u2:
            continue
        l1, l2 = u1.lower(), u2.lower()
        if l1 != l2:
            return natural_order(l1, l2)
    return natural_order(len(one), len(other))


natural_order_nulls_first = nulls_first(natural_order)
natural_order_nulls_last = nulls_last(natural_order)
case_insensitive_nulls_last = nulls_last(case_insensitive_order)

DEFAULT_ORDER: Compare = natural_order_nulls_first


def as_key(cmp: Compare) -> Callable[[T], Any]:
    return cmp_to_key(cmp)
