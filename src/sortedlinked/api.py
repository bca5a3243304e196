from __future__ import annotations

import logging
from typing import Iterable, Literal, Optional, TypeVar

from .engine.insertion import is_ordered
from .errors import OrderViolation
from .ordering import Compare, case_insensitive_nulls_last, natural_order_nulls_first, natural_order_nulls_last
from .sortedlist import SortedLinkedList
from .storage import LinkedStorage, StorageFactory

logger = logging.getLogger(__name__)

T = TypeVar("T")


def natural(
    iterable: Optional[Iterable[T]] = None,
    *,
    nulls: Literal["first", "last"] = "first",
    storage: StorageFactory = LinkedStorage,
) -> SortedLinkedList[T]:
    if nulls not in ("first", "last"):
        raise ValueError('nulls must be one of: "first","last"')
    cmp = natural_order_nulls_first if nulls == "first" else natural_order_nulls_last
    return SortedLinkedList(iterable, cmp, storage=storage)


def case_insensitive(
    iterable: Optional[Iterable[str]] = None,
    *,
    storage: StorageFactory = LinkedStorage,
) -> SortedLinkedList[str]:
    return SortedLinkedList(iterable, case_insensitive_nulls_last, storage=storage)


def from_sorted(
    iterable: Iterable[T],
    cmp: Optional[Compare] = None,
    *,
    storage: StorageFactory = LinkedStorage,
) -> SortedLinkedList[T]:
    """Build a list from values that must already be in ``cmp`` order.

    Unlike the constructor, nothing is sorted: out-of-order input raises
    :class:`~sortedlinked.errors.OrderViolation`.
    """
    values = list(iterable)
    sl: SortedLinkedList[T] = SortedLinkedList(cmp=cmp, storage=storage)
    if not is_ordered(values, sl.cmp):
        logger.debug("rejected %d unordered values", len(values))
        raise OrderViolation("collection")
    sl.insert_all(0, values)
    return sl
