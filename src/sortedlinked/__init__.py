from .api import case_insensitive, from_sorted, natural
from .errors import ErrorKind, IndexOutOfRange, OrderViolation, SortedListError, UnsupportedOperation
from .ordering import (
    DEFAULT_ORDER,
    case_insensitive_nulls_last,
    case_insensitive_order,
    natural_order,
    natural_order_nulls_first,
    natural_order_nulls_last,
    nulls_first,
    nulls_last,
)
from .sortedlist import SortedLinkedList
from .storage import ArrayStorage, LinkedStorage, Storage
from .views import Cursor, RangeView, ReversedView

__all__ = [
    "SortedLinkedList",
    "natural",
    "case_insensitive",
    "from_sorted",
    "DEFAULT_ORDER",
    "natural_order",
    "nulls_first",
    "nulls_last",
    "natural_order_nulls_first",
    "natural_order_nulls_last",
    "case_insensitive_order",
    "case_insensitive_nulls_last",
    "Storage",
    "LinkedStorage",
    "ArrayStorage",
    "ReversedView",
    "RangeView",
    "Cursor",
    "ErrorKind",
    "SortedListError",
    "OrderViolation",
    "IndexOutOfRange",
    "UnsupportedOperation",
]
