from __future__ import annotations

from enum import Enum
from typing import Literal

Operand = Literal["element", "collection"]

WRONG_POSITION_MESSAGE_TEMPLATE = "Cannot add specified {} at specified position since it would break ordering."
WRONG_REPLACEMENT_MESSAGE = (
    "Cannot replace element at specified index by specified element since it would break ordering."
)
REORDER_MESSAGE = "This list is sorted by nature and cannot be reordered."


class ErrorKind(Enum):
    ORDER_VIOLATION = "order_violation"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    UNSUPPORTED_OPERATION = "unsupported_operation"


class SortedListError(Exception):
    """Base for every error the list raises itself.

    ``kind`` tags the failure so callers can dispatch with ``match err.kind``.
    Exceptions raised by the order policy are never wrapped in this type.
    """

    kind: ErrorKind


class OrderViolation(SortedListError, ValueError):
    kind = ErrorKind.ORDER_VIOLATION

    def __init__(self, operand: Operand, *, replacement: bool = False) -> None:
        self.operand = operand
        if replacement:
            msg = WRONG_REPLACEMENT_MESSAGE
        else:
            msg = WRONG_POSITION_MESSAGE_TEMPLATE.format(operand)
        super().__init__(msg)


class IndexOutOfRange(SortedListError, IndexError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index: {index}, Size: {size}")


class UnsupportedOperation(SortedListError, TypeError):
    kind = ErrorKind.UNSUPPORTED_OPERATION

    def __init__(self, msg: str = REORDER_MESSAGE) -> None:
        super().__init__(msg)
