"""Read-only live views over a :class:`~sortedlinked.sortedlist.SortedLinkedList`.

Views hold no storage of their own. Reads always go through the owning
list, so mutations made on the owner are visible on the next read. Nothing
reachable from a view can mutate the owner: the mutator names exist only to
raise :class:`~sortedlinked.errors.UnsupportedOperation`, and iterators are
plain generators.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Generic, Iterator, Optional, TypeVar, Union, overload

from .errors import IndexOutOfRange, UnsupportedOperation

if TYPE_CHECKING:
    from .sortedlist import SortedLinkedList

T = TypeVar("T")

READ_ONLY_MESSAGE = "View is read-only; mutate the owning list instead."


class _ReadOnlyView(Sequence, Generic[T]):
    __slots__ = ("_owner",)

    def __init__(self, owner: "SortedLinkedList[T]") -> None:
        self._owner = owner

    def _at(self, index: int) -> T:
        raise NotImplementedError

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, list[T]]:
        size = len(self)
        if isinstance(index, slice):
            return [self._at(i) for i in range(*index.indices(size))]
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexOutOfRange(index, size)
        return self._at(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _reject(self, *args: Any, **kwargs: Any) -> None:
        raise UnsupportedOperation(READ_ONLY_MESSAGE)

    add = append = extend = update = insert = insert_all = _reject
    remove = discard = pop = clear = replace = _reject
    sort = reverse = _reject
    __setitem__ = __delitem__ = __iadd__ = _reject


class ReversedView(_ReadOnlyView[T]):
    """The owner's elements, last to first."""

    __slots__ = ()

    def __len__(self) -> int:
        return len(self._owner)

    def _at(self, index: int) -> T:
        return self._owner[len(self._owner) - 1 - index]

    def __iter__(self) -> Iterator[T]:
        for value in reversed(self._owner):
            yield value

    def __reversed__(self) -> Iterator[T]:
        for value in self._owner:
            yield value


class RangeView(_ReadOnlyView[T]):
    """Window ``[start, stop)`` of the owner, clipped to what is present."""

    __slots__ = ("_start", "_stop")

    def __init__(self, owner: "SortedLinkedList[T]", start: int, stop: int) -> None:
        size = len(owner)
        if not 0 <= start <= size:
            raise IndexOutOfRange(start, size)
        if not start <= stop <= size:
            raise IndexOutOfRange(stop, size)
        super().__init__(owner)
        self._start = start
        self._stop = stop

    def __len__(self) -> int:
        return max(0, min(self._stop, len(self._owner)) - self._start)

    def _at(self, index: int) -> T:
        return self._owner[self._start + index]

    def __iter__(self) -> Iterator[T]:
        remaining = len(self)
        if remaining == 0:
            return
        for value in self._owner._iter_from(self._start):
            yield value
            remaining -= 1
            if remaining == 0:
                break


class Cursor(Generic[T]):
    """Bidirectional cursor sitting between two elements of the owner.

    The only mutation it offers is :meth:`remove`, which drops the element
    last returned by :meth:`next` or :meth:`previous`; removal cannot break
    the ordering of what remains.
    """

    __slots__ = ("_owner", "_cursor", "_last")

    def __init__(self, owner: "SortedLinkedList[T]", index: int = 0) -> None:
        size = len(owner)
        if not 0 <= index <= size:
            raise IndexOutOfRange(index, size)
        self._owner = owner
        self._cursor = index
        self._last: Optional[int] = None

    def has_next(self) -> bool:
        return self._cursor < len(self._owner)

    def has_previous(self) -> bool:
        return self._cursor > 0

    def next_index(self) -> int:
        return self._cursor

    def previous_index(self) -> int:
        return self._cursor - 1

    def next(self) -> T:
        if not self.has_next():
            raise StopIteration
        value = self._owner[self._cursor]
        self._last = self._cursor
        self._cursor += 1
        return value

    def previous(self) -> T:
        if not self.has_previous():
            raise StopIteration
        self._cursor -= 1
        value = self._owner[self._cursor]
        self._last = self._cursor
        return value

    def remove(self) -> T:
        if self._last is None:
            raise RuntimeError("next() or previous() must be called before remove()")
        value = self._owner.pop(self._last)
        if self._last < self._cursor:
            self._cursor -= 1
        self._last = None
        return value

    def __iter__(self) -> "Cursor[T]":
        return self

    __next__ = next
