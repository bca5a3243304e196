from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar, Union, overload

from .engine.bounds import check_insert_index, check_replace_index, fits_between, fits_in_place
from .engine.insertion import insertion_index
from .errors import OrderViolation, UnsupportedOperation
from .ordering import DEFAULT_ORDER, Compare, as_key
from .storage import LinkedStorage, Storage, StorageFactory
from .views import Cursor, RangeView, ReversedView

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SortedLinkedList(Sequence, Generic[T]):
    """List whose elements are always ordered by ``cmp``.

    Positions are not destinations here. :meth:`add` ignores position and
    finds the slot itself, while :meth:`insert`, :meth:`replace` and
    :meth:`insert_all` treat the index as a constraint that is checked
    against the neighbouring elements before anything is changed. A rejected
    call raises :class:`~sortedlinked.errors.OrderViolation` and leaves the
    list as it was. Whatever ``cmp`` raises is propagated as is, and also
    happens before any mutation.

    ``cmp`` decides how ``None`` is treated; the default ranks it first.

    Not thread-safe. Callers sharing an instance across threads must hold one
    lock around every mutating call.
    """

    def __init__(
        self,
        iterable: Optional[Iterable[T]] = None,
        cmp: Optional[Compare] = None,
        *,
        storage: StorageFactory = LinkedStorage,
    ) -> None:
        self._cmp: Compare = cmp if cmp is not None else DEFAULT_ORDER
        self._key = as_key(self._cmp)
        self._storage_factory = storage
        self._storage: Storage[T] = storage()
        if iterable is not None:
            seed = sorted(iterable, key=self._key)
            logger.debug("seeding %s with %d sorted values", type(self).__name__, len(seed))
            self._storage.insert_many(0, seed)

    @property
    def cmp(self) -> Compare:
        return self._cmp

    # -- queries ---------------------------------------------------------

    def __len__(self) -> int:
        return len(self._storage)

    def __bool__(self) -> bool:
        return len(self._storage) > 0

    def is_empty(self) -> bool:
        return len(self._storage) == 0

    def __iter__(self) -> Iterator[T]:
        return iter(self._storage)

    def __reversed__(self) -> Iterator[T]:
        return self._storage.iter_reversed()

    def _iter_from(self, index: int) -> Iterator[T]:
        return self._storage.iter_from(index)

    def _normalize(self, index: int) -> int:
        return index + len(self._storage) if index < 0 else index

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, list[T]]:
        if isinstance(index, slice):
            return list(self._storage)[index]
        index = self._normalize(index)
        check_replace_index(index, len(self._storage))
        return self._storage.get(index)

    def contains_all(self, values: Iterable[Any]) -> bool:
        return all(value in self for value in values)

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        size = len(self._storage)
        lo, hi, _ = slice(start, stop).indices(size)
        for i, existing in enumerate(self._storage.iter_from(lo) if lo < size else (), lo):
            if i >= hi:
                break
            if existing is value or existing == value:
                return i
        raise ValueError(f"{value!r} not in list")

    def last_index(self, value: Any) -> int:
        i = len(self._storage)
        for existing in self._storage.iter_reversed():
            i -= 1
            if existing is value or existing == value:
                return i
        raise ValueError(f"{value!r} not in list")

    def to_list(self) -> list[T]:
        return list(self._storage)

    def copy(self) -> "SortedLinkedList[T]":
        dup: SortedLinkedList[T] = type(self)(cmp=self._cmp, storage=self._storage_factory)
        dup._storage.insert_many(0, self._storage)
        return dup

    # -- unconstrained insertion ------------------------------------------

    def add(self, value: T) -> bool:
        """Insert ``value`` after every element that is not greater than it.

        Always succeeds; returns ``True`` to report the list changed.
        """
        index = insertion_index(self._storage, self._cmp, value)
        self._storage.insert(index, value)
        return True

    def update(self, values: Iterable[T]) -> bool:
        """:meth:`add` each value in iteration order.

        Each value is placed against the list as it stands after the previous
        one, unlike :meth:`insert_all`. Returns whether anything was added.
        """
        changed = False
        for value in values:
            changed = self.add(value) or changed
        return changed

    # -- position-constrained mutation ------------------------------------

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` at ``index`` if its neighbours allow it.

        ``index`` must lie in ``[0, len(self)]``.
        """
        check_insert_index(index, len(self._storage))
        if not fits_between(self._storage, self._cmp, index, value, value):
            logger.debug("rejected insert at %d (size %d)", index, len(self._storage))
            raise OrderViolation("element")
        self._storage.insert(index, value)

    def append(self, value: T) -> None:
        self.insert(len(self._storage), value)

    def replace(self, index: int, value: T) -> T:
        """Swap the element at ``index`` for ``value``; return the old one.

        ``index`` must lie in ``[0, len(self) - 1]``; ``xs[-1] = value`` is
        the way to address from the end.
        """
        check_replace_index(index, len(self._storage))
        if not fits_in_place(self._storage, self._cmp, index, value):
            logger.debug("rejected replace at %d (size %d)", index, len(self._storage))
            raise OrderViolation("element", replacement=True)
        return self._storage.set(index, value)

    def __setitem__(self, index: int, value: T) -> None:
        if isinstance(index, slice):
            raise UnsupportedOperation("Slice assignment is not supported; use insert_all().")
        self.replace(self._normalize(index), value)

    def insert_all(self, index: int, values: Iterable[T]) -> bool:
        """Sort ``values`` and splice them in at ``index`` as one run.

        The batch is sorted on its own; only its smallest and largest members
        are checked against the neighbours at ``index``. Returns ``False``
        for an empty batch, since nothing changed.
        """
        check_insert_index(index, len(self._storage))
        batch = sorted(values, key=self._key)
        if not batch:
            return False
        if not fits_between(self._storage, self._cmp, index, batch[0], batch[-1]):
            logger.debug(
                "rejected batch of %d at %d (size %d)", len(batch), index, len(self._storage)
            )
            raise OrderViolation("collection")
        self._storage.insert_many(index, batch)
        return True

    # -- removal ------------------------------------------------------------

    def pop(self, index: int = -1) -> T:
        index = self._normalize(index)
        check_replace_index(index, len(self._storage))
        return self._storage.pop(index)

    def __delitem__(self, index: Union[int, slice]) -> None:
        if isinstance(index, slice):
            for i in sorted(range(*index.indices(len(self._storage))), reverse=True):
                self._storage.pop(i)
            return
        self.pop(index)

    def remove(self, value: Any) -> None:
        """Remove first occurrence of ``value`` or raise ``ValueError``."""
        self._storage.pop(self.index(value))

    def discard(self, value: Any) -> bool:
        try:
            self.remove(value)
        except ValueError:
            return False
        return True

    def _retain(self, keep) -> bool:
        kept = [value for value in self._storage if keep(value)]
        if len(kept) == len(self._storage):
            return False
        self._storage.clear()
        self._storage.insert_many(0, kept)
        return True

    def remove_all(self, values: Iterable[Any]) -> bool:
        doomed = list(values)
        return self._retain(lambda value: value not in doomed)

    def retain_all(self, values: Iterable[Any]) -> bool:
        wanted = list(values)
        return self._retain(lambda value: value in wanted)

    def clear(self) -> None:
        self._storage.clear()

    # -- reordering is not allowed ------------------------------------------

    def sort(self, *args: Any, **kwargs: Any) -> None:
        # TODO: offer an explicit re-policy operation (new cmp + one re-sort)
        raise UnsupportedOperation()

    def reverse(self) -> None:
        raise UnsupportedOperation()

    # -- views ------------------------------------------------------------

    def reversed_view(self) -> ReversedView[T]:
        return ReversedView(self)

    def sub_view(self, start: int, stop: int) -> RangeView[T]:
        return RangeView(self, start, stop)

    def cursor(self, index: int = 0) -> Cursor[T]:
        return Cursor(self, index)

    # -- dunder -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._storage)!r})"
