"""Backing sequences for :class:`~sortedlinked.sortedlist.SortedLinkedList`.

The list only needs positional get/set/insert/pop plus forward and backward
traversal, so anything implementing :class:`Storage` can be plugged in.
Positions are plain non-negative offsets; the list normalizes Python-style
negative indexes before calling in. Positional access outside the stored
range raises :class:`~sortedlinked.errors.IndexOutOfRange`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Protocol, TypeVar

from .errors import IndexOutOfRange

T = TypeVar("T")


class Storage(Protocol[T]):
    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[T]: ...

    def get(self, index: int) -> T: ...

    def set(self, index: int, value: T) -> T: ...

    def insert(self, index: int, value: T) -> None: ...

    def insert_many(self, index: int, values: Iterable[T]) -> None: ...

    def pop(self, index: int) -> T: ...

    def clear(self) -> None: ...

    def iter_from(self, index: int) -> Iterator[T]: ...

    def iter_reversed(self) -> Iterator[T]: ...


StorageFactory = Callable[[], Storage[Any]]


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class LinkedStorage(Generic[T]):
    """Doubly linked node chain; positional access walks from the nearer end."""

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        self.insert_many(0, values)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def iter_from(self, index: int) -> Iterator[T]:
        node = self._node(index) if index < self._size else None
        while node is not None:
            yield node.value
            node = node.next

    def iter_reversed(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def _node(self, index: int) -> _Node:
        if not 0 <= index < self._size:
            raise IndexOutOfRange(index, self._size)
        if index < (self._size >> 1):
            node = self._head
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev  # type: ignore[union-attr]
        assert node is not None
        return node

    def get(self, index: int) -> T:
        return self._node(index).value

    def set(self, index: int, value: T) -> T:
        node = self._node(index)
        old, node.value = node.value, value
        return old

    def insert(self, index: int, value: T) -> None:
        self.insert_many(index, (value,))

    def insert_many(self, index: int, values: Iterable[T]) -> None:
        if not 0 <= index <= self._size:
            raise IndexOutOfRange(index, self._size)
        # build a detached chain first, then link it in one splice
        first: Optional[_Node] = None
        last: Optional[_Node] = None
        count = 0
        for value in values:
            node = _Node(value, prev=last)
            if last is None:
                first = node
            else:
                last.next = node
            last = node
            count += 1
        if first is None or last is None:
            return

        after = self._node(index) if index < self._size else None
        before = after.prev if after is not None else self._tail

        first.prev = before
        last.next = after
        if before is None:
            self._head = first
        else:
            before.next = first
        if after is None:
            self._tail = last
        else:
            after.prev = last
        self._size += count

    def pop(self, index: int) -> T:
        node = self._node(index)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def clear(self) -> None:
        self._head = self._tail = None
        self._size = 0

    def __repr__(self) -> str:
        return f"LinkedStorage({list(self)!r})"


class ArrayStorage(Generic[T]):
    """Python ``list`` behind the :class:`Storage` interface."""

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = list(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def iter_from(self, index: int) -> Iterator[T]:
        items = self._items
        for i in range(index, len(items)):
            yield items[i]

    def iter_reversed(self) -> Iterator[T]:
        return reversed(self._items)

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexOutOfRange(index, len(self._items))
        return index

    def _check_slot(self, index: int) -> int:
        if not 0 <= index <= len(self._items):
            raise IndexOutOfRange(index, len(self._items))
        return index

    def get(self, index: int) -> T:
        return self._items[self._check(index)]

    def set(self, index: int, value: T) -> T:
        old = self._items[self._check(index)]
        self._items[index] = value
        return old

    def insert(self, index: int, value: T) -> None:
        self._items.insert(self._check_slot(index), value)

    def insert_many(self, index: int, values: Iterable[T]) -> None:
        index = self._check_slot(index)
        self._items[index:index] = values

    def pop(self, index: int) -> T:
        return self._items.pop(self._check(index))

    def clear(self) -> None:
        self._items.clear()

    def __repr__(self) -> str:
        return f"ArrayStorage({self._items!r})"
