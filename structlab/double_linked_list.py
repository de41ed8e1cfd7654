"""Doubly linked lists: a plain one with open ends and a circular one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class _Node:
    value: int
    prev: Optional[_Node] = None
    next: Optional[_Node] = None


def _check_insert(index: int, size: int) -> None:
    if not 0 <= index <= size:
        raise IndexError("insert index out of range")


def _check_erase(index: int, size: int) -> None:
    if not 0 <= index < size:
        raise IndexError("erase index out of range")


class DoublyLinkedList:
    """Doubly linked list with a sentinel head; the last node links to nothing."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head = _Node(0)
        self._tail = self._head
        self._size = 0
        for value in values:
            self.insert(self._size, value)

    def _before(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node.next is not None
            node = node.next
        return node

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at ``index`` (0..len)."""
        _check_insert(index, self._size)
        previous = self._before(index)
        node = _Node(value, previous, previous.next)
        if previous.next is None:
            self._tail = node
        else:
            previous.next.prev = node
        previous.next = node
        self._size += 1

    def erase(self, index: int) -> int:
        """Remove and return the value at ``index`` (0..len-1)."""
        _check_erase(index, self._size)
        previous = self._before(index)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        if removed.next is None:
            self._tail = previous
        else:
            removed.next.prev = previous
        self._size -= 1
        return removed.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not self._head:
            yield node.value
            assert node.prev is not None
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


class CircularDoublyLinkedList:
    """Doubly linked ring closed through a sentinel node."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._sentinel = _Node(0)
        self._sentinel.prev = self._sentinel
        self._sentinel.next = self._sentinel
        self._size = 0
        for value in values:
            self.insert(self._size, value)

    def _before(self, index: int) -> _Node:
        node = self._sentinel
        for _ in range(index):
            assert node.next is not None
            node = node.next
        return node

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at ``index`` (0..len)."""
        _check_insert(index, self._size)
        previous = self._before(index)
        following = previous.next
        assert following is not None
        node = _Node(value, previous, following)
        following.prev = node
        previous.next = node
        self._size += 1

    def erase(self, index: int) -> int:
        """Remove and return the value at ``index`` (0..len-1)."""
        _check_erase(index, self._size)
        previous = self._before(index)
        removed = previous.next
        assert removed is not None and removed.next is not None
        removed.next.prev = previous
        previous.next = removed.next
        self._size -= 1
        return removed.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._sentinel.next
        while node is not self._sentinel:
            assert node is not None
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            assert node is not None
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"{value}<-" for value in reversed(self)) + f"Length:{self._size}"

    def __repr__(self) -> str:
        return f"CircularDoublyLinkedList({list(self)!r})"