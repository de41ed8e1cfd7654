"""A singly linked list with positional insert and erase, plus list algorithms."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class _Node:
    value: int
    next: Optional[_Node] = None


class LinkedList:
    """Singly linked list of values, indexed from 0."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in reversed(list(values)):
            self._head = _Node(value, self._head)
            self._size += 1

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def push_back(self, value: int) -> None:
        self.insert(self._size, value)

    def push_front(self, value: int) -> None:
        self.insert(0, value)

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at ``index`` (0..len)."""
        if not 0 <= index <= self._size:
            raise IndexError("insert index out of range")
        if index == 0:
            self._head = _Node(value, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(value, previous.next)
        self._size += 1

    def pop_back(self) -> int:
        if not self._size:
            raise IndexError("list is empty")
        return self.erase(self._size - 1)

    def pop_front(self) -> int:
        if not self._size:
            raise IndexError("list is empty")
        return self.erase(0)

    def erase(self, index: int) -> int:
        """Remove and return the value at ``index`` (0..len-1)."""
        if not 0 <= index < self._size:
            raise IndexError("erase index out of range")
        if index == 0:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(index - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
        self._size -= 1
        return removed.value

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def bubble_sort(self) -> None:
        """Sort the values in ascending order by swapping neighbours."""
        for _ in range(self._size):
            node = self._head
            while node is not None and node.next is not None:
                if node.value > node.next.value:
                    node.value, node.next.value = node.next.value, node.value
                node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def sorted_list(values: Iterable[int]) -> LinkedList:
    """Build a list by inserting each value after every value not greater than it."""
    result = LinkedList()
    for value in values:
        position = sum(1 for existing in result if existing <= value)
        result.insert(position, value)
    return result


def merge_sorted(first: LinkedList, second: LinkedList) -> LinkedList:
    """Merge two ascending lists into a new ascending list."""
    return LinkedList(heapq.merge(first, second))