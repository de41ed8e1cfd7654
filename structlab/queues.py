"""Linked, fixed-array and circular FIFO queues."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


class QueueEmptyError(IndexError):
    """Raised when reading from or popping an empty queue."""


class QueueFullError(OverflowError):
    """Raised when pushing onto a queue that has no room left."""


@dataclass
class _Node:
    value: int
    next: Optional[_Node] = None


class LinkedQueue:
    """Unbounded queue kept as a chain of nodes with front and rear links."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def pop(self) -> int:
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def peek(self) -> int:
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield values from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"


class ArrayQueue:
    """Queue over a fixed array of ``capacity`` slots that are never reused.

    Popped slots stay consumed, so once ``capacity`` values have been pushed
    the queue reports itself full even if some were popped since.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []
        self._front = 0

    def push(self, value: int) -> None:
        if len(self._items) >= self.capacity:
            raise QueueFullError("rear reached capacity")
        self._items.append(value)

    def pop(self) -> int:
        value = self.peek()
        self._front += 1
        return value

    def peek(self) -> int:
        if self._front >= len(self._items):
            raise QueueEmptyError("queue is empty")
        return self._items[self._front]

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __iter__(self) -> Iterator[int]:
        """Yield values from front to rear."""
        return iter(self._items[self._front:])

    def __repr__(self) -> str:
        return f"ArrayQueue(capacity={self.capacity}, items={list(self)!r})"


class CircularQueue:
    """Ring buffer of ``slots`` slots; one stays free, so it holds ``slots - 1`` values."""

    def __init__(self, slots: int = 5) -> None:
        if slots < 1:
            raise ValueError("a circular queue needs at least one slot")
        self._slots: list[Optional[int]] = [None] * slots
        self._front = 0
        self._rear = 0

    @property
    def capacity(self) -> int:
        return len(self._slots) - 1

    def _advance(self, index: int) -> int:
        return (index + 1) % len(self._slots)

    def push(self, value: int) -> None:
        if self._advance(self._rear) == self._front:
            raise QueueFullError("circular queue is full")
        self._slots[self._rear] = value
        self._rear = self._advance(self._rear)

    def pop(self) -> int:
        value = self.peek()
        self._slots[self._front] = None
        self._front = self._advance(self._front)
        return value

    def peek(self) -> int:
        if self._front == self._rear:
            raise QueueEmptyError("circular queue is empty")
        value = self._slots[self._front]
        assert value is not None
        return value

    def __len__(self) -> int:
        return (self._rear - self._front) % len(self._slots)

    def __iter__(self) -> Iterator[int]:
        """Yield values from front to rear."""
        index = self._front
        while index != self._rear:
            value = self._slots[index]
            assert value is not None
            yield value
            index = self._advance(index)

    def __repr__(self) -> str:
        return f"CircularQueue(slots={len(self._slots)}, items={list(self)!r})"