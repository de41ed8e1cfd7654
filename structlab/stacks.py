"""Linked and fixed-capacity stacks, with a small command interpreter."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is at capacity."""


@dataclass
class _Node:
    value: int
    below: Optional[_Node]


class LinkedStack:
    """Unbounded stack kept as a chain of nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._top: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def top(self) -> int:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield values from the top of the stack down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __repr__(self) -> str:
        return f"LinkedStack({list(reversed(list(self)))!r})"


class ArrayStack:
    """Stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        if len(self._items) >= self.capacity:
            raise StackFullError("stack is over capacity")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Yield values from the top of the stack down."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(capacity={self.capacity}, items={self._items!r})"


Stack = Union[LinkedStack, ArrayStack]


def run_commands(lines: Iterable[str], stack: Stack) -> list[str]:
    """Apply ``push x``, ``pop``, ``empty`` and ``query`` commands; return the output lines."""
    output: list[str] = []
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        name, *args = parts
        if name == "push":
            stack.push(int(args[0]))
        elif name == "pop":
            stack.pop()
        elif name == "empty":
            output.append("NO" if stack else "YES")
        elif name == "query":
            output.append(str(stack.top()))
    return output


def _commands_from_tokens(tokens: Iterable[str]) -> Iterator[str]:
    stream = iter(tokens)
    count = int(next(stream, "0"))
    for _ in range(count):
        word = next(stream, None)
        if word is None:
            return
        if word == "push":
            yield f"push {next(stream)}"
        else:
            yield word


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read a command count and stack commands from standard input."
    )
    parser.add_argument("--array", action="store_true", help="use a fixed-capacity stack")
    parser.add_argument("--capacity", type=int, default=1000, help="capacity for --array")
    args = parser.parse_args(argv)

    stack: Stack = ArrayStack(args.capacity) if args.array else LinkedStack()
    try:
        lines = run_commands(_commands_from_tokens(sys.stdin.read().split()), stack)
    except (StackEmptyError, StackFullError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())