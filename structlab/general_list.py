"""Generalised lists such as ``(a,(b,c),y)``: atoms and nested sublists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

EMPTY_MARK = "#"


@dataclass(frozen=True)
class Atom:
    """A single-character element of a generalised list."""

    value: str

    def depth(self) -> int:
        """An atom has depth 0."""
        return 0

    def __str__(self) -> str:
        return self.value


Element = Union[Atom, "GeneralList"]


@dataclass(frozen=True)
class GeneralList:
    """An ordered list whose elements are atoms or further lists."""

    items: tuple[Element, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.items)

    def depth(self) -> int:
        """Return the nesting depth: 1 for an empty list, 0 for an atom."""
        return 1 + max((item.depth() for item in self.items), default=0)

    def head(self) -> Element:
        """Return the first element; an empty list has no head."""
        if not self.items:
            raise IndexError("an empty list has no head")
        return self.items[0]

    def tail(self) -> GeneralList:
        """Return the list of all elements but the first; an empty list has no tail."""
        if not self.items:
            raise IndexError("an empty list has no tail")
        return GeneralList(self.items[1:])

    def __str__(self) -> str:
        return "(" + ",".join(str(item) for item in self.items) + ")"


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = "".join(text.split())
        self._pos = 0

    def _peek(self) -> str:
        if self._pos >= len(self._text):
            raise ValueError("unexpected end of input")
        return self._text[self._pos]

    def _take(self, expected: str) -> None:
        char = self._peek()
        if char != expected:
            raise ValueError(f"expected {expected!r} at {self._pos}, found {char!r}")
        self._pos += 1

    def document(self) -> GeneralList:
        result = self._list()
        if self._pos != len(self._text):
            raise ValueError(f"trailing input at {self._pos}")
        return result

    def _list(self) -> GeneralList:
        self._take("(")
        if self._peek() == ")":
            self._pos += 1
            return GeneralList()
        if self._peek() == EMPTY_MARK:
            self._pos += 1
            self._take(")")
            return GeneralList()
        items: list[Element] = [self._element()]
        while self._peek() == ",":
            self._pos += 1
            items.append(self._element())
        self._take(")")
        return GeneralList(tuple(items))

    def _element(self) -> Element:
        char = self._peek()
        if char == "(":
            return self._list()
        if char in "),#":
            raise ValueError(f"unexpected {char!r} at {self._pos}")
        self._pos += 1
        return Atom(char)


def parse(text: str) -> GeneralList:
    """Parse a list such as ``(a,(b,c),(#))``; ``(#)`` and ``()`` are empty lists."""
    return _Parser(text).document()