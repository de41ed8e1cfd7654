"""A B-tree that splits a node once it fills up to the tree's order."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable

ORDER = 4


@dataclass
class _Node:
    keys: list[int] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


class BTree:
    """B-tree of the given order; a node holding ``order`` keys is split."""

    def __init__(self, keys: Iterable[int] = (), order: int = ORDER) -> None:
        if order < 3:
            raise ValueError("order must be at least 3")
        self.order = order
        self._root = _Node()
        for key in keys:
            self.insert(key)

    @property
    def _middle(self) -> int:
        half = self.order // 2
        return half - 1 if self.order % 2 == 0 else half

    def insert(self, key: int) -> None:
        """Insert ``key`` into a leaf, then split full nodes on the way back up."""
        path: list[tuple[_Node, int]] = []
        node = self._root
        while not node.is_leaf:
            index = bisect_left(node.keys, key)
            path.append((node, index))
            node = node.children[index]

        node.keys.insert(bisect_right(node.keys, key), key)

        while len(node.keys) == self.order:
            if not path:
                self._split_root()
                return
            parent, index = path.pop()
            self._split_child(parent, index)
            node = parent

    def _split(self, node: _Node) -> tuple[int, _Node]:
        middle = self._middle
        middle_key = node.keys[middle]
        right = _Node(node.keys[middle + 1:], node.children[middle + 1:])
        del node.keys[middle:]
        del node.children[middle + 1:]
        return middle_key, right

    def _split_root(self) -> None:
        left = self._root
        middle_key, right = self._split(left)
        self._root = _Node([middle_key], [left, right])

    def _split_child(self, parent: _Node, index: int) -> None:
        middle_key, right = self._split(parent.children[index])
        parent.keys.insert(index, middle_key)
        parent.children.insert(index + 1, right)

    def level_order(self) -> list[list[int]]:
        """Return the keys of every node, level by level, left to right."""
        result: list[list[int]] = []
        pending = deque([self._root])
        while pending:
            node = pending.popleft()
            result.append(list(node.keys))
            pending.extend(node.children)
        return result

    def __contains__(self, key: object) -> bool:
        node = self._root
        while True:
            index = bisect_left(node.keys, key)
            if index < len(node.keys) and node.keys[index] == key:
                return True
            if node.is_leaf:
                return False
            node = node.children[index]

    def __str__(self) -> str:
        return "  ".join(",".join(map(str, keys)) for keys in self.level_order())