"""Hash tables with linear probing, quadratic probing and separate chaining."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, NamedTuple, Optional, Union

TABLE_SIZE = 7
MODULUS = 7
QUADRATIC_STEPS = (1, -1, 4, -4, 9, -9)


class SearchLength(NamedTuple):
    """An average search length kept as the unreduced fraction ``total/count``."""

    total: int
    count: int

    @property
    def value(self) -> float:
        return self.total / self.count if self.count else 0.0

    def __str__(self) -> str:
        return f"{self.total}/{self.count}"


class _Deleted:
    def __repr__(self) -> str:
        return "DELETED"


_DELETED = _Deleted()
Slot = Union[int, None, _Deleted]


def _check_shape(size: int, mod: int) -> None:
    if size < 1:
        raise ValueError("table size must be at least 1")
    if not 1 <= mod <= size:
        raise ValueError("modulus must be between 1 and the table size")


class _OpenAddressingTable(ABC):
    def __init__(self, keys: Iterable[int], size: int, mod: int) -> None:
        _check_shape(size, mod)
        self.size = size
        self.mod = mod
        self._slots: list[Slot] = [None] * size
        self._probes: list[int] = [0] * size
        for key in keys:
            self._place(key)

    @abstractmethod
    def _probe(self, home: int) -> Iterator[int]:
        """Yield, in order, the slots visited for a key whose home slot is ``home``."""

    def _place(self, key: int) -> int:
        for count, position in enumerate(self._probe(key % self.mod), 1):
            if self._slots[position] is None or self._slots[position] is _DELETED:
                self._slots[position] = key
                self._probes[position] = count
                return position
        raise OverflowError(f"no free slot for key {key}")

    def _find(self, key: int) -> Optional[int]:
        for position in self._probe(key % self.mod):
            slot = self._slots[position]
            if slot is None:
                return None
            if slot is not _DELETED and slot == key:
                return position
        return None

    def _remove(self, key: int) -> int:
        position = self._find(key)
        if position is None:
            raise KeyError(key)
        self._slots[position] = _DELETED
        return position

    def _occupied(self) -> Iterator[int]:
        return (
            position
            for position, slot in enumerate(self._slots)
            if slot is not None and slot is not _DELETED
        )

    def _success_length(self) -> SearchLength:
        occupied = list(self._occupied())
        return SearchLength(sum(self._probes[p] for p in occupied), len(occupied))

    def _fail_length(self) -> SearchLength:
        total = 0
        for home in range(self.mod):
            probes = 0
            for probes, position in enumerate(self._probe(home), 1):
                if self._slots[position] is None:
                    break
            total += probes
        return SearchLength(total, self.mod)

    def _render(self) -> str:
        def show(slot: Slot) -> str:
            if slot is None:
                return "-"
            if slot is _DELETED:
                return "#"
            return str(slot)

        indices = "\t".join(str(i) for i in range(self.size))
        values = "\t".join(show(slot) for slot in self._slots)
        return f"{indices}\n{values}"

    def __len__(self) -> int:
        return sum(1 for _ in self._occupied())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) is not None


class LinearProbingTable(_OpenAddressingTable):
    """Open addressing with h(key) = key % mod, stepping one slot at a time."""

    def __init__(self, keys: Iterable[int] = (), size: int = TABLE_SIZE, mod: int = MODULUS) -> None:
        super().__init__(keys, size, mod)

    def _probe(self, home: int) -> Iterator[int]:
        return ((home + step) % self.size for step in range(self.size))

    def insert(self, key: int) -> int:
        """Place ``key`` in the first free or deleted slot it probes; return the slot."""
        return self._place(key)

    def search(self, key: int) -> Optional[int]:
        """Return the slot holding ``key``, or None if it is not in the table."""
        return self._find(key)

    def delete(self, key: int) -> int:
        """Mark the slot of ``key`` deleted and return it; raise KeyError if absent."""
        return self._remove(key)

    def asl_success(self) -> SearchLength:
        """Average number of probes a successful search makes over the stored keys."""
        return self._success_length()

    def asl_fail(self) -> SearchLength:
        """Average probes, counting the final empty slot, for misses from each home slot."""
        return self._fail_length()

    def __str__(self) -> str:
        return self._render()


class QuadraticProbingTable(_OpenAddressingTable):
    """Open addressing that tries home, then home +1, -1, +4, -4, +9, -9."""

    def __init__(self, keys: Iterable[int] = (), size: int = TABLE_SIZE, mod: int = MODULUS) -> None:
        super().__init__(keys, size, mod)

    def _probe(self, home: int) -> Iterator[int]:
        yield home
        for step in QUADRATIC_STEPS:
            yield (home + step) % self.size

    def insert(self, key: int) -> int:
        """Place ``key`` in the first free or deleted slot it probes; return the slot."""
        return self._place(key)

    def search(self, key: int) -> Optional[int]:
        """Return the slot holding ``key``, or None if it is not in the table."""
        return self._find(key)

    def delete(self, key: int) -> int:
        """Mark the slot of ``key`` deleted and return it; raise KeyError if absent."""
        return self._remove(key)

    def asl_success(self) -> SearchLength:
        """Average number of probes a successful search makes over the stored keys."""
        return self._success_length()

    def asl_fail(self) -> SearchLength:
        """Average probes, counting the final empty slot, for misses from each home slot."""
        return self._fail_length()

    def __str__(self) -> str:
        return self._render()


class ChainedHashTable:
    """Separate chaining: each bucket is a chain, new keys go to its front."""

    def __init__(self, keys: Iterable[int] = (), size: int = TABLE_SIZE, mod: int = MODULUS) -> None:
        _check_shape(size, mod)
        self.size = size
        self.mod = mod
        self._buckets: list[list[int]] = [[] for _ in range(size)]
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> int:
        """Put ``key`` at the front of its bucket; return the bucket index."""
        position = key % self.mod
        self._buckets[position].insert(0, key)
        return position

    def search(self, key: int) -> Optional[int]:
        """Return the bucket holding ``key``, or None if it is absent."""
        position = key % self.mod
        return position if key in self._buckets[position] else None

    def delete(self, key: int) -> int:
        """Remove ``key`` from its bucket and return the bucket; raise KeyError if absent."""
        position = key % self.mod
        try:
            self._buckets[position].remove(key)
        except ValueError:
            raise KeyError(key) from None
        return position

    def asl_success(self) -> SearchLength:
        """The k-th key of a chain takes k comparisons to find."""
        total = sum(len(chain) * (len(chain) + 1) // 2 for chain in self._buckets)
        return SearchLength(total, len(self))

    def asl_fail(self) -> SearchLength:
        """A miss compares against every key in the chain; reaching the end is free."""
        total = sum(len(self._buckets[home]) for home in range(self.mod))
        return SearchLength(total, self.mod)

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __str__(self) -> str:
        return "\n".join(
            f"{index}: " + "".join(f"{key}->" for key in chain) + "NULL"
            for index, chain in enumerate(self._buckets)
        )