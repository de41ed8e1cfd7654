"""The Josephus ring: people 1..n count around a circle, every count-th leaves."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Iterator, Optional


def _validate(people: int, count: int) -> None:
    if people < 1:
        raise ValueError("no one is playing")
    if count < 1:
        raise ValueError("count must be at least 1")


def _rounds(people: int, count: int) -> Iterator[tuple[int, tuple[int, ...]]]:
    ring = deque(range(1, people + 1))
    while len(ring) > 1:
        ring.rotate(-(count - 1))
        removed = ring.popleft()
        yield removed, tuple(ring)


def elimination_order(people: int, count: int) -> Iterator[int]:
    """Yield the numbers of people in the order they leave; the survivor is not yielded."""
    _validate(people, count)
    return (removed for removed, _ in _rounds(people, count))


def josephus(people: int, count: int) -> int:
    """Return the number of the last person left in the ring."""
    _validate(people, count)
    survivor = 1
    for _, remaining in _rounds(people, count):
        survivor = remaining[0]
    return survivor


def _format_ring(ring: tuple[int, ...]) -> str:
    return "".join(f"{number}->" for number in ring) + "NULL"


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play out the Josephus ring.")
    parser.add_argument("people", type=int, nargs="?", default=10, help="number of people")
    parser.add_argument("count", type=int, nargs="?", default=4, help="who leaves on each count")
    args = parser.parse_args(argv)
    try:
        _validate(args.people, args.count)
    except ValueError as exc:
        parser.error(str(exc))

    print(_format_ring(tuple(range(1, args.people + 1))))
    survivor = 1
    for _, remaining in _rounds(args.people, args.count):
        print(_format_ring(remaining))
        survivor = remaining[0]
    print(survivor)
    return 0


if __name__ == "__main__":
    sys.exit(main())