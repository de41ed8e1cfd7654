"""Brute-force and KMP substring search, reporting inclusive (begin, end) spans."""

from __future__ import annotations


def brute_force_search(text: str, pattern: str) -> list[tuple[int, int]]:
    """Return every (begin, end) span where ``pattern`` occurs in ``text``."""
    if not pattern:
        return []
    size = len(pattern)
    return [
        (begin, begin + size - 1)
        for begin in range(len(text) - size + 1)
        if text[begin:begin + size] == pattern
    ]


def next_array(pattern: str) -> list[int]:
    """Return the failure table: entry i is the longest border of pattern[:i], -1 at 0."""
    table: list[int] = []
    for i in range(len(pattern)):
        if i == 0:
            table.append(-1)
            continue
        t = table[i - 1]
        while t != -1 and pattern[t] != pattern[i - 1]:
            t = table[t]
        table.append(t + 1)
    return table


def nextval_array(pattern: str) -> list[int]:
    """Return the improved failure table that skips fallbacks to an equal character."""
    table = next_array(pattern)
    result: list[int] = []
    for i, char in enumerate(pattern):
        if i == 0:
            result.append(-1)
            continue
        t = table[i]
        result.append(table[t] if char == pattern[t] else table[i])
    return result


def _kmp(text: str, pattern: str, fallback: list[int], resume: list[int]) -> list[tuple[int, int]]:
    size = len(pattern)
    matches: list[tuple[int, int]] = []
    j = 0
    for i, char in enumerate(text):
        while j > 0 and char != pattern[j]:
            j = fallback[j]
        if j < 0:
            j = 0
        if char == pattern[j]:
            j += 1
        if j == size:
            matches.append((i - size + 1, i))
            j = resume[j - 1] + 1
    return matches


def kmp_search(text: str, pattern: str) -> list[tuple[int, int]]:
    """Find every match of ``pattern`` in ``text`` using the next table."""
    if not pattern:
        return []
    table = next_array(pattern)
    return _kmp(text, pattern, table, table)


def kmp_nextval_search(text: str, pattern: str) -> list[tuple[int, int]]:
    """Find every match using the nextval table; after a match it resumes via the next table."""
    if not pattern:
        return []
    return _kmp(text, pattern, nextval_array(pattern), next_array(pattern))