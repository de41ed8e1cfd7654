import pytest

from structlab.string_match import (
    brute_force_search,
    kmp_nextval_search,
    kmp_search,
    next_array,
    nextval_array,
)

TEXTS = ["abaababaabaababab", "aaaaaaa", "babababa", "xyz", ""]
PATTERNS = ["a", "aa", "aaa", "aba", "abab", "abaaba"]


def test_brute_force_overlapping_matches():
    assert brute_force_search("aaaa", "aa") == [(0, 1), (1, 2), (2, 3)]


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("pattern", PATTERNS)
def test_brute_force_spans_hold_pattern(text, pattern):
    for begin, end in brute_force_search(text, pattern):
        assert text[begin:end + 1] == pattern


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("pattern", PATTERNS)
def test_kmp_variants_agree_with_brute_force(text, pattern):
    expected = brute_force_search(text, pattern)
    assert kmp_search(text, pattern) == expected
    assert kmp_nextval_search(text, pattern) == expected


def test_next_array_textbook_pattern():
    assert next_array("abaabcac") == [-1, 0, 0, 1, 1, 2, 0, 1]


@pytest.mark.parametrize("pattern", ["abaabcac", "aaaab", "abcabcab", "a", "ababaa"])
def test_next_array_entries_are_borders(pattern):
    table = next_array(pattern)
    assert len(table) == len(pattern)
    assert table[0] == -1
    for i in range(1, len(pattern)):
        k = table[i]
        assert 0 <= k < i
        assert pattern[:k] == pattern[i - k:i]


@pytest.mark.parametrize("pattern", ["abaabcac", "aaaab", "abcabcab", "ababaa"])
def test_nextval_never_exceeds_next(pattern):
    table = next_array(pattern)
    improved = nextval_array(pattern)
    assert improved[0] == -1
    for i in range(1, len(pattern)):
        assert improved[i] <= table[i]
        if improved[i] != table[i]:
            assert pattern[i] == pattern[table[i]]


def test_nextval_for_repeated_character():
    assert nextval_array("aaaab") == [-1, -1, 0, 1, 3]


@pytest.mark.parametrize(
    "search", [brute_force_search, kmp_search, kmp_nextval_search]
)
def test_empty_pattern_has_no_matches(search):
    assert search("abc", "") == []


@pytest.mark.parametrize(
    "search", [brute_force_search, kmp_search, kmp_nextval_search]
)
def test_pattern_longer_than_text(search):
    assert search("ab", "abab") == []


def test_empty_pattern_tables():
    assert next_array("") == []
    assert nextval_array("") == []