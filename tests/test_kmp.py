import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpalgos.kmp import kmp_search, prefix_function

small_text = st.text(alphabet="ab", max_size=30)


def test_prefix_function_known():
    assert prefix_function("AABAACAABAA") == [0, 1, 0, 1, 2, 0, 1, 2, 3, 4, 5]


@given(small_text)
def test_prefix_function_invariant(pattern):
    lps = prefix_function(pattern)
    assert len(lps) == len(pattern)
    for i, length in enumerate(lps):
        assert length <= i
        assert pattern[:length] == pattern[i - length + 1 : i + 1]


def test_overlapping_matches():
    assert kmp_search("aaaa", "aa") == [0, 1, 2]


def test_pattern_longer_than_text():
    assert kmp_search("ab", "abc") == []


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        kmp_search("text", "")


@given(small_text, st.text(alphabet="ab", min_size=1, max_size=4))
def test_search_finds_every_occurrence(text, pattern):
    expected = [m.start() for m in re.finditer(f"(?={re.escape(pattern)})", text)]
    found = kmp_search(text, pattern)
    assert found == expected
    assert all(text[i : i + len(pattern)] == pattern for i in found)