"""Knuth-Morris-Pratt pattern search."""

from __future__ import annotations


def prefix_function(pattern: str) -> list[int]:
    """Length of the longest proper prefix that is also a suffix, per position."""
    lps = [0] * len(pattern)
    length = 0
    for index in range(1, len(pattern)):
        char = pattern[index]
        while length and char != pattern[length]:
            length = lps[length - 1]
        if char == pattern[length]:
            length += 1
        lps[index] = length
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every index of ``text`` where ``pattern`` starts, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    matches: list[int] = []
    matched = 0
    for index, char in enumerate(text):
        while matched and char != pattern[matched]:
            matched = lps[matched - 1]
        if char == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            matches.append(index - matched + 1)
            matched = lps[matched - 1]
    return matches