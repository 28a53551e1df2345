"""Prime sieves, prime paths and coprime subsequence counting."""

from __future__ import annotations

import math
from collections import Counter, deque
from collections.abc import Iterable, Iterator
from functools import lru_cache


def sieve(limit: int) -> list[int]:
    """Return the primes strictly below ``limit`` in increasing order."""
    if limit <= 2:
        return []
    marks = bytearray([1]) * limit
    marks[0] = marks[1] = 0
    for p in range(2, math.isqrt(limit - 1) + 1):
        if marks[p]:
            marks[p * p :: p] = bytes(len(range(p * p, limit, p)))
    return [value for value, is_prime in enumerate(marks) if is_prime]


def segmented_sieve(limit: int) -> Iterator[int]:
    """Yield the primes strictly below ``limit``, one segment at a time.

    Memory use stays proportional to the square root of ``limit``.
    """
    if limit <= 2:
        return
    root = math.isqrt(limit - 1) + 1
    base = sieve(root + 1)
    yield from (p for p in base if p < limit)
    low = root + 1
    while low < limit:
        high = min(low + root, limit)
        marks = bytearray([1]) * (high - low)
        for p in base:
            if p * p >= high:
                break
            start = max(p * p, -(-low // p) * p)
            marks[start - low :: p] = bytes(len(range(start, high, p)))
        yield from (low + offset for offset, flag in enumerate(marks) if flag)
        low = high


def count_primes(values: Iterable[int]) -> int:
    """Count how many of the given numbers are prime."""
    items = list(values)
    if not items:
        return 0
    primes = set(segmented_sieve(max(items) + 1))
    return sum(1 for value in items if value in primes)


@lru_cache(maxsize=1)
def _four_digit_primes() -> frozenset[int]:
    return frozenset(p for p in sieve(10000) if p > 1000)


def _one_digit_changes(number: int) -> Iterator[int]:
    digits = str(number)
    for place, current in enumerate(digits):
        for replacement in "0123456789":
            if replacement != current:
                yield int(digits[:place] + replacement + digits[place + 1 :])


def prime_path_distance(start: int, end: int) -> int | None:
    """Fewest single-digit changes turning one four-digit prime into another.

    Every intermediate number must also be a four-digit prime. Returns
    None when no such path exists.
    """
    primes = _four_digit_primes()
    for value in (start, end):
        if value not in primes:
            raise ValueError(f"{value} is not a four-digit prime")
    distance = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            return distance[current]
        for neighbour in _one_digit_changes(current):
            if neighbour in primes and neighbour not in distance:
                distance[neighbour] = distance[current] + 1
                queue.append(neighbour)
    return None


def count_coprime_subsequences(values: Iterable[int]) -> int:
    """Count the non-empty subsequences whose greatest common divisor is 1."""
    by_gcd: Counter[int] = Counter()
    for value in values:
        if value < 1:
            raise ValueError("values must be positive")
        extended: Counter[int] = Counter({value: 1})
        for divisor, count in by_gcd.items():
            extended[math.gcd(divisor, value)] += count
        by_gcd.update(extended)
    return by_gcd[1]