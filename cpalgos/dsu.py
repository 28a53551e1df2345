"""Disjoint-set union structure and the problems solved with it."""

from __future__ import annotations

import math
import string
from collections.abc import Iterable, Sequence

_ALPHABET = string.ascii_uppercase + string.ascii_lowercase
_CELL_ROW_SPAN = 5


class DisjointSet:
    """Union-find over the items ``0 .. size - 1``.

    Uses union by rank and path compression.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._sizes = [1] * size

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} is outside the set")

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        first, second = self.find(a), self.find(b)
        if first == second:
            return False
        if self._rank[first] < self._rank[second]:
            first, second = second, first
        self._parent[second] = first
        self._sizes[first] += self._sizes[second]
        if self._rank[first] == self._rank[second]:
            self._rank[first] += 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """Tell whether ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)


def connectivity_queries(
    n: int,
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[bool]:
    """Answer, for 1-based nodes, whether each queried pair is connected."""
    sets = DisjointSet(n + 1)
    for a, b in edges:
        sets.union(a, b)
    return [sets.connected(a, b) for a, b in queries]


def _primes_up_to(limit: int) -> list[int]:
    if limit < 2:
        return []
    marks = bytearray([1]) * (limit + 1)
    marks[0] = marks[1] = 0
    for p in range(2, math.isqrt(limit) + 1):
        if marks[p]:
            marks[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return [value for value, is_prime in enumerate(marks) if is_prime]


def _nth_prime(k: int) -> int:
    if k < 1:
        raise ValueError("k must be positive")
    if k < 6:
        bound = 16
    else:
        bound = int(k * (math.log(k) + math.log(math.log(k)))) + 1
    while True:
        primes = _primes_up_to(bound)
        if len(primes) >= k:
            return primes[k - 1]
        bound *= 2


def largest_group_prime(n: int, pairs: Sequence[tuple[int, int]]) -> int:
    """Return the k-th prime, k being the largest group formed by the pairs.

    People are numbered from 1. With no pairs at all the answer is -1.
    """
    if not pairs:
        return -1
    sets = DisjointSet(n)
    for a, b in pairs:
        sets.union(a - 1, b - 1)
    largest = max(sets._sizes[sets.find(item)] for item in range(n))
    return _nth_prime(largest)


class DishOwnership:
    """Chefs owning dishes; the owner of the better top dish takes all."""

    def __init__(self, scores: Iterable[int]) -> None:
        self._scores = list(scores)
        self._parent = list(range(len(self._scores)))

    def _find(self, item: int) -> int:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"dish {item + 1} does not exist")
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def challenge(self, first: int, second: int) -> int | None:
        """Let the owners of two 1-based dishes compete.

        Returns the winning chef (1-based), or None on a tie. Raises
        ValueError when both dishes already have the same owner.
        """
        a, b = self._find(first - 1), self._find(second - 1)
        if a == b:
            raise ValueError("Invalid query!")
        if self._scores[a] > self._scores[b]:
            self._parent[b] = a
            return a + 1
        if self._scores[a] < self._scores[b]:
            self._parent[a] = b
            return b + 1
        return None

    def owner(self, dish: int) -> int:
        """Return the chef (1-based) who owns the 1-based ``dish``."""
        return self._find(dish - 1) + 1


def galactik_cost(
    n: int, edges: Iterable[tuple[int, int]], costs: Sequence[int]
) -> int:
    """Cheapest way to join all planets, or -1 if it cannot be done.

    Planets are numbered from 1 in ``edges``; a negative cost marks a
    planet where no teleport may be built.
    """
    if len(costs) != n:
        raise ValueError("one cost per planet is required")
    sets = DisjointSet(n)
    for a, b in edges:
        sets.union(a - 1, b - 1)
    best: dict[int, float] = {}
    for planet, cost in enumerate(costs):
        root = sets.find(planet)
        value = cost if cost >= 0 else math.inf
        best[root] = min(best.get(root, math.inf), value)
    if len(best) <= 1:
        return 0
    if math.inf in best.values():
        return -1
    cheapest = min(best.values())
    return int(cheapest * (len(best) - 1) + sum(best.values()) - cheapest)


def _letter_value(char: str) -> int:
    index = _ALPHABET.find(char)
    if index < 0:
        raise ValueError(f"invalid coordinate character {char!r}")
    return index


def decode_coordinates(token: str) -> list[int]:
    """Decode the base-52 letter pairs that follow a command letter."""
    body = token[1:]
    if len(body) % 2:
        raise ValueError("coordinates must come in letter pairs")
    return [
        _letter_value(high) * 52 + _letter_value(low)
        for high, low in zip(body[::2], body[1::2])
    ]


class Breadboard:
    """Breadboard of wired cells carrying voltage sources."""

    def __init__(self, rows: int, cols: int) -> None:
        self._cols = cols
        cells = rows * cols + 1
        self._parent = list(range(cells))
        self._charge = [0] * cells

    def _cell(self, x: int, y: int) -> int:
        return ((y - 1) // _CELL_ROW_SPAN) * self._cols + (x - 1)

    def _find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def _union(self, a: int, b: int) -> None:
        first, second = self._find(a), self._find(b)
        if first == second:
            return
        if self._charge[first] < self._charge[second]:
            first, second = second, first
        self._parent[second] = first
        self._charge[first] += self._charge[second]

    def execute(self, command: str) -> bool | None:
        """Run one command; an ``L`` command returns whether the LED is on.

        ``W`` wires two cells, ``V`` adds a voltage source, ``R`` removes
        one and ``L`` asks about an LED between two cells.
        """
        if not command:
            raise ValueError("empty command")
        kind = command[0]
        coords = decode_coordinates(command)
        needed = 4 if kind in "WL" else 2
        if kind not in ("W", "V", "R", "L"):
            raise ValueError(f"unknown command {kind!r}")
        if len(coords) < needed:
            raise ValueError(f"command {kind!r} needs {needed} coordinates")
        first = self._cell(coords[0], coords[1])
        if kind == "W":
            self._union(first, self._cell(coords[2], coords[3]))
            return None
        root = self._find(first)
        if kind == "V":
            self._charge[root] += 1
            return None
        if kind == "R":
            if self._charge[root]:
                self._charge[root] -= 1
            return None
        other = self._find(self._cell(coords[2], coords[3]))
        a_live = self._charge[root] > 0
        b_live = self._charge[other] > 0
        return a_live != b_live