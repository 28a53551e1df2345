"""Segment trees: range assignment with range sums, and maximum subarray sums."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


class RangeAssignSumTree:
    """Positions ``1 .. size``, all zero at first.

    Supports assigning one value to a whole range and summing a range,
    both in logarithmic time through lazy propagation.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._sums = [0] * (4 * size)
        self._pending: list[int | None] = [None] * (4 * size)

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self._size:
            raise ValueError(
                f"range {left}..{right} is not inside 1..{self._size}"
            )

    def _apply(self, node: int, low: int, high: int, value: int) -> None:
        self._sums[node] = value * (high - low + 1)
        self._pending[node] = value

    def _push(self, node: int, low: int, high: int) -> None:
        value = self._pending[node]
        if value is None or low == high:
            return
        mid = (low + high) // 2
        self._apply(2 * node, low, mid, value)
        self._apply(2 * node + 1, mid + 1, high, value)
        self._pending[node] = None

    def _assign(
        self, node: int, low: int, high: int, left: int, right: int, value: int
    ) -> None:
        if high < left or right < low:
            return
        if left <= low and high <= right:
            self._apply(node, low, high, value)
            return
        self._push(node, low, high)
        mid = (low + high) // 2
        self._assign(2 * node, low, mid, left, right, value)
        self._assign(2 * node + 1, mid + 1, high, left, right, value)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def _query(self, node: int, low: int, high: int, left: int, right: int) -> int:
        if high < left or right < low:
            return 0
        if left <= low and high <= right:
            return self._sums[node]
        self._push(node, low, high)
        mid = (low + high) // 2
        return self._query(2 * node, low, mid, left, right) + self._query(
            2 * node + 1, mid + 1, high, left, right
        )

    def assign(self, left: int, right: int, value: int) -> None:
        """Set every position in ``left .. right`` (inclusive) to ``value``."""
        self._check(left, right)
        self._assign(1, 1, self._size, left, right, value)

    def query(self, left: int, right: int) -> int:
        """Return the sum of positions ``left .. right`` (inclusive)."""
        self._check(left, right)
        return self._query(1, 1, self._size, left, right)


class _Summary(NamedTuple):
    total: int
    prefix: int
    suffix: int
    best: int

    @classmethod
    def single(cls, value: int) -> _Summary:
        return cls(value, value, value, value)

    def __add__(self, other: object) -> _Summary:
        if not isinstance(other, _Summary):
            return NotImplemented
        return _Summary(
            self.total + other.total,
            max(self.prefix, self.total + other.prefix),
            max(other.suffix, self.suffix + other.total),
            max(self.best, other.best, self.suffix + other.prefix),
        )


class MaxSubarrayTree:
    """Maximum sum of a non-empty contiguous run inside a range.

    Positions are numbered from 1; single values can be replaced.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("at least one value is required")
        self._size = len(items)
        self._nodes: list[_Summary] = [_Summary.single(0)] * (4 * self._size)
        self._build(1, 0, self._size - 1, items)

    def _build(self, node: int, low: int, high: int, items: list[int]) -> None:
        if low == high:
            self._nodes[node] = _Summary.single(items[low])
            return
        mid = (low + high) // 2
        self._build(2 * node, low, mid, items)
        self._build(2 * node + 1, mid + 1, high, items)
        self._nodes[node] = self._nodes[2 * node] + self._nodes[2 * node + 1]

    def _update(self, node: int, low: int, high: int, index: int, value: int) -> None:
        if low == high:
            self._nodes[node] = _Summary.single(value)
            return
        mid = (low + high) // 2
        if index <= mid:
            self._update(2 * node, low, mid, index, value)
        else:
            self._update(2 * node + 1, mid + 1, high, index, value)
        self._nodes[node] = self._nodes[2 * node] + self._nodes[2 * node + 1]

    def _query(
        self, node: int, low: int, high: int, left: int, right: int
    ) -> _Summary:
        if left <= low and high <= right:
            return self._nodes[node]
        mid = (low + high) // 2
        if right <= mid:
            return self._query(2 * node, low, mid, left, right)
        if left > mid:
            return self._query(2 * node + 1, mid + 1, high, left, right)
        return self._query(2 * node, low, mid, left, right) + self._query(
            2 * node + 1, mid + 1, high, left, right
        )

    def update(self, position: int, value: int) -> None:
        """Replace the value at the 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise ValueError(f"position {position} is not inside 1..{self._size}")
        self._update(1, 0, self._size - 1, position - 1, value)

    def query(self, left: int, right: int) -> int:
        """Return the best subarray sum within ``left .. right`` (inclusive)."""
        if not 1 <= left <= right <= self._size:
            raise ValueError(
                f"range {left}..{right} is not inside 1..{self._size}"
            )
        return self._query(1, 0, self._size - 1, left - 1, right - 1).best