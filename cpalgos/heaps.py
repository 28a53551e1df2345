"""Array-backed binary heaps, ordered draining and running medians."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator


class BinaryHeap:
    """Binary heap kept in a list, largest or smallest value on top."""

    def __init__(self, items: Iterable[int] = (), largest_first: bool = True) -> None:
        self._items: list[int] = []
        self._largest_first = largest_first
        for item in items:
            self.push(item)

    def _above(self, a: int, b: int) -> bool:
        return a > b if self._largest_first else a < b

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _sift_up(self, index: int) -> None:
        while index:
            parent = (index - 1) // 2
            if not self._above(self._items[index], self._items[parent]):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._items)
        while True:
            best = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._above(self._items[child], self._items[best]):
                    best = child
            if best == index:
                return
            self._swap(index, best)
            index = best

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"heap index {index} out of range")

    def push(self, value: int) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def change_priority(self, index: int, value: int) -> None:
        """Replace the value stored at array position ``index``."""
        self._check(index)
        old = self._items[index]
        self._items[index] = value
        if self._above(value, old):
            self._sift_up(index)
        else:
            self._sift_down(index)

    def remove(self, index: int) -> int:
        """Remove and return the value stored at array position ``index``."""
        self._check(index)
        removed = self._items[index]
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            parent = (index - 1) // 2
            if index and self._above(last, self._items[parent]):
                self._sift_up(index)
            else:
                self._sift_down(index)
        return removed

    def __len__(self) -> int:
        return len(self._items)


def drain_ordered(values: Iterable[int], largest_first: bool = True) -> list[int]:
    """Push every value into a heap and return them in the order popped."""
    heap = BinaryHeap(values, largest_first=largest_first)
    return [heap.pop() for _ in range(len(heap))]


def running_medians(values: Iterable[float]) -> Iterator[float]:
    """Yield the median of the stream after each value arrives."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        return
    lower: list[float] = [-float(first)]  # max-heap through negation
    upper: list[float] = []
    median = float(first)
    yield median
    for raw in iterator:
        x = float(raw)
        if len(lower) > len(upper):
            if x < median:
                heapq.heappush(upper, -heapq.heapreplace(lower, -x))
            else:
                heapq.heappush(upper, x)
            median = (-lower[0] + upper[0]) / 2.0
        elif len(lower) == len(upper):
            if x < median:
                heapq.heappush(lower, -x)
                median = -lower[0]
            else:
                heapq.heappush(upper, x)
                median = upper[0]
        else:
            if x > median:
                heapq.heappush(lower, -heapq.heapreplace(upper, x))
            else:
                heapq.heappush(lower, -x)
            median = (-lower[0] + upper[0]) / 2.0
        yield median