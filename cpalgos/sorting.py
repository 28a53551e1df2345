"""Randomized quicksort with three-way partitioning."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def randomized_quicksort(
    values: Iterable[T], rng: random.Random | None = None
) -> list[T]:
    """Return the values sorted ascending; the input is left untouched.

    Pivots are drawn at random from ``rng`` (the module generator if None).
    """
    choose = rng.randrange if rng is not None else random.randrange
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = items[choose(low, high)]
        less, index, greater = low, low, high
        while index <= greater:
            item = items[index]
            if item < pivot:
                items[less], items[index] = item, items[less]
                less += 1
                index += 1
            elif pivot < item:
                items[greater], items[index] = item, items[greater]
                greater -= 1
            else:
                index += 1
        pending.append((low, less - 1))
        pending.append((greater + 1, high))
    return items