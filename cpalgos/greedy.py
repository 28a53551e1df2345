"""Greedy solutions: colouring a round cake and the largest product of k numbers."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007


def _fill_two(cells: list[str]) -> str | None:
    n = len(cells)
    if n % 2:
        return None
    start = next((i for i, cell in enumerate(cells) if cell != "?"), 0)
    for i in [*range(start + 1, n), *range(start + 1)]:
        if cells[i] == "?":
            cells[i] = "0" if cells[i - 1] == "1" else "1"
        elif cells[i] == cells[i - 1]:
            return None
    return "".join(cells)


def _fill_many(cells: list[str]) -> str | None:
    n = len(cells)
    for i, cell in enumerate(cells):
        left, right = cells[i - 1], cells[(i + 1) % n]
        if cell == "?":
            if left != "0" and right != "0":
                cells[i] = "0"
            elif left == "0" and right == "0":
                cells[i] = "1"
            elif {left, right} == {"0", "1"}:
                cells[i] = "2"
            elif left != "1" and right != "1":
                cells[i] = "1"
            else:
                return None
        elif cell in (left, right):
            return None
    return "".join(cells)


def fill_cake(colours: int, cake: str) -> str | None:
    """Fill the ``?`` pieces of a round cake so neighbours differ in colour.

    Colours are the digits ``0 .. colours - 1``. Returns the coloured cake
    or None when no colouring is found.
    """
    if colours < 1:
        raise ValueError("at least one colour is required")
    if not cake:
        raise ValueError("the cake must have pieces")
    cells = list(cake)
    if len(cells) == 1:
        return "0" if cells[0] == "?" else cake
    if colours == 1:
        return None
    if colours == 2:
        return _fill_two(cells)
    return _fill_many(cells)


def max_product_mod(values: Iterable[int], k: int) -> int:
    """Largest product of ``k`` of the values, reduced modulo 1e9+7."""
    items = sorted(values, key=abs)
    n = len(items)
    if not 1 <= k <= n:
        raise ValueError("k must be between 1 and the number of values")

    def product(indices: Iterable[int]) -> int:
        result = 1
        for index in indices:
            result = result * items[index] % MOD
        return result

    top = range(n - k, n)
    negatives = sum(1 for i in top if items[i] < 0)
    if negatives % 2 == 0 or any(items[i] == 0 for i in top):
        return product(top)

    outside = range(n - k - 1, -1, -1)
    weakest_positive = next((i for i in top if items[i] > 0), None)
    weakest_negative = next((i for i in top if items[i] < 0), None)
    spare_negative = next((i for i in outside if items[i] < 0), None)
    spare_positive = next((i for i in outside if items[i] > 0), None)

    def swapped(leaving: int, joining: int) -> int:
        return product(joining if i == leaving else i for i in top)

    drop_positive = weakest_positive is not None and spare_negative is not None
    drop_negative = weakest_negative is not None and spare_positive is not None
    if not drop_positive and not drop_negative:
        return product(range(k))
    if not drop_positive:
        return swapped(weakest_negative, spare_positive)
    if not drop_negative:
        return swapped(weakest_positive, spare_negative)
    if (
        items[weakest_positive] * items[spare_positive]
        < items[spare_negative] * items[weakest_negative]
    ):
        return swapped(weakest_positive, spare_negative)
    return swapped(weakest_negative, spare_positive)