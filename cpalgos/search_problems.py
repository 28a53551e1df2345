"""Problems solved by binary search on the answer."""

from __future__ import annotations

import bisect
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_BISECTION_STEPS = 100
_PIE_STEPS = 50


def _cars_have_met(flags: Sequence[float], length: float, time: float) -> bool:
    """Tell whether two cars starting at both ends have met after ``time``.

    Each car starts at speed 1 and gains 1 for every flag it passes.
    """
    front, speed, left = 0.0, 1.0, time
    for flag in flags:
        reach = front + speed * left
        if reach > flag:
            left -= (flag - front) / speed
            speed += 1.0
            front = float(flag)
        else:
            front, left = reach, 0.0
            break
    front += speed * left

    back, speed, left = float(length), 1.0, time
    for flag in reversed(flags):
        reach = back - speed * left
        if reach < flag:
            left -= (back - flag) / speed
            speed += 1.0
            back = float(flag)
        else:
            back, left = reach, 0.0
            break
    back -= speed * left
    return front <= back


def meeting_time(length: float, flags: Iterable[float]) -> float:
    """Time at which two cars driving towards each other along a road meet.

    The cars start at ``0`` and ``length`` with speed 1, and each flag
    a car passes raises its speed by 1.
    """
    if length <= 0:
        raise ValueError("road length must be positive")
    ordered = sorted(flags)
    if ordered and (ordered[0] < 0 or ordered[-1] > length):
        raise ValueError("flags must lie on the road")
    low, high = 0.0, float(length)
    for _ in range(_BISECTION_STEPS):
        mid = (low + high) / 2.0
        if _cars_have_met(ordered, length, mid):
            low = mid
        else:
            high = mid
    return low


def max_divisible_sets(values: Iterable[int], k: int, c: int) -> int:
    """Largest number of disjoint k-element sets with each step growing by ``c``.

    Inside a set, every element is at least ``c`` times the one before.
    """
    if k < 1:
        raise ValueError("k must be positive")
    items = sorted(values)

    def feasible(groups: int) -> bool:
        lasts = [0] * groups
        counts = [0] * groups
        current = 0
        for value in items:
            if counts[current] == k:
                return True
            if counts[current] == 0 or lasts[current] * c <= value:
                lasts[current] = value
                counts[current] += 1
                current = (current + 1) % groups
        return counts[-1] == k

    best, low, high = 0, 0, len(items)
    while high - low > 1:
        mid = (low + high) // 2
        if feasible(mid):
            best = low = mid
        else:
            high = mid
    return best


@dataclass(frozen=True)
class Ingredient:
    """What one ingredient needs per serving, what is in stock, and its packages."""

    need: int
    stock: int
    small_size: int
    small_price: int
    large_size: int
    large_price: int

    def __post_init__(self) -> None:
        if self.small_size <= 0 or self.large_size <= 0:
            raise ValueError("package sizes must be positive")


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _cheapest(ingredient: Ingredient, servings: int) -> int:
    required = max(ingredient.need * servings - ingredient.stock, 0)
    most_small = _ceil_div(required, ingredient.small_size)
    return min(
        smalls * ingredient.small_price
        + _ceil_div(max(required - smalls * ingredient.small_size, 0), ingredient.large_size)
        * ingredient.large_price
        for smalls in range(most_small + 1)
    )


def max_servings(budget: int, ingredients: Iterable[Ingredient]) -> int:
    """Most servings that can be cooked buying packages within ``budget``.

    The answer never exceeds ``budget``.
    """
    items = list(ingredients)

    def affordable(servings: int) -> bool:
        total = 0
        for ingredient in items:
            total += _cheapest(ingredient, servings)
            if total > budget:
                return False
        return True

    low, high = 0, budget
    while low < high:
        mid = low + (high - low + 1) // 2
        if affordable(mid):
            low = mid
        else:
            high = mid - 1
    return low


def largest_pie_volume(radii: Iterable[float], friends: int) -> float:
    """Largest equal piece volume that feeds ``friends`` plus the host.

    Pies are cylinders of height 1; a piece must come from a single pie.
    """
    volumes = [math.pi * r * r for r in radii]
    if not volumes or max(volumes) <= 0:
        raise ValueError("at least one pie with a positive radius is required")
    people = friends + 1
    low, high = 0.0, max(volumes)
    mid = high
    for _ in range(_PIE_STEPS):
        mid = (low + high) / 2.0
        if sum(int(volume / mid) for volume in volumes) >= people:
            low = mid
        else:
            high = mid
    return mid


def balance_scale(weights: int, mass: int) -> tuple[list[int], list[int]] | None:
    """Balance ``mass`` with weights 3**0 .. 3**(weights-1), each used once.

    Returns the 1-based weight numbers placed beside the mass and those on
    the opposite pan, or None when the mass is too heavy.
    """
    if weights < 0 or mass < 0:
        raise ValueError("weights and mass must not be negative")
    if mass > (3**weights - 1) // 2:
        return None
    digits: list[int] = []
    remaining = mass
    while remaining:
        digit = remaining % 3
        remaining //= 3
        if digit == 2:
            digit = -1
            remaining += 1
        digits.append(digit)
    beside = [place for place, digit in enumerate(digits, start=1) if digit == -1]
    opposite = [place for place, digit in enumerate(digits, start=1) if digit == 1]
    return beside, opposite


def stack_tops(radii: Iterable[int]) -> list[int]:
    """Place discs in order, each on the leftmost stack whose top is larger.

    Returns the top radius of every stack, left to right.
    """
    tops: list[int] = []
    for radius in radii:
        index = bisect.bisect_right(tops, radius)
        if index == len(tops):
            tops.append(radius)
        else:
            tops[index] = radius
    return tops