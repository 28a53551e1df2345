import random

from hypothesis import given
from hypothesis import strategies as st

from cpalgos.sorting import randomized_quicksort


@given(st.lists(st.integers(-1000, 1000), max_size=60), st.integers(0, 10**6))
def test_matches_sorted(values, seed):
    assert randomized_quicksort(values, random.Random(seed)) == sorted(values)


@given(st.lists(st.integers(0, 3), max_size=80))
def test_many_duplicates(values):
    assert randomized_quicksort(values, random.Random(1)) == sorted(values)


def test_input_not_modified():
    values = [5, 3, 9, 1, 3]
    copy = list(values)
    result = randomized_quicksort(values, random.Random(7))
    assert values == copy
    assert result == sorted(copy)


def test_seed_does_not_change_result():
    values = [random.Random(3).randint(-50, 50) for _ in range(40)]
    outputs = {tuple(randomized_quicksort(values, random.Random(s))) for s in range(5)}
    assert outputs == {tuple(sorted(values))}


def test_default_generator():
    values = [3, -1, 2, 2, 0]
    assert randomized_quicksort(values) == sorted(values)


def test_empty_and_single():
    assert randomized_quicksort([]) == []
    assert randomized_quicksort([42]) == [42]