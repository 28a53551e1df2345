import math
from itertools import combinations

import pytest
from hypothesis import given, strategies as st

from cpalgos.greedy import MOD, fill_cake, max_product_mod


def _valid(cake, result, colours):
    if len(result) != len(cake):
        return False
    if any(c != "?" and c != r for c, r in zip(cake, result)):
        return False
    if any(int(r) >= colours for r in result):
        return False
    if len(result) == 1:
        return True
    return all(result[i] != result[i - 1] for i in range(len(result)))


def test_single_unknown_piece_gets_first_colour():
    assert fill_cake(1, "?") == "0"


def test_single_known_piece_is_kept():
    assert fill_cake(5, "7") == "7"


def test_one_colour_cannot_fill_two_pieces():
    assert fill_cake(1, "??") is None


def test_two_colours_odd_cake_fails():
    assert fill_cake(2, "???") is None


def test_two_colours_forced_choice():
    assert fill_cake(2, "0?") == "01"


def test_neighbouring_equal_pieces_fail():
    assert fill_cake(3, "00") is None


def test_no_colours_rejected():
    with pytest.raises(ValueError):
        fill_cake(0, "??")


@given(
    st.integers(min_value=2, max_value=4),
    st.text(alphabet="01?", min_size=2, max_size=9),
)
def test_filled_cake_is_proper(colours, cake):
    result = fill_cake(colours, cake)
    assert result is None or (
        len(result) == len(cake) and _valid(cake, result, colours)
    )


@given(st.integers(min_value=3, max_value=5), st.integers(min_value=2, max_value=12))
def test_all_unknown_with_three_colours_succeeds(colours, size):
    result = fill_cake(colours, "?" * size)
    assert isinstance(result, str)
    assert len(result) == size
    assert all(piece.isdigit() and int(piece) < colours for piece in result)
    assert all(result[i] != result[i - 1] for i in range(size))


@given(
    st.lists(st.integers(min_value=-10, max_value=10), min_size=1, max_size=7).flatmap(
        lambda values: st.tuples(
            st.just(values), st.integers(min_value=1, max_value=len(values))
        )
    )
)
def test_max_product_matches_exhaustive_search(case):
    values, k = case
    best = max(math.prod(chosen) for chosen in combinations(values, k))
    assert max_product_mod(values, k) == best % MOD


def test_max_product_negative_result_is_reduced():
    assert max_product_mod([-5], 1) == MOD - 5


def test_max_product_rejects_bad_k():
    with pytest.raises(ValueError):
        max_product_mod([1, 2], 3)