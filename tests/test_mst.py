import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cpalgos.mst import prim_cost

TREE = [(1, 2, 4), (2, 3, 7), (2, 4, 1), (4, 5, 9)]
GRAPH = TREE + [(1, 3, 2), (3, 5, 3), (1, 5, 6)]


def test_tree_cost_is_sum_of_weights():
    assert prim_cost(5, TREE, 1) == sum(w for _, _, w in TREE)


def test_heavy_extra_edge_is_ignored():
    heavy = TREE + [(1, 5, 100)]
    assert prim_cost(5, heavy, 1) == prim_cost(5, TREE, 1)


@pytest.mark.parametrize("start", range(1, 6))
def test_start_does_not_change_cost(start):
    assert prim_cost(5, GRAPH, start) == prim_cost(5, GRAPH, 1)


def test_graph_cost_not_above_any_spanning_tree():
    assert prim_cost(5, GRAPH, 1) <= sum(w for _, _, w in TREE)


def test_only_start_component_counts():
    assert prim_cost(3, [(2, 3, 5)], 1) == 0


def test_parallel_edges_take_cheapest():
    assert prim_cost(2, [(1, 2, 7), (1, 2, 3)], 1) == 3


def test_invalid_node():
    with pytest.raises(ValueError):
        prim_cost(2, [(1, 3, 1)], 1)
    with pytest.raises(ValueError):
        prim_cost(2, [], 0)


@settings(max_examples=60)
@given(st.data())
def test_random_connected_graphs(data):
    n = data.draw(st.integers(min_value=1, max_value=8))
    tree = [
        (node, data.draw(st.integers(1, node - 1)), data.draw(st.integers(0, 30)))
        for node in range(2, n + 1)
    ]
    extra = data.draw(
        st.lists(
            st.tuples(st.integers(1, n), st.integers(1, n), st.integers(0, 30)),
            max_size=10,
        )
    )
    edges = tree + extra
    cost = prim_cost(n, edges, 1)
    assert cost <= sum(w for _, _, w in tree)
    assert all(prim_cost(n, edges, s) == cost for s in range(1, n + 1))