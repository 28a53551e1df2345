import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpalgos.dfs import (
    MOD,
    component_sizes,
    count_components,
    dfs_order,
    fire_escape,
    is_tree,
    max_reach,
    unreachable_count,
)


@st.composite
def trees(draw, max_nodes=25):
    n = draw(st.integers(1, max_nodes))
    edges = [(draw(st.integers(1, child - 1)), child) for child in range(2, n + 1)]
    return n, edges


@st.composite
def graphs(draw, max_nodes=15):
    n = draw(st.integers(1, max_nodes))
    edges = draw(
        st.lists(st.tuples(st.integers(1, n), st.integers(1, n)), max_size=30)
    )
    return n, edges


def test_dfs_order_example():
    assert dfs_order(4, [(1, 2), (1, 3), (2, 4)]) == [1, 2, 4, 3]


@given(graphs())
def test_dfs_order_visits_connected_nodes(graph):
    n, edges = graph
    order = dfs_order(n, edges)
    assert order[0] == 1
    assert len(order) == len(set(order))
    neighbours = {node: set() for node in range(1, n + 1)}
    for a, b in edges:
        neighbours[a].add(b)
        neighbours[b].add(a)
    for index, node in enumerate(order[1:], start=1):
        assert neighbours[node] & set(order[:index])
    assert len(order) == n - unreachable_count(n, edges, 1)


@given(graphs())
def test_component_sizes_partition_nodes(graph):
    n, edges = graph
    sizes = component_sizes(n, edges)
    assert sum(sizes) == n
    assert all(size >= 1 for size in sizes)
    assert sizes[0] == n - unreachable_count(n, edges, 1)


@given(graphs())
def test_count_components_zero_based(graph):
    n, edges = graph
    zero_based = [(a - 1, b - 1) for a, b in edges]
    assert count_components(n, zero_based) == len(component_sizes(n, edges))


@given(st.integers(1, 40))
def test_isolated_people_each_form_group(n):
    assert count_components(n, []) == n
    assert fire_escape(n, []) == (n, 1)


def test_fire_escape_example():
    assert fire_escape(4, [(1, 2), (3, 4)]) == (2, 4)


@given(graphs())
def test_fire_escape_consistent(graph):
    n, edges = graph
    routes, ways = fire_escape(n, edges)
    sizes = component_sizes(n, edges)
    assert routes == len(sizes)
    assert 0 < ways < MOD
    for size in sizes:
        assert ways % size == 0 or ways >= MOD // 2 or size > ways


@given(st.integers(1, 30))
def test_max_reach_chain(n):
    chain = [(i, i + 1) for i in range(1, n)]
    assert max_reach(n, chain) == n
    assert max_reach(n, [(b, a) for a, b in chain]) == n


@given(graphs())
def test_max_reach_bounds(graph):
    n, edges = graph
    best = max_reach(n, edges)
    assert 1 <= best <= n
    assert best >= max(
        (1 + len({b for a2, b in edges if a2 == a and b != a}) for a, _ in edges),
        default=1,
    ) or best == n


def test_single_node_is_tree():
    assert is_tree(1, [])


@given(trees())
def test_trees_recognised(tree):
    n, edges = tree
    assert is_tree(n, edges)
    assert len(component_sizes(n, edges)) == 1


@given(trees(), st.data())
def test_extra_or_missing_edge_breaks_tree(tree, data):
    n, edges = tree
    a = data.draw(st.integers(1, n))
    b = data.draw(st.integers(1, n))
    assert not is_tree(n, edges + [(a, b)])
    if edges:
        drop = data.draw(st.integers(0, len(edges) - 1))
        assert not is_tree(n, edges[:drop] + edges[drop + 1 :])


@given(graphs(), st.data())
def test_unreachable_matches_component(graph, data):
    n, edges = graph
    start = data.draw(st.integers(1, n))
    missing = unreachable_count(n, edges, start)
    reached = dfs_order(n, edges, start)
    assert missing == n - len(reached)
    assert 0 <= missing < n


def test_node_out_of_range():
    with pytest.raises(ValueError):
        component_sizes(2, [(1, 3)])


def test_start_out_of_range():
    with pytest.raises(ValueError):
        unreachable_count(3, [(1, 2)], 0)


def test_dfs_start_out_of_range():
    with pytest.raises(ValueError):
        dfs_order(3, [(1, 2)], start=4)