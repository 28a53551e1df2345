"""Depth-first search and the problems solved with it."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007


def _adjacency(
    n: int, edges: Iterable[tuple[int, int]], directed: bool = False
) -> list[list[int]]:
    """Build adjacency lists for nodes ``1 .. n``."""
    if n < 0:
        raise ValueError("node count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        for node in (a, b):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} is outside the graph")
        adjacency[a].append(b)
        if not directed:
            adjacency[b].append(a)
    return adjacency


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside the graph")


def _reach(adjacency: list[list[int]], start: int, visited: set[int]) -> int:
    """Mark everything reachable from ``start`` and return how many were new."""
    visited.add(start)
    stack = [start]
    count = 1
    while stack:
        node = stack.pop()
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(neighbour)
                count += 1
    return count


def dfs_order(
    n: int, edges: Iterable[tuple[int, int]], start: int = 1
) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first preorder."""
    adjacency = _adjacency(n, edges)
    _check_node(n, start)
    visited = {start}
    order = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()
    return order


def component_sizes(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Sizes of the connected components of nodes ``1 .. n``.

    Components are listed in the order of their smallest node.
    """
    adjacency = _adjacency(n, edges)
    visited: set[int] = set()
    return [
        _reach(adjacency, node, visited)
        for node in range(1, n + 1)
        if node not in visited
    ]


def count_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected groups among people numbered ``0 .. n - 1``."""
    shifted = [(a + 1, b + 1) for a, b in edges]
    return len(component_sizes(n, shifted))


def fire_escape(n: int, edges: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Return the number of escape routes and the ways to pick captains.

    The second value is the product of component sizes modulo 1e9+7.
    """
    sizes = component_sizes(n, edges)
    ways = 1
    for size in sizes:
        ways = ways * size % MOD
    return len(sizes), ways


def max_reach(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Largest number of nodes (itself included) one node reaches by directed edges."""
    adjacency = _adjacency(n, edges, directed=True)
    return max(
        (_reach(adjacency, start, set()) for start in range(1, n + 1)), default=0
    )


def is_tree(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the undirected graph on ``1 .. n`` is a tree."""
    edge_list = list(edges)
    components = len(component_sizes(n, edge_list))
    return n == len(edge_list) + 1 and components == 1


def unreachable_count(
    n: int, edges: Iterable[tuple[int, int]], start: int
) -> int:
    """Count the nodes that cannot be reached from ``start``."""
    adjacency = _adjacency(n, edges)
    _check_node(n, start)
    return n - _reach(adjacency, start, set())