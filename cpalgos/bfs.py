"""Breadth-first search and the problems solved with it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _adjacency(
    n: int, edges: Iterable[tuple[int, int]], first: int = 1
) -> list[list[int]]:
    """Build undirected adjacency lists for nodes ``first .. first + n - 1``."""
    if n < 0:
        raise ValueError("node count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(n + first)]
    for a, b in edges:
        for node in (a, b):
            if not first <= node < n + first:
                raise ValueError(f"node {node} is outside the graph")
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _check_node(n: int, node: int, first: int = 1) -> None:
    if not first <= node < n + first:
        raise ValueError(f"node {node} is outside the graph")


def zero_one_bfs(
    n: int, edges: Iterable[tuple[int, int, int]], source: int = 0
) -> list[int | None]:
    """Shortest distances from ``source`` over undirected 0/1-weighted edges.

    Nodes are numbered from 0. Unreachable nodes get ``None``.
    """
    _check_node(n, source, first=0)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, weight in edges:
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        for node in (a, b):
            _check_node(n, node, first=0)
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))

    distance: list[int | None] = [None] * n
    distance[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        base = distance[node]
        assert base is not None
        for neighbour, weight in adjacency[node]:
            candidate = base + weight
            current = distance[neighbour]
            if current is None or candidate < current:
                distance[neighbour] = candidate
                if weight == 0:
                    queue.appendleft(neighbour)
                else:
                    queue.append(neighbour)
    return distance


def bfs_levels(
    n: int, edges: Iterable[tuple[int, int]], start: int = 1
) -> dict[int, int]:
    """Map every node reachable from ``start`` to its level, in visit order.

    Nodes are numbered from 1 and ``start`` sits on level 1.
    """
    adjacency = _adjacency(n, edges)
    _check_node(n, start)
    levels = {start: 1}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in levels:
                levels[neighbour] = levels[node] + 1
                queue.append(neighbour)
    return levels


def bfs_order(
    n: int, edges: Iterable[tuple[int, int]], start: int = 1
) -> list[int]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    return list(bfs_levels(n, edges, start))


def count_nodes_at_level(
    n: int, edges: Iterable[tuple[int, int]], level: int
) -> int:
    """Count the nodes on ``level`` of the tree rooted at node 1 (level 1)."""
    levels = bfs_levels(n, edges, 1)
    return sum(1 for value in levels.values() if value == level)


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the undirected graph on nodes ``1 .. n`` is two-colourable."""
    adjacency = _adjacency(n, edges)
    colour: list[int | None] = [None] * (n + 1)
    for root in range(1, n + 1):
        if colour[root] is not None:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if colour[neighbour] is None:
                    colour[neighbour] = colour[node] ^ 1
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True