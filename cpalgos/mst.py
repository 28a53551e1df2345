"""Minimum spanning tree cost with Prim's algorithm."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def prim_cost(n: int, edges: Iterable[tuple[int, int, int]], start: int = 1) -> int:
    """Total weight of the minimum spanning tree of ``start``'s component.

    Edges are undirected ``(u, v, weight)`` on nodes ``1 .. n``.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, weight in edges:
        for node in (u, v):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} is outside the graph")
        adjacency[u].append((weight, v))
        adjacency[v].append((weight, u))
    if not 1 <= start <= n:
        raise ValueError(f"node {start} is outside the graph")

    visited: set[int] = set()
    queue = [(0, start)]
    total = 0
    while queue:
        weight, node = heapq.heappop(queue)
        if node in visited:
            continue
        visited.add(node)
        total += weight
        for edge in adjacency[node]:
            if edge[1] not in visited:
                heapq.heappush(queue, edge)
    return total