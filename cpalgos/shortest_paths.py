"""Single-source shortest paths: Bellman-Ford, Dijkstra and negative cycles."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside the graph")


def _edge_list(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> list[tuple[int, int, int]]:
    checked = []
    for u, v, cost in edges:
        _check_node(n, u)
        _check_node(n, v)
        checked.append((u, v, cost))
    return checked


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors found from one source node.

    Only nodes reachable from the source appear in ``distances``.
    """

    source: int
    node_count: int
    distances: dict[int, int] = field(default_factory=dict)
    predecessors: dict[int, int] = field(default_factory=dict)

    def path_to(self, target: int) -> list[int] | None:
        """Return the node sequence from the source to ``target``, or None."""
        _check_node(self.node_count, target)
        if target not in self.distances:
            return None
        path = [target]
        while path[-1] in self.predecessors:
            path.append(self.predecessors[path[-1]])
        path.reverse()
        return path

    def nearest(self) -> int | None:
        """Return the closest node other than the source.

        Ties go to the smallest node; None when nothing else is reachable.
        """
        candidates = [
            (distance, node)
            for node, distance in self.distances.items()
            if node != self.source
        ]
        if not candidates:
            return None
        return min(candidates)[1]


def bellman_ford(
    n: int, edges: Iterable[tuple[int, int, int]], source: int
) -> ShortestPaths:
    """Shortest paths over directed ``(u, v, cost)`` edges on nodes ``1 .. n``.

    Raises ValueError when a negative cycle is reachable from ``source``.
    """
    edge_list = _edge_list(n, edges)
    _check_node(n, source)
    distances = {source: 0}
    predecessors: dict[int, int] = {}
    for _ in range(n):
        changed = False
        for u, v, cost in edge_list:
            if u not in distances:
                continue
            candidate = distances[u] + cost
            if v not in distances or candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                changed = True
        if not changed:
            return ShortestPaths(source, n, distances, predecessors)
    raise ValueError(f"negative cycle reachable from node {source}")


def find_negative_cycle(
    n: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[int] | None:
    """Find a negative cycle reachable from ``source`` over directed edges.

    The cycle is returned in edge order, starting and ending at the same
    node; None means there is no such cycle.
    """
    edge_list = _edge_list(n, edges)
    _check_node(n, source)
    distances = {source: 0}
    predecessors: dict[int, int] = {}
    last: int | None = None
    for _ in range(n):
        last = None
        for u, v, cost in edge_list:
            if u not in distances:
                continue
            candidate = distances[u] + cost
            if v not in distances or candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                last = v
    if last is None:
        return None
    anchor = last
    for _ in range(n):
        anchor = predecessors[anchor]
    cycle = [anchor]
    current = predecessors[anchor]
    while True:
        cycle.append(current)
        if current == anchor:
            break
        current = predecessors[current]
    cycle.reverse()
    return cycle


def dijkstra(
    n: int, edges: Iterable[tuple[int, int, int]], source: int
) -> ShortestPaths:
    """Shortest paths over undirected ``(u, v, weight)`` edges on ``1 .. n``."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, weight in _edge_list(n, edges):
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    _check_node(n, source)

    distances = {source: 0}
    predecessors: dict[int, int] = {}
    queue = [(0, source)]
    while queue:
        distance, node = heapq.heappop(queue)
        if distance != distances[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if neighbour not in distances or candidate < distances[neighbour]:
                distances[neighbour] = candidate
                predecessors[neighbour] = node
                heapq.heappush(queue, (candidate, neighbour))
    return ShortestPaths(source, n, distances, predecessors)


def city_distances(
    cities: Sequence[tuple[str, Iterable[tuple[int, int]]]],
    queries: Iterable[tuple[str, str]],
) -> list[int | None]:
    """Answer travel-cost queries between named cities.

    Each city is ``(name, [(neighbour, cost), ...])`` with neighbours
    numbered from 1 in the order the cities are given. Roads run both
    ways. An unreachable destination yields None; an unknown name raises
    KeyError.
    """
    index: dict[str, int] = {}
    edges: list[tuple[int, int, int]] = []
    for number, (name, roads) in enumerate(cities, start=1):
        index[name] = number
        edges.extend((number, neighbour, cost) for neighbour, cost in roads)
    n = len(index) if len(index) == len(cities) else len(cities)

    cache: dict[int, ShortestPaths] = {}
    answers: list[int | None] = []
    for start, end in queries:
        source, target = index[start], index[end]
        if source not in cache:
            cache[source] = dijkstra(n, edges, source)
        answers.append(cache[source].distances.get(target))
    return answers