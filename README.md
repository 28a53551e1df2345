# cpalgos

Classic algorithms and data structures, together with solvers for a set of
well-known competitive-programming problems. It uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `cpalgos.dsu` | `DisjointSet` (union by rank, path compression), `connectivity_queries`, `largest_group_prime`, `DishOwnership`, `galactik_cost`, `decode_coordinates`, `Breadboard` |
| `cpalgos.heaps` | `BinaryHeap` (largest or smallest first, with `change_priority` and `remove`), `drain_ordered`, `running_medians` |
| `cpalgos.bfs` | `zero_one_bfs`, `bfs_order`, `bfs_levels`, `count_nodes_at_level`, `is_bipartite` |
| `cpalgos.dfs` | `dfs_order`, `component_sizes`, `count_components`, `fire_escape`, `max_reach`, `is_tree`, `unreachable_count` |
| `cpalgos.shortest_paths` | `ShortestPaths` (`path_to`, `nearest`), `bellman_ford`, `find_negative_cycle`, `dijkstra`, `city_distances` |
| `cpalgos.mst` | `prim_cost` |
| `cpalgos.kmp` | `prefix_function`, `kmp_search` |
| `cpalgos.sorting` | `randomized_quicksort` (three-way partition, returns a new list) |
| `cpalgos.segment_tree` | `RangeAssignSumTree` (lazy range assignment, range sum), `MaxSubarrayTree` (maximum subarray sum with point updates) |
| `cpalgos.number_theory` | `sieve`, `segmented_sieve`, `count_primes`, `prime_path_distance`, `count_coprime_subsequences` |
| `cpalgos.search_problems` | `meeting_time`, `max_divisible_sets`, `Ingredient`, `max_servings`, `largest_pie_volume`, `balance_scale`, `stack_tops` |
| `cpalgos.greedy` | `fill_cake`, `max_product_mod` |

## Conventions

- Graphs are given as a node count and a list of edge tuples. Nodes are numbered
  from 1, except in `zero_one_bfs` (numbered from 0) and `count_components`
  (people numbered from 0).
- Unreachable nodes show up as `None` (`zero_one_bfs`, `city_distances`,
  `ShortestPaths.path_to`) or are simply absent from `ShortestPaths.distances`.
- Bad input raises an exception instead of returning a status code: nodes outside
  the graph, negative Dijkstra weights and reachable negative cycles in
  `bellman_ford` raise `ValueError`; popping an empty `BinaryHeap` raises
  `IndexError`; a challenge between dishes with the same owner raises
  `ValueError("Invalid query!")`.

## Examples

Union-find:

```python
from cpalgos.dsu import DisjointSet

sets = DisjointSet(5)
sets.union(0, 1)
sets.union(3, 4)
sets.connected(0, 1)   # True
sets.connected(1, 3)   # False
```

A heap that hands back the largest value first:

```python
from cpalgos.heaps import BinaryHeap

heap = BinaryHeap([10, 30, 20, 5, 1], largest_first=True)
heap.pop()    # 30
heap.peek()   # 20
len(heap)     # 4
```

Medians of a growing stream:

```python
from cpalgos.heaps import running_medians

list(running_medians([5, 15, 1, 3]))   # [5.0, 10.0, 5.0, 4.0]
```

Shortest paths on an undirected weighted graph:

```python
from cpalgos.shortest_paths import dijkstra

result = dijkstra(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)], 1)
result.distances[3]   # 5
result.path_to(3)     # [1, 2, 3]
```

Negative cycles over directed edges:

```python
from cpalgos.shortest_paths import find_negative_cycle

find_negative_cycle(3, [(1, 2, 1), (2, 3, -3), (3, 2, 1)], 1)
# a list such as [2, 3, 2], or None when there is no negative cycle
```

Pattern search:

```python
from cpalgos.kmp import kmp_search

kmp_search("abababa", "aba")   # [0, 2, 4]
```

## What it does not do

The package is a library only. It has no command-line programs and reads no
problem input from standard input or files; every solver takes ordinary Python
values and returns its answer, leaving parsing and printing to the caller.