"""Classic algorithms, data structures and competitive-programming problem solvers."""

__version__ = "0.1.0"

__all__ = [
    "bfs",
    "dfs",
    "dsu",
    "greedy",
    "heaps",
    "kmp",
    "mst",
    "number_theory",
    "search_problems",
    "segment_tree",
    "shortest_paths",
    "sorting",
]