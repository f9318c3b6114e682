"""
Generic searching and sorting algorithms, plus a graph and a binary search
tree to demonstrate traversals.

Modules:
    ordering  - Comparable protocol and the is_sorted check
    searching - Linear and binary search
    sorting   - Merge, heap, quick, insertion, selection and bubble sort
    graph     - Adjacency-list undirected graph with DFS/BFS reachability
    tree      - Binary search tree node
"""

from algorithm_playground.graph import Graph
from algorithm_playground.ordering import Comparable, OrderedT, is_sorted
from algorithm_playground.searching import binary_search, linear_search
from algorithm_playground.sorting import (
    SortAlgorithm,
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    sort_with,
)
from algorithm_playground.tree import TreeNode

__all__ = [
    "Comparable",
    "OrderedT",
    "is_sorted",
    "linear_search",
    "binary_search",
    "merge_sort",
    "heap_sort",
    "quick_sort",
    "insertion_sort",
    "selection_sort",
    "bubble_sort",
    "SortAlgorithm",
    "sort_with",
    "Graph",
    "TreeNode",
]
