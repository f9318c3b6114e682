"""
Undirected graph stored as an adjacency list, with reachability queries.

Nodes are the indices 0..node_count-1, fixed at construction. Edges are
inserted symmetrically and never removed; parallel edges and self-loops are
kept as given.

Reachability:
    depth_first_reachable(start, target)           - Recursive DFS
    depth_first_reachable_iterative(start, target) - DFS on an explicit stack
    breadth_first_reachable(start, target)         - BFS on a deque
"""

import logging
from collections import deque
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class Graph:
    """
    Adjacency-list undirected graph.

    Example:
        >>> graph = Graph(5)
        >>> graph.add_edge(0, 1)
        >>> graph.add_edge(1, 3)
        >>> graph.breadth_first_reachable(0, 3)
        True
        >>> graph.depth_first_reachable(0, 4)
        False
    """

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError(f"node_count must be non-negative, got {node_count}")
        self._adjacency: list[list[int]] = [[] for _ in range(node_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(node_count={self.node_count}, edges={list(self.edges())})"

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    def _check_node(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(
                f"node {node} out of range for graph with {len(self._adjacency)} nodes"
            )

    def add_edge(self, u: int, v: int) -> None:
        """Connects u and v in both directions."""
        self._check_node(u)
        self._check_node(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbours(self, node: int) -> tuple[int, ...]:
        """Neighbours of node in insertion order, with repetitions."""
        self._check_node(node)
        return tuple(self._adjacency[node])

    def edges(self) -> Iterator[tuple[int, int]]:
        """
        Yields every inserted edge once, as (u, v) with u <= v.

        Each edge is stored twice (once per endpoint), except self-loops which
        are stored twice on the same node. Edges come out in the order of their
        lower endpoint.
        """
        for u, neighbours in enumerate(self._adjacency):
            self_loops = 0
            for v in neighbours:
                if v > u:
                    yield u, v
                elif v == u:
                    # A self-loop appears twice in its own list
                    self_loops += 1
                    if self_loops % 2 == 1:
                        yield u, u

    # =========================================================================
    # Reachability
    # =========================================================================

    def depth_first_reachable(self, start: int, target: int) -> bool:
        """
        Returns True if target can be reached from start, depth-first.

        The match test happens before the visited test, so start == target is
        True without visiting anything. Each node on the explored path costs
        one stack frame, so a path approaching sys.getrecursionlimit() nodes
        (1000 by default, minus the caller's own frames) raises RecursionError.
        Use depth_first_reachable_iterative for deeper graphs.
        """
        self._check_node(start)
        self._check_node(target)
        visited: set[int] = set()
        found = self._depth_first_visit(start, target, visited)
        logger.debug(
            f"DFS {start} -> {target}: {'reached' if found else 'unreachable'} "
            f"after visiting {len(visited)} nodes"
        )
        return found

    def _depth_first_visit(self, node: int, target: int, visited: set[int]) -> bool:
        if node == target:
            return True
        if node in visited:
            return False
        visited.add(node)
        for neighbour in self._adjacency[node]:
            if self._depth_first_visit(neighbour, target, visited):
                return True
        return False

    def depth_first_reachable_iterative(self, start: int, target: int) -> bool:
        """Same answer as depth_first_reachable, without recursion."""
        self._check_node(start)
        self._check_node(target)
        visited: set[int] = set()
        stack = [start]
        while stack:
            current = stack.pop()
            if current == target:
                return True
            if current in visited:
                continue
            visited.add(current)
            # Reversed so neighbours are explored in list order
            stack.extend(reversed(self._adjacency[current]))
        return False

    def breadth_first_reachable(self, start: int, target: int) -> bool:
        """
        Returns True if target can be reached from start, level by level.

        Neighbours are enqueued without checking whether they were already
        visited; duplicates are dropped when dequeued. The queue may therefore
        hold a node several times, but each node is expanded at most once.
        """
        self._check_node(start)
        self._check_node(target)
        visited: set[int] = set()
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == target:
                logger.debug(f"BFS {start} -> {target}: reached")
                return True

            # Avoid cycles
            if current in visited:
                continue
            visited.add(current)

            queue.extend(self._adjacency[current])

        logger.debug(f"BFS {start} -> {target}: unreachable")
        return False
