"""
Graph traversal algorithms: BFS and DFS.

Both return the nodes reachable from a start node in discovery order.
Neighbors are explored in stored adjacency order, so the output order is
fully determined by the adjacency list. Edge weights are ignored.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Iterator, List, Tuple

import numpy as np

from .errors import OutOfBoundsNode

if TYPE_CHECKING:
    from .core import Graph


def _visit(visited: np.ndarray, node: int) -> bool:
    """Mark node visited; return False if it already was."""
    if not 0 <= node < visited.shape[0]:
        raise OutOfBoundsNode(node)
    if visited[node]:
        return False
    visited[node] = True
    return True


def bfs(graph: "Graph", start: int) -> List[int]:
    """
    Breadth-first search from a start node.

    Args:
        graph: Graph to traverse.
        start: Node to start from.

    Returns:
        Nodes reachable from start (start included) in the order they were
        first discovered.

    Raises:
        OutOfBoundsNode: If start, or an edge target met on the way, is not
            a node of the graph.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = Graph([[(1, UNWEIGHTED), (2, UNWEIGHTED)], [(3, UNWEIGHTED)], [], []])
        >>> bfs(G, 0)
        [0, 1, 2, 3]
    """
    n = graph.node_count
    if not 0 <= start < n:
        raise OutOfBoundsNode(start)

    visited = np.zeros(n, dtype=bool)
    visited[start] = True
    order: List[int] = [start]
    queue = deque([start])

    while queue:
        u = queue.popleft()
        for v, _ in graph.adj[u]:
            if _visit(visited, v):
                order.append(v)
                queue.append(v)

    return order


def dfs(graph: "Graph", start: int) -> List[int]:
    """
    Depth-first search from a start node (iterative).

    Produces the same discovery order as a recursive DFS that always follows
    the first unvisited edge, without recursion depth limits. Each stack
    frame keeps a cursor into its node's adjacency list, so every edge is
    examined once.

    Args:
        graph: Graph to traverse.
        start: Node to start from.

    Returns:
        Nodes reachable from start (start included) in pre-order.

    Raises:
        OutOfBoundsNode: If start, or an edge target met on the way, is not
            a node of the graph.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = Graph([[(1, UNWEIGHTED), (2, UNWEIGHTED)], [(3, UNWEIGHTED)], [], []])
        >>> dfs(G, 0)
        [0, 1, 3, 2]
    """
    n = graph.node_count
    if not 0 <= start < n:
        raise OutOfBoundsNode(start)

    visited = np.zeros(n, dtype=bool)
    visited[start] = True
    order: List[int] = [start]
    stack: List[Tuple[int, Iterator]] = [(start, iter(graph.adj[start]))]

    while stack:
        _, cursor = stack[-1]
        for v, _ in cursor:
            if _visit(visited, v):
                order.append(v)
                stack.append((v, iter(graph.adj[v])))
                break
        else:
            # No unvisited neighbor left: backtrack
            stack.pop()

    return order
