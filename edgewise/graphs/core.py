"""
Core graph data structure.

Provides Graph, an adjacency-list graph over dense, zero-based integer node
ids. Node ids double as indices into the outer adjacency list, so there is
no separate node set. Each adjacency entry is a ``(target, weight)`` pair
where weight is an ``Unweighted`` marker or a ``Weighted`` cost.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from . import shortest, traversal
from .errors import OutOfBoundsNode
from .weights import U32_MAX, W


def _as_node(target) -> int:
    """Normalise an edge target to a plain int, rejecting non-integers."""
    if isinstance(target, (bool, np.bool_)) or not isinstance(target, (int, np.integer)):
        raise TypeError(f"Edge target must be an integer, got {type(target).__name__}")
    return int(target)


class Graph(Generic[W]):
    """
    Adjacency-list graph parameterised over its weight kind.

    The graph is read-only for traversal and shortest-path queries. The only
    mutation is ``insert_edge``, used while a graph is being generated.

    Attributes:
        adj: Adjacency list; ``adj[u]`` is the list of ``(v, weight)`` pairs
            for edges leaving ``u``, in insertion order.

    Complexity:
        - edges: O(V + E), lazily
        - neighbors: O(deg(v))
        - insert_edge: O(1) amortized

    Example:
        >>> from edgewise.graphs import Graph, Weighted
        >>> G = Graph([[(1, Weighted(3))], [(0, Weighted(3))]])
        >>> list(G.edges())
        [(0, 1, Weighted(value=3)), (1, 0, Weighted(value=3))]
        >>> print(G, end="")
        0-(3)->1
        1-(3)->0
    """

    def __init__(self, adjacency: Sequence[Sequence[Tuple[int, W]]]):
        """
        Build a graph from a fully formed adjacency list.

        Edge targets are not validated here; consumers report out-of-range
        targets when they reach them.

        Args:
            adjacency: One sequence of ``(target, weight)`` pairs per node.

        Raises:
            ValueError: If the number of nodes exceeds U32_MAX.
            TypeError: If an edge target is not an integer.
        """
        n = len(adjacency)
        if n > U32_MAX:
            raise ValueError(f"The number of nodes must fit in u32, got {n}")
        self.adj: List[List[Tuple[int, W]]] = [
            [(_as_node(target), weight) for target, weight in edges] for edges in adjacency
        ]

    @classmethod
    def empty(cls, num_nodes: int) -> "Graph[W]":
        """Return a graph with ``num_nodes`` nodes and no edges."""
        if num_nodes < 0:
            raise ValueError(f"num_nodes must be non-negative, got {num_nodes}")
        if num_nodes > U32_MAX:
            raise ValueError(f"The number of nodes must fit in u32, got {num_nodes}")
        graph = cls([])
        graph.adj = [[] for _ in range(num_nodes)]
        return graph

    @property
    def node_count(self) -> int:
        """Number of nodes."""
        return len(self.adj)

    def __len__(self) -> int:
        return len(self.adj)

    def _check_node(self, node: int) -> None:
        if not 0 <= node < len(self.adj):
            raise OutOfBoundsNode(node)

    def neighbors(self, node: int) -> Tuple[Tuple[int, W], ...]:
        """
        Return the outgoing ``(target, weight)`` pairs of a node.

        Raises:
            OutOfBoundsNode: If node is not a node of the graph.
        """
        self._check_node(node)
        return tuple(self.adj[node])

    def edges(self) -> Iterator[Tuple[int, int, W]]:
        """
        Lazily yield all edges as ``(source, target, weight)`` triples.

        Sources are visited in increasing order and each node's edges in
        stored order. Every call starts a fresh enumeration.
        """
        for source, edges in enumerate(self.adj):
            for target, weight in edges:
                yield source, target, weight

    def num_edges(self) -> int:
        """Number of stored adjacency entries (mirrored edges count twice)."""
        return sum(len(edges) for edges in self.adj)

    def insert_edge(self, i: int, j: int, weight: W, directed: bool) -> "Graph[W]":
        """
        Append the edge ``i -> j``; for undirected graphs also ``j -> i``.

        Both directions of an undirected edge share the same weight.

        Raises:
            OutOfBoundsNode: If i or j is not a node of the graph.
        """
        self._check_node(i)
        self._check_node(j)
        self.adj[i].append((j, weight))
        if not directed:
            self.adj[j].append((i, weight))
        return self

    def bfs(self, start: int) -> List[int]:
        """Nodes reachable from start in breadth-first discovery order."""
        return traversal.bfs(self, start)

    def dfs(self, start: int) -> List[int]:
        """Nodes reachable from start in depth-first discovery order."""
        return traversal.dfs(self, start)

    def dijkstra(self, start: int) -> List[Optional[int]]:
        """Shortest distance from start to every node (None if unreachable)."""
        return shortest.dijkstra(self, start)

    def __str__(self) -> str:
        return "".join(
            weight.format_edge(source, target) + "\n" for source, target, weight in self.edges()
        )

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.num_edges()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.adj == other.adj

    __hash__ = None  # type: ignore[assignment]
