"""
Graph package for edgewise.

This package provides:
- Graph: adjacency-list graph over dense integer node ids
- Weight kinds (Unweighted, Weighted)
- Traversal algorithms (BFS, DFS)
- Single-source shortest paths (Dijkstra)
- Random graph generation (Erdős–Rényi G(n, p))
- Helpers for symmetry checks and dense matrix export

All algorithms explore edges in stored adjacency order, so results are
deterministic for a given graph.
"""

from .core import Graph
from .errors import DistanceOverflow, GraphError, OutOfBoundsNode
from .generators import random_graph
from .shortest import dijkstra
from .traversal import bfs, dfs
from .utils import adjacency_matrix, adjacency_tensor, is_symmetric, reachable_set
from .weights import MAX_WEIGHT, MIN_WEIGHT, U32_MAX, UNWEIGHTED, Unweighted, Weighted

__all__ = [
    "Graph",
    "Unweighted",
    "Weighted",
    "UNWEIGHTED",
    "MIN_WEIGHT",
    "MAX_WEIGHT",
    "U32_MAX",
    "GraphError",
    "OutOfBoundsNode",
    "DistanceOverflow",
    "bfs",
    "dfs",
    "dijkstra",
    "random_graph",
    "is_symmetric",
    "reachable_set",
    "adjacency_matrix",
    "adjacency_tensor",
]

# Example usage:
# from edgewise.graphs import Graph, Weighted, random_graph
#
# G = random_graph(10, 0.3, is_directed=False, weight=Weighted, seed=0)
# print(G)               # one "u-(w)->v" line per edge
# dist = G.dijkstra(0)   # [0, ..., None, ...]
