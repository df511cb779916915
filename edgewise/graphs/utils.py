"""
Utility functions for graphs.

Provides symmetry and reachability helpers plus dense matrix exports.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Optional, Set

import numpy as np
import torch

from ..core.device import Device, default_device
from .errors import OutOfBoundsNode
from .traversal import bfs
from .weights import Weighted

if TYPE_CHECKING:
    from .core import Graph


def is_symmetric(graph: "Graph") -> bool:
    """
    Check whether every edge has a mirrored edge with identical weight.

    Holds for every undirected graph. Parallel edges are matched by
    multiplicity.

    Example:
        >>> G = Graph([[(1, Weighted(2))], [(0, Weighted(2))]])
        >>> is_symmetric(G)
        True
    """
    counts = Counter(graph.edges())
    return all(counts[(v, u, w)] == c for (u, v, w), c in counts.items())


def reachable_set(graph: "Graph", start: int) -> Set[int]:
    """Return the set of nodes reachable from start (start included)."""
    return set(bfs(graph, start))


def adjacency_matrix(graph: "Graph") -> np.ndarray:
    """
    Dense (n, n) weight matrix of a graph.

    ``A[u, v]`` is the weight of edge u -> v (1 for Unweighted edges), 0 if
    there is no edge. When parallel edges exist the last one stored wins.

    Raises:
        OutOfBoundsNode: If an edge target is not a node of the graph.

    Example:
        >>> G = Graph([[(1, Weighted(4))], []])
        >>> adjacency_matrix(G)
        array([[0, 4],
               [0, 0]])
    """
    n = graph.node_count
    A = np.zeros((n, n), dtype=np.int64)
    for u, v, weight in graph.edges():
        if not 0 <= v < n:
            raise OutOfBoundsNode(v)
        A[u, v] = weight.value if isinstance(weight, Weighted) else 1
    return A


def adjacency_tensor(graph: "Graph", device: Optional[Device] = None) -> torch.Tensor:
    """
    Dense weight matrix as a torch tensor.

    Args:
        graph: Graph to export.
        device: Target device. Defaults to default_device().

    Returns:
        (n, n) tensor with the device's dtype, laid out as adjacency_matrix.
    """
    if device is None:
        device = default_device()
    return torch.as_tensor(
        adjacency_matrix(graph), dtype=device.dtype, device=device.as_torch_device()
    )
