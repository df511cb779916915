"""
Single-source shortest paths: Dijkstra.

Array-scan variant without a priority queue: each round settles the
unsettled node with the smallest finite tentative distance. Distances are
bounded by the unsigned 32-bit range; exceeding it is an error rather than
a silent wrap.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import numpy as np

from ..logging import get_logger
from .errors import DistanceOverflow, OutOfBoundsNode
from .weights import U32_MAX, Weighted

if TYPE_CHECKING:
    from .core import Graph

logger = get_logger(__name__)

# Marker for "no tentative distance yet"
_UNREACHED = -1


def dijkstra(graph: "Graph[Weighted]", start: int) -> List[Optional[int]]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Args:
        graph: Graph whose edges all carry Weighted costs.
        start: Source node.

    Returns:
        List indexed by node: shortest distance from start, or None if the
        node is unreachable.

    Raises:
        OutOfBoundsNode: If start, or a relaxed edge's target, is not a node
            of the graph.
        DistanceOverflow: If a relaxation would exceed U32_MAX. No partial
            result is returned.
        TypeError: If the graph has an edge that is not Weighted.

    Complexity: O(V^2 + E). Ties between equal tentative distances are
    broken by lowest node index.

    Example:
        >>> G = Graph([[(1, Weighted(1)), (2, Weighted(5))], [(2, Weighted(2))], []])
        >>> dijkstra(G, 0)
        [0, 1, 3]
    """
    n = graph.node_count
    if not 0 <= start < n:
        raise OutOfBoundsNode(start)

    for u, v, weight in graph.edges():
        if not isinstance(weight, Weighted):
            raise TypeError(
                f"Dijkstra requires Weighted edges. "
                f"Found {type(weight).__name__} on edge ({u}, {v})"
            )

    dist = np.full(n, _UNREACHED, dtype=np.int64)
    settled = np.zeros(n, dtype=bool)
    dist[start] = 0

    while True:
        candidates = np.flatnonzero(~settled & (dist != _UNREACHED))
        if candidates.size == 0:
            break
        # argmin returns the first minimum, i.e. the lowest node index
        u = int(candidates[np.argmin(dist[candidates])])
        d_u = int(dist[u])

        for v, weight in graph.adj[u]:
            if not 0 <= v < n:
                raise OutOfBoundsNode(v)
            new_dist = d_u + weight.value
            if new_dist > U32_MAX:
                logger.debug("Distance overflow on edge %d->%d (%d + %d)", u, v, d_u, weight.value)
                raise DistanceOverflow(u, v, d_u, weight.value)
            if dist[v] == _UNREACHED or new_dist < dist[v]:
                dist[v] = new_dist

        settled[u] = True

    return [int(d) if d != _UNREACHED else None for d in dist]
