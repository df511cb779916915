"""
Random graph generation under an Erdős–Rényi G(n, p) model.

Each candidate edge is included independently with probability p. Weighted
graphs draw edge costs uniformly from [MIN_WEIGHT, MAX_WEIGHT].

References:
    - Erdős, P., Rényi, A. "On Random Graphs I" (1959).
    - Gilbert, E. N. "Random Graphs" (1959).
"""

from __future__ import annotations

from typing import Optional, Type

import numpy as np

from ..config import default_seed, is_debug_enabled
from ..logging import get_logger
from .core import Graph
from .utils import is_symmetric
from .weights import U32_MAX, W, Weighted

logger = get_logger(__name__)


def random_graph(
    num_nodes: int,
    probability: float,
    is_directed: bool,
    weight: Type[W] = Weighted,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> Graph[W]:
    """
    Generate a random graph.

    Directed graphs consider every ordered pair ``(i, j)`` with ``i != j``;
    each included edge draws its own weight. Undirected graphs consider each
    pair ``i < j`` once and insert both ``i -> j`` and ``j -> i`` with one
    shared weight. Self loops are never generated.

    Args:
        num_nodes: Number of nodes n.
        probability: Inclusion probability p in [0, 1].
        is_directed: Whether to generate a directed graph.
        weight: Weight kind, ``Weighted`` (default) or ``Unweighted``.
        rng: Random number generator. If None, one is created from seed.
        seed: Seed for a fresh generator when rng is None. Defaults to the
            configured default seed (EDGEWISE_SEED), or OS entropy if unset.

    Returns:
        A new Graph with num_nodes nodes.

    Raises:
        ValueError: If num_nodes is negative or exceeds U32_MAX, or if
            probability is outside [0, 1].

    Complexity: O(n^2) random draws.

    Example:
        >>> G = random_graph(5, 0.5, is_directed=False, seed=0)
        >>> G.node_count
        5
    """
    if num_nodes < 0:
        raise ValueError(f"num_nodes must be non-negative, got {num_nodes}")
    if num_nodes > U32_MAX:
        raise ValueError(f"The number of nodes must fit in u32, got {num_nodes}")
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must lie in [0, 1], got {probability}")

    if rng is None:
        rng = np.random.default_rng(seed if seed is not None else default_seed())

    graph: Graph[W] = Graph.empty(num_nodes)

    for i in range(num_nodes):
        first = 0 if is_directed else i + 1
        for j in range(first, num_nodes):
            if i == j:
                continue
            if rng.random() < probability:
                graph.insert_edge(i, j, weight.draw(rng), is_directed)

    logger.debug(
        "Generated %s graph: %d nodes, %d adjacency entries (p=%s)",
        "directed" if is_directed else "undirected",
        num_nodes,
        graph.num_edges(),
        probability,
    )

    if is_debug_enabled() and not is_directed and not is_symmetric(graph):
        raise RuntimeError("Generated undirected graph is not symmetric")

    return graph
