"""edgewise - a small adjacency-list graph library with BFS, DFS, Dijkstra and random graphs."""

__version__ = "0.1.0"

# Configuration
from .config import (
    debug_context,
    default_seed,
    is_debug_enabled,
    seed_context,
    set_debug_enabled,
    set_default_seed,
)
from .core import Device, default_device, device

# Graphs
from .graphs import (
    MAX_WEIGHT,
    MIN_WEIGHT,
    U32_MAX,
    UNWEIGHTED,
    DistanceOverflow,
    Graph,
    GraphError,
    OutOfBoundsNode,
    Unweighted,
    Weighted,
    adjacency_matrix,
    adjacency_tensor,
    bfs,
    dfs,
    dijkstra,
    is_symmetric,
    random_graph,
    reachable_set,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Configuration
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "default_seed",
    "set_default_seed",
    "seed_context",
    # Devices
    "Device",
    "device",
    "default_device",
    # Graphs
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
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
