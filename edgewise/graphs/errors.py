"""Typed errors raised by graph algorithms."""


class GraphError(Exception):
    """Base class for recoverable graph errors."""


class OutOfBoundsNode(GraphError, IndexError):
    """
    A node index does not address a node of the graph.

    Attributes:
        node: The offending node index.
    """

    def __init__(self, node: int) -> None:
        self.node = node
        super().__init__(f"Node {node} is out of bounds")

    def __reduce__(self):
        return (type(self), (self.node,))


class DistanceOverflow(GraphError, OverflowError):
    """
    Relaxing an edge in Dijkstra would exceed the representable distance.

    Attributes:
        node_from: Source node of the relaxed edge.
        node_to: Target node of the relaxed edge.
        current_distance: Settled distance of node_from.
        edge_weight: Weight of the relaxed edge.
    """

    def __init__(self, node_from: int, node_to: int, current_distance: int, edge_weight: int) -> None:
        self.node_from = node_from
        self.node_to = node_to
        self.current_distance = current_distance
        self.edge_weight = edge_weight
        super().__init__(
            f"Distance overflow relaxing edge {node_from}->{node_to}: "
            f"{current_distance} + {edge_weight}"
        )

    def __reduce__(self):
        return (type(self), (self.node_from, self.node_to, self.current_distance, self.edge_weight))
