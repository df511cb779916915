"""
Example: random graphs, traversal and shortest paths with edgewise.

Generates a small weighted undirected graph, prints it in the
line-per-edge text form, then runs BFS, DFS and Dijkstra from node 0.
"""

from edgewise import Unweighted, Weighted, random_graph


def example_weighted():
    """Weighted undirected graph with Dijkstra distances."""
    print("=" * 60)
    print("Example 1: Weighted undirected random graph")
    print("=" * 60)

    G = random_graph(8, 0.35, is_directed=False, weight=Weighted, seed=7)
    print(G, end="")
    print()
    print(f"BFS from 0: {G.bfs(0)}")
    print(f"DFS from 0: {G.dfs(0)}")

    for node, dist in enumerate(G.dijkstra(0)):
        label = "unreachable" if dist is None else dist
        print(f"  distance 0 -> {node}: {label}")
    print()


def example_unweighted():
    """Unweighted directed graph and reachability."""
    print("=" * 60)
    print("Example 2: Unweighted directed random graph")
    print("=" * 60)

    G = random_graph(6, 0.25, is_directed=True, weight=Unweighted, seed=3)
    print(G, end="")
    print()
    reached = sorted(G.bfs(0))
    print(f"Nodes reachable from 0: {reached}")
    print()


if __name__ == "__main__":
    example_weighted()
    example_unweighted()
    print("Done.")
