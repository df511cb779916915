"""Tests for graph traversal algorithms."""

import pytest

from edgewise.graphs import (
    UNWEIGHTED,
    Graph,
    OutOfBoundsNode,
    Unweighted,
    Weighted,
    bfs,
    dfs,
    random_graph,
)


class TestBFS:
    """Tests for breadth-first search."""

    def test_bfs_reachable_sets(self, unweighted_graph):
        """BFS finds exactly the start node's component."""
        assert sorted(bfs(unweighted_graph, 0)) == [0, 1, 2, 5]
        assert sorted(bfs(unweighted_graph, 4)) == [3, 4]

    def test_bfs_discovery_order(self, unweighted_graph):
        """Neighbors are discovered in stored adjacency order."""
        assert bfs(unweighted_graph, 0) == [0, 1, 2, 5]
        assert bfs(unweighted_graph, 5) == [5, 0, 1, 2]

    def test_bfs_layering(self):
        """Nodes closer to the start are discovered first."""
        u = UNWEIGHTED
        # 1 and 2 are one hop away, 3 and 4 two hops
        G = Graph([[(2, u), (1, u)], [(3, u)], [(4, u)], [], [(3, u)]])
        assert bfs(G, 0) == [0, 2, 1, 4, 3]

    def test_bfs_out_of_bounds(self, unweighted_graph):
        """Starting outside the graph is reported with the node index."""
        with pytest.raises(OutOfBoundsNode) as excinfo:
            bfs(unweighted_graph, 6)
        assert excinfo.value.node == 6

    def test_bfs_negative_start(self, unweighted_graph):
        """Negative starts are out of bounds too."""
        with pytest.raises(OutOfBoundsNode):
            bfs(unweighted_graph, -1)

    def test_bfs_bad_edge_target(self):
        """An adjacency entry past the last node is reported when reached."""
        G = Graph([[(1, UNWEIGHTED)], [(9, UNWEIGHTED)]])
        with pytest.raises(OutOfBoundsNode) as excinfo:
            bfs(G, 0)
        assert excinfo.value.node == 9

    def test_bfs_single_node(self):
        """A node without edges reaches only itself."""
        assert bfs(Graph.empty(1), 0) == [0]

    def test_bfs_ignores_weights(self, weighted_graph):
        """Weighted graphs traverse the same as unweighted ones."""
        assert sorted(bfs(weighted_graph, 0)) == list(range(10))
        assert sorted(bfs(weighted_graph, 14)) == [10, 11, 12, 13, 14]

    def test_bfs_method(self, unweighted_graph):
        """Graph.bfs delegates to bfs."""
        assert unweighted_graph.bfs(0) == bfs(unweighted_graph, 0)


class TestDFS:
    """Tests for depth-first search."""

    def test_dfs_reachable_sets(self, unweighted_graph):
        """DFS finds exactly the start node's component."""
        assert sorted(dfs(unweighted_graph, 0)) == [0, 1, 2, 5]
        assert sorted(dfs(unweighted_graph, 4)) == [3, 4]

    def test_dfs_discovery_order(self):
        """DFS follows the first unvisited edge before backtracking."""
        u = UNWEIGHTED
        G = Graph([[(1, u), (2, u)], [(3, u)], [], [(2, u)]])
        assert dfs(G, 0) == [0, 1, 3, 2]

    def test_dfs_matches_recursive(self, weighted_graph):
        """Iterative DFS matches a naive recursive DFS."""

        def recursive(graph, start):
            order = []
            seen = set()

            def visit(u):
                seen.add(u)
                order.append(u)
                for v, _ in graph.adj[u]:
                    if v not in seen:
                        visit(v)

            visit(start)
            return order

        for start in range(weighted_graph.node_count):
            assert dfs(weighted_graph, start) == recursive(weighted_graph, start)

    def test_dfs_out_of_bounds(self, unweighted_graph):
        """Starting outside the graph is reported with the node index."""
        with pytest.raises(OutOfBoundsNode) as excinfo:
            dfs(unweighted_graph, 6)
        assert excinfo.value.node == 6

    def test_dfs_deep_chain(self):
        """Long paths do not hit recursion limits."""
        n = 5000
        G = Graph([[(i + 1, UNWEIGHTED)] for i in range(n - 1)] + [[]])
        assert dfs(G, 0) == list(range(n))

    def test_dfs_method(self, unweighted_graph):
        """Graph.dfs delegates to dfs."""
        assert unweighted_graph.dfs(1) == dfs(unweighted_graph, 1)


class TestReachabilityEquivalence:
    """BFS and DFS must agree on the set of reachable nodes."""

    @pytest.mark.parametrize("seed", range(5))
    def test_bfs_dfs_same_set_directed(self, seed):
        """Directed random graphs."""
        G = random_graph(20, 0.15, is_directed=True, weight=Weighted, seed=seed)
        for start in range(G.node_count):
            assert sorted(bfs(G, start)) == sorted(dfs(G, start))

    @pytest.mark.parametrize("seed", range(5))
    def test_bfs_dfs_same_set_undirected(self, seed):
        """Undirected random graphs."""
        G = random_graph(20, 0.1, is_directed=False, weight=Unweighted, seed=seed)
        for start in range(G.node_count):
            assert sorted(bfs(G, start)) == sorted(dfs(G, start))

    def test_no_duplicates(self, unweighted_graph):
        """Each node is reported at most once."""
        for start in range(unweighted_graph.node_count):
            order = bfs(unweighted_graph, start)
            assert len(order) == len(set(order))
            order = dfs(unweighted_graph, start)
            assert len(order) == len(set(order))
