"""Tests for minimum spanning forest algorithms."""

import itertools

from digraph.graphs import DiGraph, DisjointSet, SpanningForest, digraph, erdos_renyi, kruskal


def _brute_force_weight(G: DiGraph) -> float:
    """Cheapest forest of n - c edges by trying every subset."""
    components = kruskal(G).component_count
    size = G.node_count - components
    best = None
    for subset in itertools.combinations(G.edges(), size):
        uf = DisjointSet(G.nodes())
        if all(uf.union(e.source, e.target) for e in subset):
            total = sum(e.weight for e in subset)
            best = total if best is None else min(best, total)
    return best if best is not None else 0


class TestKruskal:
    """Tests for Kruskal's algorithm."""

    def test_kruskal_simple(self):
        """Test Kruskal on simple connected graph."""
        G, h = digraph("ABC", {"A": [("B", 1.0), ("C", 3.0)], "B": ("C", 2.0)})
        forest = kruskal(G)

        assert isinstance(forest, SpanningForest)
        assert len(forest) == 2
        assert forest.total_weight == 3.0
        assert forest.is_spanning_tree
        assert forest.component_count == 1
        assert forest.edge_ids == [0, 2]

    def test_directions_ignored(self):
        """Edge direction does not matter for connectivity."""
        G, h = digraph("ABC", {"B": ("A", 1), "C": ("A", 1)})
        forest = kruskal(G)
        assert forest.is_spanning_tree
        assert forest.total_weight == 2

    def test_disconnected(self):
        """A disconnected graph yields a forest with one tree per component."""
        G, h = digraph("ABCDE", {"A": ("B", 1), "C": [("D", 2), ("E", 3)]})
        forest = kruskal(G)

        assert forest.component_count == 2
        assert not forest.is_spanning_tree
        assert len(forest) == G.node_count - forest.component_count
        assert forest.total_weight == 6

    def test_tie_break_by_edge_id(self):
        """Equal weights are taken in insertion order."""
        G = DiGraph()
        a, b, c = G.add_node(), G.add_node(), G.add_node()
        G.add_edge(a, b, 1)
        G.add_edge(b, c, 1)
        G.add_edge(a, c, 1)
        assert kruskal(G).edge_ids == [0, 1]

    def test_self_loops_and_parallel_edges(self):
        """Self-loops are never chosen and only the cheapest parallel edge is."""
        G = DiGraph()
        a, b = G.add_node(), G.add_node()
        G.add_edge(a, a, 0)
        G.add_edge(a, b, 5)
        G.add_edge(b, a, 2)
        forest = kruskal(G)
        assert forest.edge_ids == [2]
        assert forest.total_weight == 2

    def test_empty_and_single(self):
        """Trivial graphs give empty forests."""
        empty = kruskal(DiGraph())
        assert len(empty) == 0
        assert empty.component_count == 0
        assert empty.is_spanning_tree

        G = DiGraph()
        G.add_node()
        single = kruskal(G)
        assert len(single) == 0
        assert single.component_count == 1

    def test_custom_weight(self):
        """A weight accessor overrides edge.weight."""
        G, h = digraph("ABC", {"A": [("B", 1), ("C", 10)], "B": ("C", 1)})
        forest = kruskal(G, weight=lambda e: -e.weight)
        assert forest.total_weight == -11

    def test_minimality(self):
        """Total weight matches exhaustive search on small graphs."""
        for seed in range(6):
            G = erdos_renyi(6, 0.3, back_strict=False, seed=seed, weight=lambda u, v: (u * 7 + v * 3) % 5 + 1)
            forest = kruskal(G)
            assert len(forest) == G.node_count - forest.component_count
            assert forest.total_weight == _brute_force_weight(G)

    def test_iteration(self):
        """Iterating a forest yields its edges."""
        G, h = digraph("AB", {"A": ("B", 4)})
        assert [e.weight for e in kruskal(G)] == [4]
