"""Tests for shortest path algorithms."""

import itertools
from fractions import Fraction

import pytest

from digraph.errors import InvalidHandle, NoPath
from digraph.graphs import (
    DiGraph,
    astar,
    digraph,
    dijkstra,
    dijkstra_path,
    erdos_renyi,
    path_cost,
    reconstruct_path,
)


def _brute_force(G: DiGraph, source: int):
    """Cheapest cost to every node by enumerating simple paths."""
    best = {source: 0}

    def walk(node, cost, seen):
        for edge, nxt in G.neighbors(node):
            if nxt in seen:
                continue
            total = cost + edge.weight
            if nxt not in best or total < best[nxt]:
                best[nxt] = total
            walk(nxt, total, seen | {nxt})

    walk(source, 0, {source})
    return best


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    def test_dijkstra_simple(self):
        """Test Dijkstra on simple weighted graph."""
        G, h = digraph("ABC", {"A": [("B", 1.0), ("C", 5.0)], "B": ("C", 2.0)})
        dist, parent = dijkstra(G, h["A"])

        assert dist[h["A"]] == 0
        assert dist[h["B"]] == 1.0
        assert dist[h["C"]] == 3.0  # A->B->C is shorter than A->C
        assert parent[h["A"]] is None
        assert parent[h["C"]] == h["B"]

    def test_dijkstra_path_reconstruction(self):
        """Test path reconstruction from Dijkstra parent map."""
        G, h = digraph("ABCD", {"A": ("B", 1.0), "B": ("C", 2.0), "C": ("D", 1.0)})
        dist, parent = dijkstra(G, h["A"])

        assert reconstruct_path(parent, h["D"]) == [h[k] for k in "ABCD"]
        assert dist[h["D"]] == 4.0

    def test_dijkstra_unreachable(self):
        """Unreachable nodes are absent from both maps."""
        G, h = digraph("ABC", {"A": "B"})
        dist, parent = dijkstra(G, h["A"])

        assert h["C"] not in dist
        assert h["C"] not in parent
        assert reconstruct_path(parent, h["C"]) is None

    def test_dijkstra_single_node(self):
        """Test Dijkstra on single node graph."""
        G = DiGraph()
        a = G.add_node()
        assert dijkstra(G, a) == ({a: 0}, {a: None})

    def test_dijkstra_invalid_source(self):
        """Test Dijkstra with unknown source."""
        with pytest.raises(InvalidHandle):
            dijkstra(DiGraph(), 0)

    def test_dijkstra_parallel_edges(self):
        """The cheapest of several parallel edges is used."""
        G = DiGraph()
        a, b = G.add_node(), G.add_node()
        G.add_edge(a, b, 9)
        G.add_edge(a, b, 2)
        G.add_edge(a, b, 5)
        assert dijkstra(G, a)[0][b] == 2

    def test_dijkstra_zero_weight_cycle(self):
        """Zero-weight cycles terminate."""
        G = DiGraph()
        a, b = G.add_node(), G.add_node()
        G.add_edge(a, b, 0)
        G.add_edge(b, a, 0)
        G.add_edge(a, a, 0)
        dist, _ = dijkstra(G, a)
        assert dist == {a: 0, b: 0}

    def test_dijkstra_custom_weight(self):
        """A weight accessor overrides edge.weight."""
        G, h = digraph("ABC", {"A": [("B", 10), ("C", 1)], "C": ("B", 1)})
        dist, _ = dijkstra(G, h["A"], weight=lambda e: 1)
        assert dist[h["B"]] == 1

    def test_dijkstra_fraction_weights(self):
        """Any additive ordered weight type works."""
        G, h = digraph("ABC", {"A": ("B", Fraction(1, 3)), "B": ("C", Fraction(1, 6))})
        dist, _ = dijkstra(G, h["A"], zero=Fraction(0))
        assert dist[h["C"]] == Fraction(1, 2)

    def test_dijkstra_deterministic_tie_breaking(self):
        """Equal-cost routes resolve the same way every run."""
        G, h = digraph("ABCD", {"A": [("B", 1), ("C", 1)], ("B", "C"): ("D", 1)})
        runs = {tuple(sorted(dijkstra(G, h["A"])[1].items(), key=str)) for _ in range(5)}
        assert len(runs) == 1

    def test_dijkstra_matches_brute_force(self):
        """Distances agree with exhaustive search on small random graphs."""
        for seed in range(10):
            G = erdos_renyi(
                7, 0.35, back_strict=False, seed=seed, weight=lambda u, v: (u * 3 + v * 5) % 7
            )
            expected = _brute_force(G, 0)
            dist, parent = dijkstra(G, 0)
            assert dist == expected
            for node in dist:
                assert path_cost(G, reconstruct_path(parent, node)) == dist[node]


class TestDijkstraPath:
    """Tests for single-pair shortest paths."""

    def test_path(self):
        """Returns the cheapest path and its cost."""
        G, h = digraph("ABCD", {"A": [("B", 1), ("C", 4)], "B": ("C", 1), "C": ("D", 1)})
        path, cost = dijkstra_path(G, h["A"], h["D"])
        assert path == [h[k] for k in "ABCD"]
        assert cost == 3

    def test_source_equals_target(self):
        """A node reaches itself at zero cost."""
        G = DiGraph()
        a = G.add_node()
        assert dijkstra_path(G, a, a) == ([a], 0)

    def test_no_path(self):
        """Unreachable targets raise NoPath."""
        G, h = digraph("AB", {"B": "A"})
        with pytest.raises(NoPath) as excinfo:
            dijkstra_path(G, h["A"], h["B"])
        assert excinfo.value.source == h["A"]
        assert excinfo.value.target == h["B"]
        assert isinstance(excinfo.value, LookupError)


class TestAStar:
    """Tests for A* search."""

    @staticmethod
    def _grid(width: int, height: int, blocked=()):
        G = DiGraph()
        cells = {}
        for y, x in itertools.product(range(height), range(width)):
            cells[x, y] = G.add_node((x, y))
        for (x, y), node in cells.items():
            for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
                other = (x + dx, y + dy)
                if other in cells and other not in blocked and (x, y) not in blocked:
                    G.add_edge(node, cells[other], 1)
        return G, cells

    def test_grid_manhattan(self):
        """Manhattan heuristic finds an optimal grid path."""
        G, cells = self._grid(5, 5, blocked={(2, 0), (2, 1), (2, 2), (2, 3)})
        goal = cells[4, 0]
        gx, gy = G.payload(goal)

        def manhattan(n):
            x, y = G.payload(n)
            return abs(x - gx) + abs(y - gy)

        path, cost = astar(G, cells[0, 0], goal, manhattan)
        assert path[0] == cells[0, 0]
        assert path[-1] == goal
        assert cost == 12
        assert len(path) == cost + 1
        assert cost == dijkstra(G, cells[0, 0])[0][goal]

    def test_zero_heuristic_equals_dijkstra(self):
        """With h == 0, A* costs match Dijkstra distances."""
        for seed in range(5):
            G = erdos_renyi(8, 0.3, seed=seed, weight=lambda u, v: 1 + (u + 2 * v) % 4)
            dist, _ = dijkstra(G, 0)
            for target in dist:
                _, cost = astar(G, 0, target, lambda n: 0)
                assert cost == dist[target]

    def test_inconsistent_admissible_heuristic(self):
        """An admissible but inconsistent heuristic still yields an optimal path."""
        G = DiGraph()
        s, a, b, c, g = (G.add_node(k) for k in "sabcg")
        G.add_edge(s, a, 1)
        G.add_edge(s, b, 1)
        G.add_edge(a, c, 1)
        G.add_edge(b, c, 3)
        G.add_edge(c, g, 3)
        # True remaining costs: s=5, a=4, b=6, c=3, g=0; h(a) breaks consistency
        h = {s: 0, a: 4, b: 0, c: 0, g: 0}

        path, cost = astar(G, s, g, h.__getitem__)
        assert cost == 5
        assert path == [s, a, c, g]

    def test_no_path(self):
        """Unreachable goal raises NoPath."""
        G, h = digraph("ABC", {"A": "B"})
        with pytest.raises(NoPath):
            astar(G, h["A"], h["C"], lambda n: 0)

    def test_invalid_goal(self):
        """Unknown goal raises InvalidHandle before searching."""
        G, h = digraph("AB", {"A": "B"})
        with pytest.raises(InvalidHandle):
            astar(G, h["A"], 7, lambda n: 0)
