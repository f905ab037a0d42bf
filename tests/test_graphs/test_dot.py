"""Tests for the Graphviz DOT exporter."""

from digraph.graphs import (
    ComponentColorizer,
    DiGraph,
    DominatorAnnotator,
    DominatorTree,
    EdgeHighlighter,
    PathHighlighter,
    digraph,
    dijkstra_path,
    kruskal,
    strongly_connected_components,
    to_dot,
    write_dot,
)
from digraph.graphs.dot import escape


class TestToDot:
    """Tests for plain DOT output."""

    def test_simple(self):
        """Nodes come first, then edges in id order."""
        G = DiGraph()
        a, b = G.add_node("A"), G.add_node("B")
        G.add_edge(a, b, 5)

        assert to_dot(G).splitlines() == [
            'digraph "G" {',
            '  0 [label="0 A"];',
            '  1 [label="1 B"];',
            '  0 -> 1 [label="5"];',
            "}",
        ]

    def test_empty_graph(self):
        """An empty graph is an empty digraph block."""
        assert to_dot(DiGraph(), name="empty") == 'digraph "empty" {\n}'

    def test_labels(self):
        """Nodes without payload show only their handle; edge payloads follow the weight."""
        G = DiGraph()
        a = G.add_node()
        G.add_edge(a, a, 2, payload="loop")
        G.add_edge(a, a, None)
        text = to_dot(G)
        assert '  0 [label="0"];' in text
        assert '  0 -> 0 [label="2 loop"];' in text
        assert "  0 -> 0;" in text

    def test_escaping(self):
        """Quotes, backslashes and newlines are escaped."""
        assert escape('say "hi"') == '"say \\"hi\\""'
        assert escape("a\\b") == '"a\\\\b"'
        assert escape("two\nlines") == '"two\\nlines"'

    def test_deterministic(self):
        """Rendering twice gives the same text."""
        G, _ = digraph("ABC", {"A": ["B", "C"], "C": "A"})
        assert to_dot(G) == to_dot(G)

    def test_write_dot(self, tmp_path):
        """write_dot writes the rendering with a trailing newline."""
        G, _ = digraph("AB", {"A": "B"})
        out = write_dot(G, tmp_path / "graph.dot")
        assert out.read_text(encoding="utf-8") == to_dot(G) + "\n"


class TestProcessors:
    """Tests for the statement decorators."""

    def test_edge_highlighter(self):
        """Spanning-forest edges are drawn bold."""
        G, _ = digraph("ABC", {"A": [("B", 1), ("C", 3)], "B": ("C", 1)})
        forest = kruskal(G)
        lines = to_dot(G, EdgeHighlighter(forest.edge_ids)).splitlines()

        assert '  0 -> 1 [label="1", color="green", penwidth="2.0"];' in lines
        assert '  0 -> 2 [label="3"];' in lines

    def test_path_highlighter(self):
        """Path nodes and the cheapest edge of each step are coloured."""
        G, h = digraph("ABC", {"A": [("B", 4), ("B", 1)], "B": ("C", 1)})
        path, _ = dijkstra_path(G, h["A"], h["C"])
        text = to_dot(G, PathHighlighter(path))

        assert '  0 [label="0 A", color="red"];' in text
        assert '  0 -> 1 [label="4"];' in text
        assert '  0 -> 1 [label="1", color="red", penwidth="2.0"];' in text

    def test_path_highlighter_reused(self):
        """A reused highlighter picks edges from the graph being rendered."""
        highlighter = PathHighlighter([0, 1])
        G1, _ = digraph("AB", {"A": [("B", 4), ("B", 1)]})
        G2, _ = digraph("ABC", {"A": ("B", 2), "B": ("C", 5)})

        first = to_dot(G1, highlighter)
        assert '  0 -> 1 [label="1", color="red", penwidth="2.0"];' in first
        assert '  0 -> 1 [label="4"];' in first

        second = to_dot(G2, highlighter)
        assert '  0 -> 1 [label="2", color="red", penwidth="2.0"];' in second
        assert '  1 -> 2 [label="5"];' in second

    def test_dominator_annotator(self, diamond):
        """Labels carry the immediate dominator."""
        G, h = diamond
        text = to_dot(G, DominatorAnnotator(DominatorTree.build(G)))
        assert '  0 [label="0 root"];' in text
        assert '  3 [label="3 C, dom = 0"];' in text

    def test_component_colorizer(self):
        """Nodes of one component share a fill colour."""
        G, h = digraph("ABC", {"A": "B", "B": ["A", "C"]})
        text = to_dot(G, ComponentColorizer(strongly_connected_components(G)))
        assert '  0 [label="0 A", style="filled", fillcolor="lightgreen"];' in text
        assert '  1 [label="1 B", style="filled", fillcolor="lightgreen"];' in text
        assert '  2 [label="2 C", style="filled", fillcolor="lightblue"];' in text
