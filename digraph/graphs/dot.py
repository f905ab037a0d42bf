"""
Graphviz DOT exporter.

Renders a DiGraph as DOT text: one statement per node, then one
``src -> dst [label="weight"]`` statement per edge in edge-id order.
Node identifiers are the node handles; labels show the handle followed by
the payload, when there is one.

A DotProcessor decides the attributes of every statement. Subclasses
highlight algorithm results (a path, a spanning forest, dominators,
strongly connected components). The text can be rendered with the
Graphviz ``dot`` tool, which is not required by this module.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set, Union

from .core import DiGraph, Edge
from .dominators import DominatorTree
from .scc import component_map

PALETTE = (
    "lightblue",
    "lightgreen",
    "lightpink",
    "khaki",
    "lightsalmon",
    "plum",
    "lightcyan",
    "wheat",
)


def escape(value: object) -> str:
    """Quote a value as a DOT string literal."""
    text = str(value).replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{text}"'


def _attrs(attrs: Dict[str, object]) -> str:
    if not attrs:
        return ""
    body = ", ".join(f"{key}={escape(value)}" for key, value in attrs.items())
    return f" [{body}]"


class DotProcessor:
    """
    Default statement attributes: labels only.

    Override ``node_attrs`` / ``edge_attrs`` to decorate statements, and
    ``begin`` to prepare per-graph state before a rendering starts.
    """

    def begin(self, graph: DiGraph) -> None:
        """Called by to_dot once per rendering, before any statement."""

    def node_label(self, graph: DiGraph, node: int) -> str:
        payload = graph.payload(node)
        return str(node) if payload is None or payload == "" else f"{node} {payload}"

    def node_attrs(self, graph: DiGraph, node: int) -> Dict[str, object]:
        return {"label": self.node_label(graph, node)}

    def edge_attrs(self, graph: DiGraph, edge: Edge) -> Dict[str, object]:
        parts = [str(p) for p in (edge.weight, edge.payload) if p is not None and p != ""]
        return {"label": " ".join(parts)} if parts else {}

    def node(self, graph: DiGraph, node: int) -> str:
        return f"{node}{_attrs(self.node_attrs(graph, node))};"

    def edge(self, graph: DiGraph, edge: Edge) -> str:
        return f"{edge.source} -> {edge.target}{_attrs(self.edge_attrs(graph, edge))};"


class EdgeHighlighter(DotProcessor):
    """Draw a set of edges (e.g. a spanning forest) bold and coloured."""

    def __init__(self, edge_ids: Iterable[int], color: str = "green"):
        self.edge_ids: Set[int] = set(edge_ids)
        self.color = color

    def edge_attrs(self, graph: DiGraph, edge: Edge) -> Dict[str, object]:
        attrs = super().edge_attrs(graph, edge)
        if edge.id in self.edge_ids:
            attrs.update(color=self.color, penwidth=2.0)
        return attrs


class PathHighlighter(DotProcessor):
    """Colour the nodes of a path and the cheapest edge between each consecutive pair."""

    def __init__(self, path: Sequence[int], color: str = "red"):
        self.path = list(path)
        self.color = color
        self._steps = set(zip(self.path, self.path[1:]))
        self._chosen: Set[int] = set()

    def begin(self, graph: DiGraph) -> None:
        self._chosen = set()
        for u, v in self._steps:
            between = graph.edges_between(u, v) if u in graph and v in graph else []
            if between:
                self._chosen.add(min(between, key=lambda e: (e.weight, e.id)).id)

    def node_attrs(self, graph: DiGraph, node: int) -> Dict[str, object]:
        attrs = super().node_attrs(graph, node)
        if node in self.path:
            attrs.update(color=self.color)
        return attrs

    def edge_attrs(self, graph: DiGraph, edge: Edge) -> Dict[str, object]:
        attrs = super().edge_attrs(graph, edge)
        if edge.id in self._chosen:
            attrs.update(color=self.color, penwidth=2.0)
        return attrs


class DominatorAnnotator(DotProcessor):
    """Append the immediate dominator to every node label."""

    def __init__(self, tree: DominatorTree):
        self.tree = tree

    def node_label(self, graph: DiGraph, node: int) -> str:
        label = super().node_label(graph, node)
        idom = self.tree.immediate_dominator(node)
        return label if idom is None else f"{label}, dom = {idom}"


class ComponentColorizer(DotProcessor):
    """Fill every strongly connected component with its own colour."""

    def __init__(self, components: Sequence[Set[int]], palette: Sequence[str] = PALETTE):
        self.mapping = component_map(components)
        self.palette = list(palette)

    def node_attrs(self, graph: DiGraph, node: int) -> Dict[str, object]:
        attrs = super().node_attrs(graph, node)
        if node in self.mapping:
            attrs.update(style="filled", fillcolor=self.palette[self.mapping[node] % len(self.palette)])
        return attrs


def to_dot(graph: DiGraph, processor: Optional[DotProcessor] = None, name: str = "G") -> str:
    """
    Render a graph as DOT text.

    Args:
        graph: DiGraph to render.
        processor: Statement decorator (default: labels only).
        name: Graph name written after the ``digraph`` keyword.

    Returns:
        DOT source code.

    Example:
        >>> G = DiGraph()
        >>> a, b = G.add_node("A"), G.add_node("B")
        >>> _ = G.add_edge(a, b, 5)
        >>> print(to_dot(G))
        digraph "G" {
          0 [label="0 A"];
          1 [label="1 B"];
          0 -> 1 [label="5"];
        }
    """
    processor = processor or DotProcessor()
    processor.begin(graph)
    lines: List[str] = [f"digraph {escape(name)} {{"]

    for node in graph.nodes():
        lines.append(f"  {processor.node(graph, node)}")
    for edge in graph.edges():
        lines.append(f"  {processor.edge(graph, edge)}")

    lines.append("}")
    return "\n".join(lines)


def write_dot(
    graph: DiGraph,
    path: Union[str, Path],
    processor: Optional[DotProcessor] = None,
    name: str = "G",
) -> Path:
    """
    Write the DOT rendering of a graph to ``path``.

    Returns:
        The path written to.
    """
    path = Path(path)
    path.write_text(to_dot(graph, processor, name) + "\n", encoding="utf-8")
    return path
