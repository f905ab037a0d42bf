"""
Minimum spanning forest: Kruskal's algorithm.

Edge directions are ignored for connectivity. Edges are scanned by
ascending weight, ties broken by edge id (insertion order), and an edge
is kept whenever its endpoints still lie in different union-find sets.
A disconnected graph yields a minimum spanning forest, reported through
``SpanningForest.component_count``.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties) and 23.2 (Kruskal).
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional

from ..diagnostics import validate
from ..logging import get_logger
from .core import DiGraph, Edge
from .disjoint import DisjointSet
from .utils import default_weight

logger = get_logger(__name__)


@dataclass
class SpanningForest:
    """
    Result of a minimum spanning forest computation.

    Attributes:
        edges: Selected edges in the order they were accepted.
        total_weight: Sum of the selected edge weights.
        component_count: Number of connected components of the undirected
            graph, i.e. the number of trees in the forest.
    """

    edges: List[Edge] = field(default_factory=list)
    total_weight: Any = 0
    component_count: int = 0

    @property
    def is_spanning_tree(self) -> bool:
        """True if the forest is a single tree (the graph is connected)."""
        return self.component_count <= 1

    @property
    def edge_ids(self) -> List[int]:
        return [edge.id for edge in self.edges]

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)


def kruskal(
    graph: DiGraph,
    weight: Optional[Callable[[Edge], Any]] = None,
    zero: Any = 0,
) -> SpanningForest:
    """
    Kruskal's algorithm for a minimum spanning forest.

    Args:
        graph: DiGraph whose edges are treated as undirected.
        weight: Optional accessor mapping an Edge to its weight.
        zero: Additive identity of the weight type.

    Returns:
        SpanningForest with exactly node_count - component_count edges.
        Self-loops are never selected; of several parallel edges at most
        the cheapest (earliest on ties) is selected.

    Complexity: O(E log E) for sorting plus near-constant union-find work
    per edge.

    Example:
        >>> G = DiGraph()
        >>> a, b, c = G.add_node(), G.add_node(), G.add_node()
        >>> _ = G.add_edge(a, b, 1.0); _ = G.add_edge(b, c, 2.0); _ = G.add_edge(a, c, 3.0)
        >>> forest = kruskal(G)
        >>> forest.total_weight, forest.is_spanning_tree
        (3.0, True)
    """
    weight = weight or default_weight

    # Sort by (weight, id) so equal weights keep insertion order
    edge_list = sorted(graph.edges(), key=lambda e: (weight(e), e.id))

    uf = DisjointSet(graph.nodes())
    forest = SpanningForest(total_weight=zero)
    target = graph.node_count - 1

    for edge in edge_list:
        if len(forest.edges) >= target:
            break
        if uf.union(edge.source, edge.target):
            forest.edges.append(edge)
            forest.total_weight = forest.total_weight + weight(edge)

    forest.component_count = uf.set_count
    logger.debug(
        "kruskal selected %d edges forming %d tree(s)", len(forest.edges), forest.component_count
    )
    validate("forest", graph, forest.edge_ids)
    return forest
