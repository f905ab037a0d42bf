"""
Declarative graph construction.

GraphBuilder lets callers describe a graph with their own node keys
(strings, ints, anything hashable) and translates the description into
``add_node`` / ``add_edge`` calls on a DiGraph. Each node's payload is
its key unless another payload is given.

In ``edges`` and ``digraph`` a tuple stands for ``(key, weight)`` as a
target and for several keys as a source, unless that tuple is itself a
declared node key. Declare tuple keys before using them there.

Example:
    >>> b = GraphBuilder().nodes("A", "B", "C", "D")
    >>> _ = b.edges("A", [("B", 3), ("C", 1)]).edges(["B", "C"], ("D", 2))
    >>> G = b.build()
    >>> G.edge_count
    4
    >>> [G.payload(t) for t in G.successors(b.handle("A"))]
    ['B', 'C']
"""

from typing import Any, Dict, Hashable, Iterable, Mapping, Sequence, Tuple, Union

from ..diagnostics import validate
from ..errors import InvalidHandle
from .core import DiGraph

_KEY = object()


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, list) else [value]


class GraphBuilder:
    """
    Fluent builder producing a DiGraph from hashable node keys.

    Attributes:
        handles: Dictionary mapping node key -> node handle in the graph.
    """

    def __init__(self, multigraph: bool = True):
        """
        Args:
            multigraph: Passed to the DiGraph being built.
        """
        self._graph = DiGraph(multigraph=multigraph)
        self.handles: Dict[Hashable, int] = {}

    def node(self, key: Hashable, payload: Any = _KEY) -> "GraphBuilder":
        """
        Declare a node. Declaring an existing key replaces its payload.

        Args:
            key: Hashable node key.
            payload: Node payload (defaults to the key).
        """
        value = key if payload is _KEY else payload
        if key in self.handles:
            self._graph.set_payload(self.handles[key], value)
        else:
            self.handles[key] = self._graph.add_node(value)
        return self

    def nodes(self, *keys: Hashable) -> "GraphBuilder":
        """Declare several nodes, keeping the given order."""
        for key in keys:
            if key not in self.handles:
                self.node(key)
        return self

    def _ensure(self, key: Hashable) -> int:
        if key not in self.handles:
            self.node(key)
        return self.handles[key]

    def edge(
        self, src: Hashable, dst: Hashable, weight: Any = 1, payload: Any = None
    ) -> "GraphBuilder":
        """Add one edge between two keys, declaring unknown keys on the fly."""
        self._graph.add_edge(self._ensure(src), self._ensure(dst), weight, payload)
        return self

    def edges(self, sources: Any, targets: Any) -> "GraphBuilder":
        """
        Add edges from every source to every target.

        Args:
            sources: A key, or a list of keys (fan-in).
            targets: A key, a ``(key, weight)`` tuple, or a list of those.
                A tuple that is a declared key is taken as that key.
        """
        for src in _as_list(sources):
            for target in _as_list(targets):
                if isinstance(target, tuple) and target not in self.handles:
                    dst, weight = target
                    self.edge(src, dst, weight)
                else:
                    self.edge(src, target)
        return self

    def handle(self, key: Hashable) -> int:
        """
        Handle of a declared key.

        Raises:
            InvalidHandle: If the key was never declared.
        """
        try:
            return self.handles[key]
        except KeyError:
            raise InvalidHandle(key) from None

    def build(self) -> DiGraph:
        """
        Return a snapshot of the graph described so far.

        Each call returns a new DiGraph; later builder calls do not change
        graphs that were already built.
        """
        validate("graph", self._graph)
        return self._graph.copy()


AdjacencySpec = Union[
    Mapping[Any, Any],
    Iterable[Tuple[Any, Any]],
]


def digraph(
    nodes: Sequence[Hashable] = (),
    adjacency: AdjacencySpec = (),
    multigraph: bool = True,
) -> Tuple[DiGraph, Dict[Hashable, int]]:
    """
    Build a graph from a node list and an adjacency description.

    Args:
        nodes: Node keys, declared first and in order.
        adjacency: Mapping (or sequence of pairs) from sources to targets.
            A source is a key or a tuple of keys (fan-in), unless the tuple
            is itself a declared key; targets follow GraphBuilder.edges.
        multigraph: Passed to the DiGraph being built.

    Returns:
        Tuple of (graph, key -> handle map).

    Example:
        >>> G, h = digraph([1, 2, 3, 4], {1: [2, 3], (2, 3): 4})
        >>> G.successors(h[2]) == [h[4]]
        True
    """
    builder = GraphBuilder(multigraph=multigraph).nodes(*nodes)
    pairs = adjacency.items() if isinstance(adjacency, Mapping) else adjacency
    for sources, targets in pairs:
        if isinstance(sources, tuple) and sources not in builder.handles:
            sources = list(sources)
        builder.edges(sources, targets)
    return builder.build(), dict(builder.handles)
