"""
Core directed-graph container.

Provides the DiGraph class: nodes are addressed by stable integer handles
assigned in insertion order, and every node owns an ordered list of
outgoing edges. Adjacency order equals edge-insertion order and is never
rearranged, so every traversal built on top of it is reproducible.

Neither nodes nor edges can be removed. Node handles and edge ids
therefore stay valid for the lifetime of their container and are never
reused.
"""

from dataclasses import dataclass, replace
from numbers import Integral
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..errors import InvalidHandle


@dataclass(frozen=True)
class Edge:
    """
    A directed edge record.

    Attributes:
        id: Stable edge handle (insertion index).
        source: Handle of the source node.
        target: Handle of the target node.
        weight: Edge weight used by the weighted algorithms (default 1).
        payload: Optional user data.
    """

    id: int
    source: int
    target: int
    weight: Any = 1
    payload: Any = None

    @property
    def is_loop(self) -> bool:
        return self.source == self.target


class DiGraph:
    """
    Directed (multi)graph with insertion-ordered adjacency lists.

    Each node keeps an ordered list of outgoing edge ids and an ordered list
    of incoming edge ids. Parallel edges are allowed unless the graph is
    created with ``multigraph=False``; in that case adding an edge between
    an already connected ordered pair updates the existing edge.

    Attributes:
        multigraph: If True, parallel edges between the same pair are kept.

    Complexity:
        - add_node: O(1) amortized
        - add_edge: O(1) amortized
        - neighbors / successors / predecessors: O(deg(v))
        - node_count / edge_count: O(1)
        - nodes: O(V), edges: O(E)
    """

    __slots__ = ("multigraph", "_payloads", "_edges", "_out", "_in", "_pair_index")

    def __init__(self, multigraph: bool = True):
        """
        Initialize an empty graph.

        Args:
            multigraph: If False, at most one edge is kept per ordered pair.
        """
        self.multigraph = multigraph
        self._payloads: List[Any] = []
        self._edges: List[Edge] = []
        self._out: List[List[int]] = []
        self._in: List[List[int]] = []
        self._pair_index: Dict[Tuple[int, int], int] = {}

    # ---- validation ------------------------------------------------------

    def _node(self, handle: Any) -> int:
        if (
            isinstance(handle, bool)
            or not isinstance(handle, Integral)
            or not 0 <= handle < len(self._payloads)
        ):
            raise InvalidHandle(handle)
        return int(handle)

    # ---- mutation --------------------------------------------------------

    def add_node(self, payload: Any = None) -> int:
        """
        Add a node carrying ``payload``.

        Args:
            payload: Optional user data attached to the node.

        Returns:
            The new node handle.
        """
        handle = len(self._payloads)
        self._payloads.append(payload)
        self._out.append([])
        self._in.append([])
        return handle

    def add_edge(self, src: int, dst: int, weight: Any = 1, payload: Any = None) -> int:
        """
        Add a directed edge from ``src`` to ``dst``.

        Args:
            src: Source node handle.
            dst: Target node handle.
            weight: Edge weight (default 1).
            payload: Optional user data attached to the edge.

        Returns:
            The edge handle. When ``multigraph`` is False and the pair is
            already connected, the existing handle is returned and that
            edge's weight and payload are replaced.

        Raises:
            InvalidHandle: If either endpoint is not in the graph.
        """
        src = self._node(src)
        dst = self._node(dst)

        if not self.multigraph:
            existing = self._pair_index.get((src, dst))
            if existing is not None:
                self._edges[existing] = replace(
                    self._edges[existing], weight=weight, payload=payload
                )
                return existing

        edge_id = len(self._edges)
        self._edges.append(Edge(edge_id, src, dst, weight, payload))
        self._out[src].append(edge_id)
        self._in[dst].append(edge_id)
        if not self.multigraph:
            self._pair_index[(src, dst)] = edge_id
        return edge_id

    def set_payload(self, handle: int, payload: Any) -> None:
        """Replace the payload of an existing node."""
        self._payloads[self._node(handle)] = payload

    def copy(self) -> "DiGraph":
        """
        Return an independent graph with the same handles, edge ids and order.

        Payloads are shared, not copied.
        """
        other = DiGraph(multigraph=self.multigraph)
        other._payloads = list(self._payloads)
        other._edges = list(self._edges)
        other._out = [list(ids) for ids in self._out]
        other._in = [list(ids) for ids in self._in]
        other._pair_index = dict(self._pair_index)
        return other

    # ---- queries ---------------------------------------------------------

    @property
    def node_count(self) -> int:
        return len(self._payloads)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def start(self) -> Optional[int]:
        """The first node added to the graph, or None for an empty graph."""
        return 0 if self._payloads else None

    def check_node(self, handle: Any) -> int:
        """
        Validate a node handle.

        Returns:
            The handle as a plain int.

        Raises:
            InvalidHandle: If node is not in graph.
        """
        return self._node(handle)

    def has_node(self, handle: Any) -> bool:
        try:
            self._node(handle)
        except InvalidHandle:
            return False
        return True

    def nodes(self) -> List[int]:
        """
        Return all node handles in insertion order.

        Returns:
            List of node handles.
        """
        return list(range(len(self._payloads)))

    def payload(self, handle: int) -> Any:
        """
        Return the payload stored on a node.

        Raises:
            InvalidHandle: If node is not in graph.
        """
        return self._payloads[self._node(handle)]

    def find_node(self, payload: Any) -> Optional[int]:
        """Return the first node (in insertion order) whose payload equals ``payload``."""
        for handle, value in enumerate(self._payloads):
            if value == payload:
                return handle
        return None

    def edge(self, edge_id: int) -> Edge:
        """
        Return the edge record for an edge handle.

        Raises:
            InvalidHandle: If the edge is not in graph.
        """
        if (
            isinstance(edge_id, bool)
            or not isinstance(edge_id, Integral)
            or not 0 <= edge_id < len(self._edges)
        ):
            raise InvalidHandle(edge_id, kind="edge")
        return self._edges[edge_id]

    def edges(self) -> List[Edge]:
        """
        Return all edges in insertion (edge id) order.

        Returns:
            List of Edge records.
        """
        return list(self._edges)

    def out_edges(self, handle: int) -> List[Edge]:
        """Outgoing edges of a node in adjacency (insertion) order."""
        return [self._edges[e] for e in self._out[self._node(handle)]]

    def in_edges(self, handle: int) -> List[Edge]:
        """Incoming edges of a node in insertion order."""
        return [self._edges[e] for e in self._in[self._node(handle)]]

    def neighbors(self, handle: int) -> List[Tuple[Edge, int]]:
        """
        Return the outgoing edges of a node paired with their targets.

        Args:
            handle: Node to get neighbors for.

        Returns:
            List of (edge, target) tuples in adjacency order.

        Raises:
            InvalidHandle: If node is not in graph.
        """
        edges = self._edges
        return [(edges[e], edges[e].target) for e in self._out[self._node(handle)]]

    def successors(self, handle: int) -> List[int]:
        """Targets of outgoing edges, in adjacency order (parallel edges repeat)."""
        edges = self._edges
        return [edges[e].target for e in self._out[self._node(handle)]]

    def predecessors(self, handle: int) -> List[int]:
        """Sources of incoming edges, in insertion order (parallel edges repeat)."""
        edges = self._edges
        return [edges[e].source for e in self._in[self._node(handle)]]

    def out_degree(self, handle: int) -> int:
        return len(self._out[self._node(handle)])

    def in_degree(self, handle: int) -> int:
        return len(self._in[self._node(handle)])

    def edges_between(self, src: int, dst: int) -> List[Edge]:
        """All edges from ``src`` to ``dst`` in insertion order."""
        dst = self._node(dst)
        return [e for e in self.out_edges(src) if e.target == dst]

    def has_edge(self, src: int, dst: int) -> bool:
        return bool(self.edges_between(src, dst))

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, handle: object) -> bool:
        return self.has_node(handle)

    def __len__(self) -> int:
        return self.node_count

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._payloads)))

    def __repr__(self) -> str:
        return f"DiGraph(nodes={self.node_count}, edges={self.edge_count})"
