"""Invariant checks for graphs and algorithm results.

The checkers only read their arguments through the public DiGraph API, so
they can be called from any algorithm without import cycles. Each
``assert_*`` helper raises ``ValueError`` describing the first violation.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Set


def assert_valid_graph(graph: Any) -> None:
    """
    Check that a container's adjacency lists agree with its edge table.

    Parameters
    ----------
    graph:
        A DiGraph instance.

    Raises
    ------
    ValueError
        If an edge references an absent node, an edge is missing from the
        adjacency of its endpoints, or the cached counts are inconsistent.
    """
    nodes = graph.nodes()
    if len(nodes) != graph.node_count:
        raise ValueError(
            f"node_count is {graph.node_count} but {len(nodes)} nodes are listed"
        )

    out_total = 0
    in_total = 0
    for node in nodes:
        for edge in graph.out_edges(node):
            if edge.source != node:
                raise ValueError(f"edge {edge.id} listed as outgoing of node {node}")
            if not graph.has_node(edge.target):
                raise ValueError(f"edge {edge.id} targets absent node {edge.target}")
            out_total += 1
        for edge in graph.in_edges(node):
            if edge.target != node:
                raise ValueError(f"edge {edge.id} listed as incoming of node {node}")
            in_total += 1

    if not out_total == in_total == graph.edge_count:
        raise ValueError(
            f"edge_count is {graph.edge_count} but adjacency lists hold "
            f"{out_total} outgoing and {in_total} incoming edges"
        )


def is_partition(parts: Iterable[Set[Any]], universe: Iterable[Any]) -> bool:
    """Return True if ``parts`` are disjoint, non-empty and cover ``universe``."""
    seen: Set[Any] = set()
    for part in parts:
        if not part or seen & part:
            return False
        seen |= part
    return seen == set(universe)


def assert_partition(parts: List[Set[Any]], universe: Iterable[Any]) -> None:
    """
    Assert that ``parts`` form a partition of ``universe``.

    Raises
    ------
    ValueError
        If a part is empty, two parts overlap, or some element is missing.
    """
    universe = set(universe)
    if not is_partition(parts, universe):
        covered = set().union(*parts) if parts else set()
        raise ValueError(
            f"{len(parts)} parts do not partition {len(universe)} nodes "
            f"(missing: {sorted(universe - covered)!r})"
        )


def assert_forest(graph: Any, edge_ids: Iterable[int]) -> None:
    """
    Assert that the given edges form an undirected forest.

    Raises
    ------
    ValueError
        If the edges contain a cycle (self-loops included).
    """
    parent = {node: node for node in graph.nodes()}

    def root(x: Any) -> Any:
        while parent[x] != x:
            x = parent[x]
        return x

    for edge_id in edge_ids:
        edge = graph.edge(edge_id)
        a, b = root(edge.source), root(edge.target)
        if a == b:
            raise ValueError(f"edge {edge_id} closes a cycle in the spanning forest")
        parent[a] = b
