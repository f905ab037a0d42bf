"""
Utility functions for graph algorithms.

Provides helpers for path reconstruction, path costs and a dense
adjacency-matrix view of a DiGraph.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence

import numpy as np

from .core import DiGraph, Edge


def default_weight(edge: Edge) -> Any:
    """Weight accessor used when an algorithm is not given one."""
    return edge.weight


def reconstruct_path(parent: Dict[int, Optional[int]], target: int) -> Optional[List[int]]:
    """
    Reconstruct path from source to target using parent map.

    The parent map should come from a shortest-path or traversal algorithm
    (e.g., bfs, dijkstra) where parent[node] is the previous node on the
    path and the source maps to None. Unreachable nodes are absent.

    Args:
        parent: Dictionary mapping node -> parent node (None for the source).
        target: Target node to reconstruct path to.

    Returns:
        List of nodes from source to target (inclusive), or None if target
        is unreachable.

    Example:
        >>> parent = {0: None, 1: 0, 2: 1}
        >>> reconstruct_path(parent, 2)
        [0, 1, 2]
        >>> reconstruct_path(parent, 3) is None
        True
    """
    if target not in parent:
        return None

    path = []
    current: Optional[int] = target
    visited = set()
    while current is not None:
        if current in visited:
            raise ValueError(f"parent map contains a cycle through node {current}")
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path


def path_cost(
    graph: DiGraph,
    path: Sequence[int],
    weight: Optional[Callable[[Edge], Any]] = None,
    zero: Any = 0,
) -> Any:
    """
    Sum the cheapest edge weight along each consecutive pair of ``path``.

    Raises:
        ValueError: If two consecutive nodes are not connected.
        InvalidHandle: If a node is not in graph.
    """
    weight = weight or default_weight
    total = zero
    for u, v in zip(path, path[1:]):
        candidates = [weight(e) for e in graph.edges_between(u, v)]
        if not candidates:
            raise ValueError(f"no edge from node {u} to node {v}")
        total = total + min(candidates)
    return total


def adjacency_matrix(graph: DiGraph, weighted: bool = False) -> np.ndarray:
    """
    Dense adjacency matrix in handle order.

    Args:
        graph: DiGraph instance.
        weighted: If True, entry [i, j] is the summed weight of edges i -> j;
            otherwise it is the number of parallel edges i -> j.

    Returns:
        (n, n) numpy array.

    Example:
        >>> G = DiGraph()
        >>> a, b = G.add_node(), G.add_node()
        >>> _ = G.add_edge(a, b, 2.5)
        >>> adjacency_matrix(G).tolist()
        [[0.0, 1.0], [0.0, 0.0]]
    """
    n = graph.node_count
    matrix = np.zeros((n, n))
    for edge in graph.edges():
        matrix[edge.source, edge.target] += edge.weight if weighted else 1
    return matrix
