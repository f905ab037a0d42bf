"""
Graph isomorphism for small directed multigraphs.

``could_be_isomorphic`` compares cheap invariants (node and edge counts,
degree sequences). ``is_isomorphic`` runs a backtracking search that maps
nodes in decreasing-degree order and checks edge multiplicities against
the already-mapped nodes at every step. Payloads and weights are ignored.

The search is exponential in the worst case and meant for small graphs.
"""

from typing import Dict, List, Set, Tuple

import numpy as np

from .core import DiGraph
from .utils import adjacency_matrix


def _signatures(matrix: np.ndarray) -> List[Tuple[int, int, int]]:
    out_deg = matrix.sum(axis=1).astype(int)
    in_deg = matrix.sum(axis=0).astype(int)
    loops = np.diag(matrix).astype(int)
    return [(int(o), int(i), int(s)) for o, i, s in zip(out_deg, in_deg, loops)]


def could_be_isomorphic(lhs: DiGraph, rhs: DiGraph) -> bool:
    """
    Necessary condition for isomorphism.

    Returns:
        False if node counts, edge counts or the multisets of
        (out-degree, in-degree, self-loops) differ; True otherwise.
    """
    if lhs.node_count != rhs.node_count or lhs.edge_count != rhs.edge_count:
        return False
    return sorted(_signatures(adjacency_matrix(lhs))) == sorted(
        _signatures(adjacency_matrix(rhs))
    )


def find_isomorphism(lhs: DiGraph, rhs: DiGraph) -> Dict[int, int]:
    """
    Find a node bijection lhs -> rhs preserving edge multiplicities.

    Returns:
        Dictionary mapping lhs handles to rhs handles, or an empty dict if
        the graphs are not isomorphic (two empty graphs also give {}).
    """
    if not could_be_isomorphic(lhs, rhs):
        return {}

    a = adjacency_matrix(lhs)
    b = adjacency_matrix(rhs)
    sig_a = _signatures(a)
    sig_b = _signatures(b)

    order = sorted(lhs.nodes(), key=lambda n: (-(sig_a[n][0] + sig_a[n][1]), n))
    candidates = {u: [v for v in rhs.nodes() if sig_b[v] == sig_a[u]] for u in order}

    mapping: Dict[int, int] = {}
    used: Set[int] = set()

    def consistent(u: int, v: int) -> bool:
        for x, y in mapping.items():
            if a[u, x] != b[v, y] or a[x, u] != b[y, v]:
                return False
        return True

    def extend(depth: int) -> bool:
        if depth == len(order):
            return True
        u = order[depth]
        for v in candidates[u]:
            if v in used or not consistent(u, v):
                continue
            mapping[u] = v
            used.add(v)
            if extend(depth + 1):
                return True
            del mapping[u]
            used.discard(v)
        return False

    return dict(mapping) if extend(0) else {}


def is_isomorphic(lhs: DiGraph, rhs: DiGraph) -> bool:
    """
    Check whether two graphs are isomorphic as directed multigraphs.

    Example:
        >>> G, H = DiGraph(), DiGraph()
        >>> g = [G.add_node() for _ in range(3)]; h = [H.add_node() for _ in range(3)]
        >>> _ = G.add_edge(g[0], g[1]); _ = G.add_edge(g[1], g[2])
        >>> _ = H.add_edge(h[2], h[0]); _ = H.add_edge(h[0], h[1])
        >>> is_isomorphic(G, H)
        True
    """
    if lhs.node_count == 0 and rhs.node_count == 0:
        return True
    return bool(find_isomorphism(lhs, rhs))
