"""
Bipartiteness check by BFS two-colouring.

Bipartiteness is a property of the underlying undirected graph, so both
outgoing and incoming edges are followed. A self-loop joins a node to
itself and makes the graph non-bipartite.
"""

from collections import deque
from typing import Dict, Optional, Set, Tuple

from ..logging import get_logger
from .core import DiGraph

logger = get_logger(__name__)


def _two_colour(graph: DiGraph) -> Optional[Dict[int, int]]:
    colour: Dict[int, int] = {}

    for start in graph.nodes():
        if start in colour:
            continue
        colour[start] = 0
        queue = deque([start])

        while queue:
            u = queue.popleft()
            for v in graph.successors(u) + graph.predecessors(u):
                if v not in colour:
                    colour[v] = 1 - colour[u]
                    queue.append(v)
                elif colour[v] == colour[u]:
                    logger.debug("odd cycle through edge %d - %d", u, v)
                    return None

    return colour


def is_bipartite(graph: DiGraph) -> bool:
    """
    Check whether the graph, with edges taken as undirected, is bipartite.

    Args:
        graph: DiGraph to check.

    Returns:
        True if the nodes can be two-coloured so that every edge joins
        different colours. The empty graph is bipartite.

    Complexity: O(V + E); stops at the first conflicting edge.

    Example:
        >>> G = DiGraph()
        >>> n = [G.add_node() for _ in range(4)]
        >>> for i in range(4):
        ...     _ = G.add_edge(n[i], n[(i + 1) % 4])
        >>> is_bipartite(G)
        True
    """
    return _two_colour(graph) is not None


def bipartition(graph: DiGraph) -> Optional[Tuple[Set[int], Set[int]]]:
    """
    Split the nodes into two independent sets.

    Each connected component is coloured starting from its lowest handle,
    which goes to the first set.

    Returns:
        Tuple (first, second) of node sets, or None if the graph is not
        bipartite.
    """
    colour = _two_colour(graph)
    if colour is None:
        return None
    first = {node for node, c in colour.items() if c == 0}
    second = {node for node, c in colour.items() if c == 1}
    return first, second
