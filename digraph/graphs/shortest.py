"""
Shortest path algorithms: Dijkstra and A*.

Both use a binary heap with lazy deletion: a node may sit in the heap
several times with different keys, and a popped entry whose distance no
longer matches the best known distance is discarded as stale instead of
using decrease-key.

Weights are read through an accessor ``weight(edge)`` (default
``edge.weight``). Any weight type supporting ``+`` and ``<`` works, with
``zero`` as the additive identity. Weights must be non-negative; results
for negative weights are unspecified.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
    - Hart, Nilsson, Raphael. "A Formal Basis for the Heuristic Determination
      of Minimum Cost Paths" (1968).
"""

import heapq
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..errors import NoPath
from ..logging import get_logger
from .core import DiGraph, Edge
from .utils import default_weight, reconstruct_path

logger = get_logger(__name__)

WeightFn = Callable[[Edge], Any]
Heuristic = Callable[[int], Any]


def dijkstra(
    graph: DiGraph,
    source: int,
    weight: Optional[WeightFn] = None,
    zero: Any = 0,
) -> Tuple[Dict[int, Any], Dict[int, Optional[int]]]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Computes shortest distances from source to every reachable node in a
    graph with non-negative edge weights.

    Args:
        graph: DiGraph to search.
        source: Source node.
        weight: Optional accessor mapping an Edge to its weight.
        zero: Distance of the source (additive identity of the weight type).

    Returns:
        Tuple of:
        - dist: Dictionary mapping node -> shortest distance from source
        - parent: Dictionary mapping node -> previous node on a shortest
          path (None for the source)
        Unreachable nodes are absent from both maps.

    Raises:
        InvalidHandle: If source is not in graph.

    Complexity: O(E log E) using a binary heap with lazy deletion.

    Example:
        >>> G = DiGraph()
        >>> a, b, c = G.add_node(), G.add_node(), G.add_node()
        >>> _ = G.add_edge(a, b, 1.0); _ = G.add_edge(b, c, 2.0)
        >>> dist, parent = dijkstra(G, a)
        >>> dist[c]
        3.0
    """
    weight = weight or default_weight
    source = graph.check_node(source)

    dist: Dict[int, Any] = {source: zero}
    parent: Dict[int, Optional[int]] = {source: None}

    # (distance, node); equal distances pop in handle order
    pq: List[Tuple[Any, int]] = [(zero, source)]
    stale = 0

    while pq:
        d, u = heapq.heappop(pq)

        if dist[u] < d:
            stale += 1
            continue

        for edge, v in graph.neighbors(u):
            new_dist = d + weight(edge)
            if v not in dist or new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                heapq.heappush(pq, (new_dist, v))

    logger.debug(
        "dijkstra from %d reached %d of %d nodes (%d stale pops)",
        source, len(dist), graph.node_count, stale,
    )
    return dist, parent


def _best_first(
    graph: DiGraph,
    source: int,
    goal: int,
    heuristic: Heuristic,
    weight: WeightFn,
    zero: Any,
) -> Tuple[List[int], Any]:
    source = graph.check_node(source)
    goal = graph.check_node(goal)

    g: Dict[int, Any] = {source: zero}
    parent: Dict[int, Optional[int]] = {source: None}

    # (estimated total, node, cost so far)
    pq: List[Tuple[Any, int, Any]] = [(zero + heuristic(source), source, zero)]
    expanded = 0

    while pq:
        _, u, cost = heapq.heappop(pq)

        if g[u] < cost:
            continue

        if u == goal:
            logger.debug("path %d -> %d found after %d expansions", source, goal, expanded)
            return reconstruct_path(parent, goal), cost

        expanded += 1
        for edge, v in graph.neighbors(u):
            new_cost = cost + weight(edge)
            if v not in g or new_cost < g[v]:
                g[v] = new_cost
                parent[v] = u
                heapq.heappush(pq, (new_cost + heuristic(v), v, new_cost))

    logger.debug("no path %d -> %d after %d expansions", source, goal, expanded)
    raise NoPath(source, goal)


def astar(
    graph: DiGraph,
    source: int,
    goal: int,
    heuristic: Heuristic,
    weight: Optional[WeightFn] = None,
    zero: Any = 0,
) -> Tuple[List[int], Any]:
    """
    A* search for a shortest path from source to goal.

    Entries are prioritised by cost-so-far plus ``heuristic(node)``. The
    search stops as soon as the goal is popped. With an admissible
    heuristic (never overestimating the remaining cost) the returned path
    is a shortest one; a node is expanded again only when a cheaper route
    to it turns up, which never happens for a consistent heuristic.

    Args:
        graph: DiGraph to search.
        source: Start node.
        goal: Goal node.
        heuristic: Pure function node -> non-negative estimate of the
            remaining cost to goal.
        weight: Optional accessor mapping an Edge to its weight.
        zero: Additive identity of the weight type.

    Returns:
        Tuple of (path from source to goal inclusive, total cost).

    Raises:
        InvalidHandle: If source or goal is not in graph.
        NoPath: If goal is unreachable from source.

    Complexity: O(E log E) in the worst case (heuristic == 0 is Dijkstra).
    """
    return _best_first(graph, source, goal, heuristic, weight or default_weight, zero)


def dijkstra_path(
    graph: DiGraph,
    source: int,
    target: int,
    weight: Optional[WeightFn] = None,
    zero: Any = 0,
) -> Tuple[List[int], Any]:
    """
    Shortest path between two nodes, stopping once target is settled.

    Returns:
        Tuple of (path from source to target inclusive, total cost).

    Raises:
        InvalidHandle: If source or target is not in graph.
        NoPath: If target is unreachable from source.
    """
    return _best_first(graph, source, target, lambda _: zero, weight or default_weight, zero)
