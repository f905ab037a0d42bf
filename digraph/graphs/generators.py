"""
Random graph generators.

All generators draw from ``numpy.random.default_rng(seed)``; passing the
same integer seed (or an existing Generator in the same state) yields the
same graph. Node handles are 0..n-1 and, unless a ``payload`` callable is
given, each node's payload is its index.

References:
    - Erdős, P., Rényi, A. "On Random Graphs I" (1959).
    - Watts, D. J., Strogatz, S. H. "Collective dynamics of 'small-world'
      networks", Nature 393 (1998).
"""

from typing import Any, Callable, List, Optional, Union

import numpy as np

from ..logging import get_logger
from .core import DiGraph

logger = get_logger(__name__)

Seed = Union[None, int, np.random.Generator]
WeightFactory = Callable[[int, int], Any]
PayloadFactory = Callable[[int], Any]


def _populate(n: int, payload: Optional[PayloadFactory]) -> DiGraph:
    if n < 0:
        raise ValueError(f"Node count must be non-negative, got {n}")
    graph = DiGraph()
    for i in range(n):
        graph.add_node(payload(i) if payload else i)
    return graph


def _check_probability(name: str, value: float) -> None:
    if not (0 <= value <= 1):
        raise ValueError(f"{name} must be in [0, 1], got {value}")


def erdos_renyi(
    n: int,
    p: float,
    self_loops: bool = False,
    back_strict: bool = True,
    max_out: int = 0,
    max_in: int = 0,
    seed: Seed = None,
    weight: Optional[WeightFactory] = None,
    payload: Optional[PayloadFactory] = None,
) -> DiGraph:
    """
    Erdős–Rényi G(n, p) random directed graph.

    Every ordered pair (u, v) is considered once, row by row, and the edge
    u -> v is added with probability p.

    Args:
        n: Number of nodes.
        p: Edge probability.
        self_loops: If False, pairs (u, u) are skipped.
        back_strict: If True, u -> v is dropped when v -> u already exists,
            so the result has no 2-cycles.
        max_out: Cap on out-degree (0 = unbounded).
        max_in: Cap on in-degree (0 = unbounded).
        seed: Seed or numpy Generator.
        weight: Optional factory (u, v) -> edge weight (default 1).
        payload: Optional factory index -> node payload.

    Returns:
        A populated DiGraph.

    Raises:
        ValueError: If n is negative, p is outside [0, 1] or a cap is negative.
    """
    _check_probability("Edge probability", p)
    if max_out < 0 or max_in < 0:
        raise ValueError("Degree caps must be non-negative")

    rng = np.random.default_rng(seed)
    graph = _populate(n, payload)

    for u in range(n):
        for v in range(n):
            if max_out and graph.out_degree(u) >= max_out:
                break
            if max_in and graph.in_degree(v) >= max_in:
                continue
            if u == v and not self_loops:
                continue
            if rng.random() >= p:
                continue
            if back_strict and graph.has_edge(v, u):
                continue
            graph.add_edge(u, v, weight(u, v) if weight else 1)

    logger.debug("erdos_renyi(n=%d, p=%s) produced %d edges", n, p, graph.edge_count)
    return graph


def watts_strogatz(
    n: int,
    k: int,
    rewire_prob: float,
    seed: Seed = None,
    weight: Optional[WeightFactory] = None,
    payload: Optional[PayloadFactory] = None,
) -> DiGraph:
    """
    Watts–Strogatz small-world random directed graph.

    Nodes sit on a ring and each node links to its ``k // 2`` nearest
    neighbours on both sides. Each of those lattice edges keeps its target
    with probability ``1 - rewire_prob``; otherwise the target is replaced
    by a uniformly chosen node that is neither the source nor one of its
    lattice neighbours.

    Args:
        n: Number of nodes.
        k: Ring degree (neighbours per node, both sides together).
        rewire_prob: Probability of rewiring each lattice edge.
        seed: Seed or numpy Generator.
        weight: Optional factory (u, v) -> edge weight (default 1).
        payload: Optional factory index -> node payload.

    Returns:
        A populated DiGraph.

    Raises:
        ValueError: If rewire_prob is outside [0, 1], k is negative or
            n <= k // 2.
    """
    _check_probability("Rewiring probability", rewire_prob)
    if k < 0:
        raise ValueError(f"Ring degree must be non-negative, got {k}")
    half = k // 2
    if n <= half:
        raise ValueError(f"Node count {n} must be greater than k // 2 = {half}")

    rng = np.random.default_rng(seed)
    graph = _populate(n, payload)

    rewired = 0
    for u in range(n):
        lattice: List[int] = []
        for r in range(1, half + 1):
            for v in ((u - r) % n, (u + r) % n):
                if v != u and v not in lattice:
                    lattice.append(v)

        others = [v for v in range(n) if v != u and v not in lattice]
        for v in lattice:
            if others and rng.random() < rewire_prob:
                v = others[int(rng.integers(len(others)))]
                rewired += 1
            graph.add_edge(u, v, weight(u, v) if weight else 1)

    logger.debug("watts_strogatz(n=%d, k=%d) rewired %d of %d edges", n, k, rewired, graph.edge_count)
    return graph


def random_graph(
    n: int,
    max_out: int = 2,
    seed: Seed = None,
    weight: Optional[WeightFactory] = None,
    payload: Optional[PayloadFactory] = None,
) -> DiGraph:
    """
    Random graph where every node gets between 1 and ``max_out`` out-edges.

    Targets are uniform over all nodes, so self-loops and parallel edges
    may occur.

    Raises:
        ValueError: If n is negative or max_out < 1.
    """
    if max_out < 1:
        raise ValueError(f"max_out must be at least 1, got {max_out}")

    rng = np.random.default_rng(seed)
    graph = _populate(n, payload)

    for u in range(n):
        for _ in range(int(rng.integers(1, max_out + 1))):
            v = int(rng.integers(n))
            graph.add_edge(u, v, weight(u, v) if weight else 1)

    return graph
