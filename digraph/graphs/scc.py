"""
Strongly connected components: Tarjan's algorithm.

A single depth-first pass assigns every node a discovery index and a
low-link value. A node whose low-link equals its own index is the root of
a component; the nodes stacked above it (inclusive) are popped as that
component. The DFS uses an explicit stack of adjacency cursors, so deep
graphs do not hit the recursion limit.

References:
    - Tarjan, R. "Depth-First Search and Linear Graph Algorithms",
      SIAM Journal on Computing 1(2), 1972.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from ..diagnostics import validate
from ..logging import get_logger
from .core import DiGraph

logger = get_logger(__name__)


def strongly_connected_components(graph: DiGraph) -> List[Set[int]]:
    """
    Partition the nodes of a graph into strongly connected components.

    Components come out in reverse topological order of the condensation:
    every edge between two different components points from a component
    appearing later in the list to one appearing earlier. DFS roots are
    tried in handle order, so the result is deterministic.

    Args:
        graph: DiGraph to analyse.

    Returns:
        List of components, each a set of node handles. Isolated nodes
        and nodes with only a self-loop form singleton components.

    Complexity: O(V + E).

    Example:
        >>> G = DiGraph()
        >>> a, b, c = G.add_node(), G.add_node(), G.add_node()
        >>> _ = G.add_edge(a, b); _ = G.add_edge(b, a); _ = G.add_edge(b, c)
        >>> strongly_connected_components(G)
        [{2}, {0, 1}]
    """
    index: Dict[int, int] = {}
    low: Dict[int, int] = {}
    on_stack: Set[int] = set()
    stack: List[int] = []
    result: List[Set[int]] = []

    def discover(node: int) -> Tuple[int, Iterator[int]]:
        index[node] = low[node] = len(index)
        stack.append(node)
        on_stack.add(node)
        return node, iter(graph.successors(node))

    for root in graph.nodes():
        if root in index:
            continue

        work = [discover(root)]
        while work:
            u, cursor = work[-1]
            for v in cursor:
                if v not in index:
                    work.append(discover(v))
                    break
                if v in on_stack:
                    low[u] = min(low[u], index[v])
            else:
                work.pop()
                if work:
                    p = work[-1][0]
                    low[p] = min(low[p], low[u])

                if low[u] == index[u]:
                    component: Set[int] = set()
                    while True:
                        w = stack.pop()
                        on_stack.discard(w)
                        component.add(w)
                        if w == u:
                            break
                    result.append(component)

    logger.debug("%d strongly connected components over %d nodes", len(result), graph.node_count)
    validate("components", graph, result)
    return result


def component_map(components: Sequence[Set[int]]) -> Dict[int, int]:
    """
    Map every node to the index of its component.

    Args:
        components: Output of strongly_connected_components.

    Returns:
        Dictionary mapping node -> component index.
    """
    return {node: idx for idx, component in enumerate(components) for node in component}


def condensation(
    graph: DiGraph, components: Optional[Sequence[Set[int]]] = None
) -> Tuple[DiGraph, Dict[int, int]]:
    """
    Build the condensation DAG of a graph.

    Node ``i`` of the returned graph stands for ``components[i]`` and
    carries that component as a frozenset payload. There is one edge
    C1 -> C2 whenever some original edge leads from C1 to C2 (C1 != C2).

    Args:
        graph: DiGraph to condense.
        components: Precomputed components (computed if omitted).

    Returns:
        Tuple of (condensation DiGraph, node -> component index map).
    """
    if components is None:
        components = strongly_connected_components(graph)

    mapping = component_map(components)
    dag = DiGraph(multigraph=False)
    for component in components:
        dag.add_node(frozenset(component))

    for edge in graph.edges():
        src, dst = mapping[edge.source], mapping[edge.target]
        if src != dst:
            dag.add_edge(src, dst)

    return dag, mapping
