"""
Dominator tree: the Cooper-Harvey-Kennedy iterative algorithm.

Nodes reachable from the root are numbered in DFS post-order. The
algorithm then sweeps the nodes in reverse post-order (skipping the root),
setting each node's immediate dominator to the "intersection" of its
already-processed predecessors, and repeats full sweeps until one of them
changes nothing. The intersection walks two fingers up the current tree,
always advancing the one with the smaller post-order number.

References:
    - Cooper, Harvey, Kennedy. "A Simple, Fast Dominance Algorithm",
      Software Practice & Experience, 2001.
"""

from typing import Dict, List, Optional, Set

from ..logging import get_logger
from .core import DiGraph
from .traversal import iter_dfs_postorder

logger = get_logger(__name__)


class DominatorTree:
    """
    Immediate-dominator relation of the nodes reachable from a root.

    Attributes:
        root: Entry node (None for a tree built over an empty graph).
        idom: Dictionary mapping every reachable node except the root to its
            immediate dominator.
        order: Reachable nodes in reverse post-order (root first).
    """

    def __init__(self, root: Optional[int], idom: Dict[int, int], order: List[int]):
        self.root = root
        self.idom = idom
        self.order = order
        self._reachable: Set[int] = set(order)
        self._children: Dict[int, List[int]] = {node: [] for node in order}
        for node in order:
            if node in idom:
                self._children[idom[node]].append(node)

    @classmethod
    def build(cls, graph: DiGraph, root: Optional[int] = None) -> "DominatorTree":
        """
        Compute the dominator tree of ``graph`` rooted at ``root``.

        Args:
            graph: DiGraph to analyse.
            root: Entry node; defaults to the first node of the graph.

        Returns:
            A DominatorTree. Nodes unreachable from root are left out.

        Raises:
            InvalidHandle: If root is not in graph.

        Complexity: O(passes * E); a small number of passes for reducible
        graphs.
        """
        if root is None:
            root = graph.start
            if root is None:
                return cls(None, {}, [])
        root = graph.check_node(root)

        postorder = list(iter_dfs_postorder(graph, root))
        number = {node: i for i, node in enumerate(postorder)}
        order = postorder[::-1]
        preds = {
            node: [p for p in graph.predecessors(node) if p in number] for node in order
        }

        doms: Dict[int, int] = {root: root}

        def intersect(finger1: int, finger2: int) -> int:
            while finger1 != finger2:
                while number[finger1] < number[finger2]:
                    finger1 = doms[finger1]
                while number[finger2] < number[finger1]:
                    finger2 = doms[finger2]
            return finger1

        passes = 0
        changed = True
        while changed:
            changed = False
            passes += 1
            for node in order[1:]:
                new_idom: Optional[int] = None
                for p in preds[node]:
                    if p in doms:
                        new_idom = p if new_idom is None else intersect(p, new_idom)
                # The DFS parent precedes node in reverse post-order
                if new_idom is None:
                    raise RuntimeError(f"node {node} has no processed predecessor")
                if doms.get(node) != new_idom:
                    doms[node] = new_idom
                    changed = True

        logger.debug("dominators of %d reachable nodes settled in %d passes", len(order), passes)
        del doms[root]
        return cls(root, doms, order)

    @property
    def reachable(self) -> List[int]:
        return list(self.order)

    def immediate_dominator(self, node: int) -> Optional[int]:
        """The immediate dominator of node, or None for the root and unreachable nodes."""
        return self.idom.get(node)

    def dominators(self, node: int) -> List[int]:
        """
        All dominators of node, from node itself up to the root.

        Returns:
            List starting with node and ending with the root; empty if node
            is unreachable.
        """
        if node not in self._reachable:
            return []
        chain = [node]
        while node in self.idom:
            node = self.idom[node]
            chain.append(node)
        return chain

    def dominates(self, a: int, b: int) -> bool:
        """True if every path from the root to b passes through a (reflexive)."""
        return a in self.dominators(b)

    def children(self, node: int) -> List[int]:
        """Nodes immediately dominated by node, in reverse post-order."""
        return list(self._children.get(node, []))

    def frontier(self, graph: DiGraph) -> Dict[int, Set[int]]:
        """
        Dominance frontier of every reachable node.

        The frontier of n holds the nodes m where n dominates a predecessor
        of m but does not strictly dominate m.
        """
        result: Dict[int, Set[int]] = {node: set() for node in self.order}
        for node in self.order:
            preds = [p for p in graph.predecessors(node) if p in self._reachable]
            if len(preds) < 2:
                continue
            for p in preds:
                runner = p
                while runner != self.idom.get(node):
                    result[runner].add(node)
                    if runner not in self.idom:
                        break
                    runner = self.idom[runner]
        return result

    def __contains__(self, node: object) -> bool:
        return node in self._reachable

    def __len__(self) -> int:
        return len(self.order)

    def __repr__(self) -> str:
        return f"DominatorTree(root={self.root}, nodes={len(self.order)})"


def immediate_dominators(graph: DiGraph, root: Optional[int] = None) -> Dict[int, int]:
    """
    Immediate-dominator map of the nodes reachable from root.

    Every reachable node except root maps to exactly one immediate
    dominator; unreachable nodes are absent.

    Example:
        >>> G = DiGraph()
        >>> r, a, b, c = (G.add_node() for _ in range(4))
        >>> for u, v in [(r, a), (r, b), (a, c), (b, c)]:
        ...     _ = G.add_edge(u, v)
        >>> immediate_dominators(G, r) == {a: r, b: r, c: r}
        True
    """
    return dict(DominatorTree.build(graph, root).idom)
