"""
Graph traversal algorithms: BFS and DFS.

The ``iter_*`` functions are lazy: they produce node handles one at a time
from an explicit frontier (a deque for BFS, a stack of adjacency cursors
for DFS), so consumers may stop early and deep graphs never hit the
interpreter recursion limit. Neighbors are visited in adjacency order,
which is edge-insertion order.

``bfs`` and ``dfs`` consume those iterators and return the visitation
order together with distance / parent maps.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .core import DiGraph


def _roots(graph: DiGraph, root: int, restart: bool) -> Iterator[int]:
    yield root
    if restart:
        yield from graph.nodes()


def _bfs(graph: DiGraph, root: int, restart: bool) -> Iterator[Tuple[int, Optional[int], int]]:
    visited: Set[int] = set()

    for start in _roots(graph, root, restart):
        if start in visited:
            continue
        visited.add(start)
        queue = deque([(start, None, 0)])

        while queue:
            item = queue.popleft()
            yield item
            u, _, depth = item
            for v in graph.successors(u):
                if v not in visited:
                    visited.add(v)
                    queue.append((v, u, depth + 1))


def _dfs(graph: DiGraph, root: int, restart: bool) -> Iterator[Tuple[int, Optional[int], bool]]:
    """Yield (node, parent, finished) events; finished=False is discovery."""
    visited: Set[int] = set()

    for start in _roots(graph, root, restart):
        if start in visited:
            continue
        visited.add(start)
        yield start, None, False
        # Each frame holds a node and a cursor over its successors
        stack: List[Tuple[int, Iterator[int]]] = [(start, iter(graph.successors(start)))]

        while stack:
            u, cursor = stack[-1]
            for v in cursor:
                if v not in visited:
                    visited.add(v)
                    yield v, u, False
                    stack.append((v, iter(graph.successors(v))))
                    break
            else:
                stack.pop()
                yield u, (stack[-1][0] if stack else None), True


def iter_bfs(graph: DiGraph, root: int, restart: bool = False) -> Iterator[int]:
    """
    Lazily iterate nodes in breadth-first order from ``root``.

    Args:
        graph: Graph to traverse.
        root: Node to start from.
        restart: If True, continue from every unvisited node (in handle
            order) once the root's reachable set is exhausted.

    Returns:
        Iterator over node handles in non-decreasing hop distance from root.

    Raises:
        InvalidHandle: If root is not in graph (raised immediately).

    Complexity: O(V + E) for a full iteration.
    """
    root = graph.check_node(root)
    return (node for node, _, _ in _bfs(graph, root, restart))


def iter_dfs(graph: DiGraph, root: int, restart: bool = False) -> Iterator[int]:
    """
    Lazily iterate nodes in depth-first pre-order from ``root``.

    A node is produced when it is first discovered, before its children.
    The order matches a recursive DFS that follows adjacency order.

    Raises:
        InvalidHandle: If root is not in graph (raised immediately).

    Complexity: O(V + E) for a full iteration.
    """
    root = graph.check_node(root)
    return (node for node, _, finished in _dfs(graph, root, restart) if not finished)


def iter_dfs_postorder(graph: DiGraph, root: int, restart: bool = False) -> Iterator[int]:
    """
    Lazily iterate nodes in depth-first post-order from ``root``.

    A node is produced only after every descendant discovered through it
    has been fully explored; the root is therefore produced last (per
    restart tree when ``restart`` is True).

    Raises:
        InvalidHandle: If root is not in graph (raised immediately).

    Complexity: O(V + E) for a full iteration.
    """
    root = graph.check_node(root)
    return (node for node, _, finished in _dfs(graph, root, restart) if finished)


def bfs(
    graph: DiGraph, root: int
) -> Tuple[List[int], Dict[int, int], Dict[int, Optional[int]]]:
    """
    Breadth-first search from a root node.

    Returns nodes in BFS visitation order, hop distances from root, and a
    parent map for path reconstruction. Only reachable nodes appear.

    Args:
        graph: Graph to traverse.
        root: Node to start BFS from.

    Returns:
        Tuple of:
        - order: List of nodes in BFS visitation order
        - distance: Dictionary mapping node -> hop distance from root
        - parent: Dictionary mapping node -> BFS-tree parent (None for root)

    Raises:
        InvalidHandle: If root is not in graph.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = DiGraph()
        >>> a, b, c = G.add_node("A"), G.add_node("B"), G.add_node("C")
        >>> _ = G.add_edge(a, b); _ = G.add_edge(a, c)
        >>> order, dist, parent = bfs(G, a)
        >>> order
        [0, 1, 2]
        >>> dist[b]
        1
    """
    root = graph.check_node(root)

    order: List[int] = []
    distance: Dict[int, int] = {}
    parent: Dict[int, Optional[int]] = {}

    for node, prev, depth in _bfs(graph, root, restart=False):
        order.append(node)
        distance[node] = depth
        parent[node] = prev

    return order, distance, parent


def dfs(
    graph: DiGraph, root: int
) -> Tuple[List[int], List[int], Dict[int, Optional[int]]]:
    """
    Depth-first search (iterative, explicit stack) from a root node.

    Returns pre-order and post-order visitation lists, plus parent map.

    Args:
        graph: Graph to traverse.
        root: Node to start DFS from.

    Returns:
        Tuple of:
        - preorder: List of nodes in pre-order (when first discovered)
        - postorder: List of nodes in post-order (when finished exploring)
        - parent: Dictionary mapping node -> DFS-tree parent (None for root)

    Raises:
        InvalidHandle: If root is not in graph.

    Complexity: O(V + E) where V is vertices and E is edges.
    """
    root = graph.check_node(root)

    preorder: List[int] = []
    postorder: List[int] = []
    parent: Dict[int, Optional[int]] = {}

    for node, prev, finished in _dfs(graph, root, restart=False):
        if finished:
            postorder.append(node)
        else:
            preorder.append(node)
            parent[node] = prev

    return preorder, postorder, parent
