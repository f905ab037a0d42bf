"""
Graph algorithms package for digraph.

This package provides classical algorithms over directed graphs:
- Graph container (DiGraph) with stable integer handles
- Traversal (lazy BFS, DFS pre-order and post-order)
- Shortest paths (Dijkstra, A*)
- Strongly connected components (Tarjan)
- Dominator trees (Cooper-Harvey-Kennedy)
- Union-find, bipartite check, minimum spanning forest (Kruskal)
- Isomorphism test, builder, DOT export, random generators

All algorithms are deterministic: neighbors are visited in edge-insertion
order and ties are broken by node or edge handle.
"""

from .bipartite import bipartition, is_bipartite
from .builder import GraphBuilder, digraph
from .core import DiGraph, Edge
from .disjoint import DisjointSet
from .dominators import DominatorTree, immediate_dominators
from .dot import (
    ComponentColorizer,
    DominatorAnnotator,
    DotProcessor,
    EdgeHighlighter,
    PathHighlighter,
    to_dot,
    write_dot,
)
from .generators import erdos_renyi, random_graph, watts_strogatz
from .isomorphism import could_be_isomorphic, find_isomorphism, is_isomorphic
from .mst import SpanningForest, kruskal
from .scc import component_map, condensation, strongly_connected_components
from .shortest import astar, dijkstra, dijkstra_path
from .traversal import bfs, dfs, iter_bfs, iter_dfs, iter_dfs_postorder
from .utils import adjacency_matrix, path_cost, reconstruct_path

__all__ = [
    "DiGraph",
    "Edge",
    "GraphBuilder",
    "digraph",
    "bfs",
    "dfs",
    "iter_bfs",
    "iter_dfs",
    "iter_dfs_postorder",
    "DisjointSet",
    "dijkstra",
    "dijkstra_path",
    "astar",
    "strongly_connected_components",
    "component_map",
    "condensation",
    "DominatorTree",
    "immediate_dominators",
    "is_bipartite",
    "bipartition",
    "kruskal",
    "SpanningForest",
    "could_be_isomorphic",
    "find_isomorphism",
    "is_isomorphic",
    "to_dot",
    "write_dot",
    "DotProcessor",
    "EdgeHighlighter",
    "PathHighlighter",
    "DominatorAnnotator",
    "ComponentColorizer",
    "erdos_renyi",
    "watts_strogatz",
    "random_graph",
    "reconstruct_path",
    "path_cost",
    "adjacency_matrix",
]

# Example usage:
# from digraph.graphs import GraphBuilder, dijkstra, reconstruct_path
#
# b = GraphBuilder().edge("A", "B", 1.0).edge("B", "C", 2.0)
# G = b.build()
# dist, parent = dijkstra(G, b.handle("A"))
# path = reconstruct_path(parent, b.handle("C"))  # [0, 1, 2]
