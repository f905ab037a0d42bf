"""digraph - classical algorithms over directed graphs."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_forest,
    assert_partition,
    assert_valid_graph,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    validate,
)
from .errors import InvalidHandle, NoPath

# Graph algorithms
from .graphs import (
    ComponentColorizer,
    DiGraph,
    DisjointSet,
    DominatorAnnotator,
    DominatorTree,
    DotProcessor,
    Edge,
    EdgeHighlighter,
    GraphBuilder,
    PathHighlighter,
    SpanningForest,
    adjacency_matrix,
    astar,
    bfs,
    bipartition,
    component_map,
    condensation,
    could_be_isomorphic,
    dfs,
    digraph,
    dijkstra,
    dijkstra_path,
    erdos_renyi,
    find_isomorphism,
    immediate_dominators,
    is_bipartite,
    is_isomorphic,
    iter_bfs,
    iter_dfs,
    iter_dfs_postorder,
    kruskal,
    path_cost,
    random_graph,
    reconstruct_path,
    strongly_connected_components,
    to_dot,
    watts_strogatz,
    write_dot,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Errors
    "InvalidHandle",
    "NoPath",
    # Container and construction
    "DiGraph",
    "Edge",
    "GraphBuilder",
    "digraph",
    # Traversal
    "bfs",
    "dfs",
    "iter_bfs",
    "iter_dfs",
    "iter_dfs_postorder",
    # Algorithms
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
    # Visualisation
    "to_dot",
    "write_dot",
    "DotProcessor",
    "EdgeHighlighter",
    "PathHighlighter",
    "DominatorAnnotator",
    "ComponentColorizer",
    # Generators
    "erdos_renyi",
    "watts_strogatz",
    "random_graph",
    # Utilities
    "reconstruct_path",
    "path_cost",
    "adjacency_matrix",
    # Diagnostics and logging
    "assert_valid_graph",
    "assert_partition",
    "assert_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "validate",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
