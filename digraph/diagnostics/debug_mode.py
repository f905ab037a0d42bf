"""Debug-mode result validation for digraph.

While debug mode is on, algorithms pass their results to ``validate``
together with a result kind, and the checker registered for that kind in
``_CHECKS`` inspects them:

- ``"graph"``: the container itself (``assert_valid_graph``)
- ``"components"``: a list of node sets that must partition the graph
- ``"forest"``: edge ids that must form an undirected forest

Debug mode starts from the DIGRAPH_DEBUG environment variable ("1",
"true", "yes" or "on") and can be switched at runtime.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator

from .core import assert_forest, assert_partition, assert_valid_graph

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_state = {"enabled": os.getenv("DIGRAPH_DEBUG", "0").strip().lower() in _TRUTHY}

_CHECKS: Dict[str, Callable[[Any, Any], None]] = {
    "graph": lambda graph, _: assert_valid_graph(graph),
    "components": lambda graph, parts: assert_partition(parts, graph.nodes()),
    "forest": assert_forest,
}


def is_debug_enabled() -> bool:
    return _state["enabled"]


def set_debug_enabled(enabled: bool) -> None:
    """Switch result validation on or off for the whole process."""
    _state["enabled"] = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch result validation, restoring the previous setting.

    Example
    -------
    >>> with debug_context(True):
    ...     forest = kruskal(graph)  # checked with assert_forest
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)


def validate(kind: str, graph: Any, result: Any = None) -> None:
    """
    Check an algorithm result against its invariant when debug mode is on.

    Parameters
    ----------
    kind:
        One of "graph", "components" or "forest".
    graph:
        The DiGraph the result was computed from.
    result:
        The result to check (ignored for "graph").

    Raises
    ------
    ValueError
        If ``kind`` is unknown (whatever the debug setting) or, in debug
        mode, if the result violates its invariant.
    """
    check = _CHECKS.get(kind)
    if check is None:
        raise ValueError(f"unknown result kind {kind!r}; expected one of {sorted(_CHECKS)}")
    if _state["enabled"]:
        check(graph, result)
