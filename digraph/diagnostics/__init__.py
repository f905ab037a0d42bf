"""Diagnostics and debugging utilities for digraph."""

from .core import (
    assert_forest,
    assert_partition,
    assert_valid_graph,
    is_partition,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    validate,
)

__all__ = [
    "assert_valid_graph",
    "assert_partition",
    "assert_forest",
    "is_partition",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "validate",
]
