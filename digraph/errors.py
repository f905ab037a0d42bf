"""Exception types raised by digraph."""

from __future__ import annotations

from typing import Any, Optional


class InvalidHandle(KeyError):
    """A node or edge handle that is not present in the container."""

    def __init__(self, handle: Any, kind: str = "node") -> None:
        super().__init__(handle)
        self.handle = handle
        self.kind = kind

    def __str__(self) -> str:
        return f"{self.kind} handle {self.handle!r} is not in the graph"


class NoPath(LookupError):
    """No route exists between a source and a target node."""

    def __init__(self, source: Any, target: Any, message: Optional[str] = None) -> None:
        super().__init__(message or f"no path from node {source!r} to node {target!r}")
        self.source = source
        self.target = target
