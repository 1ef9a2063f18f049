"""Error types raised by the longest-path engine."""

from __future__ import annotations

from typing import Hashable


class PathEngineError(Exception):
    """Base class for longest-path engine errors."""


class InvalidArgumentError(PathEngineError, ValueError):
    """Raised when the start vertex is absent."""


class CycleDetectedError(PathEngineError):
    """Raised when traversal re-enters a vertex on the active path.

    Attributes:
        vertex_id: Identifier of the vertex at which the cycle was re-entered.
    """

    def __init__(self, vertex_id: Hashable) -> None:
        self.vertex_id = vertex_id
        super().__init__(f"Cycle detected involving vertex: {vertex_id}")
