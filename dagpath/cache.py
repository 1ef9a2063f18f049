"""Memoization cache for longest-path lengths.

Entries are written once per vertex, only after that vertex's computation has
finished. Vertices still on the active path are never present.
"""

from __future__ import annotations

from typing import Dict, Optional

from dagpath.model import Vertex, VertexID


class PathCache:
    """Mapping from vertex identity to its settled longest-path length.

    The cache belongs to one graph session. Vertex identifiers are not unique
    across independently built graphs, so reuse on an unrelated graph requires
    ``clear()`` first.
    """

    def __init__(self) -> None:
        self._lengths: Dict[Vertex, int] = {}

    def get(self, vertex: Vertex) -> Optional[int]:
        """Return the cached length for ``vertex`` or None when unsettled."""
        return self._lengths.get(vertex)

    def store(self, vertex: Vertex, length: int) -> int:
        """Record ``length`` for ``vertex`` unless an entry already exists.

        Args:
            vertex: Settled vertex.
            length: Longest-path length in edges.

        Returns:
            The value held by the cache after the call (first write wins).

        Raises:
            ValueError: If ``length`` is negative.
        """
        if length < 0:
            raise ValueError(f"Path length must be non-negative, got {length}")
        return self._lengths.setdefault(vertex, length)

    def clear(self) -> None:
        """Drop every entry."""
        self._lengths.clear()

    def snapshot(self) -> Dict[VertexID, int]:
        """Return a copy of the cache keyed by vertex identifier."""
        return {vertex.id: length for vertex, length in self._lengths.items()}

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._lengths

    def __len__(self) -> int:
        return len(self._lengths)

    def __repr__(self) -> str:
        return f"PathCache(size={len(self._lengths)})"
