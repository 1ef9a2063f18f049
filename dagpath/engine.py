"""Longest directed path by edge count, with memoization and cycle detection.

``PathEngine.longest_path`` runs a depth-first search from a start vertex.
Settled results are memoized in a ``PathCache`` shared across calls on the
same engine. The set of vertices on the current descent (the active path) is
checked before the cache, so re-entering an active vertex raises
``CycleDetectedError`` instead of reading a result that does not exist yet.

Example:
    >>> from dagpath import PathEngine, build_vertices
    >>> vertices = build_vertices([(1, 2), (2, 3)])
    >>> PathEngine().longest_path(vertices[1])
    2
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Set

from dagpath.cache import PathCache
from dagpath.config import DEFAULT_CONFIG, EngineConfig, TraversalMode
from dagpath.exceptions import CycleDetectedError, InvalidArgumentError
from dagpath.logging import get_logger
from dagpath.model import Vertex, VertexID

logger = get_logger(__name__)


@dataclass
class _Frame:
    """One vertex on the explicit traversal stack."""

    vertex: Vertex
    children: Iterator[Vertex]
    best: int = 0


class PathEngine:
    """Compute longest path lengths over one graph session.

    Create one engine per logical graph. ``clear_cache()`` resets it for reuse
    on an unrelated graph. Calls on one engine are serialized by an internal
    lock, so a shared engine may be used from several threads.

    Args:
        config: Traversal configuration (defaults to ``DEFAULT_CONFIG``).
        cache: Cache to use (defaults to a new, empty ``PathCache``).
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        cache: Optional[PathCache] = None,
    ) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self._cache = cache if cache is not None else PathCache()
        self._lock = threading.RLock()

    @property
    def cache(self) -> PathCache:
        """Memoization cache backing this engine."""
        return self._cache

    def longest_path(self, start: Optional[Vertex]) -> int:
        """Return the maximum number of edges on any directed path from ``start``.

        Args:
            start: Vertex to start from.

        Returns:
            Non-negative path length; 0 when ``start`` has no outgoing edges.

        Raises:
            InvalidArgumentError: If ``start`` is None.
            CycleDetectedError: If a cycle is reachable from ``start``. Vertices
                left on the active path are not cached.
        """
        if start is None:
            raise InvalidArgumentError("Start vertex cannot be None.")

        with self._lock:
            if self.config.mode is TraversalMode.ITERATIVE:
                length = self._walk_iterative(start)
            else:
                self._ensure_recursion_limit()
                length = self._walk(start, set())
            logger.debug(
                f"Longest path from vertex {start.id}: {length} "
                f"(cached vertices: {len(self._cache)})"
            )
            return length

    def longest_paths(self, vertices: Iterable[Vertex]) -> Dict[VertexID, int]:
        """Compute ``longest_path`` for each vertex in order on the shared cache.

        Args:
            vertices: Start vertices.

        Returns:
            Mapping of vertex id to path length, in input order.

        Raises:
            InvalidArgumentError: If any vertex is None.
            CycleDetectedError: On the first cycle found; later vertices are
                not processed.
        """
        results: Dict[VertexID, int] = {}
        with self._lock:
            for vertex in vertices:
                length = self.longest_path(vertex)
                results[vertex.id] = length
        return results

    def clear_cache(self) -> None:
        """Drop all memoized results."""
        with self._lock:
            size = len(self._cache)
            self._cache.clear()
        logger.debug(f"Cleared path cache ({size} entries)")

    def _walk(self, vertex: Vertex, active: Set[Vertex]) -> int:
        if vertex in active:
            logger.debug(f"Cycle re-entered at vertex {vertex.id}")
            raise CycleDetectedError(vertex.id)

        cached = self._cache.get(vertex)
        if cached is not None:
            return cached

        active.add(vertex)
        best = 0
        for neighbor in vertex.targets():
            best = max(best, self._walk(neighbor, active) + 1)
        # Backtrack: reaching this vertex again via another branch is not a cycle
        active.remove(vertex)

        return self._cache.store(vertex, best)

    def _walk_iterative(self, start: Vertex) -> int:
        active: Set[Vertex] = set()
        stack: List[_Frame] = []

        def enter(vertex: Vertex) -> Optional[int]:
            if vertex in active:
                logger.debug(f"Cycle re-entered at vertex {vertex.id}")
                raise CycleDetectedError(vertex.id)
            cached = self._cache.get(vertex)
            if cached is not None:
                return cached
            active.add(vertex)
            stack.append(_Frame(vertex, vertex.targets()))
            return None

        settled = enter(start)
        if settled is not None:
            return settled

        while stack:
            frame = stack[-1]
            child = next(frame.children, None)
            if child is not None:
                length = enter(child)
                if length is not None:
                    frame.best = max(frame.best, length + 1)
                continue

            stack.pop()
            active.remove(frame.vertex)
            settled = self._cache.store(frame.vertex, frame.best)
            if stack:
                parent = stack[-1]
                parent.best = max(parent.best, settled + 1)

        assert settled is not None
        return settled

    def _ensure_recursion_limit(self) -> None:
        limit = self.config.recursion_limit
        if limit is not None and sys.getrecursionlimit() < limit:
            logger.debug(f"Raising recursion limit to {limit}")
            sys.setrecursionlimit(limit)
