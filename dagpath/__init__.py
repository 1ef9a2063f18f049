"""dagpath: longest directed paths with memoization and cycle detection.

Primary API:
    PathEngine - Memoized longest-path computation for one graph session
    Vertex, Edge - Graph primitives; vertices compare by identifier
    CycleDetectedError, InvalidArgumentError - Errors raised by the engine
    build_vertices(), from_networkx(), load_graph_yaml() - Graph construction

Example:
    from dagpath import PathEngine, build_vertices

    vertices = build_vertices([(1, 2), (2, 3), (1, 3)])
    engine = PathEngine()
    engine.longest_path(vertices[1])  # 2

    # Start over on an unrelated graph
    engine.clear_cache()
"""

from __future__ import annotations

from dagpath import cli, logging
from dagpath._version import __version__
from dagpath.cache import PathCache
from dagpath.config import DEFAULT_CONFIG, EngineConfig, TraversalMode
from dagpath.engine import PathEngine
from dagpath.exceptions import CycleDetectedError, InvalidArgumentError, PathEngineError
from dagpath.graph import (
    build_vertices,
    from_networkx,
    load_graph_file,
    load_graph_yaml,
    sample_dag,
    to_networkx,
)
from dagpath.model import Edge, Vertex

__all__ = [
    # Version
    "__version__",
    # Model
    "Vertex",
    "Edge",
    # Engine
    "PathEngine",
    "PathCache",
    "EngineConfig",
    "TraversalMode",
    "DEFAULT_CONFIG",
    # Errors
    "PathEngineError",
    "InvalidArgumentError",
    "CycleDetectedError",
    # Graph construction
    "build_vertices",
    "from_networkx",
    "to_networkx",
    "load_graph_yaml",
    "load_graph_file",
    "sample_dag",
    # Utilities
    "cli",
    "logging",
]
