"""Command-line interface for dagpath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from dagpath.config import EngineConfig, TraversalMode
from dagpath.engine import PathEngine
from dagpath.exceptions import CycleDetectedError, InvalidArgumentError
from dagpath.graph import load_graph_file, sample_dag
from dagpath.logging import get_logger, set_global_log_level
from dagpath.model import Vertex

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _find_vertex(vertices: List[Vertex], vertex_id: str) -> Optional[Vertex]:
    """Return the vertex whose id renders as ``vertex_id``, or None.

    Raises:
        ValueError: If several vertices render as ``vertex_id`` (e.g. ``1`` and
            ``"1"`` in one YAML file).
    """
    matches = [vertex for vertex in vertices if str(vertex.id) == vertex_id]
    if len(matches) > 1:
        ids = ", ".join(repr(vertex.id) for vertex in matches)
        raise ValueError(f"Ambiguous vertex id {vertex_id!r} matches: {ids}")
    return matches[0] if matches else None


def _load_vertices(graph_path: Optional[Path]) -> List[Vertex]:
    if graph_path is None:
        logger.info("Using built-in sample DAG")
        return sample_dag()
    logger.info(f"Loading graph from: {graph_path}")
    return list(load_graph_file(graph_path).values())


def _run(
    graph_path: Optional[Path],
    start: Optional[str],
    mode: TraversalMode,
    as_json: bool,
) -> None:
    """Compute longest paths and print them.

    Args:
        graph_path: YAML graph file; the sample DAG is used when None.
        start: Single start vertex id; every vertex is processed when None.
        mode: Traversal mechanism.
        as_json: Print a JSON object instead of text lines.
    """
    _start_time = perf_counter()

    try:
        vertices = _load_vertices(graph_path)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph_path}")
        print(f"❌ ERROR: Graph file not found: {graph_path}")
        sys.exit(1)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load graph: {e}")
        print(f"❌ ERROR: Failed to load graph: {e}")
        sys.exit(1)

    engine = PathEngine(EngineConfig(mode=mode))

    try:
        if start is not None:
            start_vertex = _find_vertex(vertices, start)
            if start_vertex is None:
                logger.debug(f"No vertex with id {start!r}")
            results = {start: engine.longest_path(start_vertex)}
        else:
            results = engine.longest_paths(vertices)
    except CycleDetectedError as e:
        logger.error(f"Cycle detected: {e}")
        print(f"\nError processing the graph: {e}", file=sys.stderr)
        print(
            "Further calculations on this graph are stopped due to detected cycle.",
            file=sys.stderr,
        )
        sys.exit(1)
    except InvalidArgumentError as e:
        logger.error(f"Invalid start vertex {start!r}: {e}")
        print(
            f"\nError during calculation: invalid start vertex {start!r}: {e}",
            file=sys.stderr,
        )
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid start vertex {start!r}: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    if as_json:
        print(json.dumps({str(k): v for k, v in results.items()}, indent=2))
    else:
        for vertex_id, length in results.items():
            print(f"Longest path from vertex {vertex_id}: {length}")

    _elapsed = perf_counter() - _start_time
    logger.info(
        f"Computed {len(results)} longest path(s) in {_format_duration(_elapsed)}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``dagpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="dagpath",
        description="Compute longest paths in directed acyclic graphs.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser(
        "run", help="Compute longest paths for a graph"
    )
    run_parser.add_argument(
        "graph",
        type=Path,
        nargs="?",
        default=None,
        help="Path to graph YAML (default: built-in sample DAG)",
    )
    run_parser.add_argument(
        "--start",
        "-s",
        default=None,
        help="Only compute the longest path from this vertex id",
    )
    run_parser.add_argument(
        "--mode",
        "-m",
        choices=[m.name.lower() for m in TraversalMode],
        default="recursive",
        help="Traversal mechanism (default: recursive)",
    )
    run_parser.add_argument(
        "--json", action="store_true", help="Print results as a JSON object"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run(
            graph_path=args.graph,
            start=args.start,
            mode=TraversalMode.from_string(args.mode),
            as_json=args.json,
        )


if __name__ == "__main__":
    main()
