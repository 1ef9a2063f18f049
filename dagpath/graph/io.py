"""YAML graph loading.

Accepted document shape::

    nodes: [1, 2, 3, 4]        # optional; isolated vertices and ordering
    edges:
      - [1, 2]                 # pair form
      - {source: 3, target: 4} # mapping form
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from dagpath.graph.build import build_vertices
from dagpath.model import Vertex, VertexID


def _parse_edge(entry: Any, index: int) -> Tuple[VertexID, VertexID]:
    if isinstance(entry, dict):
        if "source" not in entry or "target" not in entry:
            raise ValueError(
                f"Edge #{index} must include 'source' and 'target': {entry!r}"
            )
        unknown = set(entry) - {"source", "target"}
        if unknown:
            raise ValueError(
                f"Unrecognized key(s) {sorted(map(str, unknown))} in edge #{index}"
            )
        return entry["source"], entry["target"]
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        return entry[0], entry[1]
    raise ValueError(
        f"Edge #{index} must be a [source, target] pair or a mapping: {entry!r}"
    )


def _check_hashable(vertex_id: Any) -> None:
    try:
        hash(vertex_id)
    except TypeError:
        raise ValueError(f"Vertex id must be a scalar value: {vertex_id!r}") from None


def load_graph_yaml(yaml_str: str) -> Dict[VertexID, Vertex]:
    """Parse a YAML graph document into vertices.

    Args:
        yaml_str: YAML text.

    Returns:
        Dict mapping identifier to Vertex.

    Raises:
        ValueError: If the document is not shaped as described above.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    unknown = set(data) - {"nodes", "edges"}
    if unknown:
        raise ValueError(f"Unrecognized top-level key(s): {sorted(map(str, unknown))}")

    nodes = data.get("nodes") or []
    if not isinstance(nodes, list):
        raise ValueError("'nodes' must be a list")
    raw_edges = data.get("edges") or []
    if not isinstance(raw_edges, list):
        raise ValueError("'edges' must be a list")

    edges: List[Tuple[VertexID, VertexID]] = [
        _parse_edge(entry, i) for i, entry in enumerate(raw_edges)
    ]
    for vertex_id in nodes:
        _check_hashable(vertex_id)
    for src, dst in edges:
        _check_hashable(src)
        _check_hashable(dst)

    return build_vertices(edges, nodes=nodes)


def load_graph_file(path: Union[str, Path]) -> Dict[VertexID, Vertex]:
    """Read ``path`` and parse it with ``load_graph_yaml``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is malformed.
    """
    return load_graph_yaml(Path(path).read_text(encoding="utf-8"))
