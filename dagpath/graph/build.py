"""Build ``Vertex`` objects from plain edge lists."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from dagpath.model import Vertex, VertexID


def build_vertices(
    edges: Iterable[Tuple[VertexID, VertexID]],
    nodes: Optional[Iterable[VertexID]] = None,
) -> Dict[VertexID, Vertex]:
    """Create vertices and attach edges in the given order.

    Vertices are created on first mention. Duplicate edges are kept as given.

    Args:
        edges: ``(source_id, target_id)`` pairs.
        nodes: Optional identifiers created first, in order. Use it to add
            isolated vertices or to fix the ordering of the result.

    Returns:
        Dict mapping identifier to Vertex, in creation order.

    Example:
        >>> vertices = build_vertices([(1, 2), (3, 4)])
        >>> [str(e) for e in vertices[1].edges]
        ['1->2']
    """
    vertices: Dict[VertexID, Vertex] = {}

    def vertex_for(vertex_id: VertexID) -> Vertex:
        vertex = vertices.get(vertex_id)
        if vertex is None:
            vertex = Vertex(vertex_id)
            vertices[vertex_id] = vertex
        return vertex

    for vertex_id in nodes or ():
        vertex_for(vertex_id)

    for src_id, dst_id in edges:
        source = vertex_for(src_id)
        source.add_edge(vertex_for(dst_id))

    return vertices
