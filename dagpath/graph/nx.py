"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from dagpath.graph.nx import from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B")
    >>> G.add_edge("B", "C")
    >>> vertices = from_networkx(G)
    >>> [str(e) for e in vertices["A"].edges]
    ['A->B']
"""

from __future__ import annotations

from typing import Dict, Iterable

import networkx as nx

from dagpath.graph.build import build_vertices
from dagpath.model import Vertex, VertexID


def from_networkx(G: nx.DiGraph) -> Dict[VertexID, Vertex]:
    """Convert a directed NetworkX graph into vertices.

    Node order and edge insertion order are preserved. Parallel edges of a
    ``MultiDiGraph`` become duplicate edges. Attributes are ignored since all
    edges have unit length.

    Args:
        G: ``nx.DiGraph`` or ``nx.MultiDiGraph``.

    Returns:
        Dict mapping node to Vertex.

    Raises:
        ValueError: If ``G`` is undirected.
    """
    if not G.is_directed():
        raise ValueError("Only directed graphs are supported.")
    return build_vertices(((u, v) for u, v in G.edges()), nodes=G.nodes())


def to_networkx(vertices: Iterable[Vertex]) -> nx.MultiDiGraph:
    """Convert vertices into a ``nx.MultiDiGraph``.

    Every edge becomes one graph edge, so duplicates survive the conversion.
    Targets not listed in ``vertices`` are added as nodes; absent targets are
    dropped.

    Args:
        vertices: Vertices to convert.

    Returns:
        A new MultiDiGraph keyed by vertex id.
    """
    G = nx.MultiDiGraph()
    vertex_list = list(vertices)
    G.add_nodes_from(vertex.id for vertex in vertex_list)
    for vertex in vertex_list:
        for target in vertex.targets():
            G.add_edge(vertex.id, target.id)
    return G
