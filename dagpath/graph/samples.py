"""Sample graphs for demos."""

from __future__ import annotations

from typing import List

from dagpath.graph.build import build_vertices
from dagpath.model import Vertex


def sample_dag() -> List[Vertex]:
    """Return the seven-vertex demo DAG in vertex order.

    Edges (4->3 appears twice)::

        1->2, 1->3, 1->4, 2->5, 3->7, 4->3, 4->7, 4->3, 5->6, 6->7
    """
    edges = [
        (1, 2),
        (1, 3),
        (1, 4),
        (2, 5),
        (3, 7),
        (4, 3),
        (4, 7),
        (4, 3),
        (5, 6),
        (6, 7),
    ]
    return list(build_vertices(edges, nodes=range(1, 8)).values())
