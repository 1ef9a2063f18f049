"""Vertex and edge primitives traversed by ``PathEngine``.

A ``Vertex`` is identified solely by its ``id``: two instances with the same
identifier compare equal and hash alike, so they share cache and active-path
entries. Each vertex owns an ordered list of outgoing ``Edge`` objects. Edges
reference their target vertex; they do not own it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterator, List, Optional

VertexID = Hashable


@dataclass(eq=False)
class Vertex:
    """A graph vertex with outgoing edges in attachment order.

    Attributes:
        id: Unique, stable, hashable identifier.
        edges: Outgoing edges. Duplicates are allowed.
    """

    id: VertexID
    edges: List["Edge"] = field(default_factory=list, repr=False)

    def add_edge(self, target: Optional["Vertex"]) -> "Edge":
        """Attach a new outgoing edge to ``target`` and return it."""
        edge = Edge(self, target)
        self.edges.append(edge)
        return edge

    def targets(self) -> Iterator["Vertex"]:
        """Yield edge targets in attachment order, skipping absent targets."""
        for edge in self.edges:
            if edge.target is not None:
                yield edge.target

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class Edge:
    """A directed, unweighted edge.

    Attributes:
        source: Vertex the edge leaves (informational).
        target: Vertex the edge enters; ``None`` edges are skipped by traversal.
    """

    source: Optional[Vertex]
    target: Optional[Vertex]

    def __str__(self) -> str:
        src = self.source.id if self.source is not None else "null"
        dst = self.target.id if self.target is not None else "null"
        return f"{src}->{dst}"
