"""Graph construction helpers.

These modules turn edge lists, NetworkX graphs and YAML documents into the
``Vertex``/``Edge`` objects that ``PathEngine`` traverses.
"""

from dagpath.graph.build import build_vertices
from dagpath.graph.io import load_graph_file, load_graph_yaml
from dagpath.graph.nx import from_networkx, to_networkx
from dagpath.graph.samples import sample_dag

__all__ = [
    "build_vertices",
    "from_networkx",
    "load_graph_file",
    "load_graph_yaml",
    "sample_dag",
    "to_networkx",
]
