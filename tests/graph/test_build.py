from dagpath.graph.build import build_vertices
from dagpath.graph.samples import sample_dag


def test_build_creates_vertices_on_first_mention():
    vertices = build_vertices([(1, 2), (3, 4)])
    assert list(vertices) == [1, 2, 3, 4]
    assert [str(e) for e in vertices[1].edges] == ["1->2"]
    assert vertices[2].edges == []


def test_build_shares_target_instances():
    vertices = build_vertices([(1, 3), (2, 3)])
    assert vertices[1].edges[0].target is vertices[2].edges[0].target


def test_build_with_nodes_orders_and_adds_isolated():
    vertices = build_vertices([(2, 1)], nodes=[1, 2, 9])
    assert list(vertices) == [1, 2, 9]
    assert vertices[9].edges == []


def test_build_keeps_duplicates():
    vertices = build_vertices([("a", "b"), ("a", "b")])
    assert [str(e) for e in vertices["a"].edges] == ["a->b", "a->b"]


def test_sample_dag_shape():
    vertices = sample_dag()
    assert [v.id for v in vertices] == [1, 2, 3, 4, 5, 6, 7]
    four = vertices[3]
    assert [str(e) for e in four.edges] == ["4->3", "4->7", "4->3"]
    assert sum(len(v.edges) for v in vertices) == 10
