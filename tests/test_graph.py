import pytest

from comprolib.graph import AdjacencyList, Edge


def test_edge_string_format():
    assert str(Edge(0, 1, 5)) == "From:0 To:1 Cost:5"


def test_edges_are_hashable_values():
    a = Edge(2, 3, 7)
    b = Edge(2, 3, 7)
    assert a == b
    assert {a: "x"}[b] == "x"
    assert Edge(2, 3, 8) not in {a}


def test_new_graph_has_no_edges():
    g = AdjacencyList(4)
    assert g.size() == 4
    assert all(g.edges(v) == [] for v in range(4))


def test_add_edge_goes_to_source_in_order():
    g = AdjacencyList(3)
    e1 = Edge(0, 1, 4)
    e2 = Edge(0, 2, 9)
    e3 = Edge(2, 0, 1)
    for e in (e1, e2, e3):
        g.add_edge(e)
    assert g.edges(0) == [e1, e2]
    assert g.edges(1) == []
    assert g.edges(2) == [e3]
    assert sum(len(g.edges(v)) for v in range(g.size())) == 3


def test_add_edge_with_bad_source_raises():
    g = AdjacencyList(2)
    with pytest.raises(IndexError):
        g.add_edge(Edge(-1, 0, 1))
    with pytest.raises(IndexError):
        g.add_edge(Edge(2, 0, 1))


def test_edges_of_bad_vertex_raises():
    g = AdjacencyList(2)
    with pytest.raises(IndexError):
        g.edges(5)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        AdjacencyList(-1)