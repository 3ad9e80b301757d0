"""
Tests for the graph model: node registration, connection validation and
edge immutability.
"""

import math

import pytest

from pathcalc.errors import (
    DuplicateNodeError,
    GraphError,
    InvalidArgumentError,
    NodeNotFoundError,
)
from pathcalc.graph import Edge, Graph, Node


def make_graph(*names):
    graph = Graph()
    for name in names:
        graph.add_node(name)
    return graph


def test_add_node_registers_name():
    graph = make_graph("A", "B")
    assert "A" in graph
    assert graph.node_names() == ["A", "B"]
    assert len(graph) == 2
    assert graph.get_node("A").name == "A"


def test_duplicate_node_rejected_and_graph_unchanged():
    graph = make_graph("A", "B")
    graph.add_connection("A", "B", 3, False)
    original = graph.get_node("A")

    with pytest.raises(DuplicateNodeError):
        graph.add_node("A")

    assert graph.node_names() == ["A", "B"]
    assert graph.get_node("A") is original
    assert len(original.outgoing_edges) == 1


def test_errors_derive_from_builtin_exceptions():
    graph = make_graph("A")
    with pytest.raises(KeyError):
        graph.add_node("A")
    with pytest.raises(KeyError):
        graph.add_connection("A", "missing", 1, False)
    with pytest.raises(ValueError):
        graph.add_connection("A", "A", 1, False)
    with pytest.raises(GraphError):
        graph.get_node("missing")


def test_error_message_is_readable():
    graph = make_graph("A")
    with pytest.raises(DuplicateNodeError) as excinfo:
        graph.add_node("A")
    assert str(excinfo.value) == "Node 'A' already exists."
    assert excinfo.value.name == "A"


@pytest.mark.parametrize("from_name, to_name", [("A", "X"), ("X", "A"), ("X", "Y")])
def test_connection_to_missing_node_not_found(from_name, to_name):
    graph = make_graph("A", "B")
    with pytest.raises(NodeNotFoundError):
        graph.add_connection(from_name, to_name, 1, True)
    assert graph.number_of_edges() == 0


@pytest.mark.parametrize("weight", [0, -1, -0.5, float("nan"), math.inf, -math.inf, 10**400])
def test_invalid_weight_rejected(weight):
    graph = make_graph("A", "B")
    with pytest.raises(InvalidArgumentError):
        graph.add_connection("A", "B", weight, True)
    assert graph.number_of_edges() == 0


def test_self_loop_rejected():
    graph = make_graph("A")
    with pytest.raises(InvalidArgumentError):
        graph.add_connection("A", "A", 2, False)
    assert graph.get_node("A").outgoing_edges == ()


def test_one_way_connection_adds_single_edge():
    graph = make_graph("A", "B")
    graph.add_connection("A", "B", 2.5, False)

    (edge,) = graph.get_node("A").outgoing_edges
    assert edge.target is graph.get_node("B")
    assert edge.weight == 2.5
    assert graph.get_node("B").outgoing_edges == ()


def test_bidirectional_connection_adds_independent_mirror():
    graph = make_graph("A", "B")
    graph.add_connection("A", "B", 4, True)

    (forward,) = graph.get_node("A").outgoing_edges
    (backward,) = graph.get_node("B").outgoing_edges
    assert forward.target is graph.get_node("B")
    assert backward.target is graph.get_node("A")
    assert forward.weight == backward.weight == 4.0
    assert forward is not backward
    assert sorted(graph.edges()) == [("A", "B", 4.0), ("B", "A", 4.0)]


def test_edge_is_immutable():
    edge = Edge(Node("T"), 1.0)
    with pytest.raises(AttributeError):
        edge.weight = 5.0
    with pytest.raises(AttributeError):
        edge.target = Node("U")


def test_edge_rejects_non_numeric_weight():
    with pytest.raises(InvalidArgumentError):
        Edge(Node("T"), "3")
    with pytest.raises(InvalidArgumentError):
        Edge(Node("T"), True)


def test_outgoing_edges_is_a_snapshot():
    graph = make_graph("A", "B")
    graph.add_connection("A", "B", 1, False)
    edges = graph.get_node("A").outgoing_edges
    assert isinstance(edges, tuple)
    graph.add_connection("A", "B", 2, False)
    assert len(edges) == 1
    assert len(graph.get_node("A").outgoing_edges) == 2


def test_node_has_no_public_edge_builder():
    # edges are only built through Graph.add_connection
    node = Node("A")
    assert not hasattr(node, "add_edge")
    graph = make_graph("A", "B")
    graph.add_connection("A", "B", 1, False)
    assert [e.target.name for e in graph.get_node("A").outgoing_edges] == ["B"]
