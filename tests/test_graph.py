"""Tests for layered_layout.ir.graph: construction, validation, and adjacency queries."""

import pytest

from layered_layout.errors import DuplicateNodeError, GraphValidationError, InvalidInputError, UnknownNodeError
from layered_layout.ir.graph import DEFAULT_NODE_HEIGHT, DEFAULT_NODE_WIDTH, Edge, Graph


def _graph(*node_ids: str) -> Graph:
    g = Graph()
    for node_id in node_ids:
        g.add_node(node_id)
    return g


class TestBasicConstruction:
    def test_empty_graph(self):
        g = Graph()
        assert g.node_count() == 0
        assert g.edge_count() == 0
        assert g.node_ids() == []

    def test_default_size_and_label(self):
        g = _graph("A")
        data = g.node("A")
        assert data.width == DEFAULT_NODE_WIDTH == 150
        assert data.height == DEFAULT_NODE_HEIGHT == 50
        assert data.label == "A"

    def test_explicit_size_and_label(self):
        g = Graph()
        g.add_node("A", width=80, height=30.5, label="Alpha")
        data = g.node("A")
        assert (data.width, data.height, data.label) == (80, 30.5, "Alpha")

    def test_graph_level_default_size(self):
        g = Graph(node_width=40, node_height=20)
        g.add_node("A")
        assert (g.node("A").width, g.node("A").height) == (40, 20)

    def test_node_order_is_insertion_order(self):
        g = _graph("C", "A", "B")
        assert g.node_ids() == ["C", "A", "B"]
        assert [n.id for n in g.nodes()] == ["C", "A", "B"]

    def test_edge_default_id(self):
        g = _graph("A", "B")
        edge = g.add_edge("A", "B")
        assert edge.id == "A-B"
        assert g.edges == [edge]

    def test_edge_explicit_id(self):
        g = _graph("A", "B")
        assert g.add_edge("A", "B", "e1").id == "e1"

    def test_parallel_edges_kept_in_edge_list(self):
        g = _graph("A", "B")
        g.add_edge("A", "B", "e1")
        g.add_edge("A", "B", "e2")
        assert g.edge_count() == 2
        assert g.neighbors("A", "outgoing") == ["B"]

    def test_self_loop_is_accepted(self):
        g = _graph("A")
        edge = g.add_edge("A", "A")
        assert edge.is_self_loop
        assert g.neighbors("A", "outgoing") == ["A"]


class TestValidation:
    def test_duplicate_node(self):
        g = _graph("A")
        with pytest.raises(DuplicateNodeError) as excinfo:
            g.add_node("A")
        assert excinfo.value.node_id == "A"

    def test_unknown_target(self):
        g = _graph("A")
        with pytest.raises(UnknownNodeError) as excinfo:
            g.add_edge("A", "Z")
        assert excinfo.value.missing_id == "Z"
        assert excinfo.value.edge == Edge(source="A", target="Z")

    def test_unknown_source(self):
        g = _graph("B")
        with pytest.raises(UnknownNodeError) as excinfo:
            g.add_edge("Q", "B")
        assert excinfo.value.missing_id == "Q"

    def test_rejected_edge_not_recorded(self):
        g = _graph("A")
        with pytest.raises(UnknownNodeError):
            g.add_edge("A", "Z")
        assert g.edge_count() == 0
        assert g.node_count() == 1

    @pytest.mark.parametrize("size", [0, -5, "wide", True, float("nan"), float("inf"), float("-inf")])
    def test_bad_node_size(self, size):
        g = Graph()
        with pytest.raises(InvalidInputError):
            g.add_node("A", width=size)

    def test_errors_share_a_base(self):
        assert issubclass(DuplicateNodeError, GraphValidationError)
        assert issubclass(UnknownNodeError, GraphValidationError)
        assert issubclass(InvalidInputError, GraphValidationError)
        assert issubclass(GraphValidationError, ValueError)


class TestNeighbors:
    def test_outgoing_in_insertion_order(self):
        g = _graph("A", "B", "C")
        g.add_edge("A", "C")
        g.add_edge("A", "B")
        assert g.neighbors("A", "outgoing") == ["C", "B"]

    def test_incoming(self):
        g = _graph("A", "B", "C")
        g.add_edge("B", "C")
        g.add_edge("A", "C")
        assert g.neighbors("C", "incoming") == ["B", "A"]
        assert g.neighbors("A", "incoming") == []

    def test_unknown_node(self):
        g = _graph("A")
        with pytest.raises(UnknownNodeError) as excinfo:
            g.neighbors("Z", "outgoing")
        assert excinfo.value.edge is None

    def test_bad_direction(self):
        g = _graph("A")
        with pytest.raises(ValueError):
            g.neighbors("A", "sideways")


class TestDegreeQueries:
    def test_degrees(self):
        g = _graph("A", "B", "C")
        g.add_edge("A", "B")
        g.add_edge("A", "C")
        assert g.out_degree("A") == 2
        assert g.in_degree("A") == 0
        assert g.in_degree("B") == 1

    def test_degree_unknown_node_returns_zero(self):
        g = _graph("A")
        assert g.in_degree("NONEXISTENT") == 0
        assert g.out_degree("NONEXISTENT") == 0


class TestCycleDetection:
    def test_chain_is_dag(self):
        g = _graph("A", "B", "C")
        g.add_edge("A", "B")
        g.add_edge("B", "C")
        assert g.is_dag() is True

    def test_two_node_cycle_is_not_dag(self):
        g = _graph("A", "B")
        g.add_edge("A", "B")
        g.add_edge("B", "A")
        assert g.is_dag() is False
