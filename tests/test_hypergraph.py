"""Tests for conversion of lax hypergraphs to canonical form."""

import dataclasses
import logging

import pytest

from open_hypergraphs import FiniteFunction, Hypergraph, InvalidCoproductError, VecArray, lax
from open_hypergraphs.lax import Hyperedge, NodeId


class TestToHypergraph:
    """Tests for lax.Hypergraph.to_hypergraph."""

    def test_single_operation(self, empty_graph):
        empty_graph.new_operation("f", ["a", "a"], ["b"])
        empty_graph.quotient()
        g = empty_graph.to_hypergraph()
        assert isinstance(g, Hypergraph)
        assert g.s.segment_lengths() == VecArray([2])
        assert g.t.segment_lengths() == VecArray([1])
        assert g.s.values == FiniteFunction(VecArray([0, 1]), 3)
        assert g.t.values == FiniteFunction(VecArray([2]), 3)
        assert g.num_nodes == 3
        assert g.num_edges == 1

    def test_after_quotient(self, two_pair_graph):
        two_pair_graph.quotient()
        g = two_pair_graph.to_hypergraph()
        assert list(g.w.table) == ["int", "str"]
        assert list(g.x.table) == ["f"]
        assert g.s.values == FiniteFunction(VecArray([0, 1]), 2)
        assert g.t.values == FiniteFunction(VecArray([1]), 2)

    def test_segments_follow_edge_order(self):
        h = lax.Hypergraph()
        _, (a, b) = h.new_operation("f", ["x"], ["x", "x"])
        _, (c, d) = h.new_operation("g", ["x", "x"], [])
        h.unify(b[0], c[0])
        h.unify(b[1], c[1])
        h.quotient()
        g = h.to_hypergraph()
        assert g.s.segment_lengths() == VecArray([1, 2])
        assert g.t.segment_lengths() == VecArray([2, 0])
        assert g.s.offsets() == VecArray([0, 1, 3])
        assert g.s.values == FiniteFunction(VecArray([0, 1, 2]), 3)
        assert g.t.values == FiniteFunction(VecArray([1, 2]), 3)

    def test_empty_graph(self, empty_graph):
        g = empty_graph.to_hypergraph()
        assert g.num_nodes == 0
        assert g.num_edges == 0
        assert g.s.is_empty()
        assert g.t.values.target == 0

    def test_result_is_independent(self, two_pair_graph):
        g = two_pair_graph.to_hypergraph()
        two_pair_graph.new_node("extra")
        assert g.num_nodes == 4
        with pytest.raises(dataclasses.FrozenInstanceError):
            g.w = None

    def test_dangling_node_raises(self, empty_graph):
        empty_graph.new_node("a")
        empty_graph.edges.append("f")
        empty_graph.adjacency.append(Hyperedge([NodeId(0)], [NodeId(7)]))
        with pytest.raises(InvalidCoproductError, match="invalid lax hypergraph"):
            empty_graph.to_hypergraph()

    def test_pending_identifications_warn(self, two_pair_graph, caplog):
        with caplog.at_level(logging.WARNING, logger="open_hypergraphs.lax.hypergraph"):
            g = two_pair_graph.to_hypergraph()
        assert "2 pending identifications" in caplog.text
        assert g.num_nodes == 4
