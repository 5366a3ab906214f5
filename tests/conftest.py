"""Shared fixtures for open_hypergraphs tests."""

import pytest

from open_hypergraphs import FiniteFunction, IndexedCoproduct, VecArray, lax


@pytest.fixture()
def empty_graph():
    """Fresh lax hypergraph with no nodes or edges."""
    return lax.Hypergraph()


@pytest.fixture()
def two_pair_graph():
    """Lax hypergraph with four nodes and two pending identifications.

    Nodes (4):
        0 "int", 1 "int", 2 "str", 3 "str"

    Edges (1):
        f: sources [0, 2] -> targets [3]

    Pending:
        unify(0, 1), unify(2, 3)
    """
    h = lax.Hypergraph()
    n0 = h.new_node("int")
    n1 = h.new_node("int")
    n2 = h.new_node("str")
    n3 = h.new_node("str")
    h.new_edge("f", lax.Hyperedge([n0, n2], [n3]))
    h.unify(n0, n1)
    h.unify(n2, n3)
    return h


@pytest.fixture()
def ragged():
    """Three segments [[0, 2], [], [1]] pointing into a set of size 3."""
    values = FiniteFunction(VecArray([0, 2, 1]), 3)
    return IndexedCoproduct.from_semifinite(VecArray([2, 0, 1]), values)
