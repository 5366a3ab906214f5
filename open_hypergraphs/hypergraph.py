"""Canonical (quotiented) hypergraphs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from open_hypergraphs.finite_function import FiniteFunction, SemifiniteFunction
from open_hypergraphs.indexed_coproduct import IndexedCoproduct

W = TypeVar("W")
X = TypeVar("X")


@dataclass(frozen=True)
class Hypergraph(Generic[W, X]):
    """A hypergraph in array form.

    Edge ``e`` has the ordered sources given by segment ``e`` of ``s`` and the
    ordered targets given by segment ``e`` of ``t``; both payloads map into the
    node set ``{0..len(w)-1}``.

    Attributes:
        s: Per-edge source nodes
        t: Per-edge target nodes
        w: Node labels
        x: Edge labels
    """

    s: IndexedCoproduct[FiniteFunction]
    t: IndexedCoproduct[FiniteFunction]
    w: SemifiniteFunction[W]
    x: SemifiniteFunction[X]

    @property
    def num_nodes(self) -> int:
        return len(self.w)

    @property
    def num_edges(self) -> int:
        return len(self.x)
