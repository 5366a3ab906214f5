"""Lax (un-quotiented) hypergraphs.

A lax ``Hypergraph`` is built incrementally: nodes and edges are appended and
pairs of nodes are marked for identification with ``unify``. Nothing is merged
until ``quotient()`` is called, which collapses every connected component of
the identification relation into a single node and rewrites the adjacency in
one pass. ``to_hypergraph()`` then produces the canonical array form.

Node labels of unified nodes are not compared when ``unify`` is called, so
that construction and type inference can happen independently. If unified
nodes still disagree at ``quotient()`` time, it raises
``InconsistentMergeError`` and leaves the graph unchanged.

Thread Safety:
    Not synchronized. Mutating calls require exclusive access to the instance;
    reads may be shared while no writer is active.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from open_hypergraphs.array.vec import VecArray
from open_hypergraphs.errors import InvalidCoproductError, OutOfRangeError
from open_hypergraphs.finite_function import (
    FiniteFunction,
    SemifiniteFunction,
    coequalizer_universal,
)
from open_hypergraphs.hypergraph import Hypergraph as CanonicalHypergraph
from open_hypergraphs.indexed_coproduct import IndexedCoproduct
from open_hypergraphs.models import HypergraphStats, ValidationResult

logger = logging.getLogger(__name__)

W = TypeVar("W")
X = TypeVar("X")


@dataclass(frozen=True, order=True)
class NodeId:
    """Handle of a node: its index in ``Hypergraph.nodes``."""

    index: int

    def __post_init__(self) -> None:
        if not isinstance(self.index, int) or isinstance(self.index, bool):
            raise TypeError(f"NodeId index must be an int, got: {type(self.index).__name__}")


@dataclass(frozen=True, order=True)
class EdgeId:
    """Handle of an edge: its index in ``Hypergraph.edges``."""

    index: int

    def __post_init__(self) -> None:
        if not isinstance(self.index, int) or isinstance(self.index, bool):
            raise TypeError(f"EdgeId index must be an int, got: {type(self.index).__name__}")


@dataclass
class Hyperedge:
    """An edge's ordered source nodes and ordered target nodes."""

    sources: list[NodeId] = field(default_factory=list)
    targets: list[NodeId] = field(default_factory=list)


Interface = tuple[list[NodeId], list[NodeId]]


class Hypergraph(Generic[W, X]):
    """A hypergraph under construction, with deferred node identifications.

    Attributes:
        nodes: Node labels, indexed by ``NodeId``
        edges: Edge labels, indexed by ``EdgeId``
        adjacency: One ``Hyperedge`` per edge
        identifications: Two equal-length lists; ``(left[i], right[i])`` is a
            pending pair of nodes to identify
    """

    def __init__(self) -> None:
        self.nodes: VecArray[W] = VecArray()
        self.edges: VecArray[X] = VecArray()
        self.adjacency: VecArray[Hyperedge] = VecArray()
        self.identifications: tuple[list[NodeId], list[NodeId]] = ([], [])

    @classmethod
    def empty(cls) -> Hypergraph[W, X]:
        """The hypergraph with no nodes or edges."""
        return cls()

    def __repr__(self) -> str:
        return (
            f"lax.Hypergraph(nodes={len(self.nodes)}, edges={len(self.edges)}, "
            f"pending={len(self.identifications[0])})"
        )

    # ========== Construction ==========

    def new_node(self, label: W) -> NodeId:
        """Add a node labeled ``label``."""
        node_id = NodeId(len(self.nodes))
        self.nodes.append(label)
        return node_id

    def new_edge(self, label: X, hyperedge: Hyperedge) -> EdgeId:
        """Add an edge labeled ``label`` connecting the nodes of ``hyperedge``.

        The node lists are copied, so later changes to ``hyperedge`` do not
        affect the graph.

        Raises:
            OutOfRangeError: If ``hyperedge`` references a node that does not exist
        """
        for node_id in [*hyperedge.sources, *hyperedge.targets]:
            self._check_node(node_id)
        edge_id = EdgeId(len(self.edges))
        self.edges.append(label)
        self.adjacency.append(Hyperedge(list(hyperedge.sources), list(hyperedge.targets)))
        return edge_id

    def new_operation(
        self,
        label: X,
        source_labels: Iterable[W],
        target_labels: Iterable[W],
    ) -> tuple[EdgeId, Interface]:
        """Add an edge together with fresh nodes for each of its ports.

        One new node is created per entry of ``source_labels`` and
        ``target_labels``; existing nodes are never reused.

        Args:
            label: The edge label
            source_labels: Labels of the fresh source nodes, in order
            target_labels: Labels of the fresh target nodes, in order

        Returns:
            The new ``EdgeId`` and its ``(sources, targets)`` interface, so that
            callers can ``unify`` the new nodes with others.
        """
        sources = [self.new_node(w) for w in source_labels]
        targets = [self.new_node(w) for w in target_labels]
        edge_id = self.new_edge(label, Hyperedge(sources, targets))
        return edge_id, (list(sources), list(targets))

    def unify(self, v: NodeId, w: NodeId) -> None:
        """Record that ``v`` and ``w`` should become the same node.

        Labels are not compared here; see ``quotient``.

        Raises:
            OutOfRangeError: If either node does not exist
        """
        self._check_node(v)
        self._check_node(w)
        self.identifications[0].append(v)
        self.identifications[1].append(w)

    def add_edge_source(self, edge_id: EdgeId, label: W) -> NodeId:
        """Append a new source node labeled ``label`` to edge ``edge_id``."""
        self._check_edge(edge_id)
        node_id = self.new_node(label)
        self.adjacency[edge_id.index].sources.append(node_id)
        return node_id

    def add_edge_target(self, edge_id: EdgeId, label: W) -> NodeId:
        """Append a new target node labeled ``label`` to edge ``edge_id``."""
        self._check_edge(edge_id)
        node_id = self.new_node(label)
        self.adjacency[edge_id.index].targets.append(node_id)
        return node_id

    # ========== Finalization ==========

    def quotient(self) -> FiniteFunction:
        """Identify all pending pairs of nodes, in place.

        Computes the coequalizer ``q`` of the pending relation, merges node
        labels along ``q``, rewrites every edge's sources and targets through
        ``q`` and clears the pending relation. With nothing pending this is a
        no-op and ``q`` is the identity.

        Returns:
            The map ``q`` from old node ids to new node ids, for callers that
            track per-node data of their own.

        Raises:
            InconsistentMergeError: If two identified nodes have different
                labels. The graph is left unchanged.
        """
        q = self._coequalizer()
        nodes = coequalizer_universal(q, self.nodes)

        table = list(q.table)
        adjacency = VecArray(
            Hyperedge(
                [NodeId(table[v.index]) for v in e.sources],
                [NodeId(table[v.index]) for v in e.targets],
            )
            for e in self.adjacency
        )

        logger.debug(
            "Quotiented %d nodes to %d using %d identifications",
            len(self.nodes),
            len(nodes),
            len(self.identifications[0]),
        )
        self.nodes = nodes
        self.adjacency = adjacency
        self.identifications = ([], [])
        return q

    def to_hypergraph(self) -> CanonicalHypergraph[W, X]:
        """Convert to a canonical ``Hypergraph``, ignoring pending identifications.

        Call ``quotient()`` first; the result shares no storage with ``self``.

        Raises:
            InvalidCoproductError: If an edge references a node that does not exist
        """
        if self.identifications[0]:
            logger.warning(
                "Converting lax hypergraph with %d pending identifications; "
                "call quotient() first to apply them",
                len(self.identifications[0]),
            )
        return CanonicalHypergraph(
            s=self._ports_coproduct(lambda e: e.sources),
            t=self._ports_coproduct(lambda e: e.targets),
            w=SemifiniteFunction(VecArray(self.nodes)),
            x=SemifiniteFunction(VecArray(self.edges)),
        )

    # ========== Inspection ==========

    def validate(self) -> ValidationResult:
        """Check the structural invariants and the pending identifications.

        Errors are broken invariants (dangling node ids, mismatched lengths).
        Warnings are pending pairs whose labels differ, which would make
        ``quotient()`` fail.
        """
        errors: list[str] = []
        warnings: list[str] = []
        n = len(self.nodes)

        if len(self.adjacency) != len(self.edges):
            errors.append(
                f"{len(self.edges)} edge labels but {len(self.adjacency)} adjacency entries"
            )
        for i, e in enumerate(self.adjacency):
            dangling = [v.index for v in [*e.sources, *e.targets] if not 0 <= v.index < n]
            if dangling:
                errors.append(f"Edge {i} references non-existent nodes: {dangling}")

        left, right = self.identifications
        if len(left) != len(right):
            errors.append(
                f"Identification lists have different lengths: {len(left)} != {len(right)}"
            )
        for v, w in zip(left, right):
            if not (0 <= v.index < n and 0 <= w.index < n):
                errors.append(f"Identification ({v.index}, {w.index}) references a missing node")
            elif self.nodes[v.index] != self.nodes[w.index]:
                warnings.append(
                    f"Nodes {v.index} and {w.index} are unified but labeled "
                    f"{self.nodes[v.index]!r} and {self.nodes[w.index]!r}"
                )

        return ValidationResult(valid=not errors, errors=errors, warnings=warnings)

    def stats(self) -> HypergraphStats:
        return HypergraphStats(
            node_count=len(self.nodes),
            edge_count=len(self.edges),
            source_count=sum(len(e.sources) for e in self.adjacency),
            target_count=sum(len(e.targets) for e in self.adjacency),
            pending_identifications=len(self.identifications[0]),
        )

    # ========== Helpers ==========

    def _coequalizer(self) -> FiniteFunction:
        n = len(self.nodes)
        s = FiniteFunction(VecArray(v.index for v in self.identifications[0]), n)
        t = FiniteFunction(VecArray(v.index for v in self.identifications[1]), n)
        return s.coequalizer(t)

    def _ports_coproduct(
        self, ports: Callable[[Hyperedge], list[NodeId]]
    ) -> IndexedCoproduct[FiniteFunction]:
        lengths: VecArray[int] = VecArray()
        values: VecArray[int] = VecArray()
        for e in self.adjacency:
            lengths.append(len(ports(e)))
            for v in ports(e):
                values.append(v.index)
        try:
            table = FiniteFunction(values, len(self.nodes))
        except OutOfRangeError as exc:
            raise InvalidCoproductError(f"invalid lax hypergraph: {exc}") from exc
        return IndexedCoproduct.from_semifinite(lengths, table)

    def _check_node(self, node_id: NodeId) -> None:
        if not 0 <= node_id.index < len(self.nodes):
            raise OutOfRangeError(
                f"NodeId {node_id.index} out of range for {len(self.nodes)} nodes"
            )

    def _check_edge(self, edge_id: EdgeId) -> None:
        if not 0 <= edge_id.index < len(self.edges):
            raise OutOfRangeError(
                f"EdgeId {edge_id.index} out of range for {len(self.edges)} edges"
            )
