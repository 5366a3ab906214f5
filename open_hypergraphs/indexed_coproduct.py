"""Indexed coproducts: segmented arrays, a.k.a. lists of lists.

An ``IndexedCoproduct`` stores ``n`` segments as one flat payload (``values``)
plus a ``FiniteFunction`` ``sources`` of length ``n`` whose entries are the
segment lengths. The target of ``sources`` is always ``len(values) + 1``, so
every segment length (at most the whole payload) is in range:

    sum(sources.table) == len(values)
    sources.target == len(values) + 1

The payload ``F`` is anything with a length: a ``FiniteFunction`` when the
segments hold indices into another set, or a ``SemifiniteFunction`` of
labels. ``tensor``, ``map_values`` and ``initial`` require a
``FiniteFunction`` payload.
"""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass
from typing import Generic, TypeVar

from open_hypergraphs.array.base import NaturalArray
from open_hypergraphs.array.vec import VecArray
from open_hypergraphs.errors import InvalidCoproductError
from open_hypergraphs.finite_function import FiniteFunction

F = TypeVar("F", bound=Sized)


@dataclass(eq=True)
class IndexedCoproduct(Generic[F]):
    """A finite coproduct of arrows of type ``F``, stored as a segmented array.

    Build instances with ``new``, ``from_semifinite``, ``singleton`` or
    ``initial``; the raw constructor does not check the sum invariant.

    Attributes:
        sources: Segment lengths, with target ``len(values) + 1``
        values: Concatenation of all segments
    """

    sources: FiniteFunction
    values: F

    # ========== Construction ==========

    @classmethod
    def new(cls, sources: FiniteFunction, values: F) -> IndexedCoproduct[F]:
        """Build from a pre-built segment-length mapping.

        The sum is recomputed from ``sources.table`` and checked against both
        ``len(values)`` and the declared target.

        Raises:
            InvalidCoproductError: If the lengths, payload and target disagree
        """
        result = cls.from_semifinite(sources.table, values)
        if result.sources.target != sources.target:
            raise InvalidCoproductError(
                f"declared target {sources.target} does not match "
                f"segment sum + 1 = {result.sources.target}"
            )
        return result

    @classmethod
    def from_semifinite(cls, segment_lengths: NaturalArray, values: F) -> IndexedCoproduct[F]:
        """Build from per-segment lengths.

        Raises:
            InvalidCoproductError: If a length is negative or
                ``sum(segment_lengths) != len(values)``
        """
        low = min(segment_lengths, default=None)
        if low is not None and low < 0:
            raise InvalidCoproductError(f"segment lengths must be non-negative, got: {low}")
        total = segment_lengths.sum()
        if total != len(values):
            raise InvalidCoproductError(
                f"segment lengths sum to {total} but the payload has length {len(values)}"
            )
        return cls(FiniteFunction(segment_lengths, total + 1), values)

    @classmethod
    def singleton(cls, values: F, backend: type | None = None) -> IndexedCoproduct[F]:
        """One segment of length 1 per payload element.

        The segment table uses ``backend``, or else the class of the payload's
        own table, falling back to ``VecArray``.
        """
        if backend is None:
            table = getattr(values, "table", None)
            backend = type(table) if isinstance(table, NaturalArray) else VecArray
        n = len(values)
        return cls(FiniteFunction.constant(n, 1, n + 1, backend=backend), values)

    @classmethod
    def initial(cls, target: int, backend: type = VecArray) -> IndexedCoproduct[FiniteFunction]:
        """The empty coproduct, with payload the initial map into ``target``."""
        return cls(
            FiniteFunction.initial(1, backend=backend),
            FiniteFunction.initial(target, backend=backend),
        )

    # ========== Shape ==========

    def __len__(self) -> int:
        """Number of segments."""
        return self.sources.source

    def is_empty(self) -> bool:
        return len(self) == 0

    def segment_lengths(self) -> NaturalArray:
        return self.sources.table

    def offsets(self) -> NaturalArray:
        """Start offset of each segment, plus the total length as a sentinel."""
        return self.sources.table.cumulative_sum()

    # ========== Operations ==========

    def flatmap(self, other: IndexedCoproduct[F]) -> IndexedCoproduct[F]:
        """Compose two lists-of-lists, flattening one level of nesting.

        With ``self : A → B*`` and ``other : B → C*``, returns ``A → C*``:
        segment ``a`` of the result is the concatenation of the ``other``
        segments indexed by segment ``a`` of ``self``. The payload of
        ``self`` must have length ``len(other)``.
        """
        table = self.sources.table.segmented_sum(other.sources.table)
        return type(self)(FiniteFunction(table, other.sources.target), other.values)

    def tensor(self, other: IndexedCoproduct[FiniteFunction]) -> IndexedCoproduct[FiniteFunction]:
        """Direct sum: the segments of ``self`` followed by those of ``other``.

        Payload indices from ``other`` are shifted past ``self.values.target``.
        """
        if not isinstance(self.values, FiniteFunction) or not isinstance(
            other.values, FiniteFunction
        ):
            raise TypeError("tensor requires FiniteFunction payloads")
        table = self.sources.table.concatenate(other.sources.table)
        # both offset tables carry one sentinel; the sum keeps only one
        target = self.sources.target + other.sources.target - 1
        return type(self)(FiniteFunction(table, target), self.values.tensor(other.values))

    def map_values(self, x: FiniteFunction) -> IndexedCoproduct[FiniteFunction]:
        """Postcompose the payload with ``x``, leaving segmentation unchanged.

        Raises:
            DomainMismatchError: If ``x.source`` is not the payload's target
        """
        if not isinstance(self.values, FiniteFunction):
            raise TypeError("map_values requires a FiniteFunction payload")
        return type(self)(self.sources, self.values >> x)

    def map_indexes(self, x: FiniteFunction) -> IndexedCoproduct[F]:
        raise NotImplementedError("IndexedCoproduct.map_indexes is not implemented")

    def indexed_values(self, x: FiniteFunction) -> FiniteFunction:
        raise NotImplementedError("IndexedCoproduct.indexed_values is not implemented")
