"""Finite functions between finite ordinals.

A ``FiniteFunction`` ``f : A → B`` is stored as a table of ``A`` natural numbers,
each strictly below the target ``B``. This module provides the small amount of
finite-function structure the rest of the library relies on: composition,
tensor and copairing, identity/initial/constant constructors, and the
coequalizer (connected components) of a parallel pair together with its
universal property.

The table's class is the array backend; every derived table is built with
``type(table)``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from open_hypergraphs.array.base import Array, NaturalArray
from open_hypergraphs.array.vec import VecArray
from open_hypergraphs.errors import (
    DomainMismatchError,
    InconsistentMergeError,
    LengthMismatchError,
    OutOfRangeError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(eq=True)
class FiniteFunction:
    """A total function ``{0..source-1} → {0..target-1}``.

    Attributes:
        table: The images of ``0..source-1``
        target: Size of the codomain

    Raises:
        OutOfRangeError: If ``target`` or some entry is negative, or an entry is ``>= target``
    """

    table: NaturalArray
    target: int

    def __post_init__(self) -> None:
        if self.target < 0:
            raise OutOfRangeError(f"FiniteFunction target must be non-negative, got: {self.target}")
        low = min(self.table, default=None)
        if low is not None and low < 0:
            raise OutOfRangeError(f"FiniteFunction table entry {low} is negative")
        top = self.table.max()
        if top is not None and top >= self.target:
            raise OutOfRangeError(
                f"FiniteFunction table entry {top} out of range for target {self.target}"
            )

    @property
    def source(self) -> int:
        return len(self.table)

    def __len__(self) -> int:
        return len(self.table)

    # ========== Constructors ==========

    @classmethod
    def identity(cls, n: int, backend: type = VecArray) -> FiniteFunction:
        return cls(backend.arange(0, n), n)

    @classmethod
    def initial(cls, target: int, backend: type = VecArray) -> FiniteFunction:
        """The unique map from the empty set into ``target``."""
        return cls(backend.empty(), target)

    @classmethod
    def constant(
        cls, source: int, value: int, target: int, backend: type = VecArray
    ) -> FiniteFunction:
        """The map sending every one of ``source`` elements to ``value``."""
        return cls(backend.fill(value, source), target)

    # ========== Operations ==========

    def compose(self, other: FiniteFunction) -> FiniteFunction:
        """Diagrammatic composition ``self ; other``.

        Raises:
            DomainMismatchError: If ``self.target != other.source``
        """
        if self.target != other.source:
            raise DomainMismatchError(
                f"cannot compose: target {self.target} != source {other.source}"
            )
        return FiniteFunction(other.table.gather(self.table), other.target)

    def __rshift__(self, other: FiniteFunction) -> FiniteFunction:
        return self.compose(other)

    def tensor(self, other: FiniteFunction) -> FiniteFunction:
        """Disjoint union ``self ⊗ other : A + C → B + D``."""
        table = self.table.concatenate(self.target + other.table)
        return FiniteFunction(table, self.target + other.target)

    def __matmul__(self, other: FiniteFunction) -> FiniteFunction:
        return self.tensor(other)

    def coproduct(self, other: FiniteFunction) -> FiniteFunction:
        """Copairing ``[self, other] : A + C → B``."""
        if self.target != other.target:
            raise DomainMismatchError(
                f"cannot copair maps with targets {self.target} and {other.target}"
            )
        return FiniteFunction(self.table.concatenate(other.table), self.target)

    def __add__(self, other: FiniteFunction) -> FiniteFunction:
        return self.coproduct(other)

    def coequalizer(self, other: FiniteFunction) -> FiniteFunction:
        """Coarsest ``q`` with ``self ; q == other ; q``.

        Target elements are merged with a union-find over the pairs
        ``(self[i], other[i])``. New ids are assigned in order of first
        occurrence among the old ids, so ``q`` is monotone on representatives
        and the identity when nothing is identified.

        Raises:
            DomainMismatchError: If the two maps are not parallel
        """
        if self.source != other.source or self.target != other.target:
            raise DomainMismatchError(
                f"coequalizer needs parallel maps, got {self.source}→{self.target} "
                f"and {other.source}→{other.target}"
            )

        parent = list(range(self.target))

        def find(i: int) -> int:
            root = i
            while parent[root] != root:
                root = parent[root]
            while parent[i] != root:
                parent[i], i = root, parent[i]
            return root

        for a, b in zip(self.table, other.table):
            ra, rb = find(a), find(b)
            if ra != rb:
                # keep the smaller id as root
                if rb < ra:
                    ra, rb = rb, ra
                parent[rb] = ra

        new_id: dict[int, int] = {}
        table = []
        for i in range(self.target):
            root = find(i)
            if root not in new_id:
                new_id[root] = len(new_id)
            table.append(new_id[root])

        logger.debug(
            "coequalizer: %d pairs collapse %d elements to %d",
            self.source,
            self.target,
            len(new_id),
        )
        return FiniteFunction(type(self.table)(table), len(new_id))


@dataclass(eq=True)
class SemifiniteFunction(Generic[T]):
    """A function ``{0..n-1} → T`` into an unbounded set, e.g. a label array."""

    table: Array[T]

    def __len__(self) -> int:
        return len(self.table)


def coequalizer_universal(q: FiniteFunction, values: Sequence[Any]) -> Array[Any]:
    """Push ``values`` forward along a coequalizer ``q``.

    Returns the unique array ``u`` indexed by ``q.target`` with
    ``u[q[i]] == values[i]`` for every ``i``.

    Raises:
        LengthMismatchError: If ``len(values) != q.source``
        InconsistentMergeError: If two positions identified by ``q`` carry
            different values
        DomainMismatchError: If ``q`` is not surjective
    """
    if len(values) != q.source:
        raise LengthMismatchError(
            f"coequalizer_universal expected {q.source} values, got: {len(values)}"
        )

    unset = object()
    result: list[Any] = [unset] * q.target
    for i, (j, x) in enumerate(zip(q.table, values)):
        if result[j] is unset:
            result[j] = x
        elif result[j] != x:
            raise InconsistentMergeError(
                f"position {i} maps to {j} with value {x!r}, but {j} already holds {result[j]!r}"
            )

    if any(x is unset for x in result):
        raise DomainMismatchError("coequalizer_universal requires a surjective map")

    backend = type(values) if isinstance(values, Array) else VecArray
    return backend(result)
