"""Capability contract for array backends.

Every algorithm in the library is written against these protocols rather than
a concrete container. A backend is any class whose instances satisfy
``Array`` (and ``NaturalArray`` for index arrays) and whose constructor
accepts an iterable of elements. Operations that build new arrays from an
existing one use ``type(arr)``, so the backend chosen by the caller is carried
through every derived structure.

Index arguments always lie in ``[0, len)``; violating that is a programmer
error and raises ``OutOfRangeError``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Array(Protocol[T]):
    """An owned, ordered, mutable sequence of ``T``."""

    @classmethod
    def empty(cls) -> Array[T]: ...

    @classmethod
    def fill(cls, x: T, n: int) -> Array[T]: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[T]: ...

    def concatenate(self, other: Array[T]) -> Array[T]: ...

    def get(self, i: int) -> T: ...

    def get_range(self, r: slice) -> Array[T]: ...

    def set_range(self, r: slice, v: Array[T]) -> None: ...

    def gather(self, idx: Sequence[int]) -> Array[T]: ...

    def scatter(self, idx: Sequence[int], v: Array[T]) -> None: ...


@runtime_checkable
class NaturalArray(Array[int], Protocol):
    """An ``Array`` of natural numbers, used for index tables."""

    @classmethod
    def arange(cls, start: int, stop: int) -> NaturalArray: ...

    def __add__(self, other: NaturalArray | int) -> NaturalArray: ...

    def __radd__(self, other: int) -> NaturalArray: ...

    def __sub__(self, other: NaturalArray) -> NaturalArray: ...

    def max(self) -> int | None: ...

    def sum(self) -> int: ...

    def quot_rem(self, d: int) -> tuple[NaturalArray, NaturalArray]: ...

    def mul_constant_add(self, c: int, x: NaturalArray) -> NaturalArray: ...

    def cumulative_sum(self) -> NaturalArray: ...

    def repeat(self, counts: NaturalArray) -> NaturalArray: ...

    def segmented_sum(self, x: NaturalArray) -> NaturalArray: ...
