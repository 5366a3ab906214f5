"""List-backed reference array backend.

``VecArray`` stores its elements in a plain Python list and implements both the
``Array`` and ``NaturalArray`` capability sets. The natural-number operations
assume the elements are non-negative ``int``s; they are not checked.

Thread Safety:
    Not synchronized. A ``VecArray`` may be read from several threads as long
    as no thread mutates it; mutation requires exclusive access.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator, Sequence, Sized
from itertools import accumulate
from typing import Any, Generic, TypeVar

from open_hypergraphs.errors import (
    DivisionByZeroError,
    InvalidRangeError,
    LengthMismatchError,
    OutOfRangeError,
)

T = TypeVar("T")


class VecArray(Generic[T]):
    """An owned, mutable, ordered sequence with pointwise arithmetic.

    Example:
        >>> VecArray([1, 2, 3, 4]).cumulative_sum()
        VecArray([0, 1, 3, 6, 10])
    """

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[T] = ()) -> None:
        self._data: list[T] = list(data)

    # ========== Construction ==========

    @classmethod
    def empty(cls) -> VecArray[T]:
        return cls()

    @classmethod
    def fill(cls, x: T, n: int) -> VecArray[T]:
        """An array of ``n`` independent (shallow) copies of ``x``."""
        if n < 0:
            raise InvalidRangeError(f"fill length must be non-negative, got: {n}")
        return cls(copy.copy(x) for _ in range(n))

    @classmethod
    def arange(cls, start: int, stop: int) -> VecArray[int]:
        """Contiguous increasing integers ``[start, stop)``.

        Raises:
            InvalidRangeError: If ``stop < start``
        """
        if stop < start:
            raise InvalidRangeError(f"invalid range [{start}, {stop})")
        return cls(range(start, stop))

    # ========== Sequence protocol ==========

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __getitem__(self, key: int | slice) -> Any:
        if isinstance(key, slice):
            return self.get_range(key)
        return self.get(key)

    def __setitem__(self, i: int, x: T) -> None:
        self._check_index(i)
        self._data[i] = x

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecArray):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"VecArray({self._data!r})"

    def append(self, x: T) -> None:
        """Push ``x`` onto the end of the array (amortized O(1))."""
        self._data.append(x)

    # ========== Array operations ==========

    def concatenate(self, other: VecArray[T]) -> VecArray[T]:
        """A new array holding ``self`` followed by ``other``."""
        return type(self)(self._data + list(other))

    def get(self, i: int) -> T:
        self._check_index(i)
        return self._data[i]

    def get_range(self, r: slice) -> VecArray[T]:
        """Copy of the contiguous sub-range ``r``, resolved against the current length."""
        start, stop = self._resolve(r)
        return type(self)(self._data[start:stop])

    def set_range(self, r: slice, v: Iterable[T]) -> None:
        """Overwrite the contiguous sub-range ``r`` with the elements of ``v``.

        Raises:
            InvalidRangeError: If ``r`` has a step other than 1
            LengthMismatchError: If ``v`` does not have exactly ``len(r)`` elements
        """
        start, stop = self._resolve(r)
        values = list(v)
        if len(values) != stop - start:
            raise LengthMismatchError(
                f"set_range expected {stop - start} values, got: {len(values)}"
            )
        self._data[start:stop] = values

    def gather(self, idx: Iterable[int]) -> VecArray[T]:
        """Random-access read: ``result[k] = self[idx[k]]``."""
        n = len(self._data)
        out = []
        for i in idx:
            if not 0 <= i < n:
                raise OutOfRangeError(f"gather index {i} out of range for length {n}")
            out.append(self._data[i])
        return type(self)(out)

    def scatter(self, idx: Sequence[int], v: Sequence[T]) -> None:
        """Random-access write: ``self[i] = v[i]`` for each ``i`` in ``idx``.

        The value is read from ``v`` at the target position ``i``, not paired
        positionally with ``idx``. All indices are checked before any write.
        """
        n = len(self._data)
        for i in idx:
            if not 0 <= i < n or not 0 <= i < len(v):
                raise OutOfRangeError(f"scatter index {i} out of range")
        for i in idx:
            self._data[i] = v[i]

    # ========== Pointwise arithmetic ==========

    def __add__(self, other: VecArray[T] | Any) -> VecArray[T]:
        if isinstance(other, VecArray):
            self._check_same_length(other)
            return type(self)(x + y for x, y in zip(self._data, other._data))
        return type(self)(x + other for x in self._data)

    def __radd__(self, other: Any) -> VecArray[T]:
        return type(self)(other + x for x in self._data)

    def __sub__(self, other: VecArray[T]) -> VecArray[T]:
        self._check_same_length(other)
        return type(self)(x - y for x, y in zip(self._data, other._data))

    # ========== Natural-number operations ==========

    def max(self) -> int | None:
        """Largest element, or None for an empty array."""
        return max(self._data, default=None)  # type: ignore[type-var]

    def sum(self) -> int:
        return sum(self._data)  # type: ignore[arg-type]

    def quot_rem(self, d: int) -> tuple[VecArray[int], VecArray[int]]:
        """Elementwise ``(x // d, x % d)``.

        Raises:
            DivisionByZeroError: If ``d == 0``
        """
        if d == 0:
            raise DivisionByZeroError("quot_rem divisor must be non-zero")
        q = [x // d for x in self._data]  # type: ignore[operator]
        r = [x % d for x in self._data]  # type: ignore[operator]
        return type(self)(q), type(self)(r)

    def mul_constant_add(self, c: int, x: VecArray[int]) -> VecArray[int]:
        """Elementwise ``s * c + x``."""
        self._check_same_length(x)
        out = [s * c + xi for s, xi in zip(self._data, x._data)]  # type: ignore[operator]
        return type(self)(out)

    def cumulative_sum(self) -> VecArray[int]:
        """Prefix sums with a leading zero; one element longer than the input."""
        return type(self)(accumulate(self._data, initial=0))  # type: ignore[arg-type]

    def repeat(self, counts: Sequence[int]) -> VecArray[T]:
        """Expand ``self[i]`` into ``counts[i]`` consecutive copies.

        Example:
            >>> VecArray([5, 6, 7, 8]).repeat(VecArray([1, 2, 0, 3]))
            VecArray([5, 6, 6, 8, 8, 8])
        """
        if len(counts) != len(self._data):
            raise LengthMismatchError(
                f"repeat expected {len(self._data)} counts, got: {len(counts)}"
            )
        return type(self)(x for x, k in zip(self._data, counts) for _ in range(k))

    def segmented_sum(self, x: Sequence[int]) -> VecArray[int]:
        """Sum ``x`` within the segments whose sizes are the elements of ``self``.

        Raises:
            LengthMismatchError: If the segment sizes do not sum to ``len(x)``
        """
        ptr = list(accumulate(self._data, initial=0))  # type: ignore[arg-type]
        if ptr[-1] != len(x):
            raise LengthMismatchError(
                f"segment sizes sum to {ptr[-1]} but {len(x)} values were given"
            )
        values = list(x)
        return type(self)(sum(values[a:b]) for a, b in zip(ptr, ptr[1:]))

    # ========== Helpers ==========

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._data):
            raise OutOfRangeError(f"index {i} out of range for length {len(self._data)}")

    def _check_same_length(self, other: Sized) -> None:
        if len(other) != len(self._data):
            raise LengthMismatchError(
                f"arrays have different lengths: {len(self._data)} != {len(other)}"
            )

    def _resolve(self, r: slice) -> tuple[int, int]:
        start, stop, step = r.indices(len(self._data))
        if step != 1:
            raise InvalidRangeError(f"ranges must be contiguous, got step: {step}")
        return start, max(start, stop)
