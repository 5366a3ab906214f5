"""open_hypergraphs: array-backed open hypergraphs with a lax builder and quotienting."""

__version__ = "0.1.0"

from open_hypergraphs.array import Array, NaturalArray, VecArray
from open_hypergraphs.errors import (
    DivisionByZeroError,
    DomainMismatchError,
    InconsistentMergeError,
    InvalidCoproductError,
    InvalidRangeError,
    LengthMismatchError,
    OpenHypergraphsError,
    OutOfRangeError,
)
from open_hypergraphs.finite_function import (
    FiniteFunction,
    SemifiniteFunction,
    coequalizer_universal,
)
from open_hypergraphs.hypergraph import Hypergraph
from open_hypergraphs.indexed_coproduct import IndexedCoproduct
from open_hypergraphs.models import HypergraphStats, ValidationResult
from open_hypergraphs import lax

__all__ = [
    "Array",
    "DivisionByZeroError",
    "DomainMismatchError",
    "FiniteFunction",
    "Hypergraph",
    "HypergraphStats",
    "InconsistentMergeError",
    "IndexedCoproduct",
    "InvalidCoproductError",
    "InvalidRangeError",
    "LengthMismatchError",
    "NaturalArray",
    "OpenHypergraphsError",
    "OutOfRangeError",
    "SemifiniteFunction",
    "ValidationResult",
    "VecArray",
    "__version__",
    "coequalizer_universal",
    "lax",
]
