from open_hypergraphs.array.base import Array, NaturalArray
from open_hypergraphs.array.vec import VecArray

__all__ = [
    "Array",
    "NaturalArray",
    "VecArray",
]
