"""Vectors module - sorted-array and hashed sparse vector representations."""

# Import base and factory first (defines registry and decorator)
from sparsevec.vectors.base import Vector, SparseVector, SortedArrayVector
from sparsevec.vectors.factory import (
    VectorFactory,
    register_vector,
    get_registered_vectors,
)

# Import vectors to trigger registration
from sparsevec.vectors.generic import GenSparseVector
from sparsevec.vectors.uint32 import SparseVectorUint32
from sparsevec.vectors.hashed import MapSparseVector

__all__ = [
    "Vector",
    "SparseVector",
    "SortedArrayVector",
    "VectorFactory",
    "register_vector",
    "get_registered_vectors",
    "GenSparseVector",
    "SparseVectorUint32",
    "MapSparseVector",
]
