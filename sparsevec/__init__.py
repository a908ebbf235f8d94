"""Sparse vectors with merge-based similarity and algebra."""
from sparsevec.core.exceptions import (
    SparseVectorError,
    KindMismatchError,
    ShapeMismatchError,
    DuplicateKeyError,
)
from sparsevec.core.types import Value, SparseEntries, add_op, sub_op
from sparsevec.indices import (
    VectorIndex,
    IntIndex,
    Uint32Index,
    StringIndex,
    IndexFactory,
)
from sparsevec.vectors import (
    Vector,
    SparseVector,
    GenSparseVector,
    SparseVectorUint32,
    MapSparseVector,
    VectorFactory,
)
from sparsevec.similarity import (
    SimilarityResult,
    mean_center,
    centered_cosine,
    rank_by_similarity,
)

__version__ = "0.1.0"

__all__ = [
    "SparseVectorError",
    "KindMismatchError",
    "ShapeMismatchError",
    "DuplicateKeyError",
    "Value",
    "SparseEntries",
    "add_op",
    "sub_op",
    "VectorIndex",
    "IntIndex",
    "Uint32Index",
    "StringIndex",
    "IndexFactory",
    "Vector",
    "SparseVector",
    "GenSparseVector",
    "SparseVectorUint32",
    "MapSparseVector",
    "VectorFactory",
    "SimilarityResult",
    "mean_center",
    "centered_cosine",
    "rank_by_similarity",
]
