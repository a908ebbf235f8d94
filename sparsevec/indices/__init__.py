"""Index module - pluggable key types for sparse vectors."""

# Import base and factory first (defines registry and decorator)
from sparsevec.indices.base import VectorIndex
from sparsevec.indices.factory import (
    IndexFactory,
    register_index,
    get_registered_indices,
)

# Import indices to trigger registration
from sparsevec.indices.int_index import IntIndex
from sparsevec.indices.uint32_index import Uint32Index
from sparsevec.indices.string_index import StringIndex

__all__ = [
    "VectorIndex",
    "IndexFactory",
    "register_index",
    "get_registered_indices",
    "IntIndex",
    "Uint32Index",
    "StringIndex",
]
