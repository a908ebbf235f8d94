"""Core module - shared types, errors and configuration."""
from sparsevec.core.exceptions import (
    SparseVectorError,
    KindMismatchError,
    ShapeMismatchError,
    DuplicateKeyError,
)
from sparsevec.core.types import Value, ValueOp, SparseEntries, add_op, sub_op
from sparsevec.core.config import Config, VectorSettings

__all__ = [
    "SparseVectorError",
    "KindMismatchError",
    "ShapeMismatchError",
    "DuplicateKeyError",
    "Value",
    "ValueOp",
    "SparseEntries",
    "add_op",
    "sub_op",
    "Config",
    "VectorSettings",
]
