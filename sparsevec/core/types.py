"""Shared types used across modules."""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

import numpy as np

# Single precision throughout; swap here to change precision.
Value = np.float32

ValueOp = Callable[[Value, Value], Value]

ZERO = Value(0)


def add_op(v1: Value, v2: Value) -> Value:
    return v1 + v2


def sub_op(v1: Value, v2: Value) -> Value:
    return v1 - v2


def to_values(values) -> np.ndarray:
    """Copy values into an owned float32 array."""
    return np.array(values, dtype=Value).reshape(-1)


@dataclass
class SparseEntries:
    """
    Plain record of sparse vector entries.

    Attributes:
        indices: Keys of present entries
        values: Value for each key
    """
    indices: List[Any]
    values: List[float]

    def to_dict(self) -> Dict[Any, float]:
        """Convert to {key: value} dict."""
        return dict(zip(self.indices, self.values))

    def __repr__(self) -> str:
        return f"SparseEntries(nnz={len(self.indices)})"
