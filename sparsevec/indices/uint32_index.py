"""Index of unsigned 32-bit integer keys."""

import numbers
from typing import Any, Iterable

import numpy as np

from sparsevec.indices.base import VectorIndex
from sparsevec.indices.factory import register_index

MAX_UINT32 = 2**32 - 1


def check_uint32(key: Any) -> int:
    """
    Validate a single uint32 key.

    Raises:
        TypeError: If the key is not an integer
        ValueError: If the key is outside [0, 2**32 - 1]
    """
    if isinstance(key, bool) or not isinstance(key, numbers.Integral):
        raise TypeError(f"uint32 keys must be integers, got {type(key).__name__}")
    key = int(key)
    if not 0 <= key <= MAX_UINT32:
        raise ValueError(f"Key {key} out of uint32 range")
    return key


def to_uint32_array(keys: Iterable[Any]) -> np.ndarray:
    """Copy keys into an owned, validated uint32 array."""
    if isinstance(keys, np.ndarray) and keys.dtype == np.uint32:
        return keys.reshape(-1).copy()
    return np.array([check_uint32(k) for k in keys], dtype=np.uint32).reshape(-1)


@register_index("uint32")
class Uint32Index(VectorIndex):
    """Keys are unsigned 32-bit integers held as Python ints."""

    kind = "uint32"

    def _coerce(self, key: Any) -> int:
        return check_uint32(key)
