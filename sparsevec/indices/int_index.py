"""Index of signed integer keys."""

import numbers
from typing import Any

from sparsevec.indices.base import VectorIndex
from sparsevec.indices.factory import register_index


@register_index("int")
class IntIndex(VectorIndex):
    """Keys are Python ints of any size and sign."""

    kind = "int"

    def _coerce(self, key: Any) -> int:
        if isinstance(key, bool) or not isinstance(key, numbers.Integral):
            raise TypeError(f"IntIndex keys must be integers, got {type(key).__name__}")
        return int(key)
