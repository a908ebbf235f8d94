"""Index of string keys, e.g. usernames, URLs or document names."""

from typing import Any

from sparsevec.indices.base import VectorIndex
from sparsevec.indices.factory import register_index


@register_index("string")
class StringIndex(VectorIndex):
    """Keys are strings ordered lexicographically by code point."""

    kind = "string"

    def _coerce(self, key: Any) -> str:
        if not isinstance(key, str):
            raise TypeError(f"StringIndex keys must be str, got {type(key).__name__}")
        return key
