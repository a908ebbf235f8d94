"""Custom exceptions for sparse vectors."""


class SparseVectorError(Exception):
    """Base class for structural sparse vector errors."""
    pass


class KindMismatchError(SparseVectorError, TypeError):
    """Raised when two vectors or indices of different concrete kinds are combined."""

    def __init__(self, expected: type, got: type):
        self.expected = expected
        self.got = got
        super().__init__(
            f"Kind mismatch: expected {expected.__name__}, got {got.__name__}"
        )


class ShapeMismatchError(SparseVectorError, ValueError):
    """Raised when parallel index and value sequences differ in length."""

    def __init__(self, n_indices: int, n_values: int):
        self.n_indices = n_indices
        self.n_values = n_values
        super().__init__(
            f"Index and value lengths differ: {n_indices} indices, {n_values} values"
        )


class DuplicateKeyError(SparseVectorError, ValueError):
    """Raised when the same key is supplied more than once at construction."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Duplicate key in sparse vector input: {key!r}")
