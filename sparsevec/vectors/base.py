"""Abstract base classes for sparse vectors."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterator, Tuple

import numpy as np

from sparsevec.core.exceptions import KindMismatchError, ShapeMismatchError
from sparsevec.core.types import SparseEntries, Value, ZERO


class Vector(ABC):
    """
    Abstract base class that all vector representations must implement.

    Binary operations require both operands to be the same concrete
    representation; anything else raises KindMismatchError.

    The magnitude is computed lazily and cached. Every method that changes
    values must call ``_invalidate``. Vectors are not thread safe.
    """

    def __init__(self):
        self._mag = ZERO
        self._mag_clean = False

    @abstractmethod
    def dot(self, other: "Vector") -> Value:
        """Dot product of this vector and another."""
        pass

    @abstractmethod
    def _sum_of_squares(self) -> Value:
        pass

    @abstractmethod
    def add(self, other: "Vector") -> "Vector":
        """Return a new vector holding this + other."""
        pass

    @abstractmethod
    def sub(self, other: "Vector") -> "Vector":
        """Return a new vector holding this - other."""
        pass

    @abstractmethod
    def mult(self, scalar: float) -> None:
        """Multiply every present value by scalar, in place."""
        pass

    @abstractmethod
    def copy(self) -> "Vector":
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[Any, Value]]:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def mag(self) -> Value:
        """Euclidean norm of the present values, cached until the next mutation."""
        if not self._mag_clean:
            self._mag = Value(np.sqrt(self._sum_of_squares()))
            self._mag_clean = True
        return self._mag

    def cos(self, other: "Vector") -> Value:
        """
        Cosine of the angle between this vector and another.

        A zero-magnitude operand gives nan (or inf), not an error.
        """
        dp = self.dot(other)
        with np.errstate(divide="ignore", invalid="ignore"):
            return Value(dp / (self.mag() * other.mag()))

    def _invalidate(self) -> None:
        self._mag_clean = False

    def _check_kind(self, other: Any) -> None:
        if type(other) is not type(self):
            raise KindMismatchError(type(self), type(other))

    @staticmethod
    def _check_shape(n_indices: int, n_values: int) -> None:
        if n_indices != n_values:
            raise ShapeMismatchError(n_indices, n_values)

    def to_dict(self) -> Dict[Any, float]:
        """Convert to {key: value} dict."""
        return {key: float(value) for key, value in self}

    def to_entries(self) -> SparseEntries:
        keys, values = [], []
        for key, value in self:
            keys.append(key)
            values.append(float(value))
        return SparseEntries(indices=keys, values=values)

    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.sub(other)

    def __mul__(self, scalar: float) -> "Vector":
        result = self.copy()
        result.mult(scalar)
        return result

    __rmul__ = __mul__

    def __matmul__(self, other: "Vector") -> Value:
        return self.dot(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nnz={len(self)})"


class SparseVector(Vector):
    """
    Vector with operations on present values only.

    ``mean``, ``add_const`` and ``sub_const`` exist so a vector can be
    mean-centered over its sparse support. Absent entries stay zero.
    """

    @abstractmethod
    def mean(self) -> Value:
        """Mean of the present values."""
        pass

    @abstractmethod
    def add_const(self, to_add: float) -> None:
        pass

    def sub_const(self, to_sub: float) -> None:
        self.add_const(-Value(to_sub))

    @abstractmethod
    def iter(self, f: Callable[[Any, Value], None]) -> None:
        """Call f(key, value) for each present entry."""
        pass

    @abstractmethod
    def iter_update(self, f: Callable[[Any, Value], float]) -> None:
        """Replace each present value with f(key, value)."""
        pass


class SortedArrayVector(SparseVector):
    """
    Shared value handling for the sorted parallel-array representations.

    Subclasses own the keys and provide ``_key_at``; values live in a
    float32 array positionally paired with the keys.
    """

    _values: np.ndarray

    @abstractmethod
    def _key_at(self, i: int) -> Any:
        pass

    def _sum_of_squares(self) -> Value:
        return Value(np.dot(self._values, self._values))

    def mean(self) -> Value:
        total = Value(np.sum(self._values, dtype=Value))
        with np.errstate(divide="ignore", invalid="ignore"):
            return Value(total / Value(len(self._values)))

    def add_const(self, to_add: float) -> None:
        self._values += Value(to_add)
        self._invalidate()

    def mult(self, scalar: float) -> None:
        self._values *= Value(scalar)
        self._invalidate()

    def iter(self, f: Callable[[Any, Value], None]) -> None:
        for i, value in enumerate(self._values):
            f(self._key_at(i), value)

    def iter_update(self, f: Callable[[Any, Value], float]) -> None:
        values = self._values
        for i in range(len(values)):
            values[i] = Value(f(self._key_at(i), values[i]))
        self._invalidate()

    def get_values(self) -> np.ndarray:
        """Read-only view of the values in key order."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Tuple[Any, Value]]:
        for i, value in enumerate(self._values):
            yield self._key_at(i), value
