"""
Sparse vector specialised to uint32 keys.

This is the fastest representation. Keys and values are held in parallel
numpy arrays, sorted by key when the vector is created, so ``dot``, ``cos``,
``add`` and ``sub`` are linear scans. Keys and values are kept in separate
arrays so scanning the keys stays cheap.
"""

import logging
from typing import Iterable, Mapping, Sequence

import numpy as np

from sparsevec.core.exceptions import DuplicateKeyError
from sparsevec.core.types import SparseEntries, Value, ValueOp, ZERO, add_op, sub_op, to_values
from sparsevec.indices.uint32_index import MAX_UINT32, check_uint32, to_uint32_array
from sparsevec.vectors.base import SortedArrayVector
from sparsevec.vectors.factory import register_vector

logger = logging.getLogger(__name__)

# Larger than any real key, marks an exhausted side of a merge.
_EXHAUSTED = MAX_UINT32 + 1


@register_vector("uint32")
class SparseVectorUint32(SortedArrayVector):
    """
    Sparse vector with uint32 keys in a plain array.

    Usage:
        v1 = SparseVectorUint32([1, 2, 3], [4, 5, 6])
        v2 = SparseVectorUint32([1, 3, 4], [4, 5, 6])
        v1.add(v2).get_indices()  # array([1, 2, 3, 4], dtype=uint32)
    """

    def __init__(
        self,
        indices: Iterable[int],
        values: Sequence[float],
        check_duplicates: bool = True,
    ):
        """
        Args:
            indices: Keys of present entries, each in [0, 2**32 - 1]
            values: Value for each key, parallel to indices
            check_duplicates: Raise DuplicateKeyError on repeated keys

        Raises:
            ShapeMismatchError: If indices and values differ in length
            DuplicateKeyError: If a key repeats and check_duplicates is set
        """
        super().__init__()
        indices = to_uint32_array(indices)
        values = to_values(values)
        self._check_shape(len(indices), len(values))

        self._indices = indices
        self._values = values
        self.sort()
        if check_duplicates:
            self._check_duplicates()

    @classmethod
    def _from_sorted(cls, indices: np.ndarray, values: np.ndarray) -> "SparseVectorUint32":
        v = cls.__new__(cls)
        SortedArrayVector.__init__(v)
        v._indices = indices
        v._values = values
        return v

    @classmethod
    def from_entries(cls, entries: SparseEntries, **kwargs) -> "SparseVectorUint32":
        return cls(entries.indices, entries.values, **kwargs)

    def sort(self) -> None:
        """
        Co-sort keys and values by ascending key.

        Runs at construction. Call again after a map_indices that did not
        preserve key order.
        """
        order = np.argsort(self._indices, kind="stable")
        self._indices[:] = self._indices[order]
        self._values[:] = self._values[order]

    def _check_duplicates(self) -> None:
        repeats = np.flatnonzero(self._indices[1:] == self._indices[:-1])
        if len(repeats):
            raise DuplicateKeyError(int(self._indices[repeats[0] + 1]))

    def _key_at(self, i: int) -> int:
        return int(self._indices[i])

    def get_indices(self) -> np.ndarray:
        """Read-only view of the keys in ascending order."""
        view = self._indices.view()
        view.flags.writeable = False
        return view

    def map_indices(self, mapping: Mapping[int, int]) -> None:
        """
        Replace every key with mapping[key].

        Intended for compacting the key space across a set of vectors, e.g.
        moving the keys in use to the front. The vector is NOT re-sorted:
        the mapping must preserve key order, or call sort() afterwards.

        Raises:
            KeyError: If a key has no image; nothing is changed
        """
        mapped = np.array(
            [check_uint32(mapping[k]) for k in self._indices.tolist()],
            dtype=np.uint32,
        )
        self._indices[:] = mapped

    def dot(self, other: "SparseVectorUint32") -> Value:
        """
        Dot product by two-pointer merge over both key arrays.

        Raises:
            KindMismatchError: If other is not a SparseVectorUint32
        """
        self._check_kind(other)
        k1 = self._indices.tolist()
        k2 = other._indices.tolist()
        v1, v2 = self._values, other._values
        n1, n2 = len(k1), len(k2)

        i1 = i2 = 0
        dp = ZERO
        while i1 < n1 and i2 < n2:
            a, b = k1[i1], k2[i2]
            if a < b:
                i1 += 1
            elif b < a:
                i2 += 1
            else:
                dp += v1[i1] * v2[i2]
                i1 += 1
                i2 += 1
        return Value(dp)

    def add(self, other: "SparseVectorUint32") -> "SparseVectorUint32":
        return self._merge(other, add_op)

    def sub(self, other: "SparseVectorUint32") -> "SparseVectorUint32":
        return self._merge(other, sub_op)

    def _merge(self, other: "SparseVectorUint32", op: ValueOp) -> "SparseVectorUint32":
        self._check_kind(other)
        k1 = self._indices.tolist()
        k2 = other._indices.tolist()
        v1, v2 = self._values, other._values
        n1, n2 = len(k1), len(k2)

        out_keys = []
        out_values = []
        i1 = i2 = 0
        while True:
            a = k1[i1] if i1 < n1 else _EXHAUSTED
            b = k2[i2] if i2 < n2 else _EXHAUSTED
            if a < b:
                out_keys.append(a)
                out_values.append(op(v1[i1], ZERO))
                i1 += 1
            elif b < a:
                out_keys.append(b)
                out_values.append(op(ZERO, v2[i2]))
                i2 += 1
            elif a == _EXHAUSTED:
                break
            else:
                out_keys.append(a)
                out_values.append(op(v1[i1], v2[i2]))
                i1 += 1
                i2 += 1

        logger.debug(f"Merged {n1} and {n2} entries into {len(out_keys)}")
        # Already sorted
        return self._from_sorted(
            np.array(out_keys, dtype=np.uint32),
            np.array(out_values, dtype=Value),
        )

    def copy(self) -> "SparseVectorUint32":
        return self._from_sorted(self._indices.copy(), self._values.copy())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            np.array_equal(self._indices, other._indices)
            and np.array_equal(self._values, other._values)
        )
