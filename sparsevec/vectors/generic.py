"""Sparse vector keyed by any orderable index kind."""

import logging
from functools import cmp_to_key
from typing import Any, Iterable, Sequence, Union

import numpy as np

from sparsevec.core.exceptions import DuplicateKeyError
from sparsevec.core.types import SparseEntries, Value, ValueOp, ZERO, add_op, sub_op, to_values
from sparsevec.indices import IndexFactory, VectorIndex
from sparsevec.vectors.base import SortedArrayVector
from sparsevec.vectors.factory import register_vector

logger = logging.getLogger(__name__)


@register_vector("generic")
class GenSparseVector(SortedArrayVector):
    """
    Sparse vector whose rows can be identified by any orderable key type.

    For example, the rows could be usernames, URLs or document names. Keys
    live in a VectorIndex and values in a parallel float32 array; both are
    co-sorted by key at construction so every binary operation is a single
    linear merge.

    Comparisons go through the index, so this is slower than
    SparseVectorUint32 for integer keys, but it is still usually faster than
    MapSparseVector for the lengths we care about.

    Usage:
        ratings = GenSparseVector(StringIndex(["liz", "brian"]), [4.5, 1.0])
        other = GenSparseVector(StringIndex(["brian", "penny"]), [3.0, 5.0])
        ratings.cos(other)
    """

    def __init__(
        self,
        index: Union[VectorIndex, Iterable[Any]],
        values: Sequence[float],
        index_kind: str = "int",
        check_duplicates: bool = True,
    ):
        """
        Args:
            index: Keys of present entries. A VectorIndex is taken over and
                reordered in place; any other iterable is wrapped in an
                index of ``index_kind``.
            values: Value for each key, parallel to index
            index_kind: Index kind for plain key sequences. The constructor
                does not read config; VectorFactory.from_config passes the
                configured vectors.index_kind here.
            check_duplicates: Raise DuplicateKeyError on repeated keys

        Raises:
            ShapeMismatchError: If index and values differ in length
            DuplicateKeyError: If a key repeats and check_duplicates is set
        """
        super().__init__()
        if not isinstance(index, VectorIndex):
            index = IndexFactory.create(index_kind, index)
        values = to_values(values)
        self._check_shape(len(index), len(values))

        self._index = index
        self._values = values
        self._sort()
        if check_duplicates:
            self._check_duplicates()

    @classmethod
    def _from_sorted(cls, index: VectorIndex, values: np.ndarray) -> "GenSparseVector":
        v = cls.__new__(cls)
        SortedArrayVector.__init__(v)
        v._index = index
        v._values = values
        return v

    @classmethod
    def from_entries(cls, entries: SparseEntries, **kwargs) -> "GenSparseVector":
        return cls(entries.indices, entries.values, **kwargs)

    def _sort(self) -> None:
        index = self._index

        def compare(i: int, j: int) -> int:
            if index.less(i, j):
                return -1
            if index.less(j, i):
                return 1
            return 0

        order = sorted(range(len(index)), key=cmp_to_key(compare))
        index.reorder(order)
        self._values[:] = self._values[np.asarray(order, dtype=np.intp)]
        logger.debug(f"Sorted {len(order)} entries by {index.kind} key")

    def _check_duplicates(self) -> None:
        index = self._index
        for i in range(1, len(index)):
            # Sorted, so anything not strictly increasing is a repeat.
            if not index.less(i - 1, i):
                raise DuplicateKeyError(index.get_at_location(i))

    def _check_kind(self, other: Any) -> None:
        super()._check_kind(other)
        self._index.check_same_kind(other._index)

    def _key_at(self, i: int) -> Any:
        return self._index.get_at_location(i)

    def get_index(self) -> VectorIndex:
        return self._index

    def dot(self, other: "GenSparseVector") -> Value:
        """
        Dot product by two-pointer merge over both sorted indices.

        Raises:
            KindMismatchError: If other is not a GenSparseVector with the
                same index kind
        """
        self._check_kind(other)
        idx1, idx2 = self._index, other._index
        v1, v2 = self._values, other._values
        n1, n2 = len(idx1), len(idx2)

        i1 = i2 = 0
        dp = ZERO
        while i1 < n1 and i2 < n2:
            if idx1.less_than_other(i1, idx2, i2):
                i1 += 1
            elif idx2.less_than_other(i2, idx1, i1):
                i2 += 1
            else:
                dp += v1[i1] * v2[i2]
                i1 += 1
                i2 += 1
        return Value(dp)

    def add(self, other: "GenSparseVector") -> "GenSparseVector":
        return self._merge(other, add_op)

    def sub(self, other: "GenSparseVector") -> "GenSparseVector":
        return self._merge(other, sub_op)

    def _merge(self, other: "GenSparseVector", op: ValueOp) -> "GenSparseVector":
        """
        Combine two vectors key by key with op.

        Keys only in self give op(v, 0), keys only in other give op(0, v),
        shared keys give op(v1, v2). The output is already sorted.
        """
        self._check_kind(other)
        idx1, idx2 = self._index, other._index
        v1, v2 = self._values, other._values
        n1, n2 = len(idx1), len(idx2)

        out_index = idx1.new(max(n1, n2))
        out_values = []
        i1 = i2 = 0
        while i1 < n1 or i2 < n2:
            if i2 >= n2 or (i1 < n1 and idx1.less_than_other(i1, idx2, i2)):
                out_index = out_index.append(idx1.get_at_location(i1))
                out_values.append(op(v1[i1], ZERO))
                i1 += 1
            elif i1 >= n1 or idx2.less_than_other(i2, idx1, i1):
                out_index = out_index.append(idx2.get_at_location(i2))
                out_values.append(op(ZERO, v2[i2]))
                i2 += 1
            else:
                out_index = out_index.append(idx1.get_at_location(i1))
                out_values.append(op(v1[i1], v2[i2]))
                i1 += 1
                i2 += 1

        logger.debug(f"Merged {n1} and {n2} entries into {len(out_values)}")
        return self._from_sorted(out_index, np.array(out_values, dtype=Value))

    def copy(self) -> "GenSparseVector":
        index = self._index.new(len(self._index))
        for key in self._index.keys():
            index = index.append(key)
        return self._from_sorted(index, self._values.copy())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._index == other._index and np.array_equal(self._values, other._values)
