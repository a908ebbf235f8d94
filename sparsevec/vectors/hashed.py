"""Sparse vector held in a dict, the baseline representation."""

import logging
import math
from typing import Dict, Iterable, Iterator, Sequence, Tuple

from sparsevec.core.exceptions import DuplicateKeyError
from sparsevec.core.types import SparseEntries, Value, ValueOp, ZERO, add_op, sub_op, to_values
from sparsevec.indices.uint32_index import check_uint32
from sparsevec.vectors.base import Vector
from sparsevec.vectors.factory import register_vector

logger = logging.getLogger(__name__)


@register_vector("map")
class MapSparseVector(Vector):
    """
    Sparse vector implemented as a {uint32 key: float32 value} dict.

    Simple and usually the slowest representation; which one wins depends
    on the data, so benchmark with your own vectors.
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
            check_duplicates: Raise DuplicateKeyError on repeated keys.
                When off, a repeated key keeps its last value.

        Raises:
            ShapeMismatchError: If indices and values differ in length
            DuplicateKeyError: If a key repeats and check_duplicates is set
        """
        super().__init__()
        keys = [check_uint32(k) for k in indices]
        values = to_values(values)
        self._check_shape(len(keys), len(values))

        self._values: Dict[int, Value] = dict(zip(keys, values))
        if check_duplicates and len(self._values) != len(keys):
            seen = set()
            for key in keys:
                if key in seen:
                    raise DuplicateKeyError(key)
                seen.add(key)

    @classmethod
    def _from_dict(cls, values: Dict[int, Value]) -> "MapSparseVector":
        v = cls.__new__(cls)
        Vector.__init__(v)
        v._values = values
        return v

    @classmethod
    def from_entries(cls, entries: SparseEntries, **kwargs) -> "MapSparseVector":
        return cls(entries.indices, entries.values, **kwargs)

    def _sum_of_squares(self) -> Value:
        total = ZERO
        for v in self._values.values():
            total += v * v
        return total

    def dot(self, other: "MapSparseVector") -> Value:
        """
        Dot product, probing the larger dict with each key of the smaller.

        Products are summed exactly with math.fsum, so the result does not
        depend on dict iteration order and a.dot(b) == b.dot(a).

        Raises:
            KindMismatchError: If other is not a MapSparseVector
        """
        self._check_kind(other)
        small, large = self._values, other._values
        if len(large) < len(small):
            small, large = large, small

        products = []
        for key, v in small.items():
            v2 = large.get(key)
            if v2 is not None:
                # float32 * float32 is exact in float64
                products.append(float(v) * float(v2))
        return Value(math.fsum(products))

    def add(self, other: "MapSparseVector") -> "MapSparseVector":
        return self._merge(other, add_op)

    def sub(self, other: "MapSparseVector") -> "MapSparseVector":
        return self._merge(other, sub_op)

    def _merge(self, other: "MapSparseVector", op: ValueOp) -> "MapSparseVector":
        self._check_kind(other)
        out = {key: op(v, ZERO) for key, v in self._values.items()}
        for key, v in other._values.items():
            mine = self._values.get(key)
            out[key] = op(ZERO, v) if mine is None else op(mine, v)

        logger.debug(f"Merged {len(self._values)} and {len(other._values)} entries into {len(out)}")
        return self._from_dict(out)

    def mult(self, scalar: float) -> None:
        scalar = Value(scalar)
        values = self._values
        for key in values:
            values[key] = values[key] * scalar
        self._invalidate()

    def get(self, key: int) -> Value:
        """Value at key, zero when absent."""
        return self._values.get(key, ZERO)

    def copy(self) -> "MapSparseVector":
        return self._from_dict(dict(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Tuple[int, Value]]:
        return iter(list(self._values.items()))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values
