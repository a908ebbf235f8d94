"""Tests for SparseVectorUint32."""

import math

import numpy as np
import pytest

from sparsevec.core.exceptions import DuplicateKeyError, KindMismatchError, ShapeMismatchError
from sparsevec.core.types import Value
from sparsevec.vectors import MapSparseVector, SparseVectorUint32

MAX_KEY = 2**32 - 1


def vec(indices, values, **kwargs):
    return SparseVectorUint32(indices, values, **kwargs)


class TestConstruction:
    """Tests for building and sorting."""

    def test_sorts_keys_and_values(self):
        """Should co-sort keys and values."""
        v = vec([9, 2, 5], [1, 2, 3])

        assert v.get_indices().tolist() == [2, 5, 9]
        assert v.get_values().tolist() == [2, 3, 1]

    def test_sort_invariant_random(self):
        """Keys should be ascending and still paired after sorting."""
        rng = np.random.default_rng(7)
        keys = rng.permutation(10000)[:7500]
        v = vec(keys, keys * 3)

        indices = v.get_indices()
        assert np.all(indices[:-1] < indices[1:])
        assert np.array_equal(v.get_values(), (indices * 3).astype(np.float32))

    def test_does_not_alias_caller_array(self):
        """Should sort its own copy of the input."""
        keys = np.array([3, 1, 2], dtype=np.uint32)
        vec(keys, [1, 2, 3])
        assert keys.tolist() == [3, 1, 2]

    def test_indices_read_only(self):
        """Keys exposed to callers cannot be written."""
        v = vec([1, 2], [1, 1])
        with pytest.raises(ValueError):
            v.get_indices()[0] = 5

    def test_shape_mismatch(self):
        """Should fail fast on unequal lengths."""
        with pytest.raises(ShapeMismatchError) as exc_info:
            vec([1, 2, 3], [1, 2])

        assert exc_info.value.n_indices == 3
        assert exc_info.value.n_values == 2

    @pytest.mark.parametrize("key", [-1, 2**32])
    def test_key_out_of_range(self, key):
        """Should reject keys outside uint32."""
        with pytest.raises(ValueError):
            vec([key], [1])

    def test_duplicate_keys_rejected(self):
        """Should reject repeated keys by default."""
        with pytest.raises(DuplicateKeyError) as exc_info:
            vec([4, 1, 4], [1, 2, 3])

        assert exc_info.value.key == 4

    def test_duplicate_keys_kept_when_unchecked(self):
        """Should leave duplicates in place when checking is off."""
        v = vec([4, 4], [1, 2], check_duplicates=False)
        assert len(v) == 2


class TestSimilarity:
    """Tests for dot, mag and cos."""

    def test_dot(self):
        """Dot sums products of shared keys."""
        v1 = vec([1, 2, 3], [4, 5, 6])
        v2 = vec([1, 3, 4], [4, 5, 6])

        assert v1.dot(v2) == 4 * 4 + 6 * 5
        assert v2.dot(v1) == v1.dot(v2)

    def test_dot_disjoint(self):
        """No shared keys gives zero."""
        assert vec([1, 2], [1, 1]).dot(vec([3, 4], [1, 1])) == 0

    def test_mag_and_cos(self):
        """Magnitude and cosine follow their definitions."""
        v1 = vec([1, 2], [3, 4])
        v2 = vec([2, 9], [4, 3])

        assert v1.mag() == 5
        assert v1.cos(v2) == pytest.approx(16 / 25, rel=1e-6)

    def test_cos_zero_vector(self):
        """Zero magnitude yields nan, not an exception."""
        zero = vec([1], [0])
        assert np.isnan(zero.cos(vec([1], [1])))

    def test_kind_mismatch(self):
        """Should refuse a different representation."""
        with pytest.raises(KindMismatchError):
            vec([1], [1]).dot(MapSparseVector([1], [1]))

    def test_mag_cache_follows_mutation(self):
        """Cached magnitude should never go stale."""
        v = vec([1, 2], [3, 4])
        assert v.mag() == 5

        v.mult(2)
        assert v.mag() == 10

        v.add_const(1)
        assert v.mag() == Value(math.sqrt(7 ** 2 + 9 ** 2))


class TestAlgebra:
    """Tests for add, sub and mult."""

    @pytest.mark.parametrize("v1,v2,expected", [
        (([1, 2, 3], [4, 5, 6]), ([1, 3, 4], [4, 5, 6]), ([1, 2, 3, 4], [8, 5, 11, 6])),
        (([], []), ([1, 3, 4], [4, 5, 6]), ([1, 3, 4], [4, 5, 6])),
        (([2], [7]), ([1, 3, 4], [4, 5, 6]), ([1, 2, 3, 4], [4, 7, 5, 6])),
        (([1, 3, 4], [4, 5, 6]), ([1, 3, 4], [4, 5, 6]), ([1, 3, 4], [8, 10, 12])),
        (([1, 3, 4], [4, 5, 6]), ([1, 3], [4, 5]), ([1, 3, 4], [8, 10, 6])),
        (([1, 3, 4], [4, 5, 6]), ([], []), ([1, 3, 4], [4, 5, 6])),
    ])
    def test_add(self, v1, v2, expected):
        """Sum should match in both orders."""
        a, b, exp = vec(*v1), vec(*v2), vec(*expected)

        assert a.add(b) == exp
        assert b.add(a) == exp

    def test_sub_self_is_zero(self):
        """Subtracting a vector from itself keeps its keys with zero values."""
        v1 = vec([1, 3, 4], [4, 5, 6])
        v2 = vec([1, 3, 4], [4, 5, 6])

        result = v1.sub(v2)

        assert result.get_indices().tolist() == [1, 3, 4]
        assert result.get_values().tolist() == [0, 0, 0]

    def test_sub_anti_symmetry(self):
        """a - b should be the negation of b - a at every key."""
        a = vec([1, 2, 5], [1.5, 2, 3])
        b = vec([2, 3], [4, 0.25])

        left = a.sub(b).to_dict()
        right = b.sub(a).to_dict()

        assert left.keys() == right.keys()
        for key in left:
            assert left[key] == -right[key]

    def test_merge_handles_largest_key(self):
        """A real key equal to the largest uint32 should merge normally."""
        a = vec([1, MAX_KEY], [1, 2])
        b = vec([MAX_KEY], [5])

        assert a.add(b).to_dict() == {1: 1.0, MAX_KEY: 7.0}
        assert b.add(a).to_dict() == {1: 1.0, MAX_KEY: 7.0}
        assert a.sub(b).to_dict() == {1: 1.0, MAX_KEY: -3.0}

    @pytest.mark.parametrize("values,scalar,expected", [
        ([4, 5, 6], 1, [4, 5, 6]),
        ([4, 5, 6], 0, [0, 0, 0]),
        ([4, 5, 6], -1, [-4, -5, -6]),
        ([4, 5, 6], 137.4, [549.6, 687, 824.39996]),
    ])
    def test_mult(self, values, scalar, expected):
        """Should scale with single precision rounding."""
        v = vec([1, 3, 4], values)
        v.mult(scalar)
        assert v == vec([1, 3, 4], expected)

    def test_mult_empty(self):
        """Scaling an empty vector is a no-op."""
        v = vec([], [])
        v.mult(3)
        assert len(v) == 0


class TestMapIndices:
    """Tests for key remapping."""

    def test_order_preserving_map(self):
        """Should compact keys without reordering."""
        v = vec([100, 7, 52], [1, 2, 3])

        v.map_indices({7: 0, 52: 1, 100: 2})

        assert v.get_indices().tolist() == [0, 1, 2]
        assert v.get_values().tolist() == [2, 3, 1]

    def test_map_then_sort(self):
        """A non-monotone map needs an explicit sort."""
        v = vec([1, 2, 3], [10, 20, 30])

        v.map_indices({1: 9, 2: 8, 3: 7})
        assert v.get_indices().tolist() == [9, 8, 7]

        v.sort()
        assert v.get_indices().tolist() == [7, 8, 9]
        assert v.get_values().tolist() == [30, 20, 10]

    def test_missing_key_leaves_vector_unchanged(self):
        """Should raise KeyError before changing anything."""
        v = vec([1, 2], [1, 1])

        with pytest.raises(KeyError):
            v.map_indices({1: 5})

        assert v.get_indices().tolist() == [1, 2]


class TestIteration:
    """Tests for iter, iter_update and the Python protocol."""

    def test_iter(self):
        """Should visit keys in ascending order."""
        v = vec([3, 1], [30, 10])
        seen = []
        v.iter(lambda key, value: seen.append((key, float(value))))
        assert seen == [(1, 10.0), (3, 30.0)]

    def test_iter_update(self):
        """Should replace values using key and value."""
        v = vec([1, 2], [1, 1])
        v.iter_update(lambda key, value: key * value)
        assert v.get_values().tolist() == [1, 2]
        assert v.mag() == Value(math.sqrt(5))

    def test_dunder_iter_and_len(self):
        """Should yield (key, value) pairs."""
        v = vec([2, 1], [5, 4])
        assert len(v) == 2
        assert [(k, float(x)) for k, x in v] == [(1, 4.0), (2, 5.0)]

    def test_repr(self):
        """Repr shows non-zero count."""
        assert repr(vec([1, 2, 3], [1, 1, 1])) == "SparseVectorUint32(nnz=3)"
