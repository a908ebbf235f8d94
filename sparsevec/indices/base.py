"""Abstract base class for sparse vector indices."""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, List, Sequence

from sparsevec.core.exceptions import KindMismatchError


class VectorIndex(ABC):
    """
    Ordered sequence of keys backing a sparse vector.

    The index is sorted in parallel with the vector's values, so positions
    are what callers compare and swap. Keys at two positions can be compared
    within one index (``less``) or against a position in another index of
    the same concrete kind (``less_than_other``).

    Subclasses define ``kind`` and ``_coerce``. The default storage is a
    Python list; subclasses may replace it.
    """

    kind: str = ""

    def __init__(self, keys: Iterable[Any] = ()):
        self._keys: List[Any] = [self._coerce(k) for k in keys]

    @abstractmethod
    def _coerce(self, key: Any) -> Any:
        """Validate a key and convert it to the stored type."""
        pass

    def __len__(self) -> int:
        return len(self._keys)

    def less(self, i: int, j: int) -> bool:
        """True if the key at position i orders before the key at position j."""
        return self._keys[i] < self._keys[j]

    def less_than_other(self, i: int, other: "VectorIndex", j: int) -> bool:
        """
        True if this index's key at i orders before other's key at j.

        Raises:
            KindMismatchError: If other is a different concrete index kind
        """
        self.check_same_kind(other)
        return self._keys[i] < other._keys[j]

    def swap(self, i: int, j: int) -> None:
        keys = self._keys
        keys[i], keys[j] = keys[j], keys[i]

    def get_at_location(self, i: int) -> Any:
        return self._keys[i]

    def new(self, capacity: int = 0) -> "VectorIndex":
        """Create an empty index of the same kind."""
        # Lists grow on demand, so the capacity is only a hint.
        return type(self)()

    def append(self, key: Any) -> "VectorIndex":
        """
        Append a key and return the index to use from now on.

        Callers must use the returned value; an implementation may copy.
        """
        self._keys.append(self._coerce(key))
        return self

    def reorder(self, order: Sequence[int]) -> None:
        """Permute keys in place so position p holds the key previously at order[p]."""
        keys = self._keys
        self._keys = [keys[p] for p in order]

    def check_same_kind(self, other: "VectorIndex") -> None:
        if type(other) is not type(self):
            raise KindMismatchError(type(self), type(other))

    def keys(self) -> List[Any]:
        """Copy of the keys in their current order."""
        return list(self._keys)

    def __getitem__(self, i: int) -> Any:
        return self.get_at_location(i)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.keys() == other.keys()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self)})"
