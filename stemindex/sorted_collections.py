"""
Ordered containers backing the inverted index.

Keys and positions are kept sorted on insertion (binary search via bisect),
so every iteration already yields ascending order and no caller ever sorts.
The *View classes are read-only wrappers over the live containers: they
expose the collections.abc read interfaces and nothing that mutates.

Not thread-safe: one writer, no concurrent readers during writes.
"""

from bisect import bisect_left, insort
from collections.abc import Mapping, Set
from typing import Callable, Iterator


class SortedMap:
    """Mapping with keys held in ascending order."""

    __slots__ = ("_keys", "_items")

    def __init__(self) -> None:
        self._keys: list = []
        self._items: dict = {}

    def setdefault(self, key, factory: Callable):
        """Return the value for key, inserting factory() first if absent."""
        if key not in self._items:
            insort(self._keys, key)
            self._items[key] = factory()
        return self._items[key]

    def set(self, key, value) -> None:
        if key not in self._items:
            insort(self._keys, key)
        self._items[key] = value

    def get(self, key, default=None):
        return self._items.get(key, default)

    def prefixed(self, prefix: str) -> Iterator:
        """Iterate keys starting with prefix, in order."""
        i = bisect_left(self._keys, prefix)
        while i < len(self._keys) and self._keys[i].startswith(prefix):
            yield self._keys[i]
            i += 1

    def items(self) -> Iterator[tuple]:
        for key in self._keys:
            yield key, self._items[key]

    def __getitem__(self, key):
        return self._items[key]

    def __contains__(self, key) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return "{" + body + "}"


class SortedIntSet:
    """Ascending, duplicate-free set of integers."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: list[int] = []

    def add(self, value: int) -> bool:
        """Insert value; return True iff the set changed."""
        i = bisect_left(self._values, value)
        if i < len(self._values) and self._values[i] == value:
            return False
        self._values.insert(i, value)
        return True

    def __contains__(self, value) -> bool:
        i = bisect_left(self._values, value)
        return i < len(self._values) and self._values[i] == value

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return repr(self._values)


class PositionsView(Set):
    """Read-only view of a SortedIntSet (iterates ascending)."""

    __slots__ = ("_data",)

    def __init__(self, data: SortedIntSet | None = None) -> None:
        self._data = data if data is not None else SortedIntSet()

    def __contains__(self, value) -> bool:
        return value in self._data

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PositionsView({list(self._data)!r})"


class MapView(Mapping):
    """
    Read-only view of a SortedMap.

    Nested SortedMap / SortedIntSet values are wrapped in views on access,
    so no path through a view reaches a mutable container.
    """

    __slots__ = ("_data",)

    def __init__(self, data: SortedMap | None = None) -> None:
        self._data = data if data is not None else SortedMap()

    def __getitem__(self, key):
        return wrap(self._data[key])

    def __contains__(self, key) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MapView({self._data!r})"


def wrap(value):
    """Return a read-only view for container values, scalars unchanged."""
    if isinstance(value, SortedMap):
        return MapView(value)
    if isinstance(value, SortedIntSet):
        return PositionsView(value)
    return value


EMPTY_MAP = MapView()
EMPTY_POSITIONS = PositionsView()
