"""
Inverted index: term -> location -> positions, ordered at every level.

Terms and locations iterate in ascending code-point order, positions in
ascending numeric order. Ordering holds at all times because every level is
a sorted container, so writers (see json_writer) never sort.
"""

from typing import Iterable, Iterator

from .sorted_collections import (
    EMPTY_MAP,
    EMPTY_POSITIONS,
    MapView,
    PositionsView,
    SortedIntSet,
    SortedMap,
)


class InvertedIndex:
    """
    Append-only positional inverted index.

    - add() is idempotent: a repeated (term, location, position) is a no-op
      and reports False.
    - Lookups on missing keys return zero / False / an empty view; nothing
      raises.
    - Views are read-only wrappers over live state.
    - Word counts: each new triple adds one word to its location.

    Not thread-safe. Build with a single writer; if concurrent builds are ever
    needed, shard by term and keep ordering per shard.
    """

    def __init__(self) -> None:
        self._index: SortedMap = SortedMap()
        self._counts: SortedMap = SortedMap()

    def add(self, term: str, location: str, position: int) -> bool:
        """Record term at position in location. Returns True iff new."""
        positions = self._index.setdefault(term, SortedMap).setdefault(
            location, SortedIntSet
        )
        if not positions.add(position):
            return False
        self._counts.set(location, self._counts.get(location, 0) + 1)
        return True

    def add_all(self, terms: Iterable[str], location: str, start: int = 1) -> int:
        """Add terms at consecutive positions from start; return number added."""
        added = 0
        for position, term in enumerate(terms, start=start):
            if self.add(term, location, position):
                added += 1
        return added

    def merge(self, other: "InvertedIndex") -> int:
        """Fold another index into this one; return number of new triples."""
        added = 0
        for term, locations in other._index.items():
            for location, positions in locations.items():
                for position in positions:
                    if self.add(term, location, position):
                        added += 1
        return added

    def has_term(self, term: str) -> bool:
        return term in self._index

    def has_location(self, term: str, location: str) -> bool:
        locations = self._index.get(term)
        return locations is not None and location in locations

    def has_position(self, term: str, location: str, position: int) -> bool:
        locations = self._index.get(term)
        if locations is None:
            return False
        positions = locations.get(location)
        return positions is not None and position in positions

    def term_count(self) -> int:
        return len(self._index)

    def location_count(self, term: str) -> int:
        locations = self._index.get(term)
        return len(locations) if locations is not None else 0

    def position_count(self, term: str, location: str) -> int:
        locations = self._index.get(term)
        if locations is None:
            return 0
        positions = locations.get(location)
        return len(positions) if positions is not None else 0

    def word_count(self, location: str) -> int:
        """
        Number of new (term, location, position) triples added for location.
        Two terms recorded at the same position count twice.
        """
        return self._counts.get(location, 0)

    def view(self) -> MapView:
        """Read-only view of the whole index."""
        return MapView(self._index)

    def locations_of(self, term: str) -> MapView:
        """Read-only location -> positions view for term (empty if absent)."""
        locations = self._index.get(term)
        return MapView(locations) if locations is not None else EMPTY_MAP

    def positions_of(self, term: str, location: str) -> PositionsView:
        """Read-only positions for (term, location) (empty if absent)."""
        locations = self._index.get(term)
        if locations is None:
            return EMPTY_POSITIONS
        positions = locations.get(location)
        return PositionsView(positions) if positions is not None else EMPTY_POSITIONS

    def word_counts(self) -> MapView:
        """Read-only location -> word count view."""
        return MapView(self._counts)

    def terms_with_prefix(self, prefix: str) -> Iterator[str]:
        """Iterate terms starting with prefix, in ascending order."""
        return self._index.prefixed(prefix)

    def to_dict(self) -> dict[str, dict[str, list[int]]]:
        """Plain nested copy, in iteration order."""
        return {
            term: {location: list(positions) for location, positions in locations.items()}
            for term, locations in self._index.items()
        }

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, term: str) -> bool:
        return term in self._index

    def __str__(self) -> str:
        return str(self._index)
