"""
Query matching over an InvertedIndex.

A query line is normalized to its distinct sorted stems. Exact search counts
occurrences of each stem; partial search counts every term that starts with
a query stem. Each matching location gets one MatchResult per query, created
on its first match and combined with later ones, and results are returned
ranked best first.
"""

import logging
from pathlib import Path
from typing import Iterable

from .inverted_index import InvertedIndex
from .query_result import MatchResult
from .sorted_collections import MapView, SortedMap
from .tokenizer import get_unique_stems, read_document

logger = logging.getLogger(__name__)


def normalize_query(line: str) -> str:
    """Distinct sorted stems of line joined by spaces ("" if none)."""
    return " ".join(get_unique_stems(line))


def _collect(index: InvertedIndex, terms: Iterable[str]) -> list[MatchResult]:
    """One result per matching location over terms, ranked."""
    by_location: dict[str, MatchResult] = {}
    for term in terms:
        for location, positions in index.locations_of(term).items():
            match = MatchResult(index.word_count(location), len(positions), location)
            existing = by_location.get(location)
            if existing is None:
                by_location[location] = match
            else:
                existing.combine(match)
    return sorted(by_location.values())


def exact_search(index: InvertedIndex, stems: Iterable[str]) -> list[MatchResult]:
    """Rank locations containing any of stems exactly."""
    return _collect(index, (s for s in sorted(set(stems)) if index.has_term(s)))


def partial_search(index: InvertedIndex, stems: Iterable[str]) -> list[MatchResult]:
    """Rank locations containing any term that starts with one of stems."""
    terms: set[str] = set()
    for stem in set(stems):
        terms.update(index.terms_with_prefix(stem))
    return _collect(index, sorted(terms))


def search(index: InvertedIndex, stems: Iterable[str], partial: bool = False) -> list[MatchResult]:
    return partial_search(index, stems) if partial else exact_search(index, stems)


class QueryProcessor:
    """
    Runs query lines against an index and keeps query -> ranked results,
    ordered by query text. Repeated queries are answered once.
    Not thread-safe.
    """

    def __init__(self, index: InvertedIndex, partial: bool = False) -> None:
        self.index = index
        self.partial = partial
        self._results: SortedMap = SortedMap()

    def process_line(self, line: str) -> str | None:
        """
        Search one query line. Returns the normalized query, or None when
        the line has no stems.
        """
        query = normalize_query(line)
        if not query:
            return None
        if query not in self._results:
            self._results.set(query, tuple(search(self.index, query.split(), self.partial)))
        return query

    def process_file(self, path: Path) -> int:
        """Search every line of a query file; return number of queries kept."""
        for line in read_document(path).splitlines():
            self.process_line(line)
        logger.info("Processed %d queries from %s", len(self._results), path)
        return len(self._results)

    def results(self) -> MapView:
        """Read-only query -> ranked results view."""
        return MapView(self._results)

    def results_of(self, query: str) -> list[MatchResult]:
        """Copy of the ranked results for a line ([] if never queried)."""
        return list(self._results.get(normalize_query(query), []))

    def has_query(self, query: str) -> bool:
        return normalize_query(query) in self._results

    def query_count(self) -> int:
        return len(self._results)
