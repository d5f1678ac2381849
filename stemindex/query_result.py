"""
Per-location search outcome and its ranking order.

A MatchResult is created the first time a location matches a query and then
absorbs every further matching term for that query via combine().
"""


class MatchResult:
    """
    Match strength of one location against one query.
    - word_count: words recorded for the location (fixed, > 0)
    - match_count: matching term occurrences so far
    - score: match_count / word_count, kept in step with match_count

    Ordering (sorted() ascending = best first): score descending, then
    match_count descending, then location ascending ignoring case.
    """

    __slots__ = ("_word_count", "_match_count", "_score", "location")

    def __init__(self, word_count: int, match_count: int, location: str) -> None:
        if word_count <= 0:
            raise ValueError(f"word_count must be positive for {location!r}: {word_count}")
        self._word_count = word_count
        self.location = location
        self.set_match_count(match_count)

    @property
    def word_count(self) -> int:
        return self._word_count

    @property
    def match_count(self) -> int:
        return self._match_count

    @property
    def score(self) -> float:
        return self._score

    def set_match_count(self, match_count: int) -> None:
        self._match_count = match_count
        self._score = match_count / self._word_count

    def combine(self, other: "MatchResult") -> None:
        """Add other's matches into this result (same location only)."""
        if other.location != self.location:
            raise ValueError(
                f"Cannot combine results for different locations: "
                f"{self.location!r} and {other.location!r}"
            )
        self.set_match_count(self._match_count + other.match_count)

    def sort_key(self) -> tuple[float, int, str]:
        return (-self._score, -self._match_count, self.location.lower())

    def compare(self, other: "MatchResult") -> int:
        """Negative if self ranks before other, positive if after, else 0."""
        mine, theirs = self.sort_key(), other.sort_key()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: "MatchResult") -> bool:
        return self.sort_key() < other.sort_key()

    def score_string(self) -> str:
        """Score as fixed-point text with 8 decimal digits."""
        return f"{self._score:.8f}"

    def __str__(self) -> str:
        return f'count: {self._match_count}, score: {self.score_string()}, where: "{self.location}"'

    def __repr__(self) -> str:
        return (
            f"MatchResult(word_count={self._word_count}, "
            f"match_count={self._match_count}, location={self.location!r})"
        )
