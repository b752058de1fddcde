"""Fuzzy matching of entry names against a query.

This module provides subsequence-style fuzzy matching on top of the
rapidfuzz library: a candidate matches when every query character
occurs in it in order, and the score rewards contiguous, early matches.
"""

from dataclasses import dataclass

from rapidfuzz import fuzz
from rapidfuzz.distance import LCSseq

# Score shaping. partial_ratio is 0-100, scaled so penalties stay integral.
RATIO_SCALE = 10
GAP_PENALTY = 5
LEADING_PENALTY = 1
PREFIX_BONUS = 25


@dataclass(frozen=True)
class FuzzyMatch:
    """Result of matching one candidate."""

    score: int
    positions: tuple[int, ...]  # indices into the candidate, ascending


def fold_case(text: str) -> str:
    """Lower-case ``text`` one character at a time, keeping its length.

    Characters whose lower-case form is longer than one character (such
    as ``İ``) are kept as they are, so indices into the result are
    indices into ``text``.
    """
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in text)


def tightest_positions(needle: str, haystack: str) -> tuple[int, ...]:
    """Positions of ``needle`` in ``haystack`` within the shortest early window.

    A forward pass finds the earliest index at which the whole needle has
    been seen in order. A backward pass from there takes the latest
    occurrence of each character, which shrinks the window to its
    tightest form. ``needle`` must be a subsequence of ``haystack``.

    Example:
        >>> tightest_positions("ap", "a_ap.txt")
        (2, 3)
    """
    qi = 0
    end = -1
    for i, ch in enumerate(haystack):
        if ch == needle[qi]:
            qi += 1
            if qi == len(needle):
                end = i
                break

    positions: list[int] = []
    qi = len(needle) - 1
    for i in range(end, -1, -1):
        if haystack[i] == needle[qi]:
            positions.append(i)
            qi -= 1
            if qi < 0:
                break
    return tuple(reversed(positions))


class Matcher:
    """Fuzzy matcher bound to a single query.

    Matching is deterministic for a fixed (candidate, query) pair and is
    safe to share between threads.
    """

    def __init__(self, query: str, *, case_sensitive: bool | None = None) -> None:
        """Initialize the matcher.

        Args:
            query: Search query.
            case_sensitive: Force case sensitivity. None enables smart
                case: insensitive unless the query has an upper-case
                character.
        """
        if case_sensitive is None:
            case_sensitive = any(ch.isupper() for ch in query)
        self.query = query
        self.case_sensitive = case_sensitive
        self._needle = query if case_sensitive else fold_case(query)

    def fmatch(self, candidate: str) -> FuzzyMatch | None:
        """Match a candidate against the query.

        Args:
            candidate: Text to test, usually a file name.

        Returns:
            FuzzyMatch with score and matched positions, or None.
        """
        needle = self._needle
        if not needle:
            return FuzzyMatch(score=0, positions=())

        haystack = candidate if self.case_sensitive else fold_case(candidate)

        # Query is a subsequence iff the LCS covers every query character
        if LCSseq.similarity(needle, haystack) != len(needle):
            return None

        positions = tightest_positions(needle, haystack)

        return FuzzyMatch(score=self._score(needle, haystack, positions), positions=positions)

    def _score(self, needle: str, haystack: str, positions: tuple[int, ...]) -> int:
        """Score a match; higher is better, no fixed range."""
        ratio = fuzz.partial_ratio(needle, haystack)
        span = positions[-1] - positions[0] + 1
        gaps = span - len(positions)

        score = round(ratio * RATIO_SCALE)
        score -= gaps * GAP_PENALTY
        score -= positions[0] * LEADING_PENALTY
        if positions[0] == 0:
            score += PREFIX_BONUS
        return score
