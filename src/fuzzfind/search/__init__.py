"""Concurrent fuzzy file-name search.

The walker fills a shared accumulator from a thread pool while the live
renderer samples it; the session ties both together and hands over to
browsing once the walk is complete.
"""

from fuzzfind.search.accumulator import AccumulatorState, MatchAccumulator, MatchRecord
from fuzzfind.search.fuzzy import FuzzyMatch, Matcher
from fuzzfind.search.renderer import LiveRenderer
from fuzzfind.search.selection import filter_matches, top_matches, view_key
from fuzzfind.search.session import (
    AfterSearchOption,
    SearchSession,
    SearchSummary,
    SessionState,
)
from fuzzfind.search.walker import DirectoryWalker, WalkStats

__all__ = [
    # Accumulator
    "AccumulatorState",
    "MatchAccumulator",
    "MatchRecord",
    # Matching
    "FuzzyMatch",
    "Matcher",
    # Walk and render
    "DirectoryWalker",
    "LiveRenderer",
    "WalkStats",
    # Selection
    "filter_matches",
    "top_matches",
    "view_key",
    # Session
    "AfterSearchOption",
    "SearchSession",
    "SearchSummary",
    "SessionState",
]
