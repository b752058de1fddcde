"""Top-K selection and filtering over match records."""

import heapq
from collections.abc import Iterable, Sequence

from fuzzfind.search.accumulator import MatchRecord


def _rank(record: MatchRecord) -> tuple[int, str, bool]:
    # Descending score, then display text, files before directories
    return (-record.score, record.display, record.is_dir)


def top_matches(
    records: Iterable[MatchRecord],
    k: int = 10,
) -> tuple[list[MatchRecord], int]:
    """Select the K best records.

    Args:
        records: Records in any order.
        k: Number of records to keep.

    Returns:
        Tuple of the best ``k`` records ordered best first, and the count
        of records beyond them.
    """
    records = list(records)
    best = heapq.nsmallest(k, records, key=_rank)
    return best, max(0, len(records) - k)


def view_key(records: Sequence[MatchRecord]) -> tuple[str, ...]:
    """Identity of a rendered view, used to skip identical redraws."""
    return tuple(record.display for record in records)


def filter_matches(records: Iterable[MatchRecord], substring: str) -> list[MatchRecord]:
    """Keep records whose display text contains ``substring``.

    Args:
        records: Records to filter.
        substring: Case-sensitive text to look for.

    Returns:
        Matching records, in their original order.
    """
    return [record for record in records if substring in record.display]
