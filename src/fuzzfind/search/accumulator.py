"""Thread-safe store of match records for one search run."""

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchRecord:
    """A scored, display-ready match.

    Attributes:
        score: Fuzzy match quality, higher is better.
        display: Relative path formatted for printing (``./dir/name``).
        highlights: Indices into ``display`` of the matched characters.
        is_dir: Whether the entry is a directory.
    """

    score: int
    display: str
    highlights: tuple[int, ...] = ()
    is_dir: bool = False


@dataclass(frozen=True)
class AccumulatorState:
    """Consistent copy of the accumulator at one instant."""

    records: tuple[MatchRecord, ...]
    completed: bool
    version: int


class MatchAccumulator:
    """Append-only multiset of MatchRecord shared by walker and renderer.

    Records and the completion flag live behind one condition variable, so
    a reader always sees both from the same instant. Records are never
    removed or replaced.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._records: list[MatchRecord] = []
        self._completed = False
        self._version = 0

    def append(self, record: MatchRecord) -> None:
        """Add one record. Safe to call from any number of threads."""
        with self._cond:
            self._records.append(record)
            self._version += 1

    def snapshot(self) -> list[MatchRecord]:
        """Return a copy of the records appended so far."""
        with self._cond:
            return list(self._records)

    def state(self) -> AccumulatorState:
        """Return records, completion flag and version read atomically."""
        with self._cond:
            return self._state()

    def complete(self) -> None:
        """Mark the run as finished and wake any waiting reader."""
        with self._cond:
            if self._completed:
                return
            self._completed = True
            self._version += 1
            self._cond.notify_all()

    @property
    def completed(self) -> bool:
        """Whether complete() has been called."""
        with self._cond:
            return self._completed

    def wait(self, timeout: float | None = None) -> AccumulatorState:
        """Wait for completion or until the timeout expires.

        Appends do not notify, so a reader samples at the timeout cadence
        while the run is active and wakes immediately on completion.

        Args:
            timeout: Maximum seconds to wait.

        Returns:
            The current state, read under the lock.
        """
        with self._cond:
            if not self._completed:
                self._cond.wait(timeout)
            return self._state()

    def _state(self) -> AccumulatorState:
        return AccumulatorState(
            records=tuple(self._records),
            completed=self._completed,
            version=self._version,
        )

    def __len__(self) -> int:
        with self._cond:
            return len(self._records)
