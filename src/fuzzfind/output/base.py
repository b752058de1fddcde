"""Result display protocol and base class."""

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, TextIO

from fuzzfind.config.schema import OutputFormat

if TYPE_CHECKING:
    from fuzzfind.search.accumulator import MatchRecord
    from fuzzfind.search.walker import WalkStats


class ResultDisplay(ABC):
    """Abstract base class for terminal result displays.

    A display owns every terminal side effect of a search: live redraws,
    the progress indicator, the final view and the browsing listings.
    The live renderer thread and the session never call it concurrently.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
    ) -> None:
        """Initialize the display.

        Args:
            stream: Output stream (defaults to stdout).
            error_stream: Error stream (defaults to stderr).
            verbose: Whether to show walk statistics.
        """
        self._stream = stream or sys.stdout
        self._error_stream = error_stream or sys.stderr
        self._verbose = verbose

    @property
    def stream(self) -> TextIO:
        """Get the output stream."""
        return self._stream

    @property
    def verbose(self) -> bool:
        """Whether verbose output is enabled."""
        return self._verbose

    @property
    @abstractmethod
    def format_type(self) -> OutputFormat:
        """Get the format type of this display."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the visible terminal."""

    @abstractmethod
    def show_view(self, records: Sequence["MatchRecord"], overflow: int) -> None:
        """Redraw the live top-K view.

        Args:
            records: Best records, best first.
            overflow: Number of matches beyond ``records``.
        """

    @abstractmethod
    def show_progress(self, overflow: int) -> None:
        """Update the lightweight progress indicator without redrawing."""

    @abstractmethod
    def show_final(
        self,
        records: Sequence["MatchRecord"],
        overflow: int,
        elapsed: float,
        stats: "WalkStats | None" = None,
    ) -> None:
        """Draw the authoritative final view.

        Args:
            records: Best records, best first.
            overflow: Number of matches beyond ``records``.
            elapsed: Wall-clock seconds the search took.
            stats: Walk statistics, shown in verbose mode.
        """

    @abstractmethod
    def show_list(self, title: str, records: Sequence["MatchRecord"]) -> None:
        """Print a titled listing with its count, e.g. ``All Matches (3):``."""

    def format_stats(self, stats: "WalkStats") -> str:
        """Summarize walk statistics on one line."""
        return (
            f"{stats.directories_scanned} directories scanned, "
            f"{stats.directories_skipped} skipped, "
            f"{stats.entries_seen} entries, "
            f"{stats.entries_skipped} unreadable names"
        )
