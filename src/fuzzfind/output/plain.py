"""Plain text display."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from fuzzfind.config.schema import OutputFormat
from fuzzfind.output.base import ResultDisplay

if TYPE_CHECKING:
    from fuzzfind.search.accumulator import MatchRecord
    from fuzzfind.search.walker import WalkStats


class PlainDisplay(ResultDisplay):
    """Plain text display.

    Produces unformatted output suitable for piping: no colors, no
    screen clearing, and no live updates. Only the final view and the
    browsing listings are written.
    """

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.PLAIN

    def _write_lines(self, lines: list[str]) -> None:
        for line in lines:
            print(line, file=self._stream)
        self._stream.flush()

    def clear(self) -> None:
        pass

    def show_view(self, records: Sequence["MatchRecord"], overflow: int) -> None:
        pass

    def show_progress(self, overflow: int) -> None:
        pass

    def show_final(
        self,
        records: Sequence["MatchRecord"],
        overflow: int,
        elapsed: float,
        stats: "WalkStats | None" = None,
    ) -> None:
        lines = [record.display for record in records]
        lines.append(f"... {overflow} more matches in {elapsed:.3f}s")
        if self._verbose and stats is not None:
            lines.append(self.format_stats(stats))
        lines.append("")
        self._write_lines(lines)

    def show_list(self, title: str, records: Sequence["MatchRecord"]) -> None:
        lines = [f"{title} ({len(records)}):"]
        lines.extend(record.display for record in records)
        self._write_lines(lines)
