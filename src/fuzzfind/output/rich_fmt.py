"""Rich terminal display."""

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.control import Control, ControlType
from rich.text import Text

from fuzzfind.config.schema import OutputFormat
from fuzzfind.output.base import ResultDisplay

if TYPE_CHECKING:
    from fuzzfind.search.accumulator import MatchRecord
    from fuzzfind.search.walker import WalkStats

MATCH_STYLE = "bold red"
DIRECTORY_STYLE = "blue"


def decorate(text: str, positions: Iterable[int], style: str = MATCH_STYLE) -> Text:
    """Return ``text`` with the characters at ``positions`` styled.

    Args:
        text: Plain text.
        positions: Character indices to emphasize.
        style: Rich style applied to each position.

    Returns:
        A new Rich Text object. ``text`` is not modified.
    """
    decorated = Text(text)
    for pos in positions:
        if 0 <= pos < len(text):
            decorated.stylize(style, pos, pos + 1)
    return decorated


class RichDisplay(ResultDisplay):
    """Rich terminal display.

    Clears the screen on every live redraw, highlights matched characters
    and keeps a single carriage-return progress line between redraws.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        color: bool = True,
        width: int | None = None,
    ) -> None:
        """Initialize rich display.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to show walk statistics.
            color: Whether to emit colors.
            width: Console width (None for auto-detect).
        """
        super().__init__(stream, error_stream, verbose)
        self.console = Console(
            file=self._stream,
            width=width,
            no_color=not color,
            highlight=False,
        )

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.RICH

    def render_record(self, record: "MatchRecord") -> Text:
        """Build the highlighted line for one record."""
        line = decorate(record.display, record.highlights)
        if record.is_dir:
            line.stylize(DIRECTORY_STYLE, 0, len(record.display))
        return line

    def clear(self) -> None:
        # No-op when the console is not a terminal
        self.console.clear()

    def show_view(self, records: Sequence["MatchRecord"], overflow: int) -> None:
        self.clear()
        for record in records:
            self.console.print(self.render_record(record))

    def show_progress(self, overflow: int) -> None:
        if not self.console.is_terminal:
            return
        self.console.control(
            Control.move_to_column(0),
            Control((ControlType.ERASE_IN_LINE, 2)),
        )
        self.console.print(f"... {overflow} more matches", end="", style="dim")

    def show_final(
        self,
        records: Sequence["MatchRecord"],
        overflow: int,
        elapsed: float,
        stats: "WalkStats | None" = None,
    ) -> None:
        self.clear()
        for record in records:
            self.console.print(self.render_record(record))
        self.console.print(f"... {overflow} more matches in {elapsed:.3f}s", style="dim")
        if self._verbose and stats is not None:
            self.console.print(self.format_stats(stats), style="dim")
        self.console.print()

    def show_list(self, title: str, records: Sequence["MatchRecord"]) -> None:
        self.console.print()
        self.clear()
        self.console.print(f"{title} ({len(records)}):", style="bold")
        for record in records:
            self.console.print(self.render_record(record))
