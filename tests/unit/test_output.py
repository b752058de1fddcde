"""Unit tests for result displays and prompts."""

from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from fuzzfind.exceptions import PromptError
from fuzzfind.output import (
    OutputFormat,
    PlainDisplay,
    RichDisplay,
    RichPrompter,
    decorate,
    get_display,
)
from fuzzfind.search import MatchRecord, WalkStats

RECORDS = [
    MatchRecord(score=30, display="./apple.txt", highlights=(2, 3)),
    MatchRecord(score=10, display="./src", highlights=(2,), is_dir=True),
]


class TestDecorate:
    """Tests for decorate."""

    def test_styles_each_position(self) -> None:
        """Test that each position gets its own one-character span."""
        text = decorate("apple", [0, 2])

        assert text.plain == "apple"
        assert [(span.start, span.end) for span in text.spans] == [(0, 1), (2, 3)]
        assert all(span.style == "bold red" for span in text.spans)

    def test_ignores_out_of_range(self) -> None:
        """Test that bad indices are dropped."""
        text = decorate("ab", [5, -1])

        assert text.spans == []

    def test_custom_style(self) -> None:
        """Test passing another style."""
        text = decorate("ab", [1], style="green")

        assert text.spans[0].style == "green"


class TestPlainDisplay:
    """Tests for PlainDisplay."""

    def test_format_type(self) -> None:
        """Test format type."""
        assert PlainDisplay().format_type == OutputFormat.PLAIN

    def test_live_calls_write_nothing(self) -> None:
        """Test that live updates are suppressed."""
        stream = StringIO()
        display = PlainDisplay(stream=stream)

        display.clear()
        display.show_view(RECORDS, 3)
        display.show_progress(4)

        assert stream.getvalue() == ""

    def test_show_final(self) -> None:
        """Test the final view with its summary line."""
        stream = StringIO()
        display = PlainDisplay(stream=stream)

        display.show_final(RECORDS, 40, 0.1234)

        lines = stream.getvalue().splitlines()
        assert lines[:2] == ["./apple.txt", "./src"]
        assert lines[2] == "... 40 more matches in 0.123s"

    def test_show_final_verbose_includes_stats(self) -> None:
        """Test that walk statistics appear when verbose."""
        stream = StringIO()
        display = PlainDisplay(stream=stream, verbose=True)
        stats = WalkStats(directories_scanned=4, directories_skipped=1)

        display.show_final(RECORDS, 0, 0.5, stats)

        assert "4 directories scanned, 1 skipped" in stream.getvalue()

    def test_show_list(self) -> None:
        """Test a titled listing with count."""
        stream = StringIO()
        display = PlainDisplay(stream=stream)

        display.show_list("All Matches", RECORDS)

        assert stream.getvalue().splitlines() == [
            "All Matches (2):",
            "./apple.txt",
            "./src",
        ]

    def test_show_empty_list(self) -> None:
        """Test a listing with no records."""
        stream = StringIO()
        display = PlainDisplay(stream=stream)

        display.show_list("Filtered Matches", [])

        assert stream.getvalue() == "Filtered Matches (0):\n"


class TestRichDisplay:
    """Tests for RichDisplay."""

    def test_format_type(self) -> None:
        """Test format type."""
        assert RichDisplay(stream=StringIO()).format_type == OutputFormat.RICH

    def test_show_view(self) -> None:
        """Test that the live view prints every record."""
        stream = StringIO()
        display = RichDisplay(stream=stream, color=False, width=80)

        display.show_view(RECORDS, 3)

        output = stream.getvalue()
        assert "./apple.txt" in output
        assert "./src" in output

    def test_progress_skipped_off_terminal(self) -> None:
        """Test that the progress line needs a terminal."""
        stream = StringIO()
        display = RichDisplay(stream=stream, color=False)

        display.show_progress(12)

        assert stream.getvalue() == ""

    def test_show_final(self) -> None:
        """Test the final view summary line."""
        stream = StringIO()
        display = RichDisplay(stream=stream, color=False, width=80)

        display.show_final(RECORDS, 7, 1.5)

        assert "... 7 more matches in 1.500s" in stream.getvalue()

    def test_show_list(self) -> None:
        """Test a titled listing with count."""
        stream = StringIO()
        display = RichDisplay(stream=stream, color=False, width=80)

        display.show_list("All Matches", RECORDS)

        output = stream.getvalue()
        assert "All Matches (2):" in output
        assert "./apple.txt" in output

    def test_render_record_highlights(self) -> None:
        """Test that matched characters and directories are styled."""
        display = RichDisplay(stream=StringIO())

        file_line = display.render_record(RECORDS[0])
        dir_line = display.render_record(RECORDS[1])

        assert [(s.start, s.end) for s in file_line.spans] == [(2, 3), (3, 4)]
        assert any(s.style == "blue" for s in dir_line.spans)

    def test_color_emits_escape_codes(self) -> None:
        """Test that highlighted output carries ANSI styling on a terminal."""
        stream = StringIO()
        display = RichDisplay(stream=stream, width=80)
        display.console = Console(file=stream, force_terminal=True, width=80)

        display.show_view(RECORDS[:1], 0)

        assert "\x1b[" in stream.getvalue()


class TestGetDisplay:
    """Tests for get_display factory."""

    def test_get_rich(self) -> None:
        """Test getting rich display."""
        assert isinstance(get_display("rich"), RichDisplay)

    def test_get_plain(self) -> None:
        """Test getting plain display."""
        assert isinstance(get_display(OutputFormat.PLAIN), PlainDisplay)

    def test_plain_ignores_color(self) -> None:
        """Test that rich-only options are dropped for plain output."""
        display = get_display("plain", color=False)

        assert isinstance(display, PlainDisplay)

    def test_case_insensitive(self) -> None:
        """Test that format names are case insensitive."""
        assert isinstance(get_display("PLAIN"), PlainDisplay)

    def test_unknown_format(self) -> None:
        """Test unknown format names."""
        with pytest.raises(ValueError):
            get_display("html")


class TestRichPrompter:
    """Tests for RichPrompter."""

    def test_select_returns_answer(self) -> None:
        """Test a valid menu answer."""
        prompter = RichPrompter(Console(file=StringIO()))

        with patch("fuzzfind.output.prompts.Prompt.ask", return_value="filter") as ask:
            answer = prompter.select("Options", ["all", "filter"])

        assert answer == "filter"
        assert ask.call_args.kwargs["choices"] == ["all", "filter"]
        assert ask.call_args.kwargs["default"] == "all"

    def test_select_closed_input(self) -> None:
        """Test that EOF becomes a PromptError."""
        prompter = RichPrompter(Console(file=StringIO()))

        with patch("fuzzfind.output.prompts.Prompt.ask", side_effect=EOFError):
            with pytest.raises(PromptError):
                prompter.select("Options", ["all", "filter"])

    def test_text_interrupted(self) -> None:
        """Test that Ctrl-C becomes a PromptError."""
        prompter = RichPrompter(Console(file=StringIO()))

        with patch("fuzzfind.output.prompts.Prompt.ask", side_effect=KeyboardInterrupt):
            with pytest.raises(PromptError) as exc_info:
                prompter.text("Filter by")

        assert exc_info.value.exit_code == 40

    def test_select_needs_options(self) -> None:
        """Test that an empty menu is rejected."""
        prompter = RichPrompter(Console(file=StringIO()))

        with pytest.raises(ValueError):
            prompter.select("Options", [])

    def test_reads_from_console_input(self) -> None:
        """Test reading a real answer through rich."""
        console = Console(file=StringIO())
        prompter = RichPrompter(console)

        with patch.object(console, "input", return_value="all"):
            assert prompter.select("Options", ["all", "filter"]) == "all"
