"""Shared CLI options for fuzzfind commands.

This module provides reusable Typer options that are shared across
commands and the shortcut entry point.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from fuzzfind.config.schema import OutputFormat


class FormatChoice(str, Enum):
    """Output format choices for CLI."""

    PLAIN = "plain"
    RICH = "rich"


FormatOption = Annotated[
    FormatChoice | None,
    typer.Option(
        "--format",
        "-f",
        help="Output format (plain, rich). Defaults to config setting.",
        case_sensitive=False,
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Report unreadable entries and show walk statistics.",
    ),
]

TopOption = Annotated[
    int | None,
    typer.Option(
        "--top",
        "-n",
        min=1,
        help="Number of matches in the live and final view.",
    ),
]

ExcludeOption = Annotated[
    list[str] | None,
    typer.Option(
        "--exclude",
        "-x",
        help="Directory name to match but not descend into. Repeatable.",
    ),
]

WorkersOption = Annotated[
    int | None,
    typer.Option(
        "--workers",
        "-w",
        min=1,
        help="Number of walker threads.",
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Config file to use instead of the default one.",
    ),
]


def get_output_format(
    format_choice: FormatChoice | None, default: str = "rich"
) -> OutputFormat:
    """Convert CLI format choice to OutputFormat.

    Args:
        format_choice: CLI format choice or None.
        default: Default format if none specified.

    Returns:
        OutputFormat enum value.

    Raises:
        typer.BadParameter: If the default format is invalid.
    """
    value = format_choice.value if format_choice is not None else default
    try:
        return OutputFormat(value)
    except ValueError as e:
        valid = [f.value for f in OutputFormat]
        raise typer.BadParameter(
            f"Invalid format '{value}'. Valid options: {', '.join(valid)}"
        ) from e
