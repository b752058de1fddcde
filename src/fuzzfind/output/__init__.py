"""Terminal output for search results (rich, plain).

Usage:
    from fuzzfind.output import get_display

    display = get_display("rich", verbose=True)
    display.show_view(records, overflow=3)
"""

from typing import Any

from fuzzfind.config.schema import OutputFormat
from fuzzfind.output.base import ResultDisplay
from fuzzfind.output.plain import PlainDisplay
from fuzzfind.output.prompts import Prompter, RichPrompter
from fuzzfind.output.rich_fmt import RichDisplay, decorate

__all__ = [
    "OutputFormat",
    "PlainDisplay",
    "Prompter",
    "ResultDisplay",
    "RichDisplay",
    "RichPrompter",
    "decorate",
    "get_display",
]


def get_display(
    format_type: OutputFormat | str,
    verbose: bool = False,
    **kwargs: Any,
) -> ResultDisplay:
    """Get a display instance by format type.

    Args:
        format_type: The output format to use.
        verbose: Whether to show walk statistics.
        **kwargs: Additional display-specific options.

    Returns:
        A ResultDisplay instance.

    Raises:
        ValueError: If format_type is not recognized.
    """
    if isinstance(format_type, str):
        format_type = OutputFormat(format_type.lower())

    if format_type == OutputFormat.RICH:
        return RichDisplay(verbose=verbose, **kwargs)
    if format_type == OutputFormat.PLAIN:
        kwargs.pop("color", None)
        return PlainDisplay(verbose=verbose, **kwargs)
    raise ValueError(f"Unknown format type: {format_type}")
