"""CLI layer for fuzzfind.

This module provides the command-line interface for fuzzfind,
built on Typer with Rich formatting support.

Usage:
    # Run the main CLI
    fuzzfind search QUERY [PATH]

    # Use the shortcut
    ff QUERY [PATH]
"""

from fuzzfind.cli.app import app, main
from fuzzfind.cli.options import (
    ConfigOption,
    ExcludeOption,
    FormatChoice,
    FormatOption,
    TopOption,
    VerboseOption,
    WorkersOption,
)

__all__ = [
    # App
    "app",
    "main",
    # Options
    "ConfigOption",
    "ExcludeOption",
    "FormatChoice",
    "FormatOption",
    "TopOption",
    "VerboseOption",
    "WorkersOption",
]
