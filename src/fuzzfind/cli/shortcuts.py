"""Shortcut entry point for the search command.

Allows ``ff QUERY [PATH]`` instead of ``fuzzfind search QUERY [PATH]``.
Defined in pyproject.toml under [project.scripts]:
    ff = "fuzzfind.cli.shortcuts:search_main"
"""

import sys


def search_main() -> None:
    """Entry point for the ff command."""
    from fuzzfind.cli.app import app

    # Rewrite sys.argv to inject 'search' command
    sys.argv = ["fuzzfind", "search"] + sys.argv[1:]
    app()
