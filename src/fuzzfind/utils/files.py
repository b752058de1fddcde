"""File and path utilities used by the directory walker."""

import os
from collections.abc import Iterable
from pathlib import Path

from fuzzfind.exceptions import InvalidPathError

# Directories commonly excluded with --exclude-common
COMMON_EXCLUDED_DIRS = frozenset(
    {
        ".git",
        ".svn",
        ".hg",
        "node_modules",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".ruff_cache",
        "venv",
        ".venv",
        ".idea",
        ".vscode",
        ".tox",
        ".nox",
        "htmlcov",
    }
)

DISPLAY_PREFIX = os.curdir + os.sep


def should_exclude_dir(name: str, excluded: Iterable[str]) -> bool:
    """Check if a directory should not be descended into.

    Args:
        name: Directory name (not a path).
        excluded: Directory names to exclude.

    Returns:
        True if the walker must not enter the directory.
    """
    return name in excluded


def decode_entry_name(name: str) -> str | None:
    """Return the name if it is representable as text, otherwise None.

    On POSIX, names that are not valid in the filesystem encoding come
    back from ``os.scandir`` with lone surrogates (PEP 383). Those cannot
    be printed or highlighted, so callers treat them as skippable.
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return name


def format_relative(base_dir: str, path: str) -> tuple[str, int]:
    """Format ``path`` relative to ``base_dir`` for display.

    Args:
        base_dir: Base directory of the search.
        path: Full path of the entry.

    Returns:
        Tuple of the display string (``./parent/dirs/name``) and the
        offset of the entry name inside it.
    """
    relative = os.path.relpath(path, base_dir)
    parent, name = os.path.split(relative)
    display = DISPLAY_PREFIX + (parent + os.sep if parent else "") + name
    return display, len(display) - len(name)


def resolve_base_dir(path: str | Path) -> Path:
    """Resolve and validate the base directory of a search.

    Args:
        path: Directory given by the operator.

    Returns:
        Absolute path to the directory.

    Raises:
        InvalidPathError: If the path does not exist or is not a directory.
    """
    base = Path(path).expanduser()
    if not base.exists():
        raise InvalidPathError(f"Path does not exist: {path}")
    if not base.is_dir():
        raise InvalidPathError(f"Not a directory: {path}")
    return base.resolve()
