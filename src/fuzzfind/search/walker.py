"""Parallel recursive directory walker.

Each directory is one unit of work on a thread pool. Subdirectories are
submitted as soon as they are discovered, so any number of tree levels
can be in flight at once, bounded only by the pool size. Every entry name
is tested against the query and matches go straight into the shared
MatchAccumulator.
"""

import logging
import os
import threading
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from fuzzfind.exceptions import WalkError
from fuzzfind.search.accumulator import MatchAccumulator, MatchRecord
from fuzzfind.search.fuzzy import Matcher
from fuzzfind.utils.files import decode_entry_name, format_relative, should_exclude_dir
from fuzzfind.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)


@dataclass
class WalkStats:
    """Statistics from one walk."""

    directories_scanned: int = 0
    directories_skipped: int = 0
    entries_seen: int = 0
    entries_skipped: int = 0
    matches: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


class DirectoryWalker:
    """Walks a directory tree in parallel and feeds matches to an accumulator."""

    def __init__(
        self,
        base_dir: str | Path,
        matcher: Matcher,
        accumulator: MatchAccumulator,
        *,
        verbose: bool = False,
        max_workers: int | None = None,
        follow_symlinks: bool = False,
        exclude_dirs: Iterable[str] = (),
    ) -> None:
        """Initialize the walker.

        Args:
            base_dir: Directory that displayed paths are relative to.
            matcher: Matcher bound to the query.
            accumulator: Store receiving one record per match.
            verbose: Report skipped entries at WARNING instead of DEBUG.
            max_workers: Thread pool size (None for the executor default).
            follow_symlinks: Descend into symlinked directories.
            exclude_dirs: Directory names that are matched but not entered.
        """
        self.base_dir = os.fspath(base_dir)
        self.matcher = matcher
        self.accumulator = accumulator
        self.verbose = verbose
        self.max_workers = max_workers
        self.follow_symlinks = follow_symlinks
        self.exclude_dirs = frozenset(exclude_dirs)
        self.stats = WalkStats()

        self._cond = threading.Condition()
        self._pending = 0
        self._failure: Exception | None = None
        self._visited: set[tuple[int, int]] = set()

    def walk(self, path: str | Path | None = None) -> WalkStats:
        """Walk the tree below ``path`` and block until it is done.

        The starting directory itself is never tested, only what it
        contains.

        Args:
            path: Directory to start from. Defaults to the base directory.

        Returns:
            Statistics for this walk.

        Raises:
            WalkError: If a worker failed with something other than an
                I/O error. Unreadable directories are never errors.
        """
        root = os.fspath(path) if path is not None else self.base_dir

        self.stats = WalkStats()
        self._failure = None
        self._visited.clear()

        with ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="fuzzfind-walk",
        ) as executor:
            self._submit(executor, root)
            with self._cond:
                while self._pending:
                    self._cond.wait()

        if self._failure is not None:
            raise WalkError(f"Walker task failed: {self._failure!r}") from self._failure

        return self.stats

    def _submit(self, executor: ThreadPoolExecutor, path: str) -> None:
        # Count before submitting so the total never reaches zero while
        # a parent task is still handing out children.
        with self._cond:
            self._pending += 1
        executor.submit(self._run, executor, path)

    def _run(self, executor: ThreadPoolExecutor, path: str) -> None:
        try:
            self._search_directory(executor, path)
        except Exception as err:
            logger.exception("Walker task failed in %s", path)
            with self._cond:
                if self._failure is None:
                    self._failure = err
        finally:
            with self._cond:
                self._pending -= 1
                if not self._pending:
                    self._cond.notify_all()

    def _search_directory(self, executor: ThreadPoolExecutor, path: str) -> None:
        if self.follow_symlinks and not self._first_visit(path):
            return

        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as err:
            self._report_skip("Skipping unreadable directory", path, err)
            with self._cond:
                self.stats.directories_skipped += 1
            return

        seen = skipped = matched = 0
        for entry in entries:
            seen += 1
            name = decode_entry_name(entry.name)
            if name is None:
                skipped += 1
                self._report_skip(
                    "Skipping entry with undecodable name",
                    entry.path,
                    UnicodeError("name is not valid text"),
                )
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=self.follow_symlinks)
            except OSError:
                is_dir = False

            if self._check_match(entry.path, name, is_dir):
                matched += 1

            if is_dir and not should_exclude_dir(name, self.exclude_dirs):
                self._submit(executor, entry.path)

        with self._cond:
            self.stats.directories_scanned += 1
            self.stats.entries_seen += seen
            self.stats.entries_skipped += skipped
            self.stats.matches += matched

    def _check_match(self, path: str, name: str, is_dir: bool) -> bool:
        match = self.matcher.fmatch(name)
        if match is None:
            return False

        display, offset = format_relative(self.base_dir, path)
        self.accumulator.append(
            MatchRecord(
                score=match.score,
                display=display,
                highlights=tuple(offset + pos for pos in match.positions),
                is_dir=is_dir,
            )
        )
        return True

    def _first_visit(self, path: str) -> bool:
        """Record a directory by device and inode; False if seen before."""
        try:
            st = os.stat(path)
        except OSError:
            # scandir will report it
            return True
        key = (st.st_dev, st.st_ino)
        with self._cond:
            if key in self._visited:
                return False
            self._visited.add(key)
        return True

    def _report_skip(self, message: str, path: str, err: Exception) -> None:
        level = logging.WARNING if self.verbose else logging.DEBUG
        shown = path.encode("utf-8", "backslashreplace").decode("utf-8")
        log_with_context(logger, level, message, path=shown, error=str(err))
        with self._cond:
            self.stats.errors.append((shown, str(err)))
