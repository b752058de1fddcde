"""Search session: scanning, final render and post-search browsing.

A session runs exactly one search and moves through
``IDLE -> SCANNING -> FINALIZING -> BROWSING -> DONE``. While scanning,
the live renderer thread samples the accumulator that the walker fills.
Once the walk returns the accumulator is completed, the renderer is
joined, and one final view is drawn from the settled records. Browsing
works on that frozen result set only.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from fuzzfind.config.schema import SearchConfig
from fuzzfind.exceptions import SearchError
from fuzzfind.output import ResultDisplay, get_display
from fuzzfind.output.prompts import Prompter, RichPrompter
from fuzzfind.search.accumulator import MatchAccumulator, MatchRecord
from fuzzfind.search.fuzzy import Matcher
from fuzzfind.search.renderer import LiveRenderer
from fuzzfind.search.selection import filter_matches, top_matches
from fuzzfind.search.walker import DirectoryWalker, WalkStats
from fuzzfind.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)


class SessionState(str, Enum):
    """Lifecycle of a search session."""

    IDLE = "idle"
    SCANNING = "scanning"
    FINALIZING = "finalizing"
    BROWSING = "browsing"
    DONE = "done"


class AfterSearchOption(str, Enum):
    """Choices offered once the search is complete."""

    SHOW_ALL = "all"
    FILTER = "filter"


@dataclass
class SearchSummary:
    """Outcome of the scanning phase."""

    top: list[MatchRecord]
    overflow: int
    total: int
    elapsed: float
    stats: WalkStats = field(default_factory=WalkStats)


class SearchSession:
    """One fuzzy search over a directory tree."""

    def __init__(
        self,
        base_dir: str | Path,
        query: str,
        *,
        verbose: bool = False,
        config: SearchConfig | None = None,
        top_k: int | None = None,
        display: ResultDisplay | None = None,
        prompter: Prompter | None = None,
        matcher: Matcher | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            base_dir: Directory to search.
            query: Fuzzy query matched against entry names.
            verbose: Report skipped entries and walk statistics.
            config: Search settings. Defaults to SearchConfig().
            top_k: Size of the live and final view. Overrides config.
            display: Terminal display. Defaults to a rich display.
            prompter: Source of menu answers. Defaults to rich prompts.
            matcher: Matcher to use instead of one built from ``query``.
        """
        self.config = config or SearchConfig()
        self.base_dir = Path(base_dir)
        self.query = query
        self.verbose = verbose
        self.top_k = top_k or self.config.top_k
        self.display = display or get_display("rich", verbose=verbose)
        self.prompter = prompter or RichPrompter()
        self.matcher = matcher or Matcher(query, case_sensitive=self.config.case_sensitive)

        self.accumulator = MatchAccumulator()
        self.state = SessionState.IDLE
        self.summary: SearchSummary | None = None
        self.renderer: LiveRenderer | None = None

    @property
    def results(self) -> list[MatchRecord]:
        """Every accumulated match, in arrival order."""
        return self.accumulator.snapshot()

    def search(self) -> SearchSummary:
        """Scan the tree while rendering live, then draw the final view.

        Returns:
            Summary with the authoritative top-K view.

        Raises:
            SearchError: If the session already ran a search.
            WalkError: If a walker task failed unexpectedly.
        """
        if self.state is not SessionState.IDLE:
            raise SearchError("A session runs a single search")

        start = time.perf_counter()
        walker = DirectoryWalker(
            self.base_dir,
            self.matcher,
            self.accumulator,
            verbose=self.verbose,
            max_workers=self.config.max_workers,
            follow_symlinks=self.config.follow_symlinks,
            exclude_dirs=self.config.exclude_dirs,
        )
        self.renderer = LiveRenderer(
            self.accumulator,
            self.display,
            top_k=self.top_k,
            interval=self.config.refresh_interval,
        )

        self.state = SessionState.SCANNING
        self.renderer.start()
        try:
            stats = walker.walk()
        finally:
            self.state = SessionState.FINALIZING
            self.accumulator.complete()
            self.renderer.join()

        # Renderer has stopped; nothing else writes to the display or the
        # accumulator from here on.
        top, overflow = top_matches(self.accumulator.snapshot(), self.top_k)
        elapsed = time.perf_counter() - start
        self.display.show_final(top, overflow, elapsed, stats)

        self.summary = SearchSummary(
            top=top,
            overflow=overflow,
            total=len(self.accumulator),
            elapsed=elapsed,
            stats=stats,
        )
        log_with_context(
            logger,
            logging.INFO,
            "Search finished",
            query=self.query,
            matches=self.summary.total,
            elapsed=f"{elapsed:.3f}s",
            redraws=self.renderer.redraws,
        )
        return self.summary

    def show_all(self) -> list[MatchRecord]:
        """Print every match with its count."""
        self._require_finished()
        records = self.results
        self.display.show_list("All Matches", records)
        return records

    def filter(self, substring: str | None = None) -> list[MatchRecord]:
        """Print the matches whose display text contains ``substring``.

        Args:
            substring: Text to look for. Prompted for when None.

        Returns:
            The matching records.
        """
        self._require_finished()
        if substring is None:
            substring = self.prompter.text("Filter by")
        records = filter_matches(self.results, substring)
        self.display.show_list("Filtered Matches", records)
        return records

    def browse(self) -> list[MatchRecord]:
        """Offer the post-search menu once and run the chosen action.

        Returns:
            The records that were listed.

        Raises:
            PromptError: If the operator's answer cannot be read.
        """
        self._require_finished()
        self.state = SessionState.BROWSING
        try:
            answer = self.prompter.select(
                "Options",
                [option.value for option in AfterSearchOption],
            )
            option = AfterSearchOption(answer)
            if option is AfterSearchOption.SHOW_ALL:
                return self.show_all()
            return self.filter()
        finally:
            self.state = SessionState.DONE

    def run(self, browse: bool = True) -> SearchSummary:
        """Search, then browse unless ``browse`` is False."""
        summary = self.search()
        if browse:
            self.browse()
        else:
            self.state = SessionState.DONE
        return summary

    def _require_finished(self) -> None:
        if self.summary is None:
            raise SearchError("Search has not finished yet")
