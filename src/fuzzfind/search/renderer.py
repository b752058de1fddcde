"""Live rendering of the best matches while a walk is in progress."""

import threading
from typing import TYPE_CHECKING

from fuzzfind.search.accumulator import AccumulatorState, MatchAccumulator
from fuzzfind.search.selection import top_matches, view_key
from fuzzfind.utils.logging import get_logger

if TYPE_CHECKING:
    from fuzzfind.output.base import ResultDisplay

logger = get_logger(__name__)


class LiveRenderer:
    """Background thread that samples the accumulator and redraws on change.

    The screen is only cleared and redrawn when the top-K view differs
    from the one currently shown. Otherwise a progress line with the
    overflow count is updated, and only when that count moved.
    """

    def __init__(
        self,
        accumulator: MatchAccumulator,
        display: "ResultDisplay",
        *,
        top_k: int = 10,
        interval: float = 0.05,
    ) -> None:
        """Initialize the renderer.

        Args:
            accumulator: Shared store being filled by the walker.
            display: Terminal display to draw on.
            top_k: Size of the live view.
            interval: Seconds between samples while the walk runs.
        """
        self.accumulator = accumulator
        self.display = display
        self.top_k = top_k
        self.interval = interval

        self.redraws = 0
        self.progress_updates = 0

        self._last_view: tuple[str, ...] = ()
        self._last_overflow: int | None = None
        self._last_version = -1
        self._thread: threading.Thread | None = None
        self._error: Exception | None = None

    @property
    def last_view(self) -> tuple[str, ...]:
        """Display strings of the view currently on screen."""
        return self._last_view

    @property
    def running(self) -> bool:
        """Whether the render thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the render thread."""
        if self._thread is not None:
            raise RuntimeError("LiveRenderer can only be started once")
        self._thread = threading.Thread(
            target=self._run,
            name="fuzzfind-render",
            daemon=True,
        )
        self._thread.start()

    def join(self, timeout: float | None = None) -> None:
        """Wait for the render thread to stop.

        The thread stops on its own once the accumulator is completed.

        Raises:
            Exception: Whatever made the render loop fail, if anything.
        """
        if self._thread is None:
            return
        self._thread.join(timeout)
        if self._error is not None:
            raise self._error

    def render_once(self, state: AccumulatorState) -> bool:
        """Render one sample.

        Args:
            state: Accumulator state to render.

        Returns:
            True if the full view was redrawn.
        """
        if state.version == self._last_version:
            return False
        self._last_version = state.version

        top, overflow = top_matches(state.records, self.top_k)
        if not top:
            # Nothing matched yet; leave the screen alone
            return False
        key = view_key(top)

        if key == self._last_view:
            if overflow != self._last_overflow:
                self.display.show_progress(overflow)
                self.progress_updates += 1
                self._last_overflow = overflow
            return False

        self.display.show_view(top, overflow)
        self.redraws += 1
        self._last_view = key
        # Redraw wiped the progress line
        self._last_overflow = None
        return True

    def _run(self) -> None:
        try:
            while True:
                # Records and completion come from a single locked read
                state = self.accumulator.wait(self.interval)
                if state.completed:
                    break
                self.render_once(state)
        except Exception as err:
            logger.exception("Live renderer failed")
            self._error = err
        logger.debug("Live renderer stopped after %d redraws", self.redraws)
