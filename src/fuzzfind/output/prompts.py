"""Interactive prompts for the post-search menu."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from rich.console import Console
from rich.prompt import Prompt

from fuzzfind.exceptions import PromptError


class Prompter(ABC):
    """Single-choice selection and free-text entry."""

    @abstractmethod
    def select(self, message: str, options: Sequence[str]) -> str:
        """Ask the operator to pick one of ``options``.

        Raises:
            PromptError: If no answer can be read.
        """

    @abstractmethod
    def text(self, message: str) -> str:
        """Ask the operator for free text.

        Raises:
            PromptError: If no answer can be read.
        """


class RichPrompter(Prompter):
    """Prompter backed by rich.prompt."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select(self, message: str, options: Sequence[str]) -> str:
        if not options:
            raise ValueError("select() needs at least one option")
        try:
            return Prompt.ask(
                message,
                choices=list(options),
                default=options[0],
                console=self.console,
            )
        except (EOFError, KeyboardInterrupt) as err:
            raise PromptError(f"Prompt '{message}' aborted: {err!r}") from err

    def text(self, message: str) -> str:
        try:
            return Prompt.ask(message, console=self.console)
        except (EOFError, KeyboardInterrupt) as err:
            raise PromptError(f"Prompt '{message}' aborted: {err!r}") from err
