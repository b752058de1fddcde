"""Pytest fixtures for fuzzfind tests."""

import logging
import tempfile
from collections.abc import Generator, Sequence
from pathlib import Path

import pytest

from fuzzfind.config import reset_config
from fuzzfind.config.schema import OutputFormat
from fuzzfind.exceptions import PromptError
from fuzzfind.output.base import ResultDisplay
from fuzzfind.output.prompts import Prompter
from fuzzfind.search.accumulator import MatchRecord


class RecordingDisplay(ResultDisplay):
    """Display that records every call instead of drawing."""

    def __init__(self, verbose: bool = False) -> None:
        super().__init__(verbose=verbose)
        self.calls: list[tuple] = []

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.PLAIN

    def clear(self) -> None:
        self.calls.append(("clear",))

    def show_view(self, records: Sequence[MatchRecord], overflow: int) -> None:
        self.calls.append(("view", tuple(r.display for r in records), overflow))

    def show_progress(self, overflow: int) -> None:
        self.calls.append(("progress", overflow))

    def show_final(self, records, overflow, elapsed, stats=None) -> None:
        self.calls.append(("final", tuple(r.display for r in records), overflow))

    def show_list(self, title: str, records: Sequence[MatchRecord]) -> None:
        self.calls.append(("list", title, tuple(r.display for r in records)))

    def named(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


class ScriptedPrompter(Prompter):
    """Prompter answering from a fixed script; raises when it runs out."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.asked: list[str] = []

    def _next(self, message: str) -> str:
        self.asked.append(message)
        if not self.answers:
            raise PromptError("no more scripted answers")
        return self.answers.pop(0)

    def select(self, message: str, options: Sequence[str]) -> str:
        return self._next(message)

    def text(self, message: str) -> str:
        return self._next(message)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def sample_tree(temp_dir: Path) -> Path:
    """Create a small directory tree.

    Layout:
        apple.txt
        banana.txt
        a.txt
        src/app.py
        src/__init__.py
        src/lib/apply.rs
        docs/guide.md
    """
    (temp_dir / "apple.txt").write_text("apple")
    (temp_dir / "banana.txt").write_text("banana")
    (temp_dir / "a.txt").write_text("a")

    src = temp_dir / "src"
    (src / "lib").mkdir(parents=True)
    (src / "app.py").write_text("print('app')\n")
    (src / "__init__.py").write_text("")
    (src / "lib" / "apply.rs").write_text("fn main() {}\n")

    docs = temp_dir / "docs"
    docs.mkdir()
    (docs / "guide.md").write_text("# Guide\n")

    return temp_dir


@pytest.fixture
def display() -> RecordingDisplay:
    """Display that records calls."""
    return RecordingDisplay()


@pytest.fixture
def make_prompter() -> type[ScriptedPrompter]:
    """Factory for prompters that replay fixed answers."""
    return ScriptedPrompter


@pytest.fixture(autouse=True)
def reset_config_fixture() -> Generator[None, None, None]:
    """Reset config singleton between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def reset_logging_fixture() -> Generator[None, None, None]:
    """Undo setup_logging() so caplog keeps working across tests."""
    yield
    pkg_logger = logging.getLogger("fuzzfind")
    pkg_logger.handlers.clear()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Create a test config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""
[search]
top_k = 5
exclude_dirs = ["node_modules"]

[output]
default_format = "plain"

[logging]
level = "ERROR"
""")
    return config_path
