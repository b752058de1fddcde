"""Logging setup for fuzzfind.

Log records go to stderr so they never interleave with match output on
stdout. Walker and renderer threads are named (``fuzzfind-walk_N``,
``fuzzfind-render``), and both formatters keep the thread name so skipped
directories can be traced back to the worker that hit them.
"""

import json
import logging
import sys
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "fuzzfind"

logger = logging.getLogger(PACKAGE_LOGGER)


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log files and log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
            **_record_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Single-line human-readable formatter with optional ANSI colours."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        context = _record_context(record)
        if context:
            message += " (" + " ".join(f"{k}={v}" for k, v in context.items()) + ")"

        source = record.name
        if record.threadName != threading.main_thread().name:
            source = f"{source} [{record.threadName}]"

        level = f"{record.levelname:8}"
        if self.use_color:
            level = f"{self.LEVEL_COLORS.get(record.levelno, '')}{level}{self.RESET}"

        line = f"{level} {source}: {message}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    level: str = "WARNING",
    log_file: Path | None = None,
    json_format: bool = False,
    use_color: bool = True,
) -> logging.Logger:
    """Configure the ``fuzzfind`` logger.

    Replaces any handlers from an earlier call, so it is safe to call once
    per CLI invocation.

    Args:
        level: Level name, case insensitive. Unknown names mean WARNING.
        log_file: Also append JSON lines to this file.
        json_format: Emit JSON on stderr instead of console lines.
        use_color: Colour the level name on stderr.

    Returns:
        The package logger.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(
        JSONFormatter() if json_format else ConsoleFormatter(use_color=use_color)
    )
    handlers: list[logging.Handler] = [stderr_handler]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(numeric_level)
        logger.addHandler(handler)

    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, e.g. ``fuzzfind.search.walker``."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log ``message`` with key/value context attached to the record.

    Both formatters render the context; nothing is built when the level
    is disabled.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"context": context})
