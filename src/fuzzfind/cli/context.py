"""Factories turning CLI options and configuration into search components."""

from collections.abc import Iterable

from fuzzfind.cli.options import FormatChoice, get_output_format
from fuzzfind.config.schema import FuzzfindConfig, SearchConfig
from fuzzfind.output import get_display
from fuzzfind.output.base import ResultDisplay
from fuzzfind.utils.files import COMMON_EXCLUDED_DIRS
from fuzzfind.utils.logging import setup_logging


def create_display(
    format_choice: FormatChoice | None,
    verbose: bool,
    config: FuzzfindConfig,
) -> ResultDisplay:
    """Create a result display from configuration.

    Args:
        format_choice: CLI format choice override.
        verbose: Whether to show walk statistics.
        config: Loaded configuration.

    Returns:
        Configured ResultDisplay instance.
    """
    output_format = get_output_format(format_choice, config.output.default_format)
    return get_display(output_format, verbose=verbose, color=config.output.color)


def build_search_config(
    config: FuzzfindConfig,
    *,
    top: int | None = None,
    workers: int | None = None,
    exclude: Iterable[str] | None = None,
    exclude_common: bool = False,
    follow_symlinks: bool | None = None,
) -> SearchConfig:
    """Apply CLI overrides on top of the configured search settings.

    Options left as None keep their configured value. Excluded
    directories from the CLI are added to the configured ones.
    """
    update: dict[str, object] = {}
    if top is not None:
        update["top_k"] = top
    if workers is not None:
        update["max_workers"] = workers
    if follow_symlinks is not None:
        update["follow_symlinks"] = follow_symlinks

    excluded = list(config.search.exclude_dirs)
    excluded.extend(exclude or ())
    if exclude_common:
        excluded.extend(sorted(COMMON_EXCLUDED_DIRS))
    update["exclude_dirs"] = list(dict.fromkeys(excluded))

    return config.search.model_copy(update=update)


def configure_logging(config: FuzzfindConfig, verbose: bool) -> None:
    """Set up logging from configuration; verbose raises detail to INFO."""
    level = config.logging.level.upper()
    if verbose and level in ("WARNING", "ERROR", "CRITICAL"):
        level = "INFO"
    setup_logging(
        level=level,
        log_file=config.logging.file,
        json_format=config.logging.json_format,
        use_color=config.output.color,
    )
