"""Configuration management."""

from fuzzfind.config.loader import get_config, load_config, reload_config, reset_config
from fuzzfind.config.schema import FuzzfindConfig, OutputFormat, SearchConfig

__all__ = [
    "FuzzfindConfig",
    "OutputFormat",
    "SearchConfig",
    "get_config",
    "load_config",
    "reload_config",
    "reset_config",
]
