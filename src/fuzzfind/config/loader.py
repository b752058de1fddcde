"""Configuration loading from TOML files and environment variables."""

import os
from pathlib import Path
from typing import Any

from fuzzfind.config.defaults import (
    DEFAULT_CONFIG_TOML,
    ENV_FORMAT,
    ENV_LOG_LEVEL,
    ENV_TOP_K,
    ENV_WORKERS,
    get_config_path,
)
from fuzzfind.config.schema import FuzzfindConfig
from fuzzfind.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError

# Global config instance (singleton)
_config: FuzzfindConfig | None = None


def load_config(
    config_path: Path | None = None,
    *,
    create_if_missing: bool = False,
    required: bool = False,
) -> FuzzfindConfig:
    """Load configuration from TOML file and environment variables.

    Args:
        config_path: Path to config file. If None, uses default.
        create_if_missing: Write the default config if file doesn't exist.
        required: Raise instead of falling back to defaults when the
            file doesn't exist.

    Returns:
        Loaded and validated configuration.

    Raises:
        ConfigNotFoundError: If the file is required but missing.
        ConfigError: If configuration cannot be loaded.
        ConfigValidationError: If configuration is invalid.
    """
    # Use Python 3.11+ tomllib or fallback
    try:
        import tomllib
    except ImportError:
        try:
            import tomli as tomllib
        except ImportError as err:
            raise ConfigError(
                "tomllib not available. Install 'tomli' for Python < 3.11"
            ) from err

    path = config_path or get_config_path()
    data: dict[str, Any] = {}

    if not path.exists():
        if required:
            raise ConfigNotFoundError(f"Config file not found: {path}")
        if create_if_missing:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(DEFAULT_CONFIG_TOML)
    else:
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except Exception as e:
            raise ConfigError(f"Failed to load config from {path}: {e}") from e

    data = _apply_env_overrides(data)

    try:
        return FuzzfindConfig.model_validate(data)
    except Exception as e:
        raise ConfigValidationError(f"Invalid configuration: {e}") from e


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides to raw configuration data."""
    search = dict(data.get("search", {}))
    output = dict(data.get("output", {}))
    logging_ = dict(data.get("logging", {}))

    top_k = os.environ.get(ENV_TOP_K)
    if top_k:
        search["top_k"] = top_k

    workers = os.environ.get(ENV_WORKERS)
    if workers:
        search["max_workers"] = workers

    output_format = os.environ.get(ENV_FORMAT)
    if output_format:
        output["default_format"] = output_format.lower()

    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        logging_["level"] = log_level.upper()

    return {**data, "search": search, "output": output, "logging": logging_}


def get_config() -> FuzzfindConfig:
    """Get the current configuration (singleton).

    Loads config on first access, caches for subsequent calls.

    Returns:
        Current configuration.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Path | None = None) -> FuzzfindConfig:
    """Reload configuration from disk.

    Args:
        config_path: Path to config file. If None, uses default.

    Returns:
        Reloaded configuration.
    """
    global _config
    _config = load_config(config_path, required=config_path is not None)
    return _config


def reset_config() -> None:
    """Reset the configuration singleton (mainly for testing)."""
    global _config
    _config = None
