"""Default configuration values and paths."""

import os
from pathlib import Path
from typing import Final

# Default directories
DEFAULT_CONFIG_DIR: Final[Path] = Path.home() / ".config" / "fuzzfind"

# Default file paths
DEFAULT_CONFIG_FILE: Final[Path] = DEFAULT_CONFIG_DIR / "config.toml"

# Environment variable names
ENV_CONFIG_PATH: Final[str] = "FUZZFIND_CONFIG"
ENV_TOP_K: Final[str] = "FUZZFIND_TOP_K"
ENV_WORKERS: Final[str] = "FUZZFIND_WORKERS"
ENV_FORMAT: Final[str] = "FUZZFIND_FORMAT"
ENV_LOG_LEVEL: Final[str] = "FUZZFIND_LOG_LEVEL"

# Default config content (TOML)
DEFAULT_CONFIG_TOML: Final[str] = """\
# fuzzfind configuration

[search]
top_k = 10              # size of the live and final view
refresh_interval = 0.05 # seconds between live samples
# max_workers = 8       # defaults to the thread pool default
follow_symlinks = false
# case_sensitive = true # omit for smart case
exclude_dirs = []

[output]
default_format = "rich"
color = true

[logging]
level = "WARNING"
json_format = false
"""


def get_config_path() -> Path:
    """Get the configuration file path."""
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_FILE
