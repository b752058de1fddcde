"""Pydantic models for fuzzfind configuration."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class OutputFormat(str, Enum):
    """Supported output formats."""

    RICH = "rich"
    PLAIN = "plain"


class SearchConfig(BaseModel):
    """Search configuration."""

    top_k: int = Field(default=10, ge=1)
    refresh_interval: float = Field(default=0.05, gt=0)  # seconds between samples
    max_workers: int | None = Field(default=None, ge=1)  # None: executor default
    follow_symlinks: bool = False
    case_sensitive: bool | None = None  # None: smart case
    exclude_dirs: list[str] = Field(default_factory=list)


class OutputConfig(BaseModel):
    """Output configuration."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    default_format: OutputFormat = OutputFormat.RICH
    color: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: Path | None = None  # Default: no file logging
    json_format: bool = False


class FuzzfindConfig(BaseModel):
    """Root configuration for fuzzfind."""

    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
