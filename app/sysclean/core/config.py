"""Cleaner configuration and settings.

This module provides the configuration model and I/O functions for
sysclean. The configuration names the junk roots, the large-file
threshold, the number of ranked results and the log destination.

Configuration is stored in ~/.config/sysclean/config.toml
"""

import sys
import tomllib
from pathlib import Path
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sysclean.core.paths import get_config_path, get_default_log_path

DEFAULT_MAX_FILE_SIZE = 100 * 1024 * 1024
DEFAULT_TOP_FILES = 10

# Suggested junk roots written by `sysclean config init`, keyed by sys.platform
SUGGESTED_CLEANUP_PATHS: dict[str, tuple[str, ...]] = {
    "darwin": ("~/Library/Caches", "~/Library/Logs"),
    "linux": ("~/.cache",),
}


class CleanerConfig(BaseModel):
    """Configuration for a sysclean run.

    Loaded once at startup and never mutated afterwards.

    Attributes:
        cleanup_paths: Root directories whose files are treated as junk.
        max_file_size: Files strictly larger than this many bytes are "large".
        top_files: Maximum number of ranked large files to display.
        log_file: File that receives warnings and per-file errors.
        monitor_interval: Seconds between two live monitor readings.
        monitor_seconds: How long the monitor runs during the interactive
            flow. 0 disables it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    cleanup_paths: Annotated[
        list[Path],
        Field(description="Junk root directories"),
    ] = []
    max_file_size: Annotated[
        int,
        Field(ge=0, description="Large-file threshold in bytes"),
    ] = DEFAULT_MAX_FILE_SIZE
    top_files: Annotated[
        int,
        Field(ge=1, le=10_000, description="Number of large files to show"),
    ] = DEFAULT_TOP_FILES
    log_file: Annotated[
        Path,
        Field(default_factory=get_default_log_path, description="Log file path"),
    ]
    monitor_interval: Annotated[
        float,
        Field(ge=0.1, le=60, description="Monitor refresh interval in seconds"),
    ] = 2.0
    monitor_seconds: Annotated[
        float,
        Field(ge=0, le=3600, description="Monitor duration in the interactive flow"),
    ] = 10.0

    @field_validator("cleanup_paths", mode="after")
    @classmethod
    def expand_cleanup_paths(cls, v: list[Path]) -> list[Path]:
        """Expand ``~`` and drop duplicate roots while keeping order."""
        seen: set[Path] = set()
        roots: list[Path] = []
        for path in v:
            expanded = path.expanduser()
            if expanded in seen:
                continue
            seen.add(expanded)
            roots.append(expanded)
        return roots

    @field_validator("log_file", mode="after")
    @classmethod
    def expand_log_file(cls, v: Path) -> Path:
        """Expand ``~`` in the log file path."""
        return v.expanduser()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> CleanerConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated CleanerConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return CleanerConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: CleanerConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    Creates parent directories if needed.

    Args:
        config: Configuration to save.
        path: Target path. If None, uses the default config path.

    Returns:
        Path where the configuration was written.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config.model_dump(mode="json")

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "wb") as f:
            tomli_w.dump(data, f)
    except OSError as e:
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def default_config(platform: str = sys.platform) -> CleanerConfig:
    """Build a starter configuration with suggested junk roots.

    Args:
        platform: Platform identifier as reported by ``sys.platform``.

    Returns:
        CleanerConfig with the suggested roots for the platform (empty
        for platforms without suggestions).
    """
    suggested = SUGGESTED_CLEANUP_PATHS.get(platform, ())
    return CleanerConfig(cleanup_paths=[Path(p) for p in suggested])
