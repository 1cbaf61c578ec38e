"""XDG-compliant path management for sysclean.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and state storage.

XDG defaults:
- Config: ~/.config/sysclean/
- State: ~/.local/state/sysclean/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "sysclean"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/sysclean/ (or XDG_CONFIG_HOME/sysclean/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    State data is the log file; nothing else persists between runs.

    Returns:
        Path to ~/.local/state/sysclean/ (or XDG_STATE_HOME/sysclean/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/sysclean/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/sysclean/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_default_log_path() -> Path:
    """Get the default log file path.

    Returns:
        Path to ~/.local/state/sysclean/sysclean.log.
    """
    return get_state_dir() / "sysclean.log"

