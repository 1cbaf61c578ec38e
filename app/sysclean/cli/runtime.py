"""Per-invocation runtime for CLI commands.

Loads the configuration and opens the log sink before any command does
real work. Both failures are fatal: the command exits with code 1
before touching the filesystem.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import typer
from rich.console import Console

from sysclean.core.cancel import CancelToken
from sysclean.core.config import (
    CleanerConfig,
    ConfigError,
    ConfigNotFoundError,
    load_config,
)
from sysclean.core.logsink import LogSinkError, configure_logging
from sysclean.core.paths import get_config_path
from sysclean.core.tasks import BackgroundTasks
from sysclean.utils.formatting import console as default_console
from sysclean.utils.formatting import print_error, print_info


@dataclass
class Runtime:
    """Everything a command needs, created once per invocation.

    Attributes:
        config: Immutable configuration of this run.
        logger: Log sink handed to every component.
        cancel: Process-wide cancellation token.
        tasks: Completion counter of background tasks.
        console: Console for regular output.
    """

    config: CleanerConfig
    logger: logging.Logger
    cancel: CancelToken = field(default_factory=CancelToken)
    tasks: BackgroundTasks = field(default_factory=BackgroundTasks)
    console: Console = field(default_factory=lambda: default_console)


def require_config(config_path: Path | None = None) -> CleanerConfig:
    """Load configuration or exit with helpful error message.

    Args:
        config_path: Optional custom config path.

    Returns:
        Loaded and validated CleanerConfig.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    path = config_path or get_config_path()
    try:
        return load_config(path)
    except ConfigNotFoundError as e:
        print_error(f"Config not found: {path}")
        print_info("Run 'sysclean config init' to create one.")
        raise typer.Exit(code=1) from e
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e


def open_runtime(ctx: typer.Context) -> Runtime:
    """Build the runtime from the global CLI options.

    Args:
        ctx: Typer context carrying ``config_path`` and ``verbose``.

    Returns:
        Runtime with configuration loaded and logging configured.

    Raises:
        typer.Exit: If the configuration or the log sink cannot be set up.
    """
    obj = ctx.obj or {}
    config = require_config(obj.get("config_path"))

    try:
        logger = configure_logging(config.log_file, verbose=obj.get("verbose", False))
    except LogSinkError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    return Runtime(config=config, logger=logger)
