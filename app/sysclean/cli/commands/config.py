"""Configuration commands.

Creates the starter configuration file and shows the active one.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from sysclean.cli.runtime import require_config
from sysclean.core.config import ConfigError, default_config, save_config
from sysclean.core.paths import get_config_path
from sysclean.utils.formatting import (
    console,
    format_size,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Create and inspect the configuration file.",
    invoke_without_command=True,
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    obj = ctx.obj or {}
    return obj.get("config_path") or get_config_path()


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config."),
    ] = False,
) -> None:
    """Write a starter config with the suggested junk directories."""
    path = _config_path(ctx)

    if path.exists() and not force:
        print_error(f"Config already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        written = save_config(default_config(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {written}")
    print_info("Review cleanup_paths before running a clean.")


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the active configuration."""
    path = _config_path(ctx)
    config = require_config(path)

    table = Table(
        title=f"Configuration ({escape(str(path))})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="info")
    table.add_column("Value", style="text")

    roots = "\n".join(escape(str(p)) for p in config.cleanup_paths) or "[muted](none)[/]"
    table.add_row("cleanup_paths", roots)
    table.add_row("max_file_size", f"{config.max_file_size} ({format_size(config.max_file_size)})")
    table.add_row("top_files", str(config.top_files))
    table.add_row("log_file", escape(str(config.log_file)))
    table.add_row("monitor_interval", f"{config.monitor_interval:g}s")
    table.add_row("monitor_seconds", f"{config.monitor_seconds:g}s")

    console.print(table)


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the path of the config file."""
    typer.echo(str(_config_path(ctx)))
