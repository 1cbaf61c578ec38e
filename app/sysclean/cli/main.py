"""Main CLI application entry point.

Defines the Typer application and global options. Without a subcommand
the interactive cleaning session runs.
"""

from pathlib import Path
from typing import Annotated

import typer

from sysclean import __version__
from sysclean.cli.commands import config, junk, large, system
from sysclean.cli.flow import run_interactive
from sysclean.cli.runtime import open_runtime
from sysclean.core.cancel import handle_interrupts
from sysclean.core.logsink import close_logging
from sysclean.utils.formatting import console

# Create main Typer app
app = typer.Typer(
    name="sysclean",
    help="System Cleaner Pro: junk cleanup, large file scan and memory tools.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"sysclean version {__version__}")
        raise typer.Exit()


def _announce_interrupt() -> None:
    console.print("\n[warning]⚠️  Received interrupt signal. Cleaning up...[/]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to the config file.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug details to the log file.",
        ),
    ] = False,
) -> None:
    """sysclean - System Cleaner Pro.

    Run without a command for the interactive session: report and clean
    junk, list the largest files, then reclaim memory.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose
    ctx.call_on_close(close_logging)

    if ctx.invoked_subcommand is not None:
        return

    runtime = open_runtime(ctx)
    with handle_interrupts(runtime.cancel, _announce_interrupt):
        code = run_interactive(runtime)
    raise typer.Exit(code=code)


# Register commands
app.add_typer(junk.app, name="junk")
app.add_typer(large.app, name="large")
app.add_typer(system.app, name="system")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
