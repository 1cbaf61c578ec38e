"""Junk usage and cleanup commands.

Reports the size of the configured junk roots and deletes the files
below them after an explicit confirmation.
"""

from typing import Annotated

import typer

from sysclean.cli.flow import clean_junk, report_junk
from sysclean.cli.prompts import ask_confirmation
from sysclean.cli.runtime import open_runtime
from sysclean.utils.formatting import print_info

app = typer.Typer(
    help="Report and clean junk files under the configured directories.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def usage(ctx: typer.Context) -> None:
    """Show the size of every configured junk directory."""
    runtime = open_runtime(ctx)
    report_junk(runtime)


@app.command()
def clean(
    ctx: typer.Context,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
) -> None:
    """Delete every file below the configured junk directories.

    Directories themselves are kept. Always asks for confirmation unless
    running a dry-run.
    """
    runtime = open_runtime(ctx)

    usage_report = report_junk(runtime)
    if not usage_report.has_entries:
        return

    if not dry_run and not ask_confirmation(
        "Do you want to clean junk files?", console=runtime.console, cancel=runtime.cancel
    ):
        print_info("Aborted.")
        return

    report = clean_junk(runtime, dry_run=dry_run)
    if report.has_failures:
        raise typer.Exit(code=1)
