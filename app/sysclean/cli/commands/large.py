"""Large file scan command."""

from pathlib import Path
from typing import Annotated

import typer

from sysclean.cli.flow import scan_large_files
from sysclean.cli.prompts import ask_directory
from sysclean.cli.runtime import open_runtime
from sysclean.core.cancel import handle_interrupts
from sysclean.utils.formatting import print_error

app = typer.Typer(
    help="Find the largest files below a directory.",
    invoke_without_command=True,
)


# Options may follow the DIRECTORY argument.
@app.callback(
    invoke_without_command=True,
    context_settings={"allow_interspersed_args": True},
)
def large_files(
    ctx: typer.Context,
    directory: Annotated[
        Path | None,
        typer.Argument(help="Directory to scan. Prompted for when omitted."),
    ] = None,
    min_size: Annotated[
        int | None,
        typer.Option(
            "--min-size",
            "-m",
            min=0,
            help="Only list files strictly larger than this many bytes.",
        ),
    ] = None,
    top: Annotated[
        int | None,
        typer.Option("--top", "-n", min=1, help="Number of files to list."),
    ] = None,
) -> None:
    """Scan a directory and list its largest files."""
    runtime = open_runtime(ctx)

    with handle_interrupts(runtime.cancel):
        target: str | Path | None = directory
        if target is None:
            target = ask_directory(console=runtime.console, cancel=runtime.cancel)
        if target is None:
            print_error("No directory given.")
            raise typer.Exit(code=1)

        result = scan_large_files(runtime, target, min_size, top)
        runtime.tasks.wait()

    if runtime.cancel.is_cancelled():
        raise typer.Exit(code=130)
    if result is None:
        raise typer.Exit(code=1)
