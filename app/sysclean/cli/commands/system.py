"""System commands: memory reclamation and the live monitor."""

from typing import Annotated

import typer

from sysclean.cli.flow import run_memory_optimization
from sysclean.cli.runtime import open_runtime
from sysclean.core.cancel import handle_interrupts
from sysclean.core.monitor import SystemMonitor

app = typer.Typer(
    help="Memory reclamation and live system metrics.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def optimize(ctx: typer.Context) -> None:
    """Ask the operating system to drop its reclaimable caches.

    Runs the platform command through sudo, so a password may be asked.
    """
    runtime = open_runtime(ctx)
    result = run_memory_optimization(runtime)
    if not result.success:
        raise typer.Exit(code=1)


@app.command()
def monitor(
    ctx: typer.Context,
    interval: Annotated[
        float | None,
        typer.Option(
            "--interval",
            "-i",
            min=0.1,
            max=60.0,
            help="Seconds between two readings.",
        ),
    ] = None,
    duration: Annotated[
        float | None,
        typer.Option(
            "--duration",
            "-d",
            min=0.0,
            help="Seconds to run. Runs until Ctrl+C when omitted.",
        ),
    ] = None,
) -> None:
    """Show live CPU and RAM usage."""
    runtime = open_runtime(ctx)

    with handle_interrupts(runtime.cancel):
        system_monitor = SystemMonitor(
            cancel=runtime.cancel,
            tasks=runtime.tasks,
            console=runtime.console,
            interval=interval if interval is not None else runtime.config.monitor_interval,
            duration=duration,
            logger=runtime.logger,
        )
        system_monitor.start()
        runtime.tasks.wait()

    if runtime.cancel.is_cancelled():
        raise typer.Exit(code=130)
