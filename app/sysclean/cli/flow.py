"""Interactive session and the steps it shares with the subcommands.

The session runs the steps in a fixed order: report junk, optionally
clean it, optionally scan for large files, monitor the system while
memory is reclaimed, then wait for background work. Cancellation skips
whatever is left but never the final wait and farewell.
"""

from pathlib import Path

from sysclean.cli.display import (
    print_banner,
    print_clean_report,
    print_farewell,
    print_junk_usage,
    print_reclaim_result,
    print_scan_result,
)
from sysclean.cli.prompts import ask_confirmation, ask_directory
from sysclean.cli.runtime import Runtime
from sysclean.core.memory import ReclaimResult, optimize_memory
from sysclean.core.monitor import SystemMonitor
from sysclean.core.progress import ProgressIndicator
from sysclean.filesystem import (
    CleanReport,
    JunkRemover,
    JunkSizeReporter,
    JunkUsage,
    LargeFileScanner,
    ScanResult,
    WalkError,
)
from sysclean.utils.formatting import print_error, print_warning

EXIT_OK = 0
EXIT_INTERRUPTED = 130


def report_junk(runtime: Runtime) -> JunkUsage:
    """Measure and print the junk usage of the configured roots."""
    reporter = JunkSizeReporter(runtime.logger)
    usage = reporter.usage(runtime.config.cleanup_paths)
    print_junk_usage(usage)
    return usage


def clean_junk(runtime: Runtime, *, dry_run: bool = False) -> CleanReport:
    """Delete the files below the configured roots and print the outcome."""
    if not dry_run:
        runtime.console.print("\n🗑️  [warning]Deleting junk files...[/]")
    remover = JunkRemover(runtime.logger, dry_run=dry_run)
    report = remover.clean(runtime.config.cleanup_paths)
    print_clean_report(report)
    return report


def scan_large_files(
    runtime: Runtime,
    directory: str | Path,
    min_size: int | None = None,
    top_n: int | None = None,
) -> ScanResult | None:
    """Scan ``directory`` for large files while a spinner runs.

    Thresholds default to the configured ``max_file_size`` and ``top_files``.

    Returns:
        The scan result, or None if the directory could not be walked.
    """
    config = runtime.config
    min_size = config.max_file_size if min_size is None else min_size
    top_n = config.top_files if top_n is None else top_n

    progress = ProgressIndicator(
        "Analyzing files...",
        cancel=runtime.cancel,
        console=runtime.console,
        tasks=runtime.tasks,
    )
    scanner = LargeFileScanner(runtime.logger)
    try:
        result = scanner.scan(directory, min_size, top_n, progress=progress)
    except WalkError as e:
        runtime.logger.error("Large file scan failed: %s", e)
        print_error(str(e))
        return None

    runtime.console.print(f"\n📂 [header]Top {top_n} largest files:[/]")
    print_scan_result(result)
    return result


def run_memory_optimization(runtime: Runtime) -> ReclaimResult:
    """Run the platform's memory reclamation command and print the outcome."""
    runtime.console.print("\n🚀 [info]Optimizing Memory...[/]")
    result = optimize_memory(logger=runtime.logger)
    print_reclaim_result(result)
    return result


def _prompt_and_scan(runtime: Runtime) -> None:
    directory = ask_directory(console=runtime.console, cancel=runtime.cancel)
    if directory is None:
        if not runtime.cancel.is_cancelled():
            print_warning("No directory given, skipping the large file scan.")
        return
    scan_large_files(runtime, directory)


def _run_steps(runtime: Runtime) -> bool:
    """Run the cancellable part of the session.

    Returns:
        False if the session ended at the "nothing to do" short-circuit.
    """
    cancel = runtime.cancel

    usage = report_junk(runtime)
    if usage.is_clean:
        return False

    if cancel.is_cancelled():
        return True
    if ask_confirmation("Do you want to clean junk files?", console=runtime.console, cancel=cancel):
        clean_junk(runtime)

    if cancel.is_cancelled():
        return True
    if ask_confirmation(
        "Do you want to scan for large files?", console=runtime.console, cancel=cancel
    ):
        _prompt_and_scan(runtime)

    if cancel.is_cancelled():
        return True
    if runtime.config.monitor_seconds > 0:
        monitor = SystemMonitor(
            cancel=cancel,
            tasks=runtime.tasks,
            console=runtime.console,
            interval=runtime.config.monitor_interval,
            duration=runtime.config.monitor_seconds,
            logger=runtime.logger,
        )
        monitor.start()

    if cancel.is_cancelled():
        return True
    run_memory_optimization(runtime)
    return True


def run_interactive(runtime: Runtime) -> int:
    """Run the full interactive session.

    Args:
        runtime: Runtime of this invocation.

    Returns:
        Process exit code: 0 on completion, 130 if interrupted.
    """
    print_banner()
    runtime.logger.info("Session started")

    if not _run_steps(runtime):
        runtime.logger.info("No junk found, nothing to do")
        return EXIT_OK

    runtime.tasks.wait()
    print_farewell()

    if runtime.cancel.is_cancelled():
        runtime.logger.warning("Session interrupted")
        return EXIT_INTERRUPTED
    runtime.logger.info("Session finished")
    return EXIT_OK
