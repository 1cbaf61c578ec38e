"""Shared Rich display functions for reports and results.

Provides the banner, the junk usage table, the clean summary and the
large-file ranking used by the interactive flow and the subcommands.
"""

from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from sysclean import __version__
from sysclean.core.memory import ReclaimResult
from sysclean.filesystem.models import CleanReport, JunkUsage, ScanResult
from sysclean.utils.formatting import (
    console,
    format_gigabytes,
    format_megabytes,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)

# Failed entries listed individually before collapsing into a count
MAX_FAILURES_SHOWN = 20


def print_banner() -> None:
    """Print the application banner."""
    console.print(f"[bold_header]🚀 System Cleaner Pro - v{__version__} 🚀[/]")
    console.print(Rule(style="border"))


def print_farewell() -> None:
    """Print the closing line of the interactive flow."""
    console.print("\n👋 [bold_header]Thank you for using System Cleaner Pro![/]")


def create_usage_table(usage: JunkUsage) -> Table:
    """Create a Rich table with the junk size of every root.

    Args:
        usage: Aggregated usage to display.

    Returns:
        Rich Table with one row per root.
    """
    table = Table(
        title="Junk Usage",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("", width=2, justify="center")
    table.add_column("Directory", style="path")
    table.add_column("Size", style="size", justify="right")
    table.add_column("MB", style="muted", justify="right")

    failed = set(usage.failed_roots)
    for root, size in usage.sizes.items():
        if root in failed:
            table.add_row("📂", escape(root), "[error]unreadable[/]", "")
        else:
            table.add_row("📂", escape(root), format_size(size), format_megabytes(size))

    return table


def print_junk_usage(usage: JunkUsage) -> None:
    """Print per-root usage and the total, or the clean verdict."""
    if not usage.sizes:
        print_warning("No junk directories configured (cleanup_paths is empty).")
    else:
        console.print(create_usage_table(usage))

    for root in usage.failed_roots:
        print_warning(f"Could not scan {root}; see the log for details.")
    if usage.skipped_entries:
        print_warning(f"{usage.skipped_entries} entries could not be read and were skipped.")

    if usage.is_clean:
        print_success("\n✅ No junk files found! Your system is clean.")
        if usage.has_entries:
            print_info(
                f"{usage.entry_count} empty file(s) or link(s) remain; "
                "'sysclean junk clean' removes them."
            )
        return

    console.print(f"\n🚨 [size]Total Junk Size: {format_size(usage.total_bytes)}[/] 🚨")


def print_clean_report(report: CleanReport) -> None:
    """Print the outcome of a clean run."""
    for root in report.refused_roots:
        print_error(f"Refused to clean protected directory: {root}")
    for root in report.failed_roots:
        print_error(f"Could not clean {root}; see the log for details.")
    for root in report.missing_roots:
        print_info(f"Not found, nothing to clean: {root}")

    failures = [r for r in report.results if not r.success]
    if failures:
        table = Table(
            title="Failed Deletions",
            show_header=True,
            header_style="bold_header",
            border_style="border",
        )
        table.add_column("Path", style="path")
        table.add_column("Error", style="muted")
        for r in failures[:MAX_FAILURES_SHOWN]:
            table.add_row(escape(r.path), escape(r.error or "Unknown error"))
        console.print(table)
        if len(failures) > MAX_FAILURES_SHOWN:
            console.print(f"[muted]... and {len(failures) - MAX_FAILURES_SHOWN} more[/]")

    freed = format_size(report.freed_bytes)
    if report.dry_run:
        print_info(f"Dry-run: {report.removed} file(s) would be deleted ({freed}).")
    elif report.has_failures:
        print_warning(f"{report.removed} file(s) deleted ({freed}), {report.failed} failed.")
    else:
        print_success(f"✅ Junk files cleaned successfully! {report.removed} file(s), {freed}.")


def create_scan_table(result: ScanResult) -> Table:
    """Create a Rich table ranking the large files of a scan.

    Args:
        result: Scan result to display.

    Returns:
        Rich Table with rank, path and size columns.
    """
    table = Table(
        title=f"Top {result.limit} largest files",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", style="muted")
    table.add_column("File", style="path")
    table.add_column("Size", style="size", justify="right")
    table.add_column("GB", style="muted", justify="right")

    for rank, entry in enumerate(result.entries, start=1):
        table.add_row(
            str(rank),
            f"📄 {escape(entry.path)}",
            format_size(entry.size),
            format_gigabytes(entry.size),
        )

    return table


def print_scan_result(result: ScanResult) -> None:
    """Print the large-file ranking of a scan."""
    if not result.entries:
        print_success(
            f"No files larger than {format_size(result.min_size)} found in {result.directory}."
        )
        return

    console.print()
    console.print(create_scan_table(result))
    if result.truncated:
        console.print(
            f"[muted](showing {len(result.entries)} of {result.matched}, "
            f"limited to {result.limit})[/]"
        )


def print_reclaim_result(result: ReclaimResult) -> None:
    """Print the outcome of a memory reclamation attempt."""
    if result.success:
        print_success(f"✅ {result.message}")
    else:
        print_warning(result.message)
