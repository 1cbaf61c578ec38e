"""Unit tests for cli/display.py.

Tests for the shared Rich display functions used by the interactive
session and the subcommands.
"""

import pytest
from sysclean.cli.display import (
    MAX_FAILURES_SHOWN,
    create_scan_table,
    create_usage_table,
    print_banner,
    print_clean_report,
    print_farewell,
    print_junk_usage,
    print_scan_result,
)
from sysclean.filesystem.models import (
    CleanReport,
    FileEntry,
    JunkUsage,
    RemovalResult,
    ScanResult,
)

MB = 1024 * 1024


def _scan(sizes: list[int], matched: int | None = None, limit: int = 10) -> ScanResult:
    entries = tuple(FileEntry(path=f"/data/file{i}.bin", size=s) for i, s in enumerate(sizes))
    return ScanResult(
        directory="/data",
        min_size=MB,
        limit=limit,
        entries=entries,
        matched=len(entries) if matched is None else matched,
    )


class TestBannerAndFarewell:
    """Tests for the session framing lines."""

    def test_banner(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The banner names the product and version."""
        print_banner()
        assert "🚀 System Cleaner Pro - v1.0.0 🚀" in capsys.readouterr().out

    def test_farewell(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The farewell thanks the user."""
        print_farewell()
        assert "👋 Thank you for using System Cleaner Pro!" in capsys.readouterr().out


class TestJunkUsageDisplay:
    """Tests for usage table and summary."""

    def test_table_rows(self) -> None:
        """Each root gets one row."""
        table = create_usage_table(JunkUsage(sizes={"/a": 10, "/b": 3 * MB}))
        assert table.row_count == 2

    def test_total_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Non-empty usage prints the total."""
        print_junk_usage(JunkUsage(sizes={"/cache": 65}))

        out = capsys.readouterr().out
        assert "/cache" in out
        assert "🚨 Total Junk Size: 65 B 🚨" in out
        assert "Your system is clean" not in out

    def test_clean_verdict(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Zero usage prints the clean message instead of a total."""
        print_junk_usage(JunkUsage(sizes={"/cache": 0}))

        out = capsys.readouterr().out
        assert "✅ No junk files found! Your system is clean." in out
        assert "Total Junk Size" not in out

    def test_zero_byte_entries_hinted(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Entries that add no bytes are pointed out after the clean message."""
        print_junk_usage(JunkUsage(sizes={"/cache": 0}, entry_count=3))

        out = capsys.readouterr().out
        assert "Your system is clean" in out
        assert "3 empty file(s) or link(s) remain" in out

    def test_failed_root_warned(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Unreadable roots are flagged in the table and on stderr."""
        print_junk_usage(JunkUsage(sizes={"/locked": 0}, failed_roots=("/locked",)))

        captured = capsys.readouterr()
        assert "unreadable" in captured.out
        assert "Could not scan /locked" in captured.err


class TestCleanReportDisplay:
    """Tests for print_clean_report."""

    def test_success_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A clean run reports the count and freed size."""
        report = CleanReport(results=(RemovalResult(path="/c/a", success=True, size=65),))

        print_clean_report(report)

        out = capsys.readouterr().out
        assert "✅ Junk files cleaned successfully!" in out
        assert "1 file(s), 65 B" in out

    def test_failures_listed(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Failed deletions are listed with their error."""
        report = CleanReport(
            results=(
                RemovalResult(path="/c/a", success=True, size=10),
                RemovalResult(path="/c/locked", success=False, error="Permission denied"),
            )
        )

        print_clean_report(report)

        captured = capsys.readouterr()
        assert "/c/locked" in captured.out
        assert "Permission denied" in captured.out
        assert "1 failed" in captured.err

    def test_long_failure_list_collapsed(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Only the first failures are listed individually."""
        results = tuple(
            RemovalResult(path=f"/c/{i}", success=False, error="denied")
            for i in range(MAX_FAILURES_SHOWN + 5)
        )

        print_clean_report(CleanReport(results=results))

        assert "... and 5 more" in capsys.readouterr().out

    def test_dry_run(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Dry-run wording says nothing was deleted."""
        report = CleanReport(
            results=(RemovalResult(path="/c/a", success=True, size=10, dry_run=True),),
            dry_run=True,
        )

        print_clean_report(report)

        assert "Dry-run: 1 file(s) would be deleted" in capsys.readouterr().out

    def test_refused_and_missing_roots(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Refused roots are errors, missing roots are informational."""
        print_clean_report(CleanReport(refused_roots=("/",), missing_roots=("/gone",)))

        captured = capsys.readouterr()
        assert "Refused to clean protected directory: /" in captured.err
        assert "Not found, nothing to clean: /gone" in captured.out


class TestScanResultDisplay:
    """Tests for the large-file ranking."""

    def test_table_ranks(self) -> None:
        """Rows follow the result order."""
        table = create_scan_table(_scan([3 * MB, 2 * MB]))
        assert table.row_count == 2

    def test_sizes_in_gigabytes(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Each file shows its decimal gigabytes."""
        print_scan_result(_scan([500 * MB]))

        out = capsys.readouterr().out
        assert "/data/file0.bin" in out
        assert "0.52 GB" in out

    def test_truncation_note(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A truncated result says how many files were left out."""
        print_scan_result(_scan([3 * MB, 2 * MB], matched=5, limit=2))

        assert "(showing 2 of 5, limited to 2)" in capsys.readouterr().out

    def test_empty_result(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No qualifying files prints a message instead of a table."""
        print_scan_result(_scan([]))

        assert "No files larger than 1.0 MB found in /data." in capsys.readouterr().out
