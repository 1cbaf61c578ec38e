"""Filesystem domain models for junk reporting and large-file ranking.

This module defines the immutable records produced by directory walks
and the aggregate results of the reporter, remover and scanner.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class PathType(str, Enum):
    """Type of a non-directory filesystem entry.

    Attributes:
        FILE: Regular file.
        SYMLINK: Symbolic link with a valid target.
        DEAD_SYMLINK: Symbolic link whose target does not exist.
        OTHER: Socket, FIFO or device node.
    """

    FILE = "file"
    SYMLINK = "symlink"
    DEAD_SYMLINK = "dead_symlink"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class FileEntry:
    """Snapshot of one leaf entry captured during a walk.

    Attributes:
        path: Path of the entry.
        size: Size in bytes as reported by ``lstat`` (the link itself for
            symlinks).
        path_type: Kind of entry. Only FILE entries count towards sizes.
    """

    path: str
    size: int
    path_type: PathType = PathType.FILE

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size < 0:
            msg = f"Size cannot be negative, got {self.size}"
            raise ValueError(msg)

    @property
    def is_regular_file(self) -> bool:
        return self.path_type == PathType.FILE


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Ranked large files of one scan.

    Attributes:
        directory: Directory that was scanned.
        min_size: Threshold in bytes; every entry is strictly larger.
        limit: Maximum number of entries kept.
        entries: Entries sorted by size, largest first, at most ``limit``.
        matched: Number of qualifying files before truncation.
    """

    directory: str
    min_size: int
    limit: int
    entries: tuple[FileEntry, ...]
    matched: int

    @property
    def truncated(self) -> bool:
        """Check if qualifying files were dropped by the limit."""
        return self.matched > len(self.entries)

    @property
    def total_size(self) -> int:
        """Combined size of the returned entries."""
        return sum(e.size for e in self.entries)


@dataclass(frozen=True, slots=True)
class JunkUsage:
    """Aggregated junk size per configured root.

    Attributes:
        sizes: Bytes of regular files per root, in configuration order.
        failed_roots: Roots that could not be walked at all (reported as 0).
        skipped_entries: Entries below the roots that could not be read.
        entry_count: Non-directory entries found, including empty files
            and links that add no bytes.
    """

    sizes: dict[str, int] = field(default_factory=lambda: {})
    failed_roots: tuple[str, ...] = ()
    skipped_entries: int = 0
    entry_count: int = 0

    @property
    def total_bytes(self) -> int:
        return sum(self.sizes.values())

    @property
    def is_clean(self) -> bool:
        """True when the junk roots add up to zero bytes."""
        return self.total_bytes == 0

    @property
    def has_entries(self) -> bool:
        """True when the roots hold anything clean() would delete."""
        return self.entry_count > 0


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of deleting a single entry.

    Attributes:
        path: Path that was operated on.
        success: Whether the entry was removed (or would be, in dry-run).
        size: Size of the entry in bytes.
        error: Error message if the deletion failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    success: bool
    size: int = 0
    error: str | None = None
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class CleanReport:
    """Outcome of one clean run over the configured roots.

    Attributes:
        results: Per-entry results in walk order.
        missing_roots: Roots that did not exist (nothing to do).
        failed_roots: Roots that exist but could not be walked.
        refused_roots: Protected roots that were never touched.
        dry_run: Whether the run was a dry-run.
    """

    results: tuple[RemovalResult, ...] = ()
    missing_roots: tuple[str, ...] = ()
    failed_roots: tuple[str, ...] = ()
    refused_roots: tuple[str, ...] = ()
    dry_run: bool = False

    @property
    def removed(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def freed_bytes(self) -> int:
        """Bytes of regular content removed (or that would be, in dry-run)."""
        return sum(r.size for r in self.results if r.success)

    @property
    def has_failures(self) -> bool:
        return self.failed > 0 or bool(self.failed_roots) or bool(self.refused_roots)


def as_root(path: str | Path) -> str:
    """Normalize a configured root into the key used in reports."""
    return str(Path(path).expanduser())
