"""Filesystem walking, junk reporting, cleanup and large-file ranking.

This module provides the directory walker and the three operations built
on it: junk size reporting, junk removal and the large-file scan.
"""

from sysclean.filesystem.large_files import LargeFileScanner
from sysclean.filesystem.models import (
    CleanReport,
    FileEntry,
    JunkUsage,
    PathType,
    RemovalResult,
    ScanResult,
)
from sysclean.filesystem.protected import PROTECTED_ROOT_PATTERNS, is_protected_root
from sysclean.filesystem.remover import JunkRemover
from sysclean.filesystem.reporter import JunkSizeReporter
from sysclean.filesystem.walker import WalkError, walk_files

__all__ = [
    "PROTECTED_ROOT_PATTERNS",
    "CleanReport",
    "FileEntry",
    "JunkRemover",
    "JunkSizeReporter",
    "JunkUsage",
    "LargeFileScanner",
    "PathType",
    "RemovalResult",
    "ScanResult",
    "WalkError",
    "is_protected_root",
    "walk_files",
]
