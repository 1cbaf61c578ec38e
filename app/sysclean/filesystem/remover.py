"""Junk file removal.

Deletes every non-directory entry below the configured junk roots. The
directory skeleton is left in place, so cleaned roots survive as empty
directory shells. Deletion is best-effort: a failing entry is logged and
the walk moves on. There is no rollback and no retry.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from sysclean.filesystem.models import CleanReport, FileEntry, RemovalResult, as_root
from sysclean.filesystem.protected import is_protected_root
from sysclean.filesystem.walker import WalkError, walk_files


class JunkRemover:
    """Deletes the file contents of junk roots.

    Callers must obtain explicit user confirmation before calling clean().

    Attributes:
        _dry_run: If True, report what would be deleted without deleting.
    """

    def __init__(self, logger: logging.Logger | None = None, *, dry_run: bool = False) -> None:
        """Initialize the JunkRemover.

        Args:
            logger: Log sink for per-file failures. Defaults to the module logger.
            dry_run: If True, report what would be deleted without deleting.
        """
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def clean(self, roots: Iterable[str | Path]) -> CleanReport:
        """Delete every non-directory entry under each root.

        Missing roots are logged as "not found" and skipped, which makes a
        second clean of the same roots a no-op. Protected roots are refused
        without walking them.

        Args:
            roots: Junk root directories.

        Returns:
            CleanReport with one RemovalResult per entry attempted.
        """
        results: list[RemovalResult] = []
        missing: list[str] = []
        failed: list[str] = []
        refused: list[str] = []
        seen: set[str] = set()

        for root in roots:
            key = as_root(root)
            if key in seen:
                continue
            seen.add(key)

            try:
                protected = is_protected_root(key)
                # A dangling or looping root link is a walk failure, not a missing root
                exists = protected or Path(key).exists() or Path(key).is_symlink()
            except (OSError, RuntimeError) as e:
                # resolve() raises RuntimeError on a symlink loop before 3.13
                self._logger.error("Error cleaning directory %s: %s", key, e)
                failed.append(key)
                continue

            if protected:
                self._logger.error("Refusing to clean protected directory %s", key)
                refused.append(key)
                continue

            if not exists:
                self._logger.warning("Junk directory not found, nothing to clean: %s", key)
                missing.append(key)
                continue

            try:
                entries = walk_files(key, self._log_access_error)
            except WalkError as e:
                self._logger.error("Error cleaning directory %s: %s", key, e.reason)
                failed.append(key)
                continue

            for entry in entries:
                result = self._remove(entry)
                if result is not None:
                    results.append(result)

        report = CleanReport(
            results=tuple(results),
            missing_roots=tuple(missing),
            failed_roots=tuple(failed),
            refused_roots=tuple(refused),
            dry_run=self._dry_run,
        )
        self._logger.info(
            "%s %d entr%s (%d bytes), %d failure(s)",
            "Would remove" if self._dry_run else "Removed",
            report.removed,
            "y" if report.removed == 1 else "ies",
            report.freed_bytes,
            report.failed,
        )
        return report

    def _remove(self, entry: FileEntry) -> RemovalResult | None:
        """Delete a single entry.

        Returns:
            RemovalResult, or None if the entry vanished before deletion.
        """
        size = entry.size if entry.is_regular_file else 0

        if self._dry_run:
            self._logger.debug("Dry-run: would delete %s", entry.path)
            return RemovalResult(path=entry.path, success=True, size=size, dry_run=True)

        try:
            # unlink never follows symlinks, so only the link is removed
            Path(entry.path).unlink()
        except FileNotFoundError:
            self._logger.info("Already removed: %s", entry.path)
            return None
        except OSError as e:
            self._logger.error("Error removing file %s: %s", entry.path, e)
            return RemovalResult(path=entry.path, success=False, size=size, error=str(e))

        return RemovalResult(path=entry.path, success=True, size=size)

    def _log_access_error(self, path: str, error: OSError) -> None:
        self._logger.warning("Error accessing path %s: %s", path, error)
