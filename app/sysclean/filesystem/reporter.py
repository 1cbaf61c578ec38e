"""Junk size reporting.

Sums the regular files below each configured junk root. One unreadable
root never hides the others: it is logged and reported as zero.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from sysclean.filesystem.models import JunkUsage, as_root
from sysclean.filesystem.walker import WalkError, walk_files


class JunkSizeReporter:
    """Aggregates junk usage per root.

    Args:
        logger: Log sink for walk errors. Defaults to the module logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def usage(self, roots: Iterable[str | Path]) -> JunkUsage:
        """Compute the size of every root.

        Directories and non-regular entries (symlinks, sockets) contribute
        nothing; empty directories therefore add 0.

        Args:
            roots: Junk root directories, in display order.

        Returns:
            JunkUsage with one size per distinct root.
        """
        sizes: dict[str, int] = {}
        failed: list[str] = []
        skipped = 0
        entries = 0

        def _on_error(path: str, error: OSError) -> None:
            nonlocal skipped
            skipped += 1
            self._logger.warning("Error accessing path %s: %s", path, error)

        for root in roots:
            key = as_root(root)
            if key in sizes:
                continue
            total = 0
            try:
                for entry in walk_files(key, _on_error):
                    entries += 1
                    if entry.is_regular_file:
                        total += entry.size
                sizes[key] = total
            except WalkError as e:
                self._logger.error("Error scanning directory %s: %s", key, e.reason)
                failed.append(key)
                sizes[key] = 0

        usage = JunkUsage(
            sizes=sizes,
            failed_roots=tuple(failed),
            skipped_entries=skipped,
            entry_count=entries,
        )
        self._logger.info(
            "Junk usage: %d bytes across %d root(s), %d unreadable entr%s",
            usage.total_bytes,
            len(sizes),
            skipped,
            "y" if skipped == 1 else "ies",
        )
        return usage
