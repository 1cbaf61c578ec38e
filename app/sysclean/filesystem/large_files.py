"""Large file scanner.

Walks a directory, keeps every regular file above a size threshold and
ranks them largest first.
"""

import logging
from pathlib import Path

from sysclean.core.progress import ProgressIndicator
from sysclean.filesystem.models import FileEntry, ScanResult
from sysclean.filesystem.walker import walk_files


class LargeFileScanner:
    """Finds the largest files below a directory.

    Args:
        logger: Log sink for unreadable entries. Defaults to the module logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def scan(
        self,
        directory: str | Path,
        min_size: int,
        top_n: int,
        *,
        progress: ProgressIndicator | None = None,
    ) -> ScanResult:
        """Rank the files under ``directory`` that are larger than ``min_size``.

        When a progress indicator is given it runs for the duration of the
        walk. It is stopped, and its final frame rendered, before this
        method returns or raises.

        Args:
            directory: Directory to scan.
            min_size: Threshold in bytes; files must be strictly larger.
            top_n: Maximum number of entries to return.
            progress: Optional indicator to animate during the walk.

        Returns:
            ScanResult with at most ``top_n`` entries, largest first.

        Raises:
            ValueError: If ``min_size`` is negative or ``top_n`` is below 1.
            WalkError: If the directory cannot be walked. No partial
                result is returned.
        """
        if min_size < 0:
            msg = f"min_size must be >= 0, got {min_size}"
            raise ValueError(msg)
        if top_n < 1:
            msg = f"top_n must be >= 1, got {top_n}"
            raise ValueError(msg)

        if progress is not None:
            progress.start()
        try:
            matched: list[FileEntry] = [
                entry
                for entry in walk_files(directory, self._log_access_error)
                if entry.is_regular_file and entry.size > min_size
            ]
        finally:
            if progress is not None:
                progress.stop()

        # Stable sort: equal sizes keep walk order.
        matched.sort(key=lambda e: e.size, reverse=True)

        self._logger.info(
            "Scanned %s: %d file(s) larger than %d bytes", directory, len(matched), min_size
        )
        return ScanResult(
            directory=str(directory),
            min_size=min_size,
            limit=top_n,
            entries=tuple(matched[:top_n]),
            matched=len(matched),
        )

    def _log_access_error(self, path: str, error: OSError) -> None:
        self._logger.warning("Error accessing path %s: %s", path, error)
