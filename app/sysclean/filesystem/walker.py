"""Recursive directory walker.

Yields every leaf entry below a root in depth-first, name-sorted order.
Directories are only descended, never yielded. Symlinks are never
followed: a link to a directory is reported as a SYMLINK entry, which
rules out cycles without a visited set. Only the root itself may be a
symlink to a directory, since the user named it explicitly.
"""

import logging
import stat
from collections.abc import Callable, Iterator
from pathlib import Path

from sysclean.filesystem.models import FileEntry, PathType

logger = logging.getLogger(__name__)

ErrorSink = Callable[[str, OSError], None]


class WalkError(Exception):
    """Raised when a walk cannot start because the root is unusable.

    Attributes:
        path: The root that could not be walked.
        reason: Human-readable cause.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot walk {path}: {reason}")
        self.path = path
        self.reason = reason


def _log_entry_error(path: str, error: OSError) -> None:
    logger.warning("Error accessing path %s: %s", path, error)


def walk_files(root: str | Path, on_error: ErrorSink | None = None) -> Iterator[FileEntry]:
    """Walk ``root`` recursively and yield its leaf entries lazily.

    The root is checked eagerly: a missing, unreadable or non-directory
    root raises WalkError from this call, before any iteration. Errors on
    entries below the root go to ``on_error`` (or the module logger) and
    the walk continues with the next sibling.

    Args:
        root: Directory to walk.
        on_error: Callback receiving ``(path, exception)`` for every entry
            that could not be read or listed.

    Returns:
        Iterator of FileEntry for every non-directory entry.

    Raises:
        WalkError: If the root does not exist, is not a directory, or
            cannot be listed.
    """
    root_path = Path(root)
    sink = on_error or _log_entry_error

    try:
        is_dir = root_path.is_dir()
        exists = is_dir or root_path.exists()
    except OSError as e:
        raise WalkError(str(root_path), str(e)) from e
    if not exists:
        raise WalkError(str(root_path), "no such directory")
    if not is_dir:
        raise WalkError(str(root_path), "not a directory")

    try:
        children = sorted(root_path.iterdir())
    except OSError as e:
        raise WalkError(str(root_path), e.strerror or str(e)) from e

    return _walk(children, sink)


def _walk(children: list[Path], sink: ErrorSink) -> Iterator[FileEntry]:
    """Depth-first traversal over already listed root children."""
    # Explicit stack of sibling iterators instead of recursion, so deep
    # trees cannot exhaust the interpreter's recursion limit.
    stack: list[Iterator[Path]] = [iter(children)]

    while stack:
        try:
            entry = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue

        try:
            st = entry.lstat()
        except OSError as e:
            sink(str(entry), e)
            continue

        if stat.S_ISDIR(st.st_mode):
            try:
                stack.append(iter(sorted(entry.iterdir())))
            except OSError as e:
                sink(str(entry), e)
            continue

        yield FileEntry(path=str(entry), size=st.st_size, path_type=_path_type(entry, st.st_mode))


def _path_type(path: Path, mode: int) -> PathType:
    """Classify a non-directory entry from its ``lstat`` mode."""
    if stat.S_ISREG(mode):
        return PathType.FILE
    if stat.S_ISLNK(mode):
        # A target that cannot be stat'ed for any reason counts as dangling
        try:
            path.stat()
        except OSError:
            return PathType.DEAD_SYMLINK
        return PathType.SYMLINK
    return PathType.OTHER
