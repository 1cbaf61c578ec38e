"""Protected roots that must never be cleaned.

A junk root is emptied recursively, so a misconfigured entry such as the
home directory would wipe user data. Roots matching these patterns are
refused before any walk starts.
"""

import fnmatch
from pathlib import Path

# Protected root patterns (glob-style).
# Patterns starting with ~ are expanded to the user's home directory
# before matching. Patterns starting with / are matched as-is.
PROTECTED_ROOT_PATTERNS: list[str] = [
    # Filesystem root and home directories
    "/",
    "/home",
    "/Users",
    "~",
    # User data
    "~/Desktop",
    "~/Documents",
    "~/Downloads",
    "~/Pictures",
    "~/Music",
    "~/Videos",
    "~/Movies",
    "~/Library",
    "~/.config",
    "~/.local",
    "~/.local/share",
    # SSH and security
    "~/.ssh",
    "~/.ssh/*",
    "~/.gnupg",
    "~/.gnupg/*",
    # sysclean itself
    "~/.config/sysclean",
    "~/.local/state/sysclean",
    # System directories
    "/bin",
    "/sbin",
    "/boot",
    "/boot/*",
    "/dev",
    "/dev/*",
    "/etc",
    "/etc/*",
    "/lib",
    "/lib64",
    "/opt",
    "/proc",
    "/proc/*",
    "/sys",
    "/sys/*",
    "/usr",
    "/usr/bin",
    "/usr/lib",
    "/usr/sbin",
    "/var",
    "/var/lib",
    "/var/lib/*",
    "/Applications",
    "/Library",
    "/System",
    "/System/*",
]


def _normalize(path: str | Path) -> str:
    """Expand ``~`` and resolve symlinks so aliases of protected roots match."""
    return str(Path(path).expanduser().resolve(strict=False))


def is_protected_root(path: str | Path) -> bool:
    """Check if a junk root is protected and must not be cleaned.

    The path is expanded and resolved first, so ``~`` and symlinks pointing
    at a protected directory are caught as well. Patterns using ~ notation
    are expanded to the actual home directory before comparison using
    fnmatch for glob-style matching.

    Args:
        path: Root path to check.

    Returns:
        True if the root matches any protected pattern, False otherwise.

    Raises:
        RuntimeError: If resolving runs into a symlink loop (Python < 3.13).
        OSError: If a path component cannot be inspected.
    """
    home = str(Path.home())
    normalized = _normalize(path)

    for pattern in PROTECTED_ROOT_PATTERNS:
        expanded = home + pattern[1:] if pattern.startswith("~") else pattern

        if fnmatch.fnmatch(normalized, expanded):
            return True

    return False
