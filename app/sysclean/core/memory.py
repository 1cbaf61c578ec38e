"""OS-level memory reclamation.

Maps a platform identifier (``sys.platform``) to the command that asks
the kernel to drop its caches. Platforms without an entry are reported
as unsupported instead of failing.
"""

import logging
import subprocess
import sys
from dataclasses import dataclass

from sysclean.utils.shell import run_command


@dataclass(frozen=True, slots=True)
class ReclaimCommand:
    """Memory reclamation command for one platform.

    Attributes:
        platform: ``sys.platform`` value the command applies to.
        args: Command and arguments, run without a shell.
        description: Human-readable summary of what the command does.
    """

    platform: str
    args: tuple[str, ...]
    description: str


@dataclass(frozen=True, slots=True)
class ReclaimResult:
    """Outcome of a memory reclamation attempt.

    Attributes:
        success: Whether the command ran and exited with status 0.
        message: Success message or failure reason.
        command: The command that was attempted, None for unsupported platforms.
    """

    success: bool
    message: str
    command: ReclaimCommand | None = None


class UnsupportedPlatformError(Exception):
    """Raised when no reclamation command exists for a platform."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"unsupported operating system: {platform}")
        self.platform = platform


RECLAIM_COMMANDS: dict[str, ReclaimCommand] = {
    "darwin": ReclaimCommand(
        platform="darwin",
        args=("sudo", "purge"),
        description="Flush the macOS disk cache (purge)",
    ),
    "linux": ReclaimCommand(
        platform="linux",
        args=("sudo", "sysctl", "-w", "vm.drop_caches=3"),
        description="Drop the Linux page cache, dentries and inodes",
    ),
}


def reclaim_command(platform: str = sys.platform) -> ReclaimCommand:
    """Look up the reclamation command for a platform.

    Raises:
        UnsupportedPlatformError: If the platform has no command.
    """
    try:
        return RECLAIM_COMMANDS[platform]
    except KeyError:
        raise UnsupportedPlatformError(platform) from None


def optimize_memory(
    platform: str = sys.platform,
    *,
    logger: logging.Logger | None = None,
) -> ReclaimResult:
    """Run the platform's memory reclamation command once.

    The command runs without a timeout; a hanging ``sudo`` prompt blocks
    the caller. Failures are logged and returned, never raised.

    Args:
        platform: Platform identifier, defaults to the running platform.
        logger: Log sink for failures.

    Returns:
        ReclaimResult describing the outcome.
    """
    log = logger if logger is not None else logging.getLogger(__name__)

    try:
        command = reclaim_command(platform)
    except UnsupportedPlatformError as e:
        log.error("Memory optimization skipped: %s", e)
        return ReclaimResult(success=False, message=str(e))

    try:
        result = run_command(list(command.args), timeout=None)
    except (FileNotFoundError, OSError, subprocess.SubprocessError) as e:
        log.error("Memory optimization failed: %s", e)
        return ReclaimResult(
            success=False, message=f"memory optimization failed: {e}", command=command
        )

    if not result.success:
        detail = result.stderr.strip() or f"exit code {result.returncode}"
        log.error("Memory optimization failed: %s", detail)
        return ReclaimResult(
            success=False,
            message=f"memory optimization failed: {detail}",
            command=command,
        )

    log.info("Memory optimization complete: %s", " ".join(command.args))
    return ReclaimResult(success=True, message="Memory optimization complete!", command=command)
