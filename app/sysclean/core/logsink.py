"""Log sink setup.

All sysclean modules log through ``logging.getLogger(__name__)``; this
module attaches the single file handler those records end up in.
Without a working sink the partial-failure reports of a clean run would
be lost, so failing to open it is fatal.
"""

import logging
from pathlib import Path

ROOT_LOGGER = "sysclean"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class LogSinkError(Exception):
    """Raised when the log file cannot be opened."""


def configure_logging(log_file: Path, *, verbose: bool = False) -> logging.Logger:
    """Attach a file handler for ``log_file`` to the sysclean logger.

    Replaces a handler installed by a previous call so repeated
    configuration (tests, subcommands) never duplicates lines.

    Args:
        log_file: File to append log records to. Parent directories are
            created when missing.
        verbose: Log DEBUG records as well as INFO and above.

    Returns:
        The configured ``sysclean`` logger.

    Raises:
        LogSinkError: If the log file or its directory cannot be created.
    """
    logger = logging.getLogger(ROOT_LOGGER)

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as e:
        raise LogSinkError(f"Failed to open log file {log_file}: {e}") from e

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    for existing in list(logger.handlers):
        if isinstance(existing, logging.FileHandler):
            logger.removeHandler(existing)
            existing.close()

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.debug("Logging to %s", log_file)
    return logger


def close_logging() -> None:
    """Detach and close the file handlers of the sysclean logger."""
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
