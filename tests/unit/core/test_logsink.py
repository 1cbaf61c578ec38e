"""Unit tests for the log sink setup."""

import logging
from pathlib import Path

import pytest
from sysclean.core.logsink import ROOT_LOGGER, LogSinkError, close_logging, configure_logging


def _file_handlers() -> list[logging.FileHandler]:
    logger = logging.getLogger(ROOT_LOGGER)
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_creates_file_and_writes(self, tmp_path: Path) -> None:
        """Records of sysclean modules end up in the log file."""
        log_file = tmp_path / "logs" / "sysclean.log"

        configure_logging(log_file)
        logging.getLogger("sysclean.filesystem.remover").warning("Error removing file %s", "x")
        close_logging()

        content = log_file.read_text()
        assert "WARNING sysclean.filesystem.remover: Error removing file x" in content

    def test_verbose_enables_debug(self, tmp_path: Path) -> None:
        """Verbose mode lowers the level to DEBUG."""
        logger = configure_logging(tmp_path / "a.log", verbose=True)
        assert logger.level == logging.DEBUG

        logger = configure_logging(tmp_path / "a.log")
        assert logger.level == logging.INFO

    def test_reconfigure_replaces_handler(self, tmp_path: Path) -> None:
        """Configuring twice leaves a single file handler."""
        configure_logging(tmp_path / "first.log")
        configure_logging(tmp_path / "second.log")

        handlers = _file_handlers()
        assert len(handlers) == 1
        assert handlers[0].baseFilename == str(tmp_path / "second.log")

    def test_unopenable_file_raises(self, tmp_path: Path) -> None:
        """A log path below a regular file cannot be opened."""
        blocker = tmp_path / "file"
        blocker.write_text("x")

        with pytest.raises(LogSinkError, match="Failed to open log file"):
            configure_logging(blocker / "sysclean.log")


class TestCloseLogging:
    """Tests for close_logging."""

    def test_removes_handlers(self, tmp_path: Path) -> None:
        """Closing detaches every file handler."""
        configure_logging(tmp_path / "a.log")

        close_logging()

        assert _file_handlers() == []
