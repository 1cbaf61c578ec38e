"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import tomli_w
from sysclean.core.logsink import close_logging
from sysclean.utils.formatting import console, err_console


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the XDG base directories at the test's tmp directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "xdg-state"))


@pytest.fixture(autouse=True)
def wide_consoles() -> Iterator[None]:
    """Keep long tmp paths on one line in captured Rich output."""
    widths = (console.width, err_console.width)
    console.width = 200
    err_console.width = 200
    yield
    console.width, err_console.width = widths


@pytest.fixture(autouse=True)
def release_log_file() -> Iterator[None]:
    """Close any log file handler a test opened."""
    yield
    close_logging()


@pytest.fixture
def junk_dir(tmp_path: Path) -> Path:
    """A junk root holding 65 bytes of regular files.

    Layout:
        junk/a.txt        (10 bytes)
        junk/sub/b.bin    (55 bytes)
        junk/empty/       (no files)
    """
    root = tmp_path / "junk"
    (root / "sub").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_bytes(b"x" * 10)
    (root / "sub" / "b.bin").write_bytes(b"y" * 55)
    return root


def _write_config(path: Path, **values: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        tomli_w.dump(values, f)
    return path


@pytest.fixture
def config_file(tmp_path: Path, junk_dir: Path) -> Path:
    """A config file pointing at ``junk_dir`` with the monitor disabled."""
    return _write_config(
        tmp_path / "config.toml",
        cleanup_paths=[str(junk_dir)],
        max_file_size=1024,
        top_files=5,
        log_file=str(tmp_path / "logs" / "sysclean.log"),
        monitor_seconds=0,
    )


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing ``config.toml`` under tmp_path with the given values.

    The log file defaults to a tmp location and the monitor to disabled.
    """

    def _make(**values: object) -> Path:
        values.setdefault("log_file", str(tmp_path / "logs" / "sysclean.log"))
        values.setdefault("monitor_seconds", 0)
        return _write_config(tmp_path / "config.toml", **values)

    return _make
