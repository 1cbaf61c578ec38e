"""Unit tests for the large command."""

from pathlib import Path

import pytest
from sysclean.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def media_dir(tmp_path: Path) -> Path:
    """A directory with two files above and one below 1 KiB."""
    root = tmp_path / "media"
    (root / "nested").mkdir(parents=True)
    (root / "movie.mkv").write_bytes(b"m" * 8192)
    (root / "nested" / "album.flac").write_bytes(b"a" * 4096)
    (root / "note.txt").write_bytes(b"n" * 10)
    return root


class TestLargeCommand:
    """Tests for sysclean large."""

    def test_scan_directory(self, config_file: Path, media_dir: Path) -> None:
        """Files above the configured threshold are ranked largest first."""
        result = runner.invoke(app, ["-c", str(config_file), "large", str(media_dir)])

        assert result.exit_code == 0
        assert "Top 5 largest files:" in result.output
        assert result.output.index("movie.mkv") < result.output.index("album.flac")
        assert "note.txt" not in result.output

    def test_options_override_config(self, config_file: Path, media_dir: Path) -> None:
        """--min-size and --top replace the configured values."""
        result = runner.invoke(
            app,
            ["-c", str(config_file), "large", str(media_dir), "--min-size", "0", "--top", "1"],
        )

        assert result.exit_code == 0
        assert "movie.mkv" in result.output
        assert "album.flac" not in result.output
        assert "(showing 1 of 3, limited to 1)" in result.output

    def test_prompts_for_directory(self, config_file: Path, media_dir: Path) -> None:
        """Without an argument the directory is read from the console."""
        result = runner.invoke(app, ["-c", str(config_file), "large"], input=f"{media_dir}\n")

        assert result.exit_code == 0
        assert "Enter directory to scan" in result.output
        assert "movie.mkv" in result.output

    def test_empty_answer(self, config_file: Path) -> None:
        """An empty answer fails with code 1."""
        result = runner.invoke(app, ["-c", str(config_file), "large"], input="\n")

        assert result.exit_code == 1
        assert "No directory given" in result.output

    def test_missing_directory(self, config_file: Path, tmp_path: Path) -> None:
        """An invalid directory fails with code 1 and no table."""
        result = runner.invoke(
            app, ["-c", str(config_file), "large", str(tmp_path / "missing")]
        )

        assert result.exit_code == 1
        assert "no such directory" in result.output
        assert "largest files" not in result.output

    def test_nothing_large(self, config_file: Path, tmp_path: Path) -> None:
        """A directory without large files prints a message."""
        small = tmp_path / "small"
        small.mkdir()
        (small / "tiny.txt").write_text("x")

        result = runner.invoke(app, ["-c", str(config_file), "large", str(small)])

        assert result.exit_code == 0
        assert "No files larger than 1.0 KB" in result.output
