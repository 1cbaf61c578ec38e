"""Tests for protected junk root patterns."""

from pathlib import Path

from sysclean.filesystem.protected import PROTECTED_ROOT_PATTERNS, is_protected_root


class TestProtectedRootPatterns:
    """Tests for the PROTECTED_ROOT_PATTERNS list."""

    def test_patterns_contain_home_and_root(self) -> None:
        """The filesystem root and the home directory are protected."""
        assert "/" in PROTECTED_ROOT_PATTERNS
        assert "~" in PROTECTED_ROOT_PATTERNS


class TestIsProtectedRoot:
    """Tests for is_protected_root function."""

    def _home(self) -> str:
        return str(Path.home())

    def test_filesystem_root_protected(self) -> None:
        """/ is never a junk root."""
        assert is_protected_root("/") is True

    def test_home_protected(self) -> None:
        """The home directory is protected, with or without ~."""
        assert is_protected_root("~") is True
        assert is_protected_root(self._home()) is True

    def test_ssh_protected(self) -> None:
        """~/.ssh and anything below it is protected."""
        assert is_protected_root("~/.ssh") is True
        assert is_protected_root(f"{self._home()}/.ssh/keys") is True

    def test_sysclean_config_protected(self) -> None:
        """sysclean's own config directory cannot be cleaned."""
        assert is_protected_root(f"{self._home()}/.config/sysclean") is True

    def test_system_dir_protected(self) -> None:
        """System directories are protected."""
        assert is_protected_root("/etc") is True
        assert is_protected_root("/usr") is True

    def test_cache_not_protected(self) -> None:
        """The usual junk roots are allowed."""
        assert is_protected_root("~/.cache") is False
        assert is_protected_root(f"{self._home()}/Library/Caches") is False

    def test_tmp_subdir_not_protected(self, tmp_path: Path) -> None:
        """An arbitrary scratch directory is allowed."""
        assert is_protected_root(tmp_path / "junk") is False

    def test_symlink_to_home_protected(self, tmp_path: Path) -> None:
        """A link pointing at a protected root is caught after resolving."""
        alias = tmp_path / "alias"
        alias.symlink_to(Path.home())

        assert is_protected_root(alias) is True
