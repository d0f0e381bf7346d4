"""Unit tests for XDG path management.

Tests for the paths module that provides the XDG-compliant config path.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from folderops.core.paths import (
    APP_NAME,
    ensure_config_dir,
    get_config_dir,
    get_config_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_value_falls_back(self) -> None:
        """An empty XDG_CONFIG_HOME is treated as unset."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


class TestGetConfigPath:
    """Tests for get_config_path function."""

    def test_config_file_name(self, isolated_config_home: Path) -> None:
        """The config file is config.toml inside the config dir."""
        assert get_config_path() == isolated_config_home / APP_NAME / "config.toml"


class TestEnsureConfigDir:
    """Tests for ensure_config_dir function."""

    def test_creates_directory(self, isolated_config_home: Path) -> None:
        """ensure_config_dir creates the directory when missing."""
        result = ensure_config_dir()

        assert result == isolated_config_home / APP_NAME
        assert result.is_dir()

    def test_idempotent(self) -> None:
        """Calling twice is harmless."""
        assert ensure_config_dir() == ensure_config_dir()

    def test_permission_error(self) -> None:
        """A permission failure is reported as RuntimeError."""
        with (
            patch.object(Path, "mkdir", side_effect=PermissionError("denied")),
            pytest.raises(RuntimeError, match="Permission denied"),
        ):
            ensure_config_dir()

    def test_other_os_error(self) -> None:
        """Other OS errors are reported as RuntimeError."""
        with (
            patch.object(Path, "mkdir", side_effect=OSError("disk full")),
            pytest.raises(RuntimeError, match="disk full"),
        ):
            ensure_config_dir()
