"""Tests for filesystem location helpers."""

from pathlib import Path

import pytest

from podcastarchive.utils.paths import get_config_dir, get_config_file


class TestConfigPaths:
    """Tests for config directory resolution."""

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that PODCASTARCHIVE_CONFIG_DIR wins."""
        monkeypatch.setenv("PODCASTARCHIVE_CONFIG_DIR", str(tmp_path))

        assert get_config_dir() == tmp_path
        assert get_config_file() == tmp_path / "config.yaml"

    def test_default_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the platform default when no override is set."""
        monkeypatch.delenv("PODCASTARCHIVE_CONFIG_DIR", raising=False)

        assert get_config_dir().name == "podcastarchive"

    def test_blank_override_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an empty override falls back to the default."""
        monkeypatch.setenv("PODCASTARCHIVE_CONFIG_DIR", "  ")

        assert get_config_dir().name == "podcastarchive"
