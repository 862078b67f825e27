"""Tests for ConfigManager."""

from pathlib import Path

import pytest
import yaml

from podcastarchive.config.manager import ConfigManager
from podcastarchive.config.schema import GlobalConfig
from podcastarchive.utils.errors import InvalidConfigError
from podcastarchive.utils.paths import get_config_file


class TestConfigManager:
    """Tests for ConfigManager class."""

    def test_init_with_custom_dir(self, tmp_path: Path) -> None:
        """Test ConfigManager initialization with custom directory."""
        manager = ConfigManager(config_dir=tmp_path)

        assert manager.config_dir == tmp_path
        assert manager.config_file == tmp_path / "config.yaml"

    def test_init_uses_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that PODCASTARCHIVE_CONFIG_DIR selects the directory."""
        monkeypatch.setenv("PODCASTARCHIVE_CONFIG_DIR", str(tmp_path / "cfg"))

        manager = ConfigManager()

        assert manager.config_dir == tmp_path / "cfg"
        assert manager.config_file == tmp_path / "cfg" / "config.yaml"
        assert manager.config_file == get_config_file()

    def test_load_config_creates_default_if_missing(self, tmp_path: Path) -> None:
        """Test that load_config creates default config if file doesn't exist."""
        manager = ConfigManager(config_dir=tmp_path)
        config = manager.load_config()

        assert isinstance(config, GlobalConfig)
        assert manager.config_file.exists()

    def test_default_file_loads_back(self, tmp_path: Path) -> None:
        """Test that the generated default file is itself valid."""
        manager = ConfigManager(config_dir=tmp_path)
        manager.load_config()

        config = manager.load_config()

        assert config == GlobalConfig()

    def test_load_config_from_existing_file(self, tmp_path: Path, sample_config_dict: dict) -> None:
        """Test loading config from existing file."""
        with open(tmp_path / "config.yaml", "w") as f:
            yaml.safe_dump(sample_config_dict, f)

        config = ConfigManager(config_dir=tmp_path).load_config()

        assert config.version == "1"
        assert config.log_level == "INFO"
        assert config.podcast.channel_title == "My Archive"

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file gives the defaults."""
        (tmp_path / "config.yaml").write_text("")

        assert ConfigManager(config_dir=tmp_path).load_config() == GlobalConfig()

    @pytest.mark.parametrize(
        "content",
        ["log_level: [unclosed", "log_level: TRACE\n", "- just\n- a list\n", "podcast:\n  explicit: maybe\n"],
    )
    def test_invalid_config_raises(self, tmp_path: Path, content: str) -> None:
        """Test that broken YAML or values raise InvalidConfigError."""
        (tmp_path / "config.yaml").write_text(content)

        with pytest.raises(InvalidConfigError):
            ConfigManager(config_dir=tmp_path).load_config()

    def test_save_config(self, tmp_path: Path) -> None:
        """Test saving configuration."""
        manager = ConfigManager(config_dir=tmp_path)

        manager.save_config(GlobalConfig(log_level="DEBUG"))

        with open(manager.config_file) as f:
            data = yaml.safe_load(f)
        assert data["log_level"] == "DEBUG"
        assert data["podcast"]["media_dir"] == "podcasts"


class TestSetValue:
    """Tests for ConfigManager.set_value()."""

    def test_set_podcast_field(self, tmp_path: Path) -> None:
        """Test setting a podcast field with the full key."""
        manager = ConfigManager(config_dir=tmp_path)

        updated = manager.set_value("podcast.base_url", "https://example.com")

        assert updated.podcast.base_url == "https://example.com"
        assert manager.load_config().podcast.base_url == "https://example.com"

    def test_prefix_optional(self, tmp_path: Path) -> None:
        """Test that the podcast. prefix can be left out."""
        manager = ConfigManager(config_dir=tmp_path)

        assert manager.set_value("channel_title", "My Show").podcast.channel_title == "My Show"

    def test_bool_coerced(self, tmp_path: Path) -> None:
        """Test that string booleans are coerced by the schema."""
        manager = ConfigManager(config_dir=tmp_path)

        assert manager.set_value("explicit", "true").podcast.explicit is True

    def test_log_level_uppercased(self, tmp_path: Path) -> None:
        """Test that log levels are case-insensitive."""
        manager = ConfigManager(config_dir=tmp_path)

        assert manager.set_value("log_level", "debug").log_level == "DEBUG"

    def test_audio_extensions_split(self, tmp_path: Path) -> None:
        """Test comma-separated extension lists."""
        manager = ConfigManager(config_dir=tmp_path)

        updated = manager.set_value("audio_extensions", ".mp3, .m4a")

        assert updated.podcast.audio_extensions == (".mp3", ".m4a")

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Test that unknown keys raise."""
        manager = ConfigManager(config_dir=tmp_path)

        with pytest.raises(InvalidConfigError, match="Unknown config key"):
            manager.set_value("podcast.nope", "x")

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Test that values failing validation raise and are not saved."""
        manager = ConfigManager(config_dir=tmp_path)
        manager.load_config()

        with pytest.raises(InvalidConfigError):
            manager.set_value("log_level", "loud")

        assert manager.load_config().log_level == "INFO"
