"""Configuration manager for loading and saving Podcast Archive config."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from podcastarchive.config.defaults import DEFAULT_GLOBAL_CONFIG, get_default_config_content
from podcastarchive.config.schema import GlobalConfig, PodcastSettings
from podcastarchive.utils.errors import InvalidConfigError
from podcastarchive.utils.paths import get_config_dir, get_config_file


class ConfigManager:
    """Manages the Podcast Archive configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        if config_dir is None:
            self.config_dir = get_config_dir()
            self.config_file = get_config_file()
        else:
            self.config_dir = config_dir
            self.config_file = config_dir / "config.yaml"

    def load_config(self) -> GlobalConfig:
        """Load and validate global configuration.

        Returns:
            Validated GlobalConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            self._create_default_config()
            return DEFAULT_GLOBAL_CONFIG

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return GlobalConfig(**data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: GlobalConfig) -> None:
        """Save global configuration.

        Args:
            config: GlobalConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def set_value(self, key: str, value: str) -> GlobalConfig:
        """Update a single setting and persist it.

        Keys are either ``log_level`` or ``podcast.<field>`` (the ``podcast.``
        prefix may be omitted for channel fields).

        Args:
            key: Setting name
            value: Raw string value, coerced by the schema

        Returns:
            The updated configuration

        Raises:
            InvalidConfigError: If the key is unknown or the value is invalid
        """
        config = self.load_config()
        data: dict[str, Any] = config.model_dump(mode="json")

        field_name = key.removeprefix("podcast.")
        if key == "log_level":
            data["log_level"] = value.upper()
        elif field_name in PodcastSettings.model_fields:
            if field_name == "audio_extensions":
                data["podcast"][field_name] = [
                    ext.strip() for ext in value.split(",") if ext.strip()
                ]
            else:
                data["podcast"][field_name] = value
        else:
            raise InvalidConfigError(f"Unknown config key: {key}")

        try:
            updated = GlobalConfig.model_validate(data)
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid value for {key}: {e}") from e

        self.save_config(updated)
        return updated

    def _create_default_config(self) -> None:
        """Create default config.yaml file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())
