"""Configuration loading for Podcast Archive."""

from podcastarchive.config.manager import ConfigManager
from podcastarchive.config.schema import GlobalConfig, PodcastSettings

__all__ = ["ConfigManager", "GlobalConfig", "PodcastSettings"]
