"""Utility functions and helpers for Podcast Archive."""

from podcastarchive.utils.datetime import format_rfc822, now_utc
from podcastarchive.utils.errors import (
    ConfigError,
    FeedError,
    FeedSerializationError,
    GuidGenerationError,
    InvalidConfigError,
    MediaError,
    MediaNotFoundError,
    PodcastArchiveError,
    UnreadableAudioError,
)
from podcastarchive.utils.paths import get_config_dir, get_config_file

__all__ = [
    # Errors
    "PodcastArchiveError",
    "ConfigError",
    "InvalidConfigError",
    "MediaError",
    "UnreadableAudioError",
    "MediaNotFoundError",
    "FeedError",
    "FeedSerializationError",
    "GuidGenerationError",
    # Paths
    "get_config_dir",
    "get_config_file",
    # Datetime
    "now_utc",
    "format_rfc822",
]
