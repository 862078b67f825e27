"""Custom exceptions for Podcast Archive."""


class PodcastArchiveError(Exception):
    """Base exception for all Podcast Archive errors."""

    pass


class ConfigError(PodcastArchiveError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class MediaError(PodcastArchiveError):
    """Media file errors."""

    pass


class UnreadableAudioError(MediaError):
    """Audio file cannot be opened or its tag container is malformed."""

    pass


class MediaNotFoundError(MediaError):
    """Requested media file does not resolve inside the media directory."""

    pass


class FeedError(PodcastArchiveError):
    """Feed assembly errors."""

    pass


class FeedSerializationError(FeedError):
    """RSS document could not be rendered to text."""

    pass


class GuidGenerationError(FeedError):
    """Stable episode identifier could not be computed."""

    pass
