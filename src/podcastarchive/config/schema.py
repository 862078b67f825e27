"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

DEFAULT_CHANNEL_TITLE = "Podcast Archive"
DEFAULT_CHANNEL_DESCRIPTION = "Local podcast archive feed."
DEFAULT_CHANNEL_AUTHOR = "Podcast Archive"
DEFAULT_OWNER_NAME = "Podcast Archive"
DEFAULT_OWNER_EMAIL = "masterbranch@email.com"
DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_IMAGE_BASE_PATH = "/images"


def _text_or_default(value: str | None, default: str) -> str:
    if value is None or not value.strip():
        return default
    return value.strip()


def _strip_trailing_slashes(value: str) -> str:
    return value.strip().rstrip("/")


class PodcastSettings(BaseModel):
    """Channel and media settings for the archive feed.

    Raw values are kept as configured; the ``normalized_*`` and
    ``effective_*`` properties are what feed assembly reads, and they
    never come back blank.
    """

    model_config = ConfigDict(frozen=True)

    media_dir: Path = Path("podcasts")
    image_dir: Path = Path("images")
    audio_extensions: tuple[str, ...] = (".mp3",)

    base_url: str = DEFAULT_BASE_URL
    channel_title: str = DEFAULT_CHANNEL_TITLE
    channel_link: str = ""
    channel_description: str = DEFAULT_CHANNEL_DESCRIPTION
    channel_author: str = DEFAULT_CHANNEL_AUTHOR
    explicit: bool = False
    channel_image_url: str = ""
    channel_owner_name: str = "Master"
    channel_owner_email: str = DEFAULT_OWNER_EMAIL
    image_base_path: str = DEFAULT_IMAGE_BASE_PATH

    @property
    def media_root(self) -> Path:
        """Absolute, normalized media directory."""
        return self.media_dir.expanduser().resolve()

    @property
    def normalized_base_url(self) -> str:
        """Base URL without trailing slashes, falling back to the default when blank."""
        return _strip_trailing_slashes(self.base_url) or DEFAULT_BASE_URL

    @property
    def normalized_channel_link(self) -> str:
        """Channel link, falling back to the base URL when blank."""
        if not self.channel_link or not self.channel_link.strip():
            return self.normalized_base_url
        return _strip_trailing_slashes(self.channel_link)

    @property
    def effective_channel_title(self) -> str:
        return _text_or_default(self.channel_title, DEFAULT_CHANNEL_TITLE)

    @property
    def effective_channel_description(self) -> str:
        return _text_or_default(self.channel_description, DEFAULT_CHANNEL_DESCRIPTION)

    @property
    def effective_channel_author(self) -> str:
        return _text_or_default(self.channel_author, DEFAULT_CHANNEL_AUTHOR)

    @property
    def effective_channel_owner_name(self) -> str:
        return _text_or_default(self.channel_owner_name, DEFAULT_OWNER_NAME)

    @property
    def effective_channel_owner_email(self) -> str:
        return _text_or_default(self.channel_owner_email, DEFAULT_OWNER_EMAIL)

    @property
    def channel_image_url_or_none(self) -> str | None:
        """Configured channel artwork URL, or None when blank."""
        trimmed = self.channel_image_url.strip()
        return trimmed or None

    @property
    def normalized_image_base_path(self) -> str:
        """Image URL path with a leading slash and no trailing slash."""
        if not self.image_base_path or not self.image_base_path.strip():
            return DEFAULT_IMAGE_BASE_PATH
        normalized = self.image_base_path.strip()
        if not normalized.startswith("/"):
            normalized = "/" + normalized
        while normalized.endswith("/") and len(normalized) > 1:
            normalized = normalized[:-1]
        return normalized

    def accepts_audio_file(self, filename: str) -> bool:
        """Check a filename against the configured audio extensions."""
        lowered = filename.lower()
        return any(lowered.endswith(ext.lower()) for ext in self.audio_extensions)


class GlobalConfig(BaseModel):
    """Global Podcast Archive configuration."""

    model_config = ConfigDict(frozen=True)

    version: str = "1"
    log_level: LogLevel = "INFO"
    podcast: PodcastSettings = Field(default_factory=PodcastSettings)
