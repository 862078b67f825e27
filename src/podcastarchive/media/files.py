"""Discovery of audio files inside the media directory."""

import logging
from pathlib import Path

from podcastarchive.config.schema import PodcastSettings

logger = logging.getLogger(__name__)


class FileResolver:
    """Lists and validates audio files under the configured media root.

    Nothing outside the media root is ever returned, whatever the caller
    passes in.
    """

    def __init__(self, settings: PodcastSettings):
        self.settings = settings
        self.media_root = settings.media_root

    def list_audio_files(self) -> list[Path]:
        """Audio files directly inside the media root, sorted case-insensitively.

        Returns an empty list when the directory is missing or unreadable.
        """
        if not self.media_root.is_dir():
            logger.debug("Media directory %s does not exist", self.media_root)
            return []

        try:
            candidates = [
                path
                for path in self.media_root.iterdir()
                if path.is_file() and self.settings.accepts_audio_file(path.name)
            ]
        except OSError as e:
            logger.warning("Cannot list media directory %s: %s", self.media_root, e)
            return []

        return sorted(candidates, key=lambda path: path.name.casefold())

    def resolve_audio_file(self, filename: str | None) -> Path | None:
        """Validate a requested filename against the media root.

        Returns:
            Absolute path of an existing audio file, or None
        """
        if not filename or not filename.strip():
            return None

        name = filename.strip()
        if not self.settings.accepts_audio_file(name):
            return None

        resolved = (self.media_root / name).resolve()
        if not resolved.is_relative_to(self.media_root):
            logger.debug("Rejected path outside media root: %s", name)
            return None
        if not resolved.is_file():
            return None
        return resolved
