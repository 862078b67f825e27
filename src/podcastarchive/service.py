"""Archive service tying file discovery, metadata and feed assembly together."""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from podcastarchive.config.schema import PodcastSettings
from podcastarchive.feed.images import EpisodeImageResolver
from podcastarchive.feed.listing import ListingItem, build_listing
from podcastarchive.feed.rss import FeedBuilder
from podcastarchive.media.files import FileResolver
from podcastarchive.media.metadata import MetadataResolver
from podcastarchive.media.models import Episode
from podcastarchive.utils.datetime import now_utc
from podcastarchive.utils.errors import MediaNotFoundError

logger = logging.getLogger(__name__)


class ArchiveService:
    """Builds listings and feeds from the media directory.

    Every call reads the directory again; nothing is cached between calls.

    Example:
        >>> service = ArchiveService(PodcastSettings(media_dir=Path("podcasts")))
        >>> xml = service.build_feed_xml()
    """

    def __init__(
        self,
        settings: PodcastSettings,
        file_resolver: FileResolver | None = None,
        metadata_resolver: MetadataResolver | None = None,
        image_resolver: EpisodeImageResolver | None = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        """Initialize service.

        Args:
            settings: Channel and media settings
            file_resolver: Audio file source (default: FileResolver over settings)
            metadata_resolver: Episode resolver (default: mutagen-backed)
            image_resolver: Artwork lookup (default: settings.image_dir)
            clock: Source of the feed build time
        """
        self.settings = settings
        self.file_resolver = file_resolver or FileResolver(settings)
        self.metadata_resolver = metadata_resolver or MetadataResolver()
        self.image_resolver = image_resolver or EpisodeImageResolver(
            settings.image_dir.expanduser()
        )
        self.clock = clock

    def load_episodes(self) -> list[Episode]:
        """Resolve every readable audio file in the media directory."""
        files = self.file_resolver.list_audio_files()
        episodes = self.metadata_resolver.resolve_all(files)
        if len(episodes) < len(files):
            logger.info("Skipped %d unreadable file(s)", len(files) - len(episodes))
        return episodes

    def build_listing(self) -> list[ListingItem]:
        """JSON listing in file order."""
        return build_listing(self.load_episodes(), self.settings)

    def build_feed_xml(self) -> str:
        """RSS document for the current media directory.

        Raises:
            FeedSerializationError: If the document cannot be rendered
            GuidGenerationError: If episode identifiers cannot be computed
        """
        builder = FeedBuilder(self.settings, self.image_resolver)
        return builder.build_xml(self.load_episodes(), built_at=self.clock())

    def locate(self, filename: str) -> Path:
        """Validated absolute path of one media file.

        Raises:
            MediaNotFoundError: If the name does not resolve to an audio file
        """
        path = self.file_resolver.resolve_audio_file(filename)
        if path is None:
            raise MediaNotFoundError(f"No audio file named '{filename}' in {self.settings.media_root}")
        return path
