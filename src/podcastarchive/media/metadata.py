"""Resolve audio files into normalized Episode records."""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from podcastarchive.media.dates import DateParts, parse_date_parts
from podcastarchive.media.models import Episode
from podcastarchive.media.tags import AudioFileInfo, TagAccessor, TagField, read_audio_file
from podcastarchive.utils.errors import UnreadableAudioError

logger = logging.getLogger(__name__)

UNKNOWN_ARTIST = "Unknown"
DEFAULT_ALBUM = "Podcast Archive"

# A chain entry is either a container-neutral TagField or a raw frame/comment key.
TagKey = TagField | str

DESCRIPTION_CHAIN: tuple[TagKey, ...] = (
    TagField.COMMENT,
    TagField.LYRICS,
    TagField.COMPOSER,
    "COMM",
    "COMMENT",
    "DESCRIPTION",
    "DESC",
    "REMARK",
    "REMARKS",
)

DATE_CHAIN: tuple[TagKey, ...] = (
    TagField.YEAR,
    TagField.ALBUM_YEAR,
    TagField.ORIGINAL_YEAR,
    TagField.RECORDING_DATE,
    TagField.ORIGINAL_RELEASE_DATE,
    TagField.RECORDING_START_DATE,
    "TDRC",
    "TYER",
    "DATE",
    "YEAR",
    "ORIGINALYEAR",
)


def lookup_tag(tags: TagAccessor | None, key: TagKey) -> str | None:
    """Look up one key, treating errors and blank values as absent.

    Returns:
        Trimmed non-blank value, or None
    """
    if tags is None:
        return None
    try:
        if isinstance(key, TagField):
            value = tags.get_first(key)
        else:
            value = tags.get_first_raw(key)
    except Exception as e:
        logger.debug("Tag lookup for %s failed: %s", key, e)
        return None

    if value is None or not value.strip():
        return None
    return value.strip()


def first_text(tags: TagAccessor | None, chain: Iterable[TagKey]) -> str | None:
    """First non-blank value along a fallback chain."""
    return next(
        (value for value in (lookup_tag(tags, key) for key in chain) if value is not None),
        None,
    )


def first_date(tags: TagAccessor | None, chain: Iterable[TagKey]) -> DateParts | None:
    """Date parts from the first key in the chain whose value parses.

    Keys are never combined: year and month always come from the same tag.
    """
    parsed_values = (parse_date_parts(lookup_tag(tags, key)) for key in chain)
    return next((parts for parts in parsed_values if parts is not None), None)


def duration_seconds(length: float | None) -> int:
    """Whole seconds from a header track length, never negative."""
    if length is None or length != length:
        return 0
    return max(int(round(length)), 0)


class MetadataResolver:
    """Turns audio files into Episode records.

    Example:
        >>> resolver = MetadataResolver()
        >>> episodes = resolver.resolve_all([Path("podcasts/episode-1.mp3")])
    """

    def __init__(self, reader: Callable[[Path], AudioFileInfo] = read_audio_file):
        """Initialize resolver.

        Args:
            reader: Opens one audio file. Defaults to the mutagen reader.
        """
        self.reader = reader

    def resolve(self, path: Path) -> Episode | None:
        """Resolve one file.

        Returns:
            Episode, or None when the file cannot be read at all
        """
        try:
            info = self.reader(path)
            size = path.stat().st_size
        except (UnreadableAudioError, OSError) as e:
            logger.warning("Skipping unreadable audio file '%s': %s", path.name, e)
            return None

        tags = info.tags
        published_at = first_date(tags, DATE_CHAIN)

        return Episode(
            filename=path.name,
            title=lookup_tag(tags, TagField.TITLE) or strip_extension(path.name),
            artist=lookup_tag(tags, TagField.ARTIST) or UNKNOWN_ARTIST,
            album=lookup_tag(tags, TagField.ALBUM) or DEFAULT_ALBUM,
            description=first_text(tags, DESCRIPTION_CHAIN) or "",
            year=published_at.year if published_at else None,
            published_at=published_at,
            file_size_bytes=max(size, 0),
            duration_seconds=duration_seconds(info.length_seconds),
        )

    def resolve_all(self, paths: Iterable[Path]) -> list[Episode]:
        """Resolve files in order, dropping the ones that cannot be read."""
        episodes = []
        for path in paths:
            episode = self.resolve(path)
            if episode is not None:
                episodes.append(episode)
        logger.debug("Resolved %d episodes", len(episodes))
        return episodes


def strip_extension(filename: str) -> str:
    """Filename without its last extension.

    Example:
        >>> strip_extension("episode-1.mp3")
        'episode-1'
    """
    stem, dot, _ = filename.rpartition(".")
    return stem if dot and stem else filename
