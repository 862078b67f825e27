"""Tag access over mutagen.

Each audio container names the same field differently (ID3 ``TIT2``, MP4
``©nam``, Vorbis ``TITLE``). ``TagField`` is the container-neutral name; the
accessor maps it to the candidate keys of whichever container the file has.
Raw keys are passed through untouched for callers that need a specific
frame or comment name.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Protocol

import mutagen
from mutagen import MutagenError
from mutagen.id3 import ID3
from mutagen.mp4 import MP4Tags

from podcastarchive.utils.errors import UnreadableAudioError


class TagField(str, Enum):
    """Container-neutral tag names."""

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    COMMENT = "comment"
    LYRICS = "lyrics"
    COMPOSER = "composer"
    YEAR = "year"
    ALBUM_YEAR = "album_year"
    ORIGINAL_YEAR = "original_year"
    RECORDING_DATE = "recording_date"
    ORIGINAL_RELEASE_DATE = "original_release_date"
    RECORDING_START_DATE = "recording_start_date"


ID3_FRAMES: dict[TagField, tuple[str, ...]] = {
    TagField.TITLE: ("TIT2",),
    TagField.ARTIST: ("TPE1",),
    TagField.ALBUM: ("TALB",),
    TagField.COMMENT: ("COMM",),
    TagField.LYRICS: ("USLT",),
    TagField.COMPOSER: ("TCOM",),
    TagField.YEAR: ("TDRC", "TYER"),
    TagField.ALBUM_YEAR: ("TDRL",),
    TagField.ORIGINAL_YEAR: ("TDOR", "TORY"),
    TagField.RECORDING_DATE: ("TXXX:RECORDINGDATE",),
    TagField.ORIGINAL_RELEASE_DATE: ("TXXX:ORIGINALRELEASEDATE",),
    TagField.RECORDING_START_DATE: ("TXXX:RECORDINGSTARTDATE",),
}

MP4_ATOMS: dict[TagField, tuple[str, ...]] = {
    TagField.TITLE: ("©nam",),
    TagField.ARTIST: ("©ART",),
    TagField.ALBUM: ("©alb",),
    TagField.COMMENT: ("©cmt", "desc"),
    TagField.LYRICS: ("©lyr",),
    TagField.COMPOSER: ("©wrt",),
    TagField.YEAR: ("©day",),
    TagField.ALBUM_YEAR: ("----:com.apple.iTunes:RELEASEDATE",),
    TagField.ORIGINAL_YEAR: ("----:com.apple.iTunes:ORIGINALYEAR",),
    TagField.RECORDING_DATE: ("----:com.apple.iTunes:RECORDINGDATE",),
    TagField.ORIGINAL_RELEASE_DATE: ("----:com.apple.iTunes:ORIGINALDATE",),
    TagField.RECORDING_START_DATE: ("----:com.apple.iTunes:RECORDINGSTARTDATE",),
}

# Comment descriptions written by players for their own bookkeeping.
PLAYER_COMMENT_PREFIXES = ("iTun", "Songs-DB")

# Vorbis comments and APEv2 use plain, case-insensitive names.
TEXT_KEYS: dict[TagField, tuple[str, ...]] = {
    TagField.TITLE: ("title",),
    TagField.ARTIST: ("artist",),
    TagField.ALBUM: ("album",),
    TagField.COMMENT: ("comment",),
    TagField.LYRICS: ("lyrics", "unsyncedlyrics"),
    TagField.COMPOSER: ("composer",),
    TagField.YEAR: ("year", "date"),
    TagField.ALBUM_YEAR: ("releasedate",),
    TagField.ORIGINAL_YEAR: ("originalyear",),
    TagField.RECORDING_DATE: ("recordingdate",),
    TagField.ORIGINAL_RELEASE_DATE: ("originaldate", "originalreleasedate"),
    TagField.RECORDING_START_DATE: ("recordingstartdate",),
}


class TagAccessor(Protocol):
    """Read-only view of one file's tags.

    Either lookup may raise for malformed fields; callers treat that as absent.
    """

    def get_first(self, field: TagField) -> str | None: ...

    def get_first_raw(self, key: str) -> str | None: ...


def _first_text(value: Any) -> str | None:
    """Reduce a mutagen tag value to its first piece of text."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        for item in value:
            text = _first_text(item)
            if text:
                return text
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    text = getattr(value, "text", value)
    if text is not value:
        return _first_text(text)
    return str(value).split("\x00")[0]


def _user_comments(frames: list[Any]) -> list[Any]:
    """COMM frames without player bookkeeping, unnamed comments first."""
    kept = [frame for frame in frames if not str(frame.desc).startswith(PLAYER_COMMENT_PREFIXES)]
    return sorted(kept, key=lambda frame: bool(frame.desc))


class MutagenTagAccessor:
    """TagAccessor over a mutagen tag container (ID3, MP4, Vorbis or APEv2)."""

    def __init__(self, tags: Any) -> None:
        self.tags = tags

    def _candidate_keys(self, field: TagField) -> tuple[str, ...]:
        if isinstance(self.tags, ID3):
            return ID3_FRAMES[field]
        if isinstance(self.tags, MP4Tags):
            return MP4_ATOMS[field]
        return TEXT_KEYS[field]

    def get_first(self, field: TagField) -> str | None:
        """First text value for a container-neutral field."""
        for key in self._candidate_keys(field):
            value = self.get_first_raw(key)
            if value is not None:
                return value
        return None

    def get_first_raw(self, key: str) -> str | None:
        """First text value stored under a raw frame id or comment name."""
        if isinstance(self.tags, ID3):
            frames = self.tags.getall(key)
            if key == "COMM":
                frames = _user_comments(frames)
            for frame in frames:
                text = _first_text(frame)
                if text and text.strip():
                    return text
            return None

        if not hasattr(self.tags, "keys"):
            return None
        wanted = key.lower()
        for existing in list(self.tags.keys()):
            if str(existing).lower() == wanted:
                return _first_text(self.tags[existing])
        return None


@dataclass(frozen=True)
class AudioFileInfo:
    """What the metadata resolver needs from one opened audio file."""

    tags: TagAccessor | None
    length_seconds: float | None = None


def read_audio_file(path: Path) -> AudioFileInfo:
    """Open an audio file with mutagen.

    Args:
        path: Audio file to read

    Returns:
        Tag accessor (None when the file carries no tags) and track length

    Raises:
        UnreadableAudioError: If the file cannot be read or its format is unknown
    """
    try:
        audio = mutagen.File(path)
    except (MutagenError, OSError, ValueError) as e:
        raise UnreadableAudioError(f"Cannot read audio file {path.name}: {e}") from e

    if audio is None:
        raise UnreadableAudioError(f"Unrecognized audio format: {path.name}")

    tags = MutagenTagAccessor(audio.tags) if audio.tags is not None else None
    length = getattr(getattr(audio, "info", None), "length", None)
    return AudioFileInfo(tags=tags, length_seconds=length)
