"""Audio file discovery, tag reading and episode metadata resolution."""

from podcastarchive.media.dates import DateParts, Precision, parse_date_parts
from podcastarchive.media.files import FileResolver
from podcastarchive.media.metadata import MetadataResolver
from podcastarchive.media.models import Episode, format_duration
from podcastarchive.media.tags import AudioFileInfo, TagField, read_audio_file

__all__ = [
    "AudioFileInfo",
    "DateParts",
    "Episode",
    "FileResolver",
    "MetadataResolver",
    "Precision",
    "TagField",
    "format_duration",
    "parse_date_parts",
    "read_audio_file",
]
