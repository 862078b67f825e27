"""URLs and stable identifiers for feed items."""

import hashlib
from urllib.parse import quote

from podcastarchive.config.schema import PodcastSettings
from podcastarchive.utils.errors import GuidGenerationError

GUID_PREFIX = "urn:podcastarchive:"
GUID_HASH_ALGORITHM = "sha256"

# RFC 3986 pchar minus the unreserved set, which quote() never escapes.
_PATH_SEGMENT_SAFE = "!$&'()*+,;=:@"


def encode_path_segment(value: str) -> str:
    """Percent-encode a filename for use as one URL path segment.

    Example:
        >>> encode_path_segment("my episode #1.mp3")
        'my%20episode%20%231.mp3'
    """
    return quote(value, safe=_PATH_SEGMENT_SAFE)


def build_file_url(settings: PodcastSettings, filename: str) -> str:
    """Absolute playback URL of an audio file."""
    return f"{settings.normalized_base_url}/file/{encode_path_segment(filename)}"


def build_image_url(settings: PodcastSettings, image_filename: str) -> str:
    """Absolute URL of an episode image."""
    return (
        f"{settings.normalized_base_url}{settings.normalized_image_base_path}/"
        f"{encode_path_segment(image_filename)}"
    )


def build_stable_guid(filename: str | None) -> str:
    """Deployment-independent identifier derived from the filename only.

    The same filename always gives the same GUID, whatever host serves it.

    Raises:
        GuidGenerationError: If the hash algorithm is unavailable
    """
    normalized = (filename or "").strip().lower()
    try:
        digest = hashlib.new(GUID_HASH_ALGORITHM)
    except ValueError as e:
        raise GuidGenerationError(f"Hash algorithm {GUID_HASH_ALGORITHM} is unavailable") from e
    digest.update(normalized.encode("utf-8"))
    return GUID_PREFIX + digest.hexdigest()
