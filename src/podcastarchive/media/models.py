"""Data models for resolved audio episodes."""

from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from podcastarchive.media.dates import DateParts


def format_duration(total_seconds: int) -> str:
    """Format seconds as zero-padded HH:MM:SS.

    Example:
        >>> format_duration(3725)
        '01:02:05'
    """
    if total_seconds <= 0:
        return "00:00:00"
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class Episode(BaseModel):
    """One audio file's normalized metadata.

    Built fresh for each listing or feed request and never changed afterwards.

    Example:
        >>> episode = Episode(
        ...     filename="episode-1.mp3",
        ...     title="Episode 1",
        ...     artist="Unknown",
        ...     album="Podcast Archive",
        ...     duration_seconds=60,
        ... )
        >>> episode.duration_text
        '00:01:00'
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    filename: str = Field(..., description="File name, unique within a listing")
    title: str = Field(..., description="Tag title or filename without extension")
    artist: str = Field(..., description="Tag artist or 'Unknown'")
    album: str = Field(..., description="Tag album or 'Podcast Archive'")
    description: str = Field("", description="First non-blank description-like tag")
    year: int | None = Field(None, description="Year of published_at, when known")
    published_at: InstanceOf[DateParts] | None = Field(
        None, description="Best-precision date found in the date tags"
    )
    file_size_bytes: int = Field(0, ge=0, description="File size in bytes")
    duration_seconds: int = Field(0, ge=0, description="Track length in seconds")

    @property
    def duration_text(self) -> str:
        """Duration as HH:MM:SS."""
        return format_duration(self.duration_seconds)
