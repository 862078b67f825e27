"""Flat JSON listing of episodes."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from podcastarchive.config.schema import PodcastSettings
from podcastarchive.feed.links import build_file_url
from podcastarchive.media.models import Episode


class ListingItem(BaseModel):
    """One row of the JSON listing."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Episode filename")
    url: str = Field(..., description="Absolute playback URL")
    title: str
    artist: str
    album: str
    duration: str = Field(..., description="HH:MM:SS")
    description: str = ""
    year: int | None = None

    @classmethod
    def from_episode(cls, episode: Episode, settings: PodcastSettings) -> "ListingItem":
        return cls(
            name=episode.filename,
            url=build_file_url(settings, episode.filename),
            title=episode.title,
            artist=episode.artist,
            album=episode.album,
            duration=episode.duration_text,
            description=episode.description,
            year=episode.year,
        )


def build_listing(episodes: Iterable[Episode], settings: PodcastSettings) -> list[ListingItem]:
    """Map episodes to listing rows, keeping their order."""
    return [ListingItem.from_episode(episode, settings) for episode in episodes]
