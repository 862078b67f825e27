"""Shared pytest fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from podcastarchive.config.schema import PodcastSettings
from podcastarchive.media.dates import DateParts
from podcastarchive.media.models import Episode


@pytest.fixture
def media_dir(tmp_path: Path) -> Path:
    """Empty media directory."""
    directory = tmp_path / "podcasts"
    directory.mkdir()
    return directory


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Empty image directory."""
    directory = tmp_path / "images"
    directory.mkdir()
    return directory


@pytest.fixture
def settings(media_dir: Path, image_dir: Path) -> PodcastSettings:
    """Settings pointing at the temporary media and image directories."""
    return PodcastSettings(
        media_dir=media_dir,
        image_dir=image_dir,
        base_url="http://localhost:8080",
    )


@pytest.fixture
def make_episode() -> Callable[..., Episode]:
    """Factory for episodes with sensible defaults."""

    def _make(filename: str = "episode-1.mp3", **overrides: Any) -> Episode:
        published_at: DateParts | None = overrides.pop("published_at", None)
        values: dict[str, Any] = {
            "filename": filename,
            "title": filename.rsplit(".", 1)[0],
            "artist": "Test Artist",
            "album": "Test Album",
            "description": "",
            "year": published_at.year if published_at else None,
            "published_at": published_at,
            "file_size_bytes": 1000,
            "duration_seconds": 60,
        }
        values.update(overrides)
        return Episode(**values)

    return _make


@pytest.fixture
def sample_config_dict() -> dict:
    """Sample configuration dictionary."""
    return {
        "version": "1",
        "log_level": "INFO",
        "podcast": {
            "media_dir": "podcasts",
            "base_url": "https://podcasts.example.com/",
            "channel_title": "My Archive",
            "explicit": True,
        },
    }
