"""Tests for EpisodeImageResolver."""

from pathlib import Path

import pytest

from podcastarchive.feed.images import EpisodeImageResolver, base_name


class TestEpisodeImageResolver:
    """Tests for artwork lookup."""

    def test_matches_base_name_any_extension(self, image_dir: Path) -> None:
        """Test that episode-2.mp3 finds episode-2.webp."""
        (image_dir / "episode-2.webp").write_bytes(b"img")
        (image_dir / "episode-3.png").write_bytes(b"img")

        assert EpisodeImageResolver(image_dir).resolve("episode-2.mp3") == "episode-2.webp"

    def test_case_insensitive(self, image_dir: Path) -> None:
        """Test that base names are compared without case."""
        (image_dir / "Episode-2.JPG").write_bytes(b"img")

        assert EpisodeImageResolver(image_dir).resolve("episode-2.mp3") == "Episode-2.JPG"

    def test_first_match_is_deterministic(self, image_dir: Path) -> None:
        """Test that duplicates resolve to the first in case-insensitive order."""
        for name in ("episode-2.webp", "episode-2.JPG", "episode-2.png"):
            (image_dir / name).write_bytes(b"img")

        assert EpisodeImageResolver(image_dir).resolve("episode-2.mp3") == "episode-2.JPG"

    def test_no_match(self, image_dir: Path) -> None:
        """Test that a missing image gives None."""
        (image_dir / "episode-20.webp").write_bytes(b"img")

        assert EpisodeImageResolver(image_dir).resolve("episode-2.mp3") is None

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name(self, image_dir: Path, name: str | None) -> None:
        """Test that blank names give None."""
        assert EpisodeImageResolver(image_dir).resolve(name) is None

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Test that a missing image directory gives None."""
        assert EpisodeImageResolver(tmp_path / "nope").resolve("episode-2.mp3") is None

    def test_new_images_picked_up(self, image_dir: Path) -> None:
        """Test that the directory is read again on each call."""
        resolver = EpisodeImageResolver(image_dir)
        assert resolver.resolve("episode-2.mp3") is None

        (image_dir / "episode-2.webp").write_bytes(b"img")

        assert resolver.resolve("episode-2.mp3") == "episode-2.webp"


class TestBaseName:
    """Tests for base_name()."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("episode-2.mp3", "episode-2"),
            (" cover.tar.gz ", "cover.tar"),
            (".hidden", ".hidden"),
            ("plain", "plain"),
            (None, ""),
        ],
    )
    def test_base_name(self, filename: str | None, expected: str) -> None:
        """Test extension stripping."""
        assert base_name(filename) == expected
