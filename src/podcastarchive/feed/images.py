"""Episode artwork lookup by base filename."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def base_name(filename: str | None) -> str:
    """Trimmed filename without its last extension.

    A leading dot does not start an extension, so ``.cover`` stays ``.cover``.
    """
    trimmed = (filename or "").strip()
    dot = trimmed.rfind(".")
    if dot <= 0:
        return trimmed
    return trimmed[:dot]


class EpisodeImageResolver:
    """Finds the image that shares an episode's base name.

    ``episode-2.mp3`` matches ``episode-2.webp``, ``Episode-2.PNG`` and so on.
    The directory is listed on every call, so new artwork shows up on the
    next feed build.
    """

    def __init__(self, image_dir: Path):
        self.image_dir = image_dir

    def _image_names(self) -> list[str]:
        if not self.image_dir.is_dir():
            return []
        try:
            return [path.name for path in self.image_dir.iterdir() if path.is_file()]
        except OSError as e:
            logger.warning("Cannot list image directory %s: %s", self.image_dir, e)
            return []

    def resolve(self, episode_filename: str | None) -> str | None:
        """Image filename for an episode, or None when there is none.

        Several matches resolve to the first in case-insensitive order.
        """
        wanted = base_name(episode_filename).casefold()
        if not wanted:
            return None

        matches = sorted(
            (name for name in self._image_names() if base_name(name).casefold() == wanted),
            key=str.casefold,
        )
        return matches[0] if matches else None
