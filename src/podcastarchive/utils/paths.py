"""Filesystem locations used by Podcast Archive."""

import os
from pathlib import Path

import platformdirs

APP_NAME = "podcastarchive"
CONFIG_DIR_ENV = "PODCASTARCHIVE_CONFIG_DIR"


def get_config_dir() -> Path:
    """Get the configuration directory.

    Honors PODCASTARCHIVE_CONFIG_DIR, otherwise uses the XDG user config dir.
    """
    override = os.environ.get(CONFIG_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_config_file() -> Path:
    """Get path to config.yaml."""
    return get_config_dir() / "config.yaml"

