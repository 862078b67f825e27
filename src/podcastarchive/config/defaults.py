"""Default configuration values and file templates."""

from podcastarchive.config.schema import GlobalConfig

DEFAULT_GLOBAL_CONFIG = GlobalConfig()

DEFAULT_CONFIG_CONTENT = """\
# Podcast Archive configuration
version: "1"

# Logging level: DEBUG, INFO, WARNING, ERROR
log_level: INFO

podcast:
  # Directory holding the audio files served by the archive
  media_dir: podcasts
  # Directory holding per-episode artwork (matched by base filename)
  image_dir: images
  audio_extensions:
    - .mp3

  # Public URL the feed links are built from
  base_url: http://localhost:8080
  # URL path the artwork is served under
  image_base_path: /images

  channel_title: Podcast Archive
  # Falls back to base_url when empty
  channel_link: ""
  channel_description: Local podcast archive feed.
  channel_author: Podcast Archive
  explicit: false
  # Optional channel artwork URL
  channel_image_url: ""
  channel_owner_name: Master
  channel_owner_email: masterbranch@email.com
"""


def get_default_config_content() -> str:
    """Get default config.yaml content with comments."""
    return DEFAULT_CONFIG_CONTENT
