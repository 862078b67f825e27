"""JSON listing and RSS feed assembly."""

from podcastarchive.feed.images import EpisodeImageResolver
from podcastarchive.feed.links import build_file_url, build_image_url, build_stable_guid
from podcastarchive.feed.listing import ListingItem, build_listing
from podcastarchive.feed.rss import FeedBuilder, render_channel, sort_for_feed

__all__ = [
    "EpisodeImageResolver",
    "FeedBuilder",
    "ListingItem",
    "build_file_url",
    "build_image_url",
    "build_listing",
    "build_stable_guid",
    "render_channel",
    "sort_for_feed",
]
