"""RSS 2.0 feed assembly.

The feed is first built as a tree of frozen dataclasses (channel, items and
their namespaced modules) and rendered to XML once, at the end, with lxml.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Protocol

from lxml import etree

from podcastarchive.config.schema import PodcastSettings
from podcastarchive.feed.images import EpisodeImageResolver
from podcastarchive.feed.links import build_file_url, build_image_url, build_stable_guid
from podcastarchive.media.models import Episode, format_duration
from podcastarchive.utils.datetime import format_rfc822
from podcastarchive.utils.errors import FeedSerializationError

logger = logging.getLogger(__name__)

ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"
DC_NS = "http://purl.org/dc/elements/1.1/"
NSMAP = {"itunes": ITUNES_NS, "dc": DC_NS}

ENCLOSURE_TYPE = "audio/mpeg"

# Empty or self-closing itunes elements without attributes, with their indentation.
_EMPTY_ITUNES_SELF_CLOSING = re.compile(r"\n?[ \t]*<itunes:\w+\s*/>")
_EMPTY_ITUNES_PAIR = re.compile(r"\n?[ \t]*<itunes:(\w+)>\s*</itunes:\1>")


def _itunes(tag: str) -> str:
    return f"{{{ITUNES_NS}}}{tag}"


def _sub(parent: etree._Element, tag: str, text: str | None = None, **attrib: str) -> etree._Element:
    element = etree.SubElement(parent, tag, attrib)
    if text is not None:
        element.text = text
    return element


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


class Module(Protocol):
    """Namespaced block of extra fields attached to a channel or an item."""

    def render(self, parent: etree._Element) -> None: ...


@dataclass(frozen=True)
class ItunesChannel:
    """Channel-level iTunes fields."""

    author: str
    explicit: bool
    summary: str
    owner_name: str
    owner_email: str
    image_url: str | None = None

    def render(self, parent: etree._Element) -> None:
        _sub(parent, _itunes("author"), self.author)
        _sub(parent, _itunes("explicit"), _yes_no(self.explicit))
        _sub(parent, _itunes("summary"), self.summary)
        owner = _sub(parent, _itunes("owner"))
        _sub(owner, _itunes("name"), self.owner_name)
        _sub(owner, _itunes("email"), self.owner_email)
        if self.image_url:
            _sub(parent, _itunes("image"), href=self.image_url)


@dataclass(frozen=True)
class ItunesItem:
    """Item-level iTunes fields."""

    author: str
    title: str
    subtitle: str
    summary: str
    explicit: bool
    duration_ms: int
    image_url: str | None = None
    keywords: tuple[str, ...] = ()

    def render(self, parent: etree._Element) -> None:
        _sub(parent, _itunes("author"), self.author)
        _sub(parent, _itunes("title"), self.title)
        _sub(parent, _itunes("subtitle"), self.subtitle)
        _sub(parent, _itunes("summary"), self.summary)
        _sub(parent, _itunes("explicit"), _yes_no(self.explicit))
        _sub(parent, _itunes("duration"), format_duration(max(self.duration_ms, 0) // 1000))
        if self.image_url:
            _sub(parent, _itunes("image"), href=self.image_url)
        # Always rendered; an empty list is removed by strip_empty_itunes_elements().
        _sub(parent, _itunes("keywords"), ",".join(self.keywords))


@dataclass(frozen=True)
class DublinCoreDate:
    """``dc:date`` carrying whatever date precision is known."""

    value: str

    def render(self, parent: etree._Element) -> None:
        _sub(parent, f"{{{DC_NS}}}date", self.value)


@dataclass(frozen=True)
class Enclosure:
    url: str
    length: int
    type: str = ENCLOSURE_TYPE


@dataclass(frozen=True)
class FeedItem:
    """One ``<item>`` before rendering."""

    title: str
    description: str
    author: str
    guid: str
    enclosure: Enclosure
    pub_date: datetime | None = None
    modules: tuple[Module, ...] = ()

    def with_module(self, module: Module) -> "FeedItem":
        """Copy of this item with one more module appended."""
        return replace(self, modules=self.modules + (module,))

    def render(self, parent: etree._Element) -> None:
        item = _sub(parent, "item")
        _sub(item, "title", self.title)
        _sub(item, "description", self.description)
        _sub(item, "author", self.author)
        _sub(item, "guid", self.guid, isPermaLink="false")
        _sub(
            item,
            "enclosure",
            url=self.enclosure.url,
            type=self.enclosure.type,
            length=str(max(self.enclosure.length, 0)),
        )
        if self.pub_date is not None:
            _sub(item, "pubDate", format_rfc822(self.pub_date))
        for module in self.modules:
            module.render(item)


@dataclass(frozen=True)
class FeedChannel:
    """The whole ``<channel>`` before rendering."""

    title: str
    link: str
    description: str
    last_build_date: datetime
    items: tuple[FeedItem, ...] = ()
    modules: tuple[Module, ...] = ()

    def with_module(self, module: Module) -> "FeedChannel":
        return replace(self, modules=self.modules + (module,))

    def to_element(self) -> etree._Element:
        rss = etree.Element("rss", nsmap=NSMAP, version="2.0")
        channel = _sub(rss, "channel")
        _sub(channel, "title", self.title)
        _sub(channel, "link", self.link)
        _sub(channel, "description", self.description)
        _sub(channel, "lastBuildDate", format_rfc822(self.last_build_date))
        for module in self.modules:
            module.render(channel)
        for item in self.items:
            item.render(channel)
        return rss


def sort_for_feed(episodes: Iterable[Episode]) -> list[Episode]:
    """Newest year first, unknown years last, then filename case-insensitively."""
    return sorted(
        episodes,
        key=lambda episode: (
            episode.year is None,
            -(episode.year or 0),
            episode.filename.casefold(),
        ),
    )


class FeedBuilder:
    """Builds the RSS channel for a set of episodes.

    Example:
        >>> builder = FeedBuilder(settings, EpisodeImageResolver(Path("images")))
        >>> xml = builder.build_xml(episodes, built_at=now_utc())
    """

    def __init__(self, settings: PodcastSettings, image_resolver: EpisodeImageResolver):
        self.settings = settings
        self.image_resolver = image_resolver

    def build_item(self, episode: Episode) -> FeedItem:
        """Map one episode to a feed item with its modules."""
        settings = self.settings
        image_filename = self.image_resolver.resolve(episode.filename)
        image_url = build_image_url(settings, image_filename) if image_filename else None

        parts = episode.published_at
        item = FeedItem(
            title=episode.title or "",
            description=episode.description or "",
            author=episode.artist or "",
            guid=build_stable_guid(episode.filename),
            enclosure=Enclosure(
                url=build_file_url(settings, episode.filename),
                length=max(episode.file_size_bytes, 0),
            ),
            pub_date=parts.to_instant() if parts is not None and parts.has_full_date_time else None,
        )
        if parts is not None:
            item = item.with_module(DublinCoreDate(parts.to_iso_partial()))

        return item.with_module(
            ItunesItem(
                author=episode.artist or "",
                title=episode.title or "",
                subtitle=episode.album or "",
                summary=episode.description or "",
                explicit=settings.explicit,
                duration_ms=max(episode.duration_seconds, 0) * 1000,
                image_url=image_url,
            )
        )

    def build_channel(self, episodes: Iterable[Episode], built_at: datetime) -> FeedChannel:
        """Assemble the channel with its items in feed order."""
        settings = self.settings
        channel = FeedChannel(
            title=settings.effective_channel_title,
            link=settings.normalized_channel_link,
            description=settings.effective_channel_description,
            last_build_date=built_at,
            items=tuple(self.build_item(episode) for episode in sort_for_feed(episodes)),
        )
        return channel.with_module(
            ItunesChannel(
                author=settings.effective_channel_author,
                explicit=settings.explicit,
                summary=settings.effective_channel_description,
                owner_name=settings.effective_channel_owner_name,
                owner_email=settings.effective_channel_owner_email,
                image_url=settings.channel_image_url_or_none,
            )
        )

    def build_xml(self, episodes: Iterable[Episode], built_at: datetime) -> str:
        """Build and serialize the feed.

        Raises:
            FeedSerializationError: If the document cannot be rendered
        """
        channel = self.build_channel(episodes, built_at)
        xml = render_channel(channel)
        logger.debug("Rendered feed with %d items", len(channel.items))
        return xml


def render_channel(channel: FeedChannel) -> str:
    """Serialize a channel to UTF-8 RSS text.

    Raises:
        FeedSerializationError: If the document cannot be rendered
    """
    try:
        data = etree.tostring(
            channel.to_element(),
            pretty_print=True,
            xml_declaration=True,
            encoding="UTF-8",
        )
    except (ValueError, TypeError, etree.LxmlError) as e:
        raise FeedSerializationError(f"Failed to build RSS XML: {e}") from e
    return strip_empty_itunes_elements(data.decode("utf-8"))


def strip_empty_itunes_elements(xml: str) -> str:
    """Remove itunes elements that rendered without content.

    Elements with text, children or attributes (``itunes:image href``) stay.

    Example:
        >>> strip_empty_itunes_elements("<item><itunes:keywords/></item>")
        '<item></item>'
    """
    xml = _EMPTY_ITUNES_SELF_CLOSING.sub("", xml)
    return _EMPTY_ITUNES_PAIR.sub("", xml)
