"""RSS 2.0 feed rendering with iTunes podcast extensions."""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from email.utils import format_datetime

from dateutil import parser as date_parser

from podfeed.config.schema import ChannelConfig
from podfeed.feeds.models import EpisodeRecord
from podfeed.utils.errors import EmptyFeedError

logger = logging.getLogger(__name__)

ITUNES_NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"
ENCLOSURE_TYPE = "audio/mpeg"
INVALID_DATE = "Invalid Date"
INDENT = "  "

# Order matters: '&' first so entities added later are left intact
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

# Parsing against two defaults exposes strings lacking a year, month or day
_DATE_DEFAULT = datetime(1970, 1, 1)
_DATE_ALT_DEFAULT = datetime(1971, 2, 2)


def escape_xml(text: str | None) -> str:
    """Escape text for use in XML element bodies and attribute values.

    Args:
        text: Raw text (None is rendered as an empty string)

    Returns:
        Escaped text
    """
    if text is None:
        return ""
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def format_pub_date(value: str | None) -> str:
    """Format a date string as an RFC-1123 UTC timestamp.

    Naive timestamps are read as UTC.

    Args:
        value: Date string from the episode record

    Returns:
        e.g. ``Tue, 02 Jan 2024 10:00:00 GMT``, or ``Invalid Date`` when the
        value cannot be parsed
    """
    if not value:
        return INVALID_DATE

    try:
        parsed = date_parser.parse(value, default=_DATE_DEFAULT)
        if parsed.date() != date_parser.parse(value, default=_DATE_ALT_DEFAULT).date():
            logger.debug(f"Incomplete publish date {value!r}")
            return INVALID_DATE
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return format_datetime(parsed.astimezone(timezone.utc), usegmt=True)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Unparseable publish date {value!r}: {e}")
        return INVALID_DATE


class FeedRenderer:
    """Render episode records into an RSS document for one channel."""

    def __init__(self, channel: ChannelConfig, escape_guid: bool = False) -> None:
        """Initialize the renderer.

        Args:
            channel: Channel metadata
            escape_guid: Escape guid values like every other field. Off by
                default so regenerated feeds match previously published ones.
        """
        self.channel = channel
        self.escape_guid = escape_guid

    def render(self, records: Sequence[EpisodeRecord] | None) -> str:
        """Render the complete feed document.

        Args:
            records: Episodes in feed order

        Returns:
            XML document, stripped of surrounding whitespace

        Raises:
            EmptyFeedError: If records is empty, None or not a sequence
        """
        if not records or isinstance(records, (str, bytes)) or not isinstance(
            records, Sequence
        ):
            raise EmptyFeedError("Feed items array is empty or invalid.")

        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<rss version="2.0" xmlns:itunes="{ITUNES_NAMESPACE}">',
            f"{INDENT}<channel>",
        ]
        lines.extend(self._channel_lines(depth=2))
        for record in records:
            lines.extend(self._item_lines(record, depth=2))
        lines.append(f"{INDENT}</channel>")
        lines.append("</rss>")

        logger.debug(f"Rendered feed with {len(records)} items")
        return "\n".join(lines).strip()

    def _channel_lines(self, depth: int) -> list[str]:
        c = self.channel
        pad = INDENT * depth
        inner = INDENT * (depth + 1)
        return [
            f"{pad}<title>{escape_xml(c.title)}</title>",
            f"{pad}<description>{escape_xml(c.description)}</description>",
            f"{pad}<link>{escape_xml(c.link)}</link>",
            f"{pad}<language>{escape_xml(c.language)}</language>",
            f"{pad}<copyright>{escape_xml(c.copyright)}</copyright>",
            f"{pad}<managingEditor>{escape_xml(c.managing_editor)}</managingEditor>",
            f"{pad}<webMaster>{escape_xml(c.web_master)}</webMaster>",
            f"{pad}<itunes:author>{escape_xml(c.itunes_author)}</itunes:author>",
            f"{pad}<itunes:explicit>{escape_xml(c.itunes_explicit)}</itunes:explicit>",
            f"{pad}<itunes:owner>",
            f"{inner}<itunes:name>{escape_xml(c.itunes_owner_name)}</itunes:name>",
            f"{inner}<itunes:email>{escape_xml(c.itunes_owner_email)}</itunes:email>",
            f"{pad}</itunes:owner>",
            f'{pad}<itunes:image href="{escape_xml(c.itunes_image)}" />',
            f'{pad}<itunes:category text="{escape_xml(c.category)}" />',
        ]

    def _item_lines(self, record: EpisodeRecord, depth: int) -> list[str]:
        pad = INDENT * depth
        inner = INDENT * (depth + 1)
        title = escape_xml(record.title)
        guid = escape_xml(record.guid) if self.escape_guid else record.guid
        return [
            f"{pad}<item>",
            f"{inner}<title>{title}</title>",
            # No separate description source; the title doubles as one
            f"{inner}<description>{title}</description>",
            f"{inner}<pubDate>{format_pub_date(record.date)}</pubDate>",
            f"{inner}<guid>{guid}</guid>",
            f'{inner}<enclosure url="{escape_xml(record.enclosure_url)}" '
            f'type="{ENCLOSURE_TYPE}" />',
            f"{inner}<link>{escape_xml(record.url)}</link>",
            f"{pad}</item>",
        ]


def render_feed(
    records: Sequence[EpisodeRecord] | None,
    channel: ChannelConfig,
    *,
    escape_guid: bool = False,
) -> str:
    """Render episode records as an RSS 2.0 + iTunes XML document.

    Args:
        records: Episodes in feed order
        channel: Channel metadata
        escape_guid: Escape guid values (see FeedRenderer)

    Returns:
        XML document

    Raises:
        EmptyFeedError: If there are no records
    """
    return FeedRenderer(channel, escape_guid=escape_guid).render(records)
