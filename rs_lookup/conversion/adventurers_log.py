"""
Decoder for the adventurer's log RSS feed.

Shape (abridged)::

    <rss version="2.0">
      <channel>
        <title>Adventurer's log: Zezima</title>
        <item>
          <title>I killed 5 boss monsters in the God Wars Dungeon.</title>
          <description>I killed 5 boss monsters ...</description>
          <pubDate>Sat, 17 Oct 2026 00:00:00 GMT</pubDate>
        </item>
      </channel>
    </rss>

feedparser decides whether the document is well-formed RSS and parses the
item dates. Its loose-mode fallback is not accepted: a document that is not
well-formed XML is rejected outright.

Titles and descriptions are NOT taken from feedparser, which treats
``<description>`` as HTML and sanitizes it (escaped ``&lt;Nex&gt;`` would
vanish). They are read as literal element text from ``/rss/channel/item``.

Unlike the highscore formats there is no position to keep aligned, so a bad
item is never skipped — dropping it would silently lose history when the
feed is merged with the stored copy.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ElementTree
from datetime import datetime
from typing import Any, Optional

import feedparser
from pydantic import ValidationError

from rs_lookup.conversion.common import KEY_ACTIVITY_FEED, KEY_REAL_NAME, Payload
from rs_lookup.exceptions import MalformedInputError
from rs_lookup.models.feed import ActivityFeed, FeedItem
from rs_lookup.utils.time_utils import struct_time_to_utc

logger = logging.getLogger(__name__)

# Not a well-formedness problem: the declared charset differed from the
# one feedparser used.
_BENIGN_BOZO = (feedparser.CharacterEncodingOverride,)

# feedparser versions whose root element is <rss>. RSS 0.90 and 1.0 are
# RDF documents and have no /rss/channel/item path.
_RSS_VERSIONS = frozenset({"rss", "rss091n", "rss091u", "rss092", "rss093", "rss094", "rss20"})


def convert_adventurers_log(data: Payload) -> dict[str, Any]:
    """Decode an adventurer's log RSS document into a feed and player name.

    Returns:
        ``{KEY_ACTIVITY_FEED: ActivityFeed, KEY_REAL_NAME: str}``

    Raises:
        MalformedInputError: If the document is not well-formed RSS 0.9x/2.0,
            has no items or channel title, or any item lacks a date, title
            or description.
    """
    # Bytes keep feedparser from treating the payload as a URL or filename.
    document = data.encode("utf-8") if isinstance(data, str) else data
    parsed = feedparser.parse(document)

    if parsed.get("bozo") and not isinstance(parsed.get("bozo_exception"), _BENIGN_BOZO):
        raise MalformedInputError(
            f"Could not parse the activity feed as XML: {parsed.get('bozo_exception')}"
        )

    if parsed.get("version", "") not in _RSS_VERSIONS:
        raise MalformedInputError("Activity feed is not an RSS document.")

    try:
        root = ElementTree.fromstring(document)
    except ElementTree.ParseError as exc:
        raise MalformedInputError(f"Could not parse the activity feed as XML: {exc}") from exc

    channel = root.find("channel") if root.tag == "rss" else None
    if channel is None:
        raise MalformedInputError("Activity feed is not an RSS document.")

    elements = channel.findall("item")
    if not elements or not parsed.entries:
        raise MalformedInputError("Could not obtain any feed items from feed.")
    if len(elements) != len(parsed.entries):
        raise MalformedInputError(
            f"Activity feed has {len(elements)} items but {len(parsed.entries)} could be read."
        )

    items = tuple(
        _feed_item(element, entry) for element, entry in zip(elements, parsed.entries)
    )

    channel_title = _element_text(channel, "title")
    if not channel_title:
        raise MalformedInputError("Could not obtain player name element from feed.")

    real_name = channel_title.rpartition(":")[2].strip()
    logger.debug("Adventurer's log for '%s': %d items", real_name, len(items))

    return {
        KEY_ACTIVITY_FEED: ActivityFeed(items=items),
        KEY_REAL_NAME: real_name,
    }


# ── Private helpers ────────────────────────────────────────────────────────────

def _element_text(parent: ElementTree.Element, tag: str) -> str:
    """Literal, trimmed text of the first ``tag`` child; ``""`` when absent."""
    child = parent.find(tag)
    if child is None:
        return ""
    return "".join(child.itertext()).strip()


def _feed_item(element: ElementTree.Element, entry: Any) -> FeedItem:
    published = entry.get("published_parsed")
    title = _element_text(element, "title")
    description = _element_text(element, "description")

    time: Optional[datetime] = struct_time_to_utc(published) if published else None

    if time is None or not title or not description:
        when = time.strftime("%d-%m-%Y") if time else entry.get("published", "?")
        raise MalformedInputError(
            "Could not parse one of the activity feed items. "
            f"(time: {when}, title: {title}, description: {description})"
        )

    try:
        return FeedItem(time=time, title=title, description=description)
    except ValidationError as exc:
        raise MalformedInputError(f"Activity feed item failed validation: {exc}") from exc
