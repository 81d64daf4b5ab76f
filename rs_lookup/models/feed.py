"""
Activity feed models — a player's adventurer's log / RuneMetrics activity list.

``FeedItem`` has no identity field upstream. Two items are the same item
exactly when their time, title and description are equal; pydantic's
field-wise equality gives us that for free.

``ActivityFeed`` keeps items in construction order (newest first, as
published). It is never re-sorted by time: upstream order is authoritative,
and same-minute events would otherwise be shuffled.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from rs_lookup.utils.time_utils import ensure_utc


class FeedItem(BaseModel):
    """A single activity feed entry.

    Attributes:
        time: When the activity happened (UTC).
        title: Short headline, e.g. ``"Levelled up Attack."``.
        description: Longer detail text.
    """

    model_config = ConfigDict(frozen=True)

    time: datetime
    title: str
    description: str

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @field_validator("title", "description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Feed item title and description must not be empty.")
        return v


class ActivityFeed(BaseModel):
    """Ordered, newest-first sequence of feed items."""

    model_config = ConfigDict(frozen=True)

    items: tuple[FeedItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> FeedItem:
        return self.items[index]

    def items_after(self, target: FeedItem) -> tuple[FeedItem, ...]:
        """Return the items that precede the first occurrence of ``target``.

        Because the feed is newest-first these are the items newer than
        ``target``. If ``target`` does not occur, every item is returned.
        Only the first match counts; a repeated identical item further down
        is never considered.
        """
        newer: list[FeedItem] = []
        for item in self.items:
            if item == target:
                break
            newer.append(item)
        return tuple(newer)

    def merge(self, newer: "ActivityFeed") -> "ActivityFeed":
        """Shorthand for ``merge_feeds(self, newer)``."""
        from rs_lookup.merger import merge_feeds

        return merge_feeds(self, newer)
