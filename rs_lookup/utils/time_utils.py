"""
Time and date utilities for upstream timestamps.

Key concepts:
  - Every datetime leaving this library is timezone-aware UTC.
  - RuneMetrics publishes activity dates like ``"19-Oct-2026 13:14"`` with no
    offset; they are interpreted in a configurable source timezone.
  - The adventurer's log RSS feed carries RFC 822 dates which feedparser
    already normalizes to a UTC ``struct_time``.
"""

from __future__ import annotations

import calendar
import time
from datetime import datetime, timezone
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

DEFAULT_ACTIVITY_DATE_FORMATS: tuple[str, ...] = ("%d-%b-%Y %H:%M", "%d-%b-%Y %H:%M:%S")


def utcnow() -> datetime:
    """Return the current UTC datetime with timezone info.

    Prefer this over ``datetime.utcnow()`` (which returns naive datetimes).
    """
    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime, assume_tz: Optional[str] = None) -> datetime:
    """Convert ``value`` to UTC.

    Naive datetimes are interpreted in ``assume_tz`` (an IANA name), or UTC
    when ``assume_tz`` is ``None``.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=ZoneInfo(assume_tz) if assume_tz else timezone.utc)
    return value.astimezone(timezone.utc)


def parse_activity_date(
    text: str,
    formats: Sequence[str] = DEFAULT_ACTIVITY_DATE_FORMATS,
    source_timezone: str = "UTC",
) -> datetime:
    """Parse a RuneMetrics activity date into a UTC datetime.

    Each of ``formats`` is tried in order, then ISO 8601 as a last resort.

    Raises:
        ValueError: If no format matches.
    """
    text = text.strip()
    for fmt in formats:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return ensure_utc(parsed, source_timezone)

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(
            f"Cannot parse activity date '{text}'. Tried formats: {list(formats)} and ISO 8601."
        ) from None
    return ensure_utc(parsed, source_timezone)


def struct_time_to_utc(value: time.struct_time) -> datetime:
    """Convert a UTC ``struct_time`` (as produced by feedparser) to a datetime."""
    return datetime.fromtimestamp(calendar.timegm(value), tz=timezone.utc)
