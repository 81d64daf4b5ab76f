"""
Decoder for the RuneMetrics profile JSON.

Shape (abridged)::

    {
      "name": "Zezima",
      "rank": "1,234",
      "totalskill": 2898,
      "totalxp": 1234567890,
      "skillvalues": [{"id": 0, "xp": 2000000000, "level": 99, "rank": 12}, ...],
      "activities": [{"date": "19-Oct-2026 13:14", "text": "...", "details": "..."}]
    }

Or, for unknown/private players, ``{"error": "NO_PROFILE", "loggedIn": "false"}``.

Differences from index_lite:
  - skill ``id`` is zero-based without the total row, so ordinal = id + 1;
  - ``xp`` is in tenths of a point;
  - the total row is not in ``skillvalues`` and is rebuilt from the
    aggregate fields;
  - there are no activity highscores, only the activity feed.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rs_lookup.catalog.ruleset import Ruleset
from rs_lookup.catalog.skills import Skill, skill_for_ordinal
from rs_lookup.conversion.common import (
    KEY_ACTIVITY_FEED,
    KEY_REAL_NAME,
    KEY_SKILL_HIGHSCORE,
    Payload,
    as_text,
)
from rs_lookup.exceptions import MalformedInputError, RemoteError
from rs_lookup.models.feed import ActivityFeed, FeedItem
from rs_lookup.models.highscore import HighscoreSnapshot, Player, SkillEntry
from rs_lookup.utils.time_utils import (
    DEFAULT_ACTIVITY_DATE_FORMATS,
    parse_activity_date,
    utcnow,
)

logger = logging.getLogger(__name__)

TOTAL_ORDINAL = 0


# ── Payload schema ─────────────────────────────────────────────────────────────

class _SkillValue(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    xp: int = Field(ge=0)
    level: int
    rank: Optional[int] = None


class _ActivityValue(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date: str
    text: str
    details: str


class _Profile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    rank: Optional[Union[int, str]] = None
    totalskill: int
    totalxp: int
    skillvalues: list[_SkillValue]
    activities: list[_ActivityValue] = []


# ── Decoder ────────────────────────────────────────────────────────────────────

def convert_rune_metrics(
    data: Payload,
    player: Optional[Player] = None,
    captured_at: Optional[datetime] = None,
    date_formats: tuple[str, ...] = DEFAULT_ACTIVITY_DATE_FORMATS,
    source_timezone: str = "UTC",
) -> dict[str, Any]:
    """Decode a RuneMetrics profile into a skill highscore, feed and name.

    Args:
        data: Raw response body.
        player: Player the payload was fetched for, if known.
        captured_at: Capture time; defaults to now.
        date_formats: ``strptime`` formats tried for activity dates.
        source_timezone: Timezone the offset-less activity dates are in.

    Returns:
        ``{KEY_SKILL_HIGHSCORE: HighscoreSnapshot, KEY_ACTIVITY_FEED:
        ActivityFeed, KEY_REAL_NAME: str}``

    Raises:
        MalformedInputError: If the body is not the expected JSON object.
        RemoteError: If the body carries an ``error`` field.
    """
    raw_text = as_text(data)

    try:
        decoded = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Could not decode RuneMetrics response: {exc}") from exc

    if not isinstance(decoded, dict) or not decoded:
        raise MalformedInputError("RuneMetrics response is not a non-empty JSON object.")

    if "error" in decoded:
        raise RemoteError(str(decoded["error"]))

    try:
        profile = _Profile.model_validate(decoded)
    except ValidationError as exc:
        raise MalformedInputError(f"Unexpected RuneMetrics response structure: {exc}") from exc

    try:
        skill_highscore = HighscoreSnapshot(
            skills=_skill_entries(profile),
            captured_at=captured_at or utcnow(),
            player=player,
            raw_text=raw_text,
            ruleset=Ruleset.MODERN,
        )
        feed = ActivityFeed(items=tuple(
            _feed_item(activity, date_formats, source_timezone)
            for activity in profile.activities
        ))
    except ValidationError as exc:
        raise MalformedInputError(f"RuneMetrics data failed validation: {exc}") from exc

    return {
        KEY_SKILL_HIGHSCORE: skill_highscore,
        KEY_ACTIVITY_FEED: feed,
        KEY_REAL_NAME: profile.name,
    }


# ── Private helpers ────────────────────────────────────────────────────────────

def _skill_entries(profile: _Profile) -> tuple[SkillEntry, ...]:
    """Resolve per-skill values, then append the synthetic total row."""
    entries: list[SkillEntry] = []
    dropped = 0

    for value in profile.skillvalues:
        ordinal = value.id + 1
        skill = skill_for_ordinal(ordinal) if ordinal != TOTAL_ORDINAL else None
        if skill is None:
            dropped += 1
            continue
        entries.append(SkillEntry(
            ordinal=ordinal,
            skill=skill,
            rank=_non_negative_rank(value.rank),
            level=value.level,
            experience=value.xp // 10,
        ))

    if dropped:
        logger.debug("RuneMetrics: skipped %d skill value(s) with unknown ids", dropped)

    entries.sort(key=lambda entry: entry.ordinal)
    entries.append(SkillEntry(
        ordinal=TOTAL_ORDINAL,
        skill=Skill.TOTAL,
        rank=_parse_total_rank(profile.rank),
        level=profile.totalskill,
        experience=profile.totalxp,
    ))
    return tuple(entries)


def _parse_total_rank(rank: Optional[Union[int, str]]) -> int:
    """Parse the aggregate rank, e.g. ``"1,234"`` → 1234; 0 if unusable."""
    if isinstance(rank, int):
        return _non_negative_rank(rank)
    if not rank:
        return 0
    cleaned = rank.replace(",", "").strip()
    return int(cleaned) if cleaned.isdigit() else 0


def _non_negative_rank(rank: Optional[int]) -> int:
    # upstream reports -1 (or omits the field) for unranked
    return rank if rank is not None and rank >= 0 else 0


def _feed_item(
    activity: _ActivityValue,
    date_formats: tuple[str, ...],
    source_timezone: str,
) -> FeedItem:
    try:
        time = parse_activity_date(activity.date, date_formats, source_timezone)
    except ValueError as exc:
        raise MalformedInputError(str(exc)) from exc
    return FeedItem(
        time=time,
        title=activity.text.strip(),
        description=activity.details.strip(),
    )
