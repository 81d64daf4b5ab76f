"""
Decoder for the "index_lite" highscore format.

Format — one record per line, comma separated, no header::

    1234,2500,230000000     ← skill:    rank,level,experience
    -1,1,-1                 ← skill:    unranked
    15,4200                 ← activity: rank,score
    -1,-1                   ← activity: unranked

The field count alone decides the record kind. Ordinals are positional and
counted separately per kind: the Nth skill-shaped record is skill ordinal
N-1 no matter how many activity rows came before it.

Upstream appends new skills and activities without notice. A record whose
ordinal the catalog does not know is skipped, but its ordinal is still
consumed so every later record keeps its correct identity.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from pydantic import ValidationError

from rs_lookup.catalog.activities import activity_for_ordinal, catalog_ordinal
from rs_lookup.catalog.ruleset import Ruleset
from rs_lookup.catalog.skills import skill_for_ordinal
from rs_lookup.conversion.common import (
    KEY_ACTIVITY_HIGHSCORE,
    KEY_LEGACY_ACTIVITY_HIGHSCORE,
    KEY_LEGACY_SKILL_HIGHSCORE,
    KEY_SKILL_HIGHSCORE,
    Payload,
    as_text,
)
from rs_lookup.exceptions import EmptyResultError, MalformedInputError
from rs_lookup.models.highscore import ActivityEntry, HighscoreSnapshot, Player, SkillEntry
from rs_lookup.utils.time_utils import utcnow

logger = logging.getLogger(__name__)

SKILL_FIELD_COUNT = 3
ACTIVITY_FIELD_COUNT = 2


def convert_index_lite(
    data: Payload,
    ruleset: Ruleset = Ruleset.MODERN,
    player: Optional[Player] = None,
    captured_at: Optional[datetime] = None,
) -> dict[str, Any]:
    """Decode an index_lite payload into skill and activity highscores.

    Args:
        data: Raw response body.
        ruleset: Catalog used to resolve ordinals.
        player: Player the payload was fetched for, if known.
        captured_at: Capture time; defaults to now.

    Returns:
        ``{KEY_SKILL_HIGHSCORE: ..., KEY_ACTIVITY_HIGHSCORE: ...}`` for the
        modern ruleset, or the ``KEY_LEGACY_*`` pair for the legacy ruleset.
        Each value is a ``HighscoreSnapshot`` holding only that kind of row.

    Raises:
        MalformedInputError: If a line has neither 2 nor 3 fields, or a
            field is not an integer.
        EmptyResultError: If no skill or activity survived catalog lookup.
    """
    raw_text = as_text(data)
    captured_at = captured_at or utcnow()

    skills: list[SkillEntry] = []
    activities: list[ActivityEntry] = []
    skill_ordinal = 0
    activity_ordinal = 0
    dropped = 0

    for line_no, line in enumerate(raw_text.strip().split("\n"), start=1):
        fields = line.split(",")

        if len(fields) == SKILL_FIELD_COUNT:
            skill = skill_for_ordinal(skill_ordinal, ruleset)
            if skill is None:
                dropped += 1
            else:
                rank, level, experience = _parse_ints(fields, line_no)
                skills.append(SkillEntry(
                    ordinal=skill_ordinal,
                    skill=skill,
                    rank=_rank_or_none(rank),
                    level=max(level, 1),
                    experience=max(experience, 0),
                ))
            skill_ordinal += 1

        elif len(fields) == ACTIVITY_FIELD_COUNT:
            activity = activity_for_ordinal(activity_ordinal, ruleset)
            if activity is None:
                dropped += 1
            else:
                rank, score = _parse_ints(fields, line_no)
                activities.append(ActivityEntry(
                    ordinal=catalog_ordinal(activity_ordinal, ruleset),
                    activity=activity,
                    rank=_rank_or_none(rank),
                    score=score,
                ))
            activity_ordinal += 1

        else:
            raise MalformedInputError(
                f"Invalid highscore record: expected {ACTIVITY_FIELD_COUNT} or "
                f"{SKILL_FIELD_COUNT} fields, got {len(fields)}",
                line_no=line_no,
            )

    if not skills and not activities:
        raise EmptyResultError("No highscore entries obtained from data.")

    if dropped:
        logger.debug(
            "index_lite (%s): skipped %d record(s) with unknown ordinals", ruleset, dropped,
        )

    try:
        skill_highscore = HighscoreSnapshot(
            skills=tuple(skills), captured_at=captured_at, player=player,
            raw_text=raw_text, ruleset=ruleset,
        )
        activity_highscore = HighscoreSnapshot(
            activities=tuple(activities), captured_at=captured_at, player=player,
            raw_text=raw_text, ruleset=ruleset,
        )
    except ValidationError as exc:
        raise MalformedInputError(f"Highscore data failed validation: {exc}") from exc

    if ruleset == Ruleset.LEGACY:
        return {
            KEY_LEGACY_SKILL_HIGHSCORE: skill_highscore,
            KEY_LEGACY_ACTIVITY_HIGHSCORE: activity_highscore,
        }
    return {
        KEY_SKILL_HIGHSCORE: skill_highscore,
        KEY_ACTIVITY_HIGHSCORE: activity_highscore,
    }


# ── Private helpers ────────────────────────────────────────────────────────────

def _parse_ints(fields: list[str], line_no: int) -> list[int]:
    try:
        return [int(field) for field in fields]
    except ValueError:
        raise MalformedInputError(
            f"Non-integer field in highscore record {fields!r}", line_no=line_no,
        ) from None


def _rank_or_none(rank: int) -> Optional[int]:
    # upstream reports -1 for unranked
    return rank if rank >= 0 else None
