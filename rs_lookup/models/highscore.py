"""
Highscore models — one player's skill and activity rankings at a moment in time.

``SkillEntry`` / ``ActivityEntry`` are single decoded rows; a
``HighscoreSnapshot`` bundles the surviving rows of one payload with its
capture time and the raw text it was decoded from.

All models are frozen. A snapshot is built once by a decoder and never
modified afterwards; merge or refresh operations produce new values.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rs_lookup.catalog.activities import Activity
from rs_lookup.catalog.ruleset import Ruleset
from rs_lookup.catalog.skills import (
    COMBAT_SKILLS,
    NON_STANDARD_CURVE,
    Skill,
    level_for_experience,
)
from rs_lookup.exceptions import IncompleteSnapshotError
from rs_lookup.utils.time_utils import ensure_utc, utcnow


class Player(BaseModel):
    """The player a snapshot was looked up for."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)


class SkillEntry(BaseModel):
    """A decoded skill row.

    Attributes:
        ordinal: Position of the row in the upstream payload (0 = total).
        skill: Catalog identity resolved from ``ordinal``.
        rank: Highscore rank, or ``None`` when the player is unranked.
        level: Level as reported upstream (capped at the skill's maximum).
        experience: Experience in whole units.
    """

    model_config = ConfigDict(frozen=True)

    ordinal: int = Field(ge=0)
    skill: Skill
    rank: Optional[int] = Field(default=None, ge=0)
    level: int = Field(ge=1)
    experience: int = Field(ge=0)

    def level_for(self, uncapped: bool = False) -> int:
        """Return the reported level, or the virtual level if ``uncapped``.

        The virtual level is read off the standard experience curve and is
        never lower than the reported level.
        """
        if not uncapped or self.skill in NON_STANDARD_CURVE:
            return self.level
        return max(self.level, level_for_experience(self.experience))


class ActivityEntry(BaseModel):
    """A decoded activity row.

    ``ordinal`` is in catalog key space: legacy activities carry the
    1000 offset.
    """

    model_config = ConfigDict(frozen=True)

    ordinal: int = Field(ge=0)
    activity: Activity
    rank: Optional[int] = Field(default=None, ge=0)
    score: int

    @property
    def is_ranked(self) -> bool:
        """``False`` when upstream reported the negative "unranked" score."""
        return self.score >= 0


HighscoreEntry = Union[SkillEntry, ActivityEntry]


class HighscoreSnapshot(BaseModel):
    """A player's highscore rows as decoded from one payload.

    Attributes:
        skills: Surviving skill rows in catalog order.
        activities: Surviving activity rows in catalog order.
        captured_at: UTC time the payload was captured (defaults to now).
        player: The player the payload belongs to, if known.
        raw_text: The payload exactly as received, kept for diagnostics.
        ruleset: Which catalog the rows were resolved against.
    """

    model_config = ConfigDict(frozen=True)

    skills: tuple[SkillEntry, ...] = ()
    activities: tuple[ActivityEntry, ...] = ()
    captured_at: datetime = Field(default_factory=utcnow)
    player: Optional[Player] = None
    raw_text: str = ""
    ruleset: Ruleset = Ruleset.MODERN

    @field_validator("captured_at")
    @classmethod
    def validate_captured_at(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @model_validator(mode="after")
    def validate_unique_ordinals(self) -> "HighscoreSnapshot":
        for label, ordinals in (
            ("skill", [s.ordinal for s in self.skills]),
            ("activity", [a.ordinal for a in self.activities]),
        ):
            if len(ordinals) != len(set(ordinals)):
                raise ValueError(f"Duplicate {label} ordinal in snapshot: {ordinals}.")
        return self

    @property
    def entries(self) -> tuple[HighscoreEntry, ...]:
        """All rows: skills first, then activities."""
        return self.skills + self.activities

    def skill(self, skill: Skill) -> Optional[SkillEntry]:
        for entry in self.skills:
            if entry.skill == skill:
                return entry
        return None

    def activity(self, activity: Activity) -> Optional[ActivityEntry]:
        for entry in self.activities:
            if entry.activity == activity:
                return entry
        return None

    def combat_level(self, include_summoning: bool = True, uncapped: bool = False) -> int:
        """Compute the combat level from the snapshot's combat skills.

        ``floor((max(att + str, 2*mag, 2*rng) * 1.3 + def + con
        + floor(pray / 2) + floor(summ / 2)) / 4)``

        Summoning counts as level 1 when excluded or absent.

        Raises:
            IncompleteSnapshotError: If any required combat skill is missing.
        """
        levels: dict[Skill, int] = {}
        missing: list[str] = []
        for skill in COMBAT_SKILLS:
            entry = self.skill(skill)
            if entry is None:
                missing.append(skill.value)
            else:
                levels[skill] = entry.level_for(uncapped)
        if missing:
            raise IncompleteSnapshotError("combat level", missing)

        summoning = self.skill(Skill.SUMMONING)
        summoning_level = (
            summoning.level_for(uncapped) if include_summoning and summoning else 1
        )

        base = max(
            levels[Skill.ATTACK] + levels[Skill.STRENGTH],
            levels[Skill.MAGIC] * 2,
            levels[Skill.RANGED] * 2,
        )
        return int(math.floor((
            base * 1.3
            + levels[Skill.DEFENCE]
            + levels[Skill.CONSTITUTION]
            + levels[Skill.PRAYER] // 2
            + summoning_level // 2
        ) / 4))
