"""
Skill catalog.

``Skill`` is the stable identity of a skill. Upstream APIs never send the
identity — they send rows in a fixed order and the position of a row is its
*ordinal*. ``MODERN_SKILLS`` and ``LEGACY_SKILLS`` map those ordinals to
identities for each ruleset.

Both rulesets share the identity for skills that exist in both games. The
legacy game calls constitution "Hitpoints"; ``display_name()`` handles the
difference.

Experience curve:
  ``experience_for_level(level)`` reproduces the game's published table:
  ``floor(sum(floor(n + 300 * 2 ** (n / 7)) for n in 1..level-1) / 4)``.
  Level 99 requires 13,034,431 experience.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Optional

from rs_lookup.catalog.ruleset import Ruleset


class Skill(StrEnum):
    """Stable skill identity."""

    TOTAL = "total"
    ATTACK = "attack"
    DEFENCE = "defence"
    STRENGTH = "strength"
    CONSTITUTION = "constitution"
    RANGED = "ranged"
    PRAYER = "prayer"
    MAGIC = "magic"
    COOKING = "cooking"
    WOODCUTTING = "woodcutting"
    FLETCHING = "fletching"
    FISHING = "fishing"
    FIREMAKING = "firemaking"
    CRAFTING = "crafting"
    SMITHING = "smithing"
    MINING = "mining"
    HERBLORE = "herblore"
    AGILITY = "agility"
    THIEVING = "thieving"
    SLAYER = "slayer"
    FARMING = "farming"
    RUNECRAFTING = "runecrafting"
    HUNTER = "hunter"
    CONSTRUCTION = "construction"
    SUMMONING = "summoning"
    DUNGEONEERING = "dungeoneering"
    DIVINATION = "divination"
    INVENTION = "invention"
    ARCHAEOLOGY = "archaeology"
    NECROMANCY = "necromancy"


# ── Ordinal tables ────────────────────────────────────────────────────────────
# Ordinal 0 is always the aggregate ("Overall") row.

_SHARED_ORDER: tuple[Skill, ...] = (
    Skill.TOTAL,
    Skill.ATTACK,
    Skill.DEFENCE,
    Skill.STRENGTH,
    Skill.CONSTITUTION,
    Skill.RANGED,
    Skill.PRAYER,
    Skill.MAGIC,
    Skill.COOKING,
    Skill.WOODCUTTING,
    Skill.FLETCHING,
    Skill.FISHING,
    Skill.FIREMAKING,
    Skill.CRAFTING,
    Skill.SMITHING,
    Skill.MINING,
    Skill.HERBLORE,
    Skill.AGILITY,
    Skill.THIEVING,
    Skill.SLAYER,
    Skill.FARMING,
    Skill.RUNECRAFTING,
    Skill.HUNTER,
    Skill.CONSTRUCTION,
)

MODERN_SKILLS: dict[int, Skill] = dict(enumerate(_SHARED_ORDER + (
    Skill.SUMMONING,
    Skill.DUNGEONEERING,
    Skill.DIVINATION,
    Skill.INVENTION,
    Skill.ARCHAEOLOGY,
    Skill.NECROMANCY,
)))

LEGACY_SKILLS: dict[int, Skill] = dict(enumerate(_SHARED_ORDER))

_LEGACY_DISPLAY_NAMES: dict[Skill, str] = {
    Skill.TOTAL: "Overall",
    Skill.CONSTITUTION: "Hitpoints",
}

# Combat level inputs
COMBAT_SKILLS: tuple[Skill, ...] = (
    Skill.ATTACK,
    Skill.DEFENCE,
    Skill.STRENGTH,
    Skill.CONSTITUTION,
    Skill.RANGED,
    Skill.PRAYER,
    Skill.MAGIC,
)
OPTIONAL_COMBAT_SKILLS: tuple[Skill, ...] = (Skill.SUMMONING,)


def skill_for_ordinal(ordinal: int, ruleset: Ruleset = Ruleset.MODERN) -> Optional[Skill]:
    """Return the skill at ``ordinal`` for ``ruleset``, or ``None`` if unknown."""
    table = LEGACY_SKILLS if ruleset == Ruleset.LEGACY else MODERN_SKILLS
    return table.get(ordinal)


def ordinal_for_skill(skill: Skill, ruleset: Ruleset = Ruleset.MODERN) -> Optional[int]:
    """Reverse lookup of ``skill_for_ordinal``."""
    table = LEGACY_SKILLS if ruleset == Ruleset.LEGACY else MODERN_SKILLS
    for ordinal, candidate in table.items():
        if candidate == skill:
            return ordinal
    return None


def display_name(skill: Skill, ruleset: Ruleset = Ruleset.MODERN) -> str:
    """Human-readable skill name as the given game shows it."""
    if ruleset == Ruleset.LEGACY and skill in _LEGACY_DISPLAY_NAMES:
        return _LEGACY_DISPLAY_NAMES[skill]
    return skill.value.capitalize()


# ── Experience curve ──────────────────────────────────────────────────────────

MAX_VIRTUAL_LEVEL = 126

# Skills levelled on a different curve or not levelled at all; uncapped
# levels for these always fall back to the reported level.
NON_STANDARD_CURVE: frozenset[Skill] = frozenset({Skill.TOTAL, Skill.INVENTION})


def _build_experience_table(max_level: int) -> tuple[int, ...]:
    table = [0, 0]  # index 0 unused; level 1 needs no experience
    points = 0
    for level in range(1, max_level):
        points += math.floor(level + 300 * 2 ** (level / 7))
        table.append(points // 4)
    return tuple(table)


_EXPERIENCE_TABLE = _build_experience_table(MAX_VIRTUAL_LEVEL)


def experience_for_level(level: int) -> int:
    """Minimum experience needed to reach ``level`` (1..MAX_VIRTUAL_LEVEL).

    Raises:
        ValueError: If ``level`` is outside the supported range.
    """
    if not 1 <= level <= MAX_VIRTUAL_LEVEL:
        raise ValueError(f"level must be in 1..{MAX_VIRTUAL_LEVEL}, got {level}.")
    return _EXPERIENCE_TABLE[level]


def level_for_experience(experience: int) -> int:
    """Highest level whose experience requirement is met by ``experience``."""
    level = 1
    for candidate in range(2, MAX_VIRTUAL_LEVEL + 1):
        if _EXPERIENCE_TABLE[candidate] > experience:
            break
        level = candidate
    return level
