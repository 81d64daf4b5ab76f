"""
Activity (minigame / clue scroll / event score) catalog.

Activity rows follow the skill rows in the lite highscore format. The two
games number their activities from zero independently; legacy ordinals are
shifted by ``LEGACY_ACTIVITY_OFFSET`` so one catalog can hold both without
collisions. ``activity_for_ordinal`` applies the offset itself — callers
always pass the raw positional ordinal.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from rs_lookup.catalog.ruleset import Ruleset

LEGACY_ACTIVITY_OFFSET = 1000


class Activity(StrEnum):
    """Stable activity identity."""

    # ── Modern ────────────────────────────────────────────────────────────────
    BOUNTY_HUNTER = "bounty_hunter"
    BOUNTY_HUNTER_ROGUES = "bounty_hunter_rogues"
    DOMINION_TOWER = "dominion_tower"
    THE_CRUCIBLE = "the_crucible"
    CASTLE_WARS = "castle_wars"
    BA_ATTACKERS = "ba_attackers"
    BA_DEFENDERS = "ba_defenders"
    BA_COLLECTORS = "ba_collectors"
    BA_HEALERS = "ba_healers"
    DUEL_TOURNAMENT = "duel_tournament"
    MOBILISING_ARMIES = "mobilising_armies"
    CONQUEST = "conquest"
    FIST_OF_GUTHIX = "fist_of_guthix"
    GG_ATHLETICS = "gg_athletics"
    GG_RESOURCE_RACE = "gg_resource_race"
    WE2_ARMADYL_CONTRIBUTION = "we2_armadyl_contribution"
    WE2_BANDOS_CONTRIBUTION = "we2_bandos_contribution"
    WE2_ARMADYL_KILLS = "we2_armadyl_kills"
    WE2_BANDOS_KILLS = "we2_bandos_kills"
    HEIST_GUARD = "heist_guard"
    HEIST_ROBBER = "heist_robber"
    CFP_AVERAGE = "cfp_average"
    AF15_COW_TIPPING = "af15_cow_tipping"
    AF15_RATS_KILLED = "af15_rats_killed"
    RUNESCORE = "runescore"
    CLUE_EASY = "clue_easy"
    CLUE_MEDIUM = "clue_medium"
    CLUE_HARD = "clue_hard"
    CLUE_ELITE = "clue_elite"
    CLUE_MASTER = "clue_master"

    # ── Legacy ────────────────────────────────────────────────────────────────
    LEGACY_BOUNTY_HUNTER = "legacy_bounty_hunter"
    LEGACY_BOUNTY_HUNTER_ROGUES = "legacy_bounty_hunter_rogues"
    LEGACY_CLUE_ALL = "legacy_clue_all"
    LEGACY_CLUE_BEGINNER = "legacy_clue_beginner"
    LEGACY_CLUE_EASY = "legacy_clue_easy"
    LEGACY_CLUE_MEDIUM = "legacy_clue_medium"
    LEGACY_CLUE_HARD = "legacy_clue_hard"
    LEGACY_CLUE_ELITE = "legacy_clue_elite"
    LEGACY_CLUE_MASTER = "legacy_clue_master"
    LEGACY_LMS_RANK = "legacy_lms_rank"


ACTIVITIES: dict[int, Activity] = {
    0: Activity.BOUNTY_HUNTER,
    1: Activity.BOUNTY_HUNTER_ROGUES,
    2: Activity.DOMINION_TOWER,
    3: Activity.THE_CRUCIBLE,
    4: Activity.CASTLE_WARS,
    5: Activity.BA_ATTACKERS,
    6: Activity.BA_DEFENDERS,
    7: Activity.BA_COLLECTORS,
    8: Activity.BA_HEALERS,
    9: Activity.DUEL_TOURNAMENT,
    10: Activity.MOBILISING_ARMIES,
    11: Activity.CONQUEST,
    12: Activity.FIST_OF_GUTHIX,
    13: Activity.GG_ATHLETICS,
    14: Activity.GG_RESOURCE_RACE,
    15: Activity.WE2_ARMADYL_CONTRIBUTION,
    16: Activity.WE2_BANDOS_CONTRIBUTION,
    17: Activity.WE2_ARMADYL_KILLS,
    18: Activity.WE2_BANDOS_KILLS,
    19: Activity.HEIST_GUARD,
    20: Activity.HEIST_ROBBER,
    21: Activity.CFP_AVERAGE,
    22: Activity.AF15_COW_TIPPING,
    23: Activity.AF15_RATS_KILLED,
    24: Activity.RUNESCORE,
    25: Activity.CLUE_EASY,
    26: Activity.CLUE_MEDIUM,
    27: Activity.CLUE_HARD,
    28: Activity.CLUE_ELITE,
    29: Activity.CLUE_MASTER,
    1000: Activity.LEGACY_BOUNTY_HUNTER,
    1001: Activity.LEGACY_BOUNTY_HUNTER_ROGUES,
    1002: Activity.LEGACY_CLUE_ALL,
    1003: Activity.LEGACY_CLUE_BEGINNER,
    1004: Activity.LEGACY_CLUE_EASY,
    1005: Activity.LEGACY_CLUE_MEDIUM,
    1006: Activity.LEGACY_CLUE_HARD,
    1007: Activity.LEGACY_CLUE_ELITE,
    1008: Activity.LEGACY_CLUE_MASTER,
    1009: Activity.LEGACY_LMS_RANK,
}


def catalog_ordinal(ordinal: int, ruleset: Ruleset = Ruleset.MODERN) -> int:
    """Translate a positional ordinal into the catalog's key space."""
    return ordinal + LEGACY_ACTIVITY_OFFSET if ruleset == Ruleset.LEGACY else ordinal


def activity_for_ordinal(
    ordinal: int,
    ruleset: Ruleset = Ruleset.MODERN,
) -> Optional[Activity]:
    """Return the activity at positional ``ordinal`` for ``ruleset``, or ``None``.

    Modern ordinals never reach into the legacy key range: an unknown modern
    ordinal >= 1000 is rejected rather than aliased onto a legacy activity.
    """
    if ruleset == Ruleset.MODERN and ordinal >= LEGACY_ACTIVITY_OFFSET:
        return None
    return ACTIVITIES.get(catalog_ordinal(ordinal, ruleset))
