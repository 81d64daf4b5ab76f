"""Ruleset selector for ordinal → identity mapping."""

from enum import StrEnum


class Ruleset(StrEnum):
    """Which game ruleset a payload was published for."""

    MODERN = "modern"
    """The current game (RS3) highscores and RuneMetrics."""

    LEGACY = "legacy"
    """Old School highscores; activity ordinals are offset by 1000."""
