"""
Conversion layer — decoders for the three upstream wire formats.

Submodules:
  index_lite       — comma-delimited highscores (modern and legacy rulesets)
  rune_metrics     — RuneMetrics profile JSON (skills + activity feed)
  adventurers_log  — adventurer's log RSS (activity feed only)
  converter        — PlayerDataConverter facade and DataFormat dispatch
  common           — result keys shared by all decoders

Fetching the payloads (HTTP, retries, size limits) is the caller's job.
"""

from rs_lookup.conversion.common import (
    KEY_ACTIVITY_FEED,
    KEY_ACTIVITY_HIGHSCORE,
    KEY_LEGACY_ACTIVITY_HIGHSCORE,
    KEY_LEGACY_SKILL_HIGHSCORE,
    KEY_REAL_NAME,
    KEY_SKILL_HIGHSCORE,
)
from rs_lookup.conversion.converter import DataFormat, PlayerDataConverter

__all__ = [
    "DataFormat",
    "KEY_ACTIVITY_FEED",
    "KEY_ACTIVITY_HIGHSCORE",
    "KEY_LEGACY_ACTIVITY_HIGHSCORE",
    "KEY_LEGACY_SKILL_HIGHSCORE",
    "KEY_REAL_NAME",
    "KEY_SKILL_HIGHSCORE",
    "PlayerDataConverter",
]
