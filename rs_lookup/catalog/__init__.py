"""
Catalogs — static ordinal → identity tables for skills and activities.

Submodules:
  ruleset     — Ruleset selector (modern / legacy)
  skills      — Skill identities, per-ruleset ordinal tables, experience curve
  activities  — Activity identities, per-ruleset ordinal tables

Lookups return ``None`` for ordinals the catalog does not know yet. Upstream
adds skills and minigames over time; decoders rely on the ``None`` result to
skip those rows without losing positional alignment.

This package has NO imports from any other ``rs_lookup`` package.
"""
