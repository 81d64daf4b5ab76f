"""
Shared pytest fixtures for the RuneScape Lookup test suite.

Provides:
  - Payload builders for the three wire formats (index_lite, RuneMetrics
    JSON, adventurer's log RSS).
  - Sample domain objects: feed items, feeds, an all-99 combat snapshot.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Optional

import pytest

from rs_lookup.catalog.skills import COMBAT_SKILLS, MODERN_SKILLS, Skill, ordinal_for_skill
from rs_lookup.models.feed import ActivityFeed, FeedItem
from rs_lookup.models.highscore import HighscoreSnapshot, SkillEntry

FIXED_DT = datetime(2026, 10, 19, 13, 14, 0, tzinfo=timezone.utc)


# ── Payload builders ──────────────────────────────────────────────────────────

def make_index_lite(skill_count: int, activity_count: int) -> str:
    """Build an index_lite body with distinct, ordinal-derived values.

    Skill row N is ``"{N+1},{N+10},{N*1000}"``; activity row N is
    ``"{N+1},{N*10}"`` so tests can tell which row ended up where.
    """
    lines = [f"{n + 1},{n + 10},{n * 1000}" for n in range(skill_count)]
    lines += [f"{n + 1},{n * 10}" for n in range(activity_count)]
    return "\n".join(lines) + "\n"


def make_rss(items: list[tuple[str, str, str]], channel_title: str = "Adventurer's log: Zezima") -> str:
    """Build an adventurer's log RSS document from ``(pubDate, title, description)``."""
    item_xml = "".join(
        "<item>"
        f"<title>{title}</title>"
        f"<description>{description}</description>"
        f"<pubDate>{pub_date}</pubDate>"
        "</item>"
        for pub_date, title, description in items
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel>'
        f"<title>{channel_title}</title>"
        "<link>https://apps.runescape.com/runemetrics/app/overview/player/Zezima</link>"
        "<description>Zezima's recent activity</description>"
        f"{item_xml}"
        "</channel></rss>"
    )


def make_rune_metrics(
    skillvalues: Optional[list[dict]] = None,
    activities: Optional[list[dict]] = None,
    rank: object = "1,234",
    name: str = "Zezima",
) -> str:
    """Build a RuneMetrics profile body."""
    if skillvalues is None:
        skillvalues = [
            {"id": ordinal - 1, "xp": 130344310, "level": 99, "rank": 1000 + ordinal}
            for ordinal in range(1, 8)
        ]
    if activities is None:
        activities = [
            {
                "date": "19-Oct-2026 13:14",
                "text": "Levelled up Attack.",
                "details": "I levelled my Attack skill, I am now level 99.",
            },
        ]
    profile = {
        "name": name,
        "rank": rank,
        "totalskill": 2898,
        "totalxp": 1234567890,
        "combatlevel": 138,
        "skillvalues": skillvalues,
        "activities": activities,
        "loggedIn": "false",
    }
    return json.dumps(profile)


# ── Logging isolation ─────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by configure_logging() during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# ── Domain fixtures ───────────────────────────────────────────────────────────

def make_item(n: int, title: str = "", description: str = "") -> FeedItem:
    """A feed item whose fields are derived from ``n`` (newer = larger ``n``)."""
    return FeedItem(
        time=datetime(2026, 10, 1 + n, 12, 0, 0, tzinfo=timezone.utc),
        title=title or f"Event {n}",
        description=description or f"Details of event {n}.",
    )


@pytest.fixture
def feed_items() -> dict[str, FeedItem]:
    """Named items A, B, C (older history) and X, Y, Z (newer)."""
    return {
        "A": make_item(3), "B": make_item(2), "C": make_item(1),
        "X": make_item(6), "Y": make_item(5), "Z": make_item(4),
    }


@pytest.fixture
def stored_feed(feed_items) -> ActivityFeed:
    """[A, B, C] — newest first."""
    return ActivityFeed(items=(feed_items["A"], feed_items["B"], feed_items["C"]))


def make_snapshot(levels: dict[Skill, int], experience: Optional[dict[Skill, int]] = None) -> HighscoreSnapshot:
    """Build a modern snapshot with the given skill levels."""
    experience = experience or {}
    skills = tuple(
        SkillEntry(
            ordinal=ordinal_for_skill(skill),
            skill=skill,
            rank=1,
            level=level,
            experience=experience.get(skill, 0),
        )
        for skill, level in sorted(levels.items(), key=lambda kv: ordinal_for_skill(kv[0]))
    )
    return HighscoreSnapshot(skills=skills, captured_at=FIXED_DT)


@pytest.fixture
def maxed_snapshot() -> HighscoreSnapshot:
    """All combat skills and summoning at 99."""
    levels = {skill: 99 for skill in COMBAT_SKILLS}
    levels[Skill.SUMMONING] = 99
    return make_snapshot(levels)


@pytest.fixture
def modern_lite_body() -> str:
    """A full modern index_lite body (every catalog skill, 30 activities)."""
    return make_index_lite(len(MODERN_SKILLS), 30)
