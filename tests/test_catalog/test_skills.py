"""Tests for the skill catalog — ordinal tables, lookups, experience curve."""

from __future__ import annotations

import pytest

from rs_lookup.catalog.ruleset import Ruleset
from rs_lookup.catalog.skills import (
    COMBAT_SKILLS,
    LEGACY_SKILLS,
    MAX_VIRTUAL_LEVEL,
    MODERN_SKILLS,
    Skill,
    display_name,
    experience_for_level,
    level_for_experience,
    ordinal_for_skill,
    skill_for_ordinal,
)


class TestOrdinalTables:
    def test_ordinal_zero_is_total_in_both_rulesets(self):
        assert MODERN_SKILLS[0] == Skill.TOTAL
        assert LEGACY_SKILLS[0] == Skill.TOTAL

    def test_ordinals_are_contiguous(self):
        for table in (MODERN_SKILLS, LEGACY_SKILLS):
            assert sorted(table) == list(range(len(table)))

    def test_no_duplicate_identities(self):
        for table in (MODERN_SKILLS, LEGACY_SKILLS):
            assert len(set(table.values())) == len(table)

    def test_legacy_is_prefix_of_modern(self):
        for ordinal, skill in LEGACY_SKILLS.items():
            assert MODERN_SKILLS[ordinal] == skill

    def test_modern_only_skills(self):
        assert Skill.SUMMONING in MODERN_SKILLS.values()
        assert Skill.SUMMONING not in LEGACY_SKILLS.values()
        assert Skill.NECROMANCY in MODERN_SKILLS.values()

    def test_combat_skills_exist_in_both(self):
        for skill in COMBAT_SKILLS:
            assert skill in MODERN_SKILLS.values()
            assert skill in LEGACY_SKILLS.values()


class TestSkillForOrdinal:
    def test_known_modern(self):
        assert skill_for_ordinal(1) == Skill.ATTACK
        assert skill_for_ordinal(4) == Skill.CONSTITUTION
        assert skill_for_ordinal(24, Ruleset.MODERN) == Skill.SUMMONING

    def test_unknown_returns_none(self):
        assert skill_for_ordinal(len(MODERN_SKILLS)) is None
        assert skill_for_ordinal(500) is None

    def test_legacy_stops_at_construction(self):
        assert skill_for_ordinal(23, Ruleset.LEGACY) == Skill.CONSTRUCTION
        assert skill_for_ordinal(24, Ruleset.LEGACY) is None

    def test_reverse_lookup(self):
        assert ordinal_for_skill(Skill.MAGIC) == 7
        assert ordinal_for_skill(Skill.SUMMONING, Ruleset.LEGACY) is None


class TestDisplayName:
    def test_modern_name(self):
        assert display_name(Skill.CONSTITUTION) == "Constitution"

    def test_legacy_hitpoints(self):
        assert display_name(Skill.CONSTITUTION, Ruleset.LEGACY) == "Hitpoints"
        assert display_name(Skill.TOTAL, Ruleset.LEGACY) == "Overall"


class TestExperienceCurve:
    @pytest.mark.parametrize("level,experience", [
        (1, 0),
        (2, 83),
        (10, 1154),
        (50, 101333),
        (92, 6517253),
        (99, 13034431),
        (120, 104273167),
    ])
    def test_published_values(self, level, experience):
        assert experience_for_level(level) == experience

    def test_level_for_experience_boundaries(self):
        assert level_for_experience(0) == 1
        assert level_for_experience(82) == 1
        assert level_for_experience(83) == 2
        assert level_for_experience(13034430) == 98
        assert level_for_experience(13034431) == 99

    def test_level_capped_at_max_virtual(self):
        assert level_for_experience(2_000_000_000) == MAX_VIRTUAL_LEVEL

    def test_out_of_range_level_raises(self):
        with pytest.raises(ValueError):
            experience_for_level(0)
        with pytest.raises(ValueError):
            experience_for_level(MAX_VIRTUAL_LEVEL + 1)
