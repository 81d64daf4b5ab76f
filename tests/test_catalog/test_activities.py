"""Tests for the activity catalog — legacy offset and lookups."""

from __future__ import annotations

from rs_lookup.catalog.activities import (
    ACTIVITIES,
    LEGACY_ACTIVITY_OFFSET,
    Activity,
    activity_for_ordinal,
    catalog_ordinal,
)
from rs_lookup.catalog.ruleset import Ruleset


class TestActivityCatalog:
    def test_offset_constant(self):
        assert LEGACY_ACTIVITY_OFFSET == 1000

    def test_no_duplicate_identities(self):
        assert len(set(ACTIVITIES.values())) == len(ACTIVITIES)

    def test_every_enum_member_is_catalogued(self):
        assert set(ACTIVITIES.values()) == set(Activity)

    def test_legacy_keys_are_offset(self):
        legacy = [k for k, v in ACTIVITIES.items() if v.value.startswith("legacy_")]
        assert legacy
        assert all(k >= LEGACY_ACTIVITY_OFFSET for k in legacy)


class TestActivityForOrdinal:
    def test_modern_lookup(self):
        assert activity_for_ordinal(0) == Activity.BOUNTY_HUNTER
        assert activity_for_ordinal(24) == Activity.RUNESCORE

    def test_legacy_lookup_applies_offset(self):
        assert activity_for_ordinal(0, Ruleset.LEGACY) == Activity.LEGACY_BOUNTY_HUNTER
        assert activity_for_ordinal(2, Ruleset.LEGACY) == Activity.LEGACY_CLUE_ALL

    def test_same_position_differs_by_ruleset(self):
        assert activity_for_ordinal(2) != activity_for_ordinal(2, Ruleset.LEGACY)

    def test_unknown_returns_none(self):
        assert activity_for_ordinal(30) is None
        assert activity_for_ordinal(10, Ruleset.LEGACY) is None

    def test_modern_never_aliases_legacy_range(self):
        assert activity_for_ordinal(1000, Ruleset.MODERN) is None

    def test_catalog_ordinal(self):
        assert catalog_ordinal(5) == 5
        assert catalog_ordinal(5, Ruleset.LEGACY) == 1005
