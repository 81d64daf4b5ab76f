"""
Entry point for turning upstream responses into player data.

``PlayerDataConverter`` exposes one method per wire format plus
``convert(data, fmt)`` which dispatches on a ``DataFormat``. Every method
returns a dict keyed by the ``KEY_*`` constants of
``rs_lookup.conversion.common`` and raises a ``DataConversionError``
subclass on failure — never a partial result.

Usage::

    converter = PlayerDataConverter()
    result = converter.convert_index_lite(body)
    skills = result[KEY_SKILL_HIGHSCORE]
    skills.combat_level()
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import StrEnum
from typing import Any, Optional

from rs_lookup.catalog.ruleset import Ruleset
from rs_lookup.config import ParsingConfig
from rs_lookup.conversion.adventurers_log import convert_adventurers_log
from rs_lookup.conversion.common import Payload
from rs_lookup.conversion.index_lite import convert_index_lite
from rs_lookup.conversion.rune_metrics import convert_rune_metrics
from rs_lookup.models.highscore import Player

logger = logging.getLogger(__name__)


class DataFormat(StrEnum):
    """Wire formats understood by the converter."""

    INDEX_LITE = "index-lite"
    LEGACY_INDEX_LITE = "legacy-index-lite"
    RUNE_METRICS = "rune-metrics"
    ADVENTURERS_LOG = "adventurers-log"


FEED_FORMATS = frozenset({DataFormat.RUNE_METRICS, DataFormat.ADVENTURERS_LOG})


class PlayerDataConverter:
    """Converts raw upstream responses into highscores and activity feeds.

    Stateless apart from its ``ParsingConfig``; safe to share across threads.
    """

    def __init__(self, config: Optional[ParsingConfig] = None) -> None:
        self.config = config or ParsingConfig()

    def convert_index_lite(
        self,
        data: Payload,
        player: Optional[Player] = None,
        captured_at: Optional[datetime] = None,
    ) -> dict[str, Any]:
        """Modern highscores. Yields ``KEY_SKILL_HIGHSCORE`` and ``KEY_ACTIVITY_HIGHSCORE``."""
        return convert_index_lite(data, Ruleset.MODERN, player, captured_at)

    def convert_legacy_index_lite(
        self,
        data: Payload,
        player: Optional[Player] = None,
        captured_at: Optional[datetime] = None,
    ) -> dict[str, Any]:
        """Old School highscores. Yields the ``KEY_LEGACY_*`` highscore pair."""
        return convert_index_lite(data, Ruleset.LEGACY, player, captured_at)

    def convert_rune_metrics(
        self,
        data: Payload,
        player: Optional[Player] = None,
        captured_at: Optional[datetime] = None,
    ) -> dict[str, Any]:
        """Yields ``KEY_SKILL_HIGHSCORE``, ``KEY_ACTIVITY_FEED`` and ``KEY_REAL_NAME``."""
        return convert_rune_metrics(
            data,
            player=player,
            captured_at=captured_at,
            date_formats=self.config.activity_date_formats,
            source_timezone=self.config.source_timezone,
        )

    def convert_adventurers_log(self, data: Payload) -> dict[str, Any]:
        """Yields ``KEY_ACTIVITY_FEED`` and ``KEY_REAL_NAME``."""
        return convert_adventurers_log(data)

    def convert(
        self,
        data: Payload,
        fmt: DataFormat,
        player: Optional[Player] = None,
        captured_at: Optional[datetime] = None,
    ) -> dict[str, Any]:
        """Dispatch to the decoder for ``fmt``."""
        fmt = DataFormat(fmt)
        logger.debug("Converting %d-byte payload as %s", len(data), fmt)

        if fmt == DataFormat.INDEX_LITE:
            return self.convert_index_lite(data, player, captured_at)
        if fmt == DataFormat.LEGACY_INDEX_LITE:
            return self.convert_legacy_index_lite(data, player, captured_at)
        if fmt == DataFormat.RUNE_METRICS:
            return self.convert_rune_metrics(data, player, captured_at)
        return self.convert_adventurers_log(data)

    def lite_format_for(self, ruleset: Optional[Ruleset] = None) -> DataFormat:
        """The index_lite format matching ``ruleset`` (config default if omitted)."""
        ruleset = ruleset or self.config.default_ruleset
        return DataFormat.LEGACY_INDEX_LITE if ruleset == Ruleset.LEGACY else DataFormat.INDEX_LITE
