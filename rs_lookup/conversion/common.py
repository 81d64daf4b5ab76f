"""Result keys and helpers shared by the decoders."""

from __future__ import annotations

from typing import Union

from rs_lookup.exceptions import MalformedInputError

KEY_REAL_NAME = "real_name"
KEY_SKILL_HIGHSCORE = "skill_highscore"
KEY_LEGACY_SKILL_HIGHSCORE = "legacy_skill_highscore"
KEY_ACTIVITY_HIGHSCORE = "activity_highscore"
KEY_LEGACY_ACTIVITY_HIGHSCORE = "legacy_activity_highscore"
KEY_ACTIVITY_FEED = "activity_feed"

Payload = Union[str, bytes]


def as_text(data: Payload) -> str:
    """Return ``data`` as text, decoding bytes as UTF-8.

    Raises:
        MalformedInputError: If ``data`` is bytes that are not valid UTF-8.
    """
    if isinstance(data, bytes):
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedInputError(f"Payload is not valid UTF-8: {exc}") from exc
    return data
