"""
Conversion error taxonomy.

Every failure raised by a decoder derives from ``DataConversionError`` so
callers can treat "this response is unusable" with a single ``except``.
None of these are retried inside the library — retrying belongs to whatever
fetched the payload.

Unknown skill/activity ordinals are NOT errors; decoders skip them silently.
"""

from __future__ import annotations

from typing import Iterable, Optional


class DataConversionError(ValueError):
    """Base class for all payload conversion failures."""


class MalformedInputError(DataConversionError):
    """The payload does not match the schema of the selected decoder.

    Attributes:
        line_no: 1-based line of the offending record, when the format is
            line-oriented; ``None`` otherwise.
    """

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"{message} (line {line_no})"
        super().__init__(message)


class EmptyResultError(DataConversionError):
    """The payload was well-formed but yielded no usable entries."""


class RemoteError(DataConversionError):
    """The upstream API embedded an explicit error in its response.

    Usually means the player does not exist or has a private profile.

    Attributes:
        remote_message: The error value reported upstream.
    """

    def __init__(self, remote_message: str) -> None:
        self.remote_message = remote_message
        super().__init__(
            f"Upstream API returned an error: '{remote_message}'. "
            "The player might not exist or their profile is private."
        )


class IncompleteSnapshotError(LookupError):
    """A derived metric needs skills that are absent from the snapshot.

    Attributes:
        missing: Slugs of the skills that were required but not found.
    """

    def __init__(self, metric: str, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            f"Cannot compute {metric}: snapshot is missing {', '.join(self.missing)}."
        )
