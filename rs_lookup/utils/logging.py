"""
Log output for the ``rs-lookup`` CLI.

The decoders only ever log through ``logging.getLogger(__name__)``: skipped
unknown ordinals at DEBUG, merge prepend counts at INFO. Where those records
end up is decided here, once, by the CLI via ``configure_logging``. Library
callers embedding the converter wire up their own handlers instead.

Records always go to stderr; stdout is reserved for the JSON a command
prints. With ``[logging] json_format = true`` each record is one line::

    {"ts": "2026-10-19T13:14:00Z", "level": "INFO", "logger": "rs_lookup.merger", "msg": "merge_feeds: prepending 2 new items"}
"""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rs_lookup.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_RESERVED_RECORD_KEYS = frozenset(vars(logging.makeLogRecord({})))


class _JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Anything passed through ``extra=`` (e.g. ``player``) lands next to
    ``ts``/``level``/``logger``/``msg``; tracebacks go under ``exc``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LOG_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        for key, val in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS and not key.startswith("_"):
                payload[key] = val
        return json.dumps(payload, default=str)


def configure_logging(config: "LoggingConfig") -> None:
    """Route all ``rs_lookup`` records according to ``config``.

    Replaces any root handlers already installed, so calling it again (as
    each CLI command does) never duplicates output. A ``log_file`` gets
    the same records and format as stderr.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)

    formatter: logging.Formatter
    if config.json_format:
        formatter = _JsonFormatter()
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        # LOG_DATE_FORMAT ends in Z, so asctime must be UTC too
        formatter.converter = time.gmtime

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    handlers.append(console)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
