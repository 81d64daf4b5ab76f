"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``RS_LOOKUP_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The decoders themselves only need a ``ParsingConfig``; library callers that
never touch TOML can construct one directly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from rs_lookup.catalog.ruleset import Ruleset
from rs_lookup.utils.time_utils import DEFAULT_ACTIVITY_DATE_FORMATS

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class ParsingConfig(BaseModel):
    """Decoder settings.

    ``source_timezone`` applies to RuneMetrics activity dates, which are
    published without an offset.
    """

    model_config = ConfigDict(frozen=True)

    default_ruleset: Ruleset = Ruleset.MODERN
    source_timezone: str = "UTC"
    activity_date_formats: tuple[str, ...] = DEFAULT_ACTIVITY_DATE_FORMATS

    @field_validator("source_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone '{v}'. Use an IANA name such as 'Europe/London'.") from None
        return v

    @field_validator("activity_date_formats")
    @classmethod
    def validate_formats(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("activity_date_formats must contain at least one format.")
        return v


class AppConfig(BaseModel):
    """Complete application configuration."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    parsing: ParsingConfig = ParsingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    load_dotenv(dotenv_path=root / ".env", override=False)

    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply RS_LOOKUP_* env vars to the raw config dict.

    Supported overrides:
      RS_LOOKUP_LOG_LEVEL  → raw["logging"]["level"]
      RS_LOOKUP_RULESET    → raw["parsing"]["default_ruleset"]
      RS_LOOKUP_SOURCE_TZ  → raw["parsing"]["source_timezone"]
      RS_LOOKUP_DEBUG      → raw["debug"]
    """
    if log_level := os.environ.get("RS_LOOKUP_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if ruleset := os.environ.get("RS_LOOKUP_RULESET"):
        raw.setdefault("parsing", {})["default_ruleset"] = ruleset

    if source_tz := os.environ.get("RS_LOOKUP_SOURCE_TZ"):
        raw.setdefault("parsing", {})["source_timezone"] = source_tz

    if debug := os.environ.get("RS_LOOKUP_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        parsing=ParsingConfig(**raw.get("parsing", {})),
        debug=raw.get("debug", False),
    )
