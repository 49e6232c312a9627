"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from stringmask.models.mask import MaskOptions

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings(BaseModel):
    """Command-line defaults loaded from environment variables or .env files."""

    reverse: bool = Field(default=False, description="Process values right to left by default.")
    use_defaults: Optional[bool] = Field(
        default=None,
        description="Backfill unmet required tokens (follows reverse when unset).",
    )
    log_level: str = Field(default="WARNING", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )

    model_config = ConfigDict(frozen=True)

    def mask_options(self) -> MaskOptions:
        return MaskOptions(reverse=self.reverse, use_defaults=self.use_defaults)


def _coerce_bool(value: str) -> Optional[bool]:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return None


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip()
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    if (reverse := _env("STRINGMASK_REVERSE")) and (parsed := _coerce_bool(reverse)) is not None:
        payload["reverse"] = parsed
    if (use_defaults := _env("STRINGMASK_USE_DEFAULTS")) and (
        parsed := _coerce_bool(use_defaults)
    ) is not None:
        payload["use_defaults"] = parsed
    if (log_level := _env("STRINGMASK_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("STRINGMASK_LOG_FORMAT")):
        payload["log_format"] = log_format
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
