"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))

DEFAULT_CATALOG_URL = (
    "https://raw.githubusercontent.com/ryohidaka/saizeriya-menus/main/saizeriya.json"
)


class Settings(BaseModel):
    """Global settings loaded from environment variables or .env files."""

    catalog_source: str = Field(
        default="bundled",
        description="Catalog provider to use (bundled/file/remote).",
    )
    catalog_path: Optional[Path] = Field(
        default=None,
        description="JSON catalog location used by the file provider and the sync command.",
    )
    catalog_url: str = Field(
        default=DEFAULT_CATALOG_URL,
        description="Upstream catalog JSON URL used by the remote provider.",
    )
    http_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for the remote catalog.",
    )
    default_budget: int = Field(
        default=1000,
        ge=0,
        description="Budget used by random selections when the caller omits one.",
    )
    allow_duplicates: bool = Field(
        default=True,
        description="Whether random selections may repeat a menu when the caller omits the flag.",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


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
    if (source := _env("SAIZERIYA_CATALOG_SOURCE")):
        payload["catalog_source"] = source.strip().lower()
    if (catalog_path := _env("SAIZERIYA_CATALOG_PATH")):
        payload["catalog_path"] = Path(catalog_path)
    if (catalog_url := _env("SAIZERIYA_CATALOG_URL")):
        payload["catalog_url"] = catalog_url
    if (http_timeout := _env("SAIZERIYA_HTTP_TIMEOUT")):
        try:
            payload["http_timeout"] = float(http_timeout)
        except ValueError:
            pass
    if (default_budget := _env("SAIZERIYA_DEFAULT_BUDGET")):
        try:
            budget = int(default_budget)
        except ValueError:
            budget = -1
        if budget >= 0:
            payload["default_budget"] = budget
    if (allow_duplicates := _env("SAIZERIYA_ALLOW_DUPLICATES")):
        payload["allow_duplicates"] = _coerce_bool(allow_duplicates)
    if (log_level := _env("SAIZERIYA_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("SAIZERIYA_LOG_FORMAT")):
        payload["log_format"] = log_format
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
