"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Global application settings loaded from environment variables or .env files."""

    database_path: Path = Field(
        default=Path("./data/grocer.db"),
        description="SQLite file backing the key-value store.",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    currency_symbol: str = Field(
        default="₹",
        description="Symbol prefixed to prices in bills and receipts.",
    )

    model_config = ConfigDict(frozen=True)


# Environment variable -> (settings field, converter)
ENV_FIELDS: dict[str, tuple[str, Callable[[str], object]]] = {
    "GROCER_DATABASE_PATH": ("database_path", Path),
    "GROCER_LOG_LEVEL": ("log_level", str.upper),
    "GROCER_LOG_FORMAT": ("log_format", str.lower),
    "GROCER_CURRENCY": ("currency_symbol", str),
}


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def _parse_env_file(path: Path) -> dict[str, str]:
    """Read ``KEY=value`` lines, skipping comments and tolerating ``export``."""

    if not path.is_file():
        return {}
    payload: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):]
        key, raw_value = line.split("=", 1)
        payload[key.strip()] = _unquote(raw_value.strip())
    return payload


def _load_from_env() -> dict[str, object]:
    """Collect overrides from env vars; later .env files win over earlier ones."""

    file_values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        file_values.update(_parse_env_file(candidate))

    payload: dict[str, object] = {}
    for env_key, (field_name, convert) in ENV_FIELDS.items():
        raw: Optional[str] = os.environ.get(env_key) or file_values.get(env_key)
        if raw:
            payload[field_name] = convert(raw)
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
