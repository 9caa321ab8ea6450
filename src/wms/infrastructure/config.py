"""Centralised configuration.

All settings come from environment variables (a local ``.env`` file is
loaded first) and are exposed through a single cached :class:`Settings`
instance returned by :func:`get_settings`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///./warehouse.db"
BACKENDS = ("orm", "sql")


def _truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Settings container populated from environment variables."""

    database_url: str
    person_backend: str
    log_level: str
    sql_echo: bool

    @classmethod
    def from_env(cls) -> Settings:
        backend = os.getenv("WMS_PERSON_BACKEND", "orm").strip().lower()
        if backend not in BACKENDS:
            raise ValueError(
                f"WMS_PERSON_BACKEND must be one of {', '.join(BACKENDS)}, got {backend!r}"
            )
        return cls(
            database_url=os.getenv("WMS_DATABASE_URL", DEFAULT_DATABASE_URL),
            person_backend=backend,
            log_level=os.getenv("WMS_LOG_LEVEL", "INFO").upper(),
            sql_echo=_truthy(os.getenv("WMS_SQL_ECHO")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    return Settings.from_env()
