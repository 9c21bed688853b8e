from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)

STORAGE_SESSION = "session"
STORAGE_DATABASE = "database"


@dataclass(frozen=True)
class Settings:
    storage_backend: str
    database_url: Optional[str]
    db_pool_min_size: int
    db_pool_max_size: int
    session_cookie_name: str
    session_cookie_secure: bool
    session_ttl_minutes: int
    log_level: str

    @property
    def uses_database(self) -> bool:
        return self.storage_backend == STORAGE_DATABASE

    @property
    def session_ttl_seconds(self) -> Optional[int]:
        if self.session_ttl_minutes <= 0:
            return None
        return self.session_ttl_minutes * 60


def _int_env(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        logger.warning("Invalid integer env value %s='%s', using default=%s", name, raw_value, default)
        return default


@lru_cache
def get_settings() -> Settings:
    database_url = os.getenv("DATABASE_URL") or None
    default_backend = STORAGE_DATABASE if database_url else STORAGE_SESSION
    storage_backend = os.getenv("STORAGE_BACKEND", default_backend).strip().lower()
    if storage_backend not in {STORAGE_SESSION, STORAGE_DATABASE}:
        logger.warning(
            "Unknown STORAGE_BACKEND '%s'; falling back to %s", storage_backend, default_backend
        )
        storage_backend = default_backend
    if storage_backend == STORAGE_DATABASE and not database_url:
        database_url = f"postgresql:///{os.getenv('DATABASE_NAME', 'todos')}"
    environment = os.getenv("ENVIRONMENT", "").lower()

    return Settings(
        storage_backend=storage_backend,
        database_url=database_url,
        db_pool_min_size=_int_env("DB_POOL_MIN_SIZE", 1),
        db_pool_max_size=_int_env("DB_POOL_MAX_SIZE", 5),
        session_cookie_name=os.getenv("SESSION_COOKIE_NAME", "todo_session"),
        session_cookie_secure=environment == "production",
        session_ttl_minutes=_int_env("SESSION_TTL_MINUTES", 1440),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
