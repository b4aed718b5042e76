"""
Configuration helpers for the ERP backend.

Settings are read from environment variables once and cached, so that
repositories/services never fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    storage_path: str
    database_url: str
    storage_quota_bytes: int
    record_id_prefix: str
    default_page_size: int
    max_page_size: int
    seed_on_startup: bool
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "file").strip().lower(),
        storage_path=os.getenv("STORAGE_PATH", "data/erp-store.json"),
        database_url=os.getenv("DATABASE_URL", ""),
        # same budget a browser grants localStorage
        storage_quota_bytes=_int(os.getenv("STORAGE_QUOTA_BYTES", "5242880"), 5242880),
        record_id_prefix=(os.getenv("RECORD_ID_PREFIX") or "ms").strip(),
        default_page_size=max(1, _int(os.getenv("DEFAULT_PAGE_SIZE", "25"), 25)),
        max_page_size=max(1, _int(os.getenv("MAX_PAGE_SIZE", "100"), 100)),
        seed_on_startup=_bool(os.getenv("SEED_ON_STARTUP"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
