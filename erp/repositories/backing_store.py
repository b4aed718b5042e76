"""
Key-value backing store contract.

A backing store is a string-keyed, string-valued persistent medium with a
finite capacity and no atomic multi-key operations. It may be missing
altogether (``open_backing_store`` returns ``None``), may refuse a write
because it is full (``QuotaExceededError``) or may fail at any call because the
medium went away (``BackingStoreUnavailableError``).
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from erp.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class BackingStoreError(Exception):
    """Base exception for backing store failures."""


class QuotaExceededError(BackingStoreError):
    """Raised when a write would take the store over its capacity."""

    def __init__(self, key: str, requested: int, quota: int):
        super().__init__(f"Writing {key!r} needs {requested} bytes, quota is {quota}")
        self.key = key
        self.requested = requested
        self.quota = quota


class BackingStoreUnavailableError(BackingStoreError):
    """Raised when the underlying medium cannot be reached."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


def entry_size(key: str, value: str) -> int:
    """UTF-8 bytes charged against the quota for one entry."""
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))


class MemoryKeyValueStore:
    """Process-local store; contents live as long as the instance."""

    def __init__(self, quota_bytes: int | None = None, initial: dict[str, str] | None = None) -> None:
        self.quota_bytes = quota_bytes
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = self.usage() - (entry_size(key, self._data[key]) if key in self._data else 0)
            requested = used + entry_size(key, value)
            if requested > self.quota_bytes:
                raise QuotaExceededError(key, requested, self.quota_bytes)
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)

    def usage(self) -> int:
        return sum(entry_size(k, v) for k, v in self._data.items())


def open_backing_store(settings: Settings | None = None) -> Optional[KeyValueStore]:
    """
    Build the backing store selected by STORAGE_BACKEND.

    Returns None when the medium cannot be opened; record stores then degrade
    to empty reads and dropped writes.
    """
    settings = settings or get_settings()
    quota = settings.storage_quota_bytes if settings.storage_quota_bytes > 0 else None
    backend = settings.storage_backend
    try:
        if backend == "memory":
            return MemoryKeyValueStore(quota_bytes=quota)
        if backend == "file":
            from .json_storage import JsonFileKeyValueStore

            return JsonFileKeyValueStore(settings.storage_path, quota_bytes=quota)
        if backend == "sql":
            from .sql_store import SQLKeyValueStore

            return SQLKeyValueStore(settings.database_url, quota_bytes=quota)
    except (BackingStoreUnavailableError, RuntimeError) as exc:
        logger.error("Backing store %r unavailable: %s", backend, exc)
        return None
    logger.error("Unknown STORAGE_BACKEND %r; running without a backing store.", backend)
    return None
