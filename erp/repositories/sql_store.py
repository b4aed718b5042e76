"""Key-value backing store on a single SQLAlchemy table."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError

from erp.db.models import KVEntry
from erp.db.session import create_all, get_session

from .backing_store import BackingStoreUnavailableError, QuotaExceededError, entry_size

logger = logging.getLogger(__name__)


class SQLKeyValueStore:
    """get/set/remove helpers wrapping the SQLAlchemy session."""

    def __init__(self, url: str | None = None, quota_bytes: int | None = None, create_schema: bool = True) -> None:
        self.url = (url or "").strip() or None
        self.quota_bytes = quota_bytes
        if create_schema:
            try:
                create_all(self.url)
            except SQLAlchemyError as exc:
                raise BackingStoreUnavailableError(f"Cannot prepare kv_entries: {exc}") from exc

    def get(self, key: str) -> Optional[str]:
        try:
            with get_session(self.url) as session:
                entry = session.get(KVEntry, key)
                return entry.value if entry else None
        except SQLAlchemyError as exc:
            raise BackingStoreUnavailableError(str(exc)) from exc

    def set(self, key: str, value: str) -> None:
        try:
            size = entry_size(key, value)
            with get_session(self.url) as session:
                if self.quota_bytes is not None:
                    stmt = select(func.coalesce(func.sum(KVEntry.size), 0)).where(KVEntry.key != key)
                    used = int(session.execute(stmt).scalar_one())
                    if used + size > self.quota_bytes:
                        raise QuotaExceededError(key, used + size, self.quota_bytes)
                entry = session.get(KVEntry, key)
                now = datetime.now(timezone.utc)
                if not entry:
                    session.add(KVEntry(key=key, value=value, size=size, updated_at=now))
                else:
                    entry.value = value
                    entry.size = size
                    entry.updated_at = now
                session.commit()
        except SQLAlchemyError as exc:
            raise BackingStoreUnavailableError(str(exc)) from exc

    def remove(self, key: str) -> None:
        try:
            with get_session(self.url) as session:
                session.execute(delete(KVEntry).where(KVEntry.key == key))
                session.commit()
        except SQLAlchemyError as exc:
            raise BackingStoreUnavailableError(str(exc)) from exc

    def keys(self) -> list[str]:
        try:
            with get_session(self.url) as session:
                return list(session.execute(select(KVEntry.key).order_by(KVEntry.key)).scalars().all())
        except SQLAlchemyError as exc:
            raise BackingStoreUnavailableError(str(exc)) from exc
