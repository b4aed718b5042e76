"""SQLAlchemy models backing the key-value store."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from .session import Base


class KVEntry(Base):
    """One namespace (or flag) of the backing store: a string key and its serialized value."""

    __tablename__ = "kv_entries"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    # UTF-8 size of key + value, summed for the quota
    size = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
