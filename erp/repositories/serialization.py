"""
Namespace (de)serialization with recovery.

Reads never fail: a missing store, an unreachable store, unparseable JSON or
JSON that is not an array all come back as an empty collection. Corrupted
values are removed so the broken parse is not retried on every read.

Writes are tiered: a full store is surfaced (the user can free space and
retry), an unreachable store is logged and the write dropped.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .backing_store import BackingStoreUnavailableError, KeyValueStore, QuotaExceededError

logger = logging.getLogger(__name__)


class StorageFullError(Exception):
    """The backing store refused a write for lack of space."""

    def __init__(self, namespace: str):
        super().__init__("Storage is full. Clear some data and try again.")
        self.namespace = namespace


def load_collection(store: Optional[KeyValueStore], namespace: str) -> list[dict[str, Any]]:
    if store is None:
        logger.warning("No backing store; reading %s as empty.", namespace)
        return []
    try:
        raw = store.get(namespace)
    except BackingStoreUnavailableError as exc:
        logger.warning("Backing store unavailable reading %s: %s", namespace, exc)
        return []
    if raw is None or raw == "":
        return []
    try:
        data = json.loads(raw)
    except ValueError as exc:
        logger.error("Malformed JSON under %s (%s); discarding it.", namespace, exc)
        _purge(store, namespace)
        return []
    if not isinstance(data, list):
        logger.error("Expected a JSON array under %s, got %s; discarding it.", namespace, type(data).__name__)
        _purge(store, namespace)
        return []
    records = [item for item in data if isinstance(item, dict)]
    if len(records) != len(data):
        logger.warning("Dropped %d non-object entries from %s.", len(data) - len(records), namespace)
    return records


def save_collection(store: Optional[KeyValueStore], namespace: str, records: list[dict[str, Any]]) -> bool:
    """Persist the whole array. Returns False when the write was dropped."""
    if store is None:
        logger.warning("No backing store; dropping write to %s.", namespace)
        return False
    payload = json.dumps(records, ensure_ascii=False, separators=(",", ":"))
    try:
        store.set(namespace, payload)
    except QuotaExceededError as exc:
        logger.error("Quota exceeded writing %s: %s", namespace, exc)
        raise StorageFullError(namespace) from exc
    except BackingStoreUnavailableError as exc:
        logger.warning("Backing store unavailable; dropping write to %s: %s", namespace, exc)
        return False
    return True


def remove_collection(store: Optional[KeyValueStore], namespace: str) -> None:
    if store is None:
        return
    _purge(store, namespace)


def _purge(store: KeyValueStore, namespace: str) -> None:
    try:
        store.remove(namespace)
    except BackingStoreUnavailableError as exc:
        logger.warning("Could not remove %s: %s", namespace, exc)
