"""
JSON-file backing store.

The whole store is one JSON document on disk mapping key -> string value.
Every ``set``/``remove`` rewrites the document through a temporary file and
``os.replace`` so a crash never leaves a half-written file behind.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from .backing_store import BackingStoreUnavailableError, QuotaExceededError, entry_size

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    def __init__(self, path: str | Path, quota_bytes: int | None = None) -> None:
        self.path = Path(path)
        self.quota_bytes = quota_bytes
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise BackingStoreUnavailableError(f"Cannot create {self.path.parent}: {exc}") from exc

    def load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as exc:
            raise BackingStoreUnavailableError(f"Cannot read {self.path}: {exc}") from exc
        except ValueError:
            self._quarantine()
            return {}
        if not isinstance(data, dict):
            self._quarantine()
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def save(self, data: dict[str, str]) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            raise BackingStoreUnavailableError(f"Cannot write {self.path}: {exc}") from exc

    def _quarantine(self) -> None:
        target = self.path.with_name(self.path.name + ".corrupt")
        logger.error("Store document %s is not a JSON object; moving it to %s", self.path, target)
        try:
            os.replace(self.path, target)
        except OSError as exc:
            raise BackingStoreUnavailableError(f"Cannot move corrupt {self.path}: {exc}") from exc

    def get(self, key: str) -> Optional[str]:
        return self.load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self.load()
        if self.quota_bytes is not None:
            used = sum(entry_size(k, v) for k, v in data.items() if k != key)
            requested = used + entry_size(key, value)
            if requested > self.quota_bytes:
                raise QuotaExceededError(key, requested, self.quota_bytes)
        data[key] = value
        self.save(data)

    def remove(self, key: str) -> None:
        data = self.load()
        if key in data:
            del data[key]
            self.save(data)

    def keys(self) -> list[str]:
        return sorted(self.load())
