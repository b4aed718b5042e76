"""One record store per registered namespace, sharing a single backing store."""
from __future__ import annotations

from typing import Iterable, Optional

from erp.core.config import Settings, get_settings
from erp.domain.namespaces import ALL_NAMESPACES, Namespace

from .backing_store import KeyValueStore
from .record_store import RecordStore


class StoreRegistry:
    def __init__(
        self,
        backing: Optional[KeyValueStore],
        namespaces: Iterable[Namespace] = ALL_NAMESPACES,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.backing = backing
        self.namespaces = {ns.slug: ns for ns in namespaces}
        self._stores: dict[str, RecordStore] = {
            ns.key: RecordStore(
                ns.key,
                ns.model,
                backing,
                id_prefix=settings.record_id_prefix,
                max_page_size=settings.max_page_size,
            )
            for ns in self.namespaces.values()
        }

    def by_slug(self, slug: str) -> RecordStore | None:
        ns = self.namespaces.get((slug or "").strip().lower())
        return self._stores.get(ns.key) if ns else None

    def by_key(self, key: str) -> RecordStore | None:
        return self._stores.get(key)

    def slugs(self) -> list[str]:
        return list(self.namespaces)
