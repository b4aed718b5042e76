"""
Generic record store bound to one backing-store namespace.

Each operation loads the namespace array, works on it and (for writes)
persists the whole array back. Nothing is cached between calls, and there is
no locking: two writers racing on the same namespace resolve as
last-write-wins for the entire array.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Generic, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from erp.domain.entities import RESERVED_FIELDS, BaseEntity
from erp.domain.listing import ListQuery, Page, matches, newest_first, paginate

from .backing_store import KeyValueStore
from .serialization import StorageFullError, load_collection, remove_collection, save_collection

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseEntity)

__all__ = ["RecordNotFoundError", "RecordStore", "StorageFullError", "now_iso"]


class RecordNotFoundError(LookupError):
    """Raised when get/update reference an id absent from the namespace."""

    def __init__(self, namespace: str, record_id: str):
        super().__init__(f"Item with id {record_id} not found in {namespace}")
        self.namespace = namespace
        self.record_id = record_id


def now_iso() -> str:
    """Current UTC time as ``2024-01-01T00:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RecordStore(Generic[T]):
    """Typed CRUD, pagination and search over one namespace."""

    def __init__(
        self,
        namespace: str,
        model: Type[T],
        store: Optional[KeyValueStore],
        *,
        id_prefix: str = "ms",
        max_page_size: int = 100,
        clock: Callable[[], str] = now_iso,
    ) -> None:
        self.namespace = namespace
        self.model = model
        self.store = store
        self.id_prefix = id_prefix
        self.max_page_size = max_page_size
        self._clock = clock

    # -------------------------- reads --------------------------
    def list(self, query: ListQuery | None = None) -> Page[T]:
        query = query or ListQuery()
        records = [r for r in self._load() if matches(r, query.text)]
        page_size = min(query.page_size, self.max_page_size)
        page = paginate(newest_first(records), query.page, page_size)
        return Page(data=self._to_entities(page.data), total=page.total)

    def get_all(self) -> list[T]:
        return self._to_entities(newest_first(self._load()))

    def get(self, record_id: str) -> T:
        for record in self._load():
            if record.get("id") == record_id:
                return self._read(record)
        raise RecordNotFoundError(self.namespace, record_id)

    # -------------------------- writes --------------------------
    def create(self, payload: Mapping[str, Any] | BaseModel) -> str:
        records = self._load()
        record_id = self._next_id(records)
        now = self._clock()
        doc = self._normalize(payload)
        doc.update({"id": record_id, "createdAt": now, "updatedAt": now})
        entity = self.model.model_validate(doc)
        records.append(entity.to_record())
        save_collection(self.store, self.namespace, records)
        logger.debug("Created %s in %s", record_id, self.namespace)
        return record_id

    def update(self, record_id: str, patch: Mapping[str, Any] | BaseModel) -> None:
        records = self._load()
        for index, current in enumerate(records):
            if current.get("id") == record_id:
                break
        else:
            raise RecordNotFoundError(self.namespace, record_id)
        patch_doc = self._normalize(patch)
        merged = {**current, **patch_doc}
        merged.update(
            {
                "id": current["id"],
                "createdAt": current.get("createdAt", merged.get("updatedAt")),
                "updatedAt": self._clock(),
            }
        )
        records[index] = self._validate_merged(merged, supplied=patch_doc).to_record()
        save_collection(self.store, self.namespace, records)

    def deactivate(self, record_id: str) -> None:
        """Soft delete: records are never removed, only switched off."""
        self.update(record_id, {"active": False})

    def clear(self) -> None:
        remove_collection(self.store, self.namespace)

    # -------------------------- helpers --------------------------
    def _load(self) -> list[dict[str, Any]]:
        return load_collection(self.store, self.namespace)

    def _next_id(self, records: list[dict[str, Any]]) -> str:
        taken = {r.get("id") for r in records}
        stamp = time.time_ns()
        while f"{self.id_prefix}_{stamp}" in taken:
            stamp += 1
        return f"{self.id_prefix}_{stamp}"

    def _normalize(self, payload: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
        """Wire-keyed copy of a payload/patch without the store-owned fields."""
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(by_alias=True, exclude_unset=True, mode="json")
        doc = {self.model.wire_name(key): value for key, value in payload.items()}
        for key in RESERVED_FIELDS:
            doc.pop(key, None)
        return doc

    def _read(self, record: dict[str, Any]) -> T:
        """
        Entity view of a stored record.

        Only the base fields are required of data already in the store. A record
        whose type-specific fields no longer fit the model (written by an older
        version, or by hand) comes back as a plain ``BaseEntity`` with every
        stored key kept as an extra.
        """
        try:
            return self.model.model_validate(record)
        except ValidationError as exc:
            logger.warning("Stored record %s in %s does not match %s: %s", record.get("id"), self.namespace, self.model.__name__, exc)
            return BaseEntity.model_validate(record)  # type: ignore[return-value]

    def _validate_merged(self, merged: dict[str, Any], supplied: Mapping[str, Any]) -> BaseEntity:
        """Strict on the fields the patch supplies, lenient on what was already stored."""
        try:
            return self.model.model_validate(merged)
        except ValidationError as exc:
            if any(err["loc"] and err["loc"][0] in supplied for err in exc.errors()):
                raise
            logger.warning("Updating %s in %s over stored fields that do not match %s", merged.get("id"), self.namespace, self.model.__name__)
            return BaseEntity.model_validate(merged)

    def _to_entities(self, records) -> list[T]:
        entities: list[T] = []
        for record in records:
            try:
                entities.append(self._read(record))
            except ValidationError as exc:
                logger.warning("Skipping record %s in %s without valid base fields: %s", record.get("id"), self.namespace, exc)
        return entities
