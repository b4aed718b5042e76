"""CSV export/import/template for a record store."""

from __future__ import annotations

import csv
import io
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Type

from pydantic import ValidationError

from erp.domain.entities import BaseEntity
from erp.domain.listing import ListQuery
from erp.repositories.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    imported: int = 0
    errors: list[str] = field(default_factory=list)


def _cell(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _parse_cell(value: str) -> Any:
    text = value.strip()
    if text[:1] in ("[", "{"):
        try:
            return json.loads(text)
        except ValueError:
            return text
    return text


def export_csv(store: RecordStore, query: ListQuery | None = None) -> str:
    """Serialize the records of ``store`` (all of them, or one list page) to CSV."""
    records = [e.to_record() for e in (store.list(query).data if query else store.get_all())]
    headers = list(store.model.wire_fields())
    for record in records:
        headers.extend(k for k in record if k not in headers)
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=headers, extrasaction="ignore", lineterminator="\n")
    writer.writeheader()
    for record in records:
        writer.writerow({k: _cell(v) for k, v in record.items()})
    return buf.getvalue()


def csv_template(model: Type[BaseEntity]) -> str:
    """Header row with the caller-supplied columns of ``model``."""
    headers = [name for name in model.wire_fields() if name not in ("id", "createdAt", "updatedAt")]
    return ",".join(headers) + "\n"


def import_csv(store: RecordStore, text: str) -> ImportResult:
    """
    Create one record per CSV row. Invalid rows are reported and skipped; a
    full store stops the import and propagates StorageFullError.
    """
    result = ImportResult()
    reader = csv.DictReader(io.StringIO(text))
    for index, row in enumerate(reader, start=1):
        payload = {k.strip(): _parse_cell(v) for k, v in row.items() if k and v is not None and v.strip() != ""}
        if not payload:
            continue
        try:
            store.create(payload)
        except ValidationError as exc:
            result.errors.append(f"Row {index}: {exc.error_count()} invalid field(s): " + "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            ))
            continue
        result.imported += 1
    if result.errors:
        logger.warning("CSV import into %s: %d rows rejected", store.namespace, len(result.errors))
    return result
