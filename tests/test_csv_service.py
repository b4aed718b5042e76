from __future__ import annotations

import csv
import io
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from erp.domain.entities import Currency, Supplier  # noqa: E402
from erp.repositories.backing_store import MemoryKeyValueStore  # noqa: E402
from erp.repositories.record_store import RecordStore  # noqa: E402
from erp.services.csv_service import csv_template, export_csv, import_csv  # noqa: E402


def test_template_lists_caller_columns():
    header = csv_template(Currency).strip().split(",")
    assert header == ["code", "name", "active", "symbol", "rateToIDR"]


def test_export_then_import_into_another_namespace():
    backing = MemoryKeyValueStore()
    source = RecordStore("erp.master.supplier", Supplier, backing)
    source.create({"code": "SUP001", "name": "PT Supplier One", "city": "Jakarta", "ratingAvg": 4.5})
    source.create({"code": "SUP002", "name": "CV Supplier Two", "active": False})

    text = export_csv(source)
    rows = list(csv.DictReader(io.StringIO(text)))
    assert {r["code"] for r in rows} == {"SUP001", "SUP002"}
    assert {r["active"] for r in rows} == {"true", "false"}

    target = RecordStore("erp.master.supplier-copy", Supplier, backing)
    result = import_csv(target, text)
    assert result.imported == 2
    assert result.errors == []
    copies = {s.code: s for s in target.get_all()}
    assert copies["SUP001"].rating_avg == 4.5
    assert copies["SUP002"].active is False
    # imported rows get fresh ids
    assert {s.id for s in copies.values()}.isdisjoint({s.id for s in source.get_all()})


def test_import_reports_invalid_rows_and_keeps_valid_ones():
    store = RecordStore("erp.master.currency", Currency, MemoryKeyValueStore())
    text = "code,name,symbol,rateToIDR\nIDR,Rupiah,Rp,1\nUSD,Dollar,$,lots\n,,,\n"
    result = import_csv(store, text)
    assert result.imported == 1
    assert len(result.errors) == 1
    assert result.errors[0].startswith("Row 2:")
    assert [c.code for c in store.get_all()] == ["IDR"]
