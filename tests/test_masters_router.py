"""
HTTP surface over the record stores, driven through FastAPI's TestClient.
"""
from __future__ import annotations

import asyncio
import dataclasses
import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from erp.app import create_app  # noqa: E402
from erp.core.config import get_settings  # noqa: E402
from erp.repositories.backing_store import MemoryKeyValueStore  # noqa: E402
from erp.routers import masters  # noqa: E402
from erp.services.csv_service import ImportResult  # noqa: E402


def _settings(**overrides):
    return dataclasses.replace(get_settings(), storage_backend="memory", **overrides)


@pytest.fixture()
def client():
    app = create_app(_settings(seed_on_startup=False), backing=MemoryKeyValueStore(quota_bytes=2000))
    with TestClient(app) as c:
        yield c


def test_create_list_get_update_flow(client):
    resp = client.post("/masters/category", json={"code": "PAINT", "name": "Paint", "active": True})
    assert resp.status_code == 201
    record_id = resp.json()["id"]

    listing = client.get("/masters/category", params={"page": 1, "page_size": 10}).json()
    assert listing["total"] == 1
    assert listing["data"][0]["code"] == "PAINT"
    assert "createdAt" in listing["data"][0]

    assert client.patch(f"/masters/category/{record_id}", json={"name": "Paints"}).status_code == 204
    assert client.get(f"/masters/category/{record_id}").json()["name"] == "Paints"

    assert client.post(f"/masters/category/{record_id}/deactivate").status_code == 204
    assert client.get(f"/masters/category/{record_id}").json()["active"] is False


def test_search_parameter(client):
    client.post("/masters/category", json={"code": "PAINT", "name": "Paint"})
    client.post("/masters/category", json={"code": "TOOLS", "name": "Tools"})
    body = client.get("/masters/category", params={"q": "pain"}).json()
    assert body["total"] == 1
    assert body["data"][0]["code"] == "PAINT"


def test_unknown_ids_and_entities_are_404(client):
    assert client.get("/masters/category/missing-id").status_code == 404
    assert client.patch("/masters/category/missing-id", json={"name": "x"}).status_code == 404
    assert client.get("/masters/not-an-entity").status_code == 404


def test_invalid_payload_is_422(client):
    resp = client.post("/masters/currency", json={"code": "USD", "name": "US Dollar"})
    assert resp.status_code == 422


def test_storage_full_is_507(client):
    resp = client.post("/masters/category", json={"code": "BIG", "name": "Big", "description": "x" * 5000})
    assert resp.status_code == 507
    assert "full" in resp.json()["detail"].lower()


def test_csv_endpoints(client):
    template = client.get("/masters/category/template.csv")
    assert template.status_code == 200
    assert template.text.startswith("code,name,active")

    resp = client.post("/masters/category/import", content="code,name\nPAINT,Paint\nTOOLS,Tools\n")
    assert resp.json() == {"imported": 2, "errors": []}

    exported = client.get("/masters/category/export.csv")
    assert exported.status_code == 200
    assert "PAINT" in exported.text and "TOOLS" in exported.text


def test_startup_seeds_master_data():
    backing = MemoryKeyValueStore()
    app = create_app(_settings(seed_on_startup=True), backing=backing)
    with TestClient(app) as c:
        assert c.get("/masters/currency").json()["total"] == 2
        assert "category" in c.get("/masters").json()["entities"]
    assert backing.get("erp.master.seeded") == "true"


def test_app_without_backing_store_degrades_quietly():
    app = create_app(_settings(seed_on_startup=True), backing=None)
    with TestClient(app) as c:
        assert c.get("/health").json()["available"] is False
        assert c.post("/masters/category", json={"code": "A", "name": "A"}).status_code == 201
        assert c.get("/masters/category").json() == {"data": [], "total": 0}


def test_stored_record_missing_type_fields_over_http():
    legacy = {
        "id": "ms_1", "code": "USD", "name": "US Dollar", "active": True,
        "createdAt": "2024-01-01T00:00:00.000Z", "updatedAt": "2024-01-01T00:00:00.000Z",
        "rateToIDR": 15000,
    }
    backing = MemoryKeyValueStore(initial={"erp.master.currency": json.dumps([legacy])})
    app = create_app(_settings(seed_on_startup=False), backing=backing)
    with TestClient(app) as c:
        listing = c.get("/masters/currency").json()
        assert listing["total"] == 1 and len(listing["data"]) == 1
        assert c.get("/masters/currency/ms_1").json()["rateToIDR"] == 15000
        assert c.patch("/masters/currency/ms_1", json={"name": "Dollar"}).status_code == 204
        assert c.patch("/masters/currency/ms_1", json={"rateToIDR": "abc"}).status_code == 422
        assert c.get("/masters/currency/ms_1").json()["name"] == "Dollar"


def test_csv_import_runs_off_the_event_loop(client, monkeypatch):
    calls = []

    def fake_import(store, text):
        try:
            asyncio.get_running_loop()
            calls.append("event loop")
        except RuntimeError:
            calls.append("worker thread")
        return ImportResult(imported=0)

    monkeypatch.setattr(masters, "import_csv", fake_import)
    resp = client.post("/masters/category/import", content="code,name\n")
    assert resp.json() == {"imported": 0, "errors": []}
    assert calls == ["worker thread"]
