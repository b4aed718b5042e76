"""
Contract tests for the memory, JSON-file and SQL backing stores.
"""
from __future__ import annotations

import dataclasses
import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from erp.core import config as core_config  # noqa: E402
from erp.db import session as db_session  # noqa: E402
from erp.repositories.backing_store import (  # noqa: E402
    BackingStoreUnavailableError,
    MemoryKeyValueStore,
    QuotaExceededError,
    open_backing_store,
)
from erp.repositories.json_storage import JsonFileKeyValueStore  # noqa: E402
from erp.repositories.sql_store import SQLKeyValueStore  # noqa: E402


@pytest.fixture()
def sql_url(tmp_path):
    """Temporary SQLite file; disposes and clears the cached engines afterwards."""
    db_file = tmp_path / "kv.db"
    url = f"sqlite:///{db_file}"
    yield url
    try:
        db_session.get_engine(url).dispose()
    except Exception:
        pass
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture(params=["memory", "json", "sql"])
def kv(request, tmp_path, sql_url):
    if request.param == "memory":
        return MemoryKeyValueStore(quota_bytes=100)
    if request.param == "json":
        return JsonFileKeyValueStore(tmp_path / "store" / "erp.json", quota_bytes=100)
    return SQLKeyValueStore(sql_url, quota_bytes=100)


def test_get_set_remove(kv):
    assert kv.get("erp.master.category") is None
    kv.set("erp.master.category", "[]")
    assert kv.get("erp.master.category") == "[]"
    kv.set("erp.master.category", '[{"id":"a"}]')
    assert kv.get("erp.master.category") == '[{"id":"a"}]'
    kv.remove("erp.master.category")
    assert kv.get("erp.master.category") is None
    kv.remove("erp.master.category")


def test_quota_rejects_write_without_mutation(kv):
    kv.set("a", "x" * 40)
    with pytest.raises(QuotaExceededError):
        kv.set("b", "y" * 80)
    assert kv.get("b") is None
    assert kv.get("a") == "x" * 40


def test_quota_counts_replaced_value_once(kv):
    kv.set("a", "x" * 90)
    kv.set("a", "z" * 90)
    assert kv.get("a") == "z" * 90


def test_quota_counts_utf8_bytes(kv):
    # 51 characters, 101 bytes
    with pytest.raises(QuotaExceededError) as excinfo:
        kv.set("a", "\u00e9" * 50)
    assert excinfo.value.requested == 101
    assert kv.get("a") is None
    kv.set("a", "e" * 50)
    assert kv.get("a") == "e" * 50


def test_keys_are_listed_sorted(kv):
    kv.set("b", "1")
    kv.set("a", "2")
    assert kv.keys() == ["a", "b"]


def test_json_store_survives_restart(tmp_path):
    path = tmp_path / "erp.json"
    JsonFileKeyValueStore(path).set("erp.master.seeded", "true")
    assert JsonFileKeyValueStore(path).get("erp.master.seeded") == "true"
    assert json.loads(path.read_text(encoding="utf-8")) == {"erp.master.seeded": "true"}
    assert not (tmp_path / "erp.json.tmp").exists()


def test_json_store_quarantines_corrupt_document(tmp_path):
    path = tmp_path / "erp.json"
    path.write_text("{{{", encoding="utf-8")
    store = JsonFileKeyValueStore(path)
    assert store.get("anything") is None
    assert (tmp_path / "erp.json.corrupt").read_text(encoding="utf-8") == "{{{"
    store.set("k", "v")
    assert store.get("k") == "v"


def test_json_store_unavailable_when_directory_cannot_be_created(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(BackingStoreUnavailableError):
        JsonFileKeyValueStore(blocker / "erp.json")


def test_open_backing_store_follows_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert isinstance(open_backing_store(settings), MemoryKeyValueStore)

        file_settings = dataclasses.replace(settings, storage_backend="file", storage_path=str(tmp_path / "s.json"))
        assert isinstance(open_backing_store(file_settings), JsonFileKeyValueStore)

        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        broken = dataclasses.replace(settings, storage_backend="file", storage_path=str(blocker / "s.json"))
        assert open_backing_store(broken) is None

        assert open_backing_store(dataclasses.replace(settings, storage_backend="floppy")) is None
        assert open_backing_store(dataclasses.replace(settings, storage_backend="sql", database_url="")) is None
    finally:
        core_config.get_settings.cache_clear()
