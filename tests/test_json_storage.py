"""
Tests for the JSON file store against a temporary directory.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Make the storeops package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from storeops.repositories.json_storage import JsonFileStore, MemoryStore, StorageError  # noqa: E402


def test_missing_file_loads_as_empty(tmp_path):
    store = JsonFileStore(tmp_path / "misc-spend.json")
    assert store.load() == []
    assert not store.path.exists()


def test_blank_file_loads_as_empty(tmp_path):
    path = tmp_path / "orders.json"
    path.write_text("  \n", encoding="utf-8")
    assert JsonFileStore(path).load() == []


def test_save_creates_directory_and_pretty_prints(tmp_path):
    store = JsonFileStore(tmp_path / "nested" / "products.json")
    store.save([{"id": "PROD-1001", "name": "Desi Ghee 500ml"}])

    text = store.path.read_text(encoding="utf-8")
    assert text.startswith("[\n  {\n    \"id\": \"PROD-1001\"")
    assert store.load() == [{"id": "PROD-1001", "name": "Desi Ghee 500ml"}]
    assert list((tmp_path / "nested").glob("*.tmp")) == []


def test_save_keeps_non_ascii_text(tmp_path):
    store = JsonFileStore(tmp_path / "gurugram-marts.json")
    store.save([{"id": "GGM-1", "name": "शुद्ध मार्ट"}])
    assert "शुद्ध मार्ट" in store.path.read_text(encoding="utf-8")


def test_save_of_load_leaves_content_unchanged(tmp_path):
    path = tmp_path / "orders.json"
    original = [
        {"id": "PH-20250101-1001", "amount": 1299, "items": [{"variant": "Gir 1L", "quantity": 2}]},
        {"id": "PH-20250101-1002", "amount": 650, "state": "Haryana"},
    ]
    path.write_text(json.dumps(original), encoding="utf-8")
    store = JsonFileStore(path)

    store.save(store.load())

    assert json.loads(path.read_text(encoding="utf-8")) == original


@pytest.mark.parametrize("content", ["{not json", "{\"id\": \"x\"}", "42"])
def test_unreadable_content_raises_storage_error(tmp_path, content):
    path = tmp_path / "orders.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStore(path).load()


def test_directory_in_place_of_file_raises_storage_error(tmp_path):
    path = tmp_path / "followups.json"
    path.mkdir()
    with pytest.raises(StorageError):
        JsonFileStore(path).load()
    with pytest.raises(StorageError):
        JsonFileStore(path).save([])


def test_memory_store_does_not_alias_callers():
    seed = [{"id": "META-1", "amount": 100}]
    store = MemoryStore(seed)
    loaded = store.load()
    loaded[0]["amount"] = 999
    seed[0]["amount"] = 5

    assert store.load() == [{"id": "META-1", "amount": 100}]
    store.save(loaded)
    loaded.append({"id": "META-2"})
    assert store.records == [{"id": "META-1", "amount": 999}]
    assert store.saves == 1


def test_save_refuses_nan_and_keeps_previous_content(tmp_path):
    store = JsonFileStore(tmp_path / "orders.json")
    store.save([{"id": "PH-20250101-1001", "amount": 10}])

    with pytest.raises(StorageError):
        store.save([{"id": "PH-20250101-1001", "amount": float("nan")}])

    assert store.load() == [{"id": "PH-20250101-1001", "amount": 10}]
    assert list(tmp_path.glob("*.tmp")) == []


def test_failed_replace_removes_temp_file(tmp_path):
    path = tmp_path / "delhi-marts.json"
    path.mkdir()
    with pytest.raises(StorageError):
        JsonFileStore(path).save([{"id": "DLM-1"}])
    assert list(tmp_path.glob("*.tmp")) == []
