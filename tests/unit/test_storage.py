"""Unit tests for the persisted key-value stores."""

import json

import pytest

from atelier.contexts.interaction.storage import JsonFileStore, KeyValueStore


@pytest.mark.unit
class TestKeyValueStore:
    """Tests for the in-memory store."""

    def test_values_stored_as_strings(self):
        store = KeyValueStore()
        store.set_item("n", 3)
        assert store.get_item("n") == "3"

    def test_missing_key(self):
        assert KeyValueStore().get_item("missing") is None

    def test_json_roundtrip(self):
        store = KeyValueStore()
        store.set_json("audio", {"index": 1, "time": 2.5})
        assert store.get_json("audio") == {"index": 1, "time": 2.5}

    @pytest.mark.parametrize("raw", ["{broken", ""])
    def test_corrupt_json_returns_default(self, raw):
        store = KeyValueStore({"k": raw})
        assert store.get_json("k", default=[]) == []

    def test_unencodable_value_dropped(self):
        store = KeyValueStore()
        store.set_json("k", {1, 2})
        assert store.get_item("k") is None

    def test_remove_item(self):
        store = KeyValueStore({"k": "v"})
        store.remove_item("k")
        store.remove_item("k")
        assert store.keys() == []


@pytest.mark.unit
class TestJsonFileStore:
    """Tests for the on-disk store."""

    def test_writes_flush_to_disk(self, tmp_path):
        path = tmp_path / "state" / "storage.json"
        store = JsonFileStore(path)
        store.set_item("portfolio.theme", "dark")

        assert json.loads(path.read_text()) == {"portfolio.theme": "dark"}
        assert JsonFileStore(path).get_item("portfolio.theme") == "dark"

    def test_unreadable_file_ignored(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("not json")
        assert JsonFileStore(path).keys() == []

    def test_non_object_root_ignored(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]")
        assert JsonFileStore(path).keys() == []

    def test_remove_item_flushes(self, tmp_path):
        path = tmp_path / "storage.json"
        store = JsonFileStore(path)
        store.set_item("a", "1")
        store.remove_item("a")
        assert json.loads(path.read_text()) == {}
