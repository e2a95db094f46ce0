"""Tests for the SQLite store."""

import sqlite3

import pytest

from stackman.store import Store


def _stack(stack_id, title="A", task_ids=()):
    return {"id": stack_id, "title": title, "task_ids": list(task_ids)}


def test_new_store_is_empty(store):
    data = store.load_all()
    assert data == {
        "tasks": [],
        "stacks": [],
        "history": [],
        "archived_tasks": [],
        "background_image": None,
    }


def test_creates_parent_directory(tmp_path):
    store = Store(tmp_path / "deep" / "dir" / "stackman.db")
    assert store.db_path.exists()


def test_replace_then_to_array_keeps_order(store):
    records = [_stack("s3", "C"), _stack("s1", "A", ["t1"]), _stack("s2", "B")]
    store.replace("stacks", records)
    assert store.to_array("stacks") == records


def test_replace_overwrites_everything(store):
    store.replace("stacks", [_stack("s1"), _stack("s2")])
    store.replace("stacks", [_stack("s2")])
    assert store.to_array("stacks") == [_stack("s2")]


def test_replace_with_empty_clears(store):
    store.replace("tasks", [{"id": "t1", "title": "x"}])
    store.replace("tasks", [])
    assert store.to_array("tasks") == []


def test_replace_is_atomic(store):
    store.replace("stacks", [_stack("s1")])
    with pytest.raises(sqlite3.IntegrityError):
        store.replace("stacks", [_stack("s2"), _stack("s2")])
    assert store.to_array("stacks") == [_stack("s1")]


def test_collections_are_independent(store):
    store.replace("stacks", [_stack("s1")])
    store.replace("tasks", [{"id": "t1", "title": "x"}])
    store.replace("tasks", [])
    assert store.to_array("stacks") == [_stack("s1")]


def test_clear(store):
    store.replace("archived_tasks", [{"id": "t1", "title": "x"}])
    store.clear("archived_tasks")
    assert store.to_array("archived_tasks") == []


def test_bulk_insert_appends(store):
    store.bulk_insert("stacks", [_stack("s1")])
    store.bulk_insert("stacks", [_stack("s2"), _stack("s0")])
    assert [s["id"] for s in store.to_array("stacks")] == ["s1", "s2", "s0"]


def test_bulk_insert_duplicate_id_raises(store):
    store.bulk_insert("stacks", [_stack("s1")])
    with pytest.raises(sqlite3.IntegrityError):
        store.bulk_insert("stacks", [_stack("s1")])


def test_unknown_collection(store):
    with pytest.raises(ValueError):
        store.to_array("cards")


def test_history_since_uses_timestamps(store):
    store.replace(
        "history",
        [
            {"id": "h1", "timestamp": 300, "action_type": "ADD_TASK", "details": "c"},
            {"id": "h2", "timestamp": 100, "action_type": "ADD_TASK", "details": "a"},
            {"id": "h3", "timestamp": 200, "action_type": "ADD_TASK", "details": "b"},
        ],
    )
    assert [h["id"] for h in store.history_since()] == ["h2", "h3", "h1"]
    assert [h["id"] for h in store.history_since(200)] == ["h3", "h1"]
    # insertion order is kept for the plain read
    assert [h["id"] for h in store.to_array("history")] == ["h1", "h2", "h3"]


def test_text_asset(store):
    store.put_asset("background_image", "data:image/png;base64,AAAA")
    assert store.get_asset("background_image") == "data:image/png;base64,AAAA"


def test_binary_asset(store):
    store.put_asset("background_image", b"\x89PNG\x00\x01")
    assert store.get_asset("background_image") == b"\x89PNG\x00\x01"


def test_asset_put_overwrites(store):
    store.put_asset("background_image", "one")
    store.put_asset("background_image", b"two")
    assert store.get_asset("background_image") == b"two"


def test_missing_asset(store):
    assert store.get_asset("background_image") is None


def test_delete_asset(store):
    store.put_asset("background_image", "one")
    store.delete_asset("background_image")
    store.delete_asset("background_image")
    assert store.get_asset("background_image") is None


def test_load_all_includes_background(store):
    store.put_asset("background_image", "img")
    store.replace("tasks", [{"id": "t1", "title": "x"}])
    data = store.load_all()
    assert data["background_image"] == "img"
    assert data["tasks"] == [{"id": "t1", "title": "x"}]


def test_data_survives_reopen(tmp_path):
    path = tmp_path / "stackman.db"
    Store(path).replace("stacks", [_stack("s1", "A", ["t1"])])
    assert Store(path).to_array("stacks") == [_stack("s1", "A", ["t1"])]


def test_wipe_deletes_file(store):
    store.replace("stacks", [_stack("s1")])
    store.put_asset("background_image", "img")
    store.wipe()
    assert not store.db_path.exists()
    assert Store(store.db_path).load_all()["stacks"] == []
