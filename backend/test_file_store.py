"""Tests for the JSON-file user store."""

import json

import pytest

from repositories import STORE_CORRUPT, STORE_MISSING, STORE_OK, STORE_UNREADABLE, FileStore


def test_read_missing_file_returns_empty(tmp_path):
    assert FileStore(tmp_path / "users.json").read() == []


def test_read_invalid_json_returns_empty(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("[{", encoding="utf-8")
    assert FileStore(path).read() == []


def test_read_empty_file_returns_empty(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("", encoding="utf-8")
    assert FileStore(path).read() == []


def test_read_non_array_document_returns_empty(tmp_path):
    path = tmp_path / "users.json"
    path.write_text('{"id": "1"}', encoding="utf-8")
    assert FileStore(path).read() == []


def test_write_then_read(tmp_path):
    store = FileStore(tmp_path / "users.json")
    users = [{"id": "1", "name": "Zoë", "email": "z@x.com", "age": 30}]
    store.write(users)
    assert store.read() == users


def test_write_is_pretty_printed_with_two_spaces(tmp_path):
    path = tmp_path / "users.json"
    users = [{"id": "1", "name": "Zoë", "email": "z@x.com", "age": 30}]
    FileStore(path).write(users)
    assert path.read_text(encoding="utf-8") == json.dumps(users, ensure_ascii=False, indent=2)


def test_write_replaces_previous_contents(tmp_path):
    store = FileStore(tmp_path / "users.json")
    store.write([{"id": "1"}, {"id": "2"}])
    store.write([{"id": "3"}])
    assert store.read() == [{"id": "3"}]


def test_write_creates_parent_directory(tmp_path):
    path = tmp_path / "app" / "users" / "users.json"
    FileStore(path).write([])
    assert path.read_text(encoding="utf-8") == "[]"


def test_read_path_under_regular_file_returns_empty(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    assert FileStore(blocker / "users.json").read() == []


def test_write_path_under_regular_file_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OSError):
        FileStore(blocker / "users.json").write([])


def test_check_reports_each_state(tmp_path):
    path = tmp_path / "users.json"
    store = FileStore(path)
    assert store.check()["state"] == STORE_MISSING

    store.write([{"id": "1"}, {"id": "2"}])
    info = store.check()
    assert info["state"] == STORE_OK
    assert info["count"] == 2
    assert info["detail"] is None

    path.write_text("{oops", encoding="utf-8")
    assert store.check()["state"] == STORE_CORRUPT

    path.write_text('{"id": "1"}', encoding="utf-8")
    info = store.check()
    assert info["state"] == STORE_CORRUPT
    assert "dict" in info["detail"]

    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    assert FileStore(blocker / "users.json").check()["state"] == STORE_UNREADABLE
