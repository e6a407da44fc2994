from __future__ import annotations

import threading
from pathlib import Path

import pytest

from pathdb.disk_store import DiskJsonDocumentStore
from pathdb.json_store import atomic_write_json, read_json
from pathdb.locks import GLOBAL_PATH_LOCKS, PathLockRegistry


def test_load_missing_or_empty_file_is_empty_document(tmp_path: Path):
    store = DiskJsonDocumentStore(tmp_path / "doc.json")
    assert store.load() == {}
    store.path.write_text("   ", encoding="utf-8")
    assert store.load() == {}


def test_non_mapping_root_loads_as_empty(tmp_path: Path):
    store = DiskJsonDocumentStore(tmp_path / "doc.json")
    store.path.write_text("[1, 2]", encoding="utf-8")
    assert store.load() == {}


def test_ensure_exists_only_creates_once(tmp_path: Path):
    store = DiskJsonDocumentStore(tmp_path / "sub" / "doc.json")
    assert store.ensure_exists() is True
    store.save({"a": 1})
    assert store.ensure_exists() is False
    assert store.load() == {"a": 1}


def test_atomic_write_leaves_no_temp_file(tmp_path: Path):
    target = tmp_path / "doc.json"
    atomic_write_json(target, {"b": 1, "a": "é"})
    assert target.read_text(encoding="utf-8") == '{"b":1,"a":"\\u00e9"}'
    assert not (tmp_path / "doc.json.tmp").exists()
    assert read_json(target) == {"b": 1, "a": "é"}


def test_read_json_missing_file(tmp_path: Path):
    assert read_json(tmp_path / "absent.json") is None


def test_write_to_unwritable_location_raises_os_error(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OSError):
        atomic_write_json(blocker / "doc.json", {})


def test_lock_registry_returns_same_lock_per_path(tmp_path: Path):
    registry = PathLockRegistry()
    a = registry.lock_for(tmp_path / "x.json")
    b = registry.lock_for(tmp_path / "." / "x.json")
    c = registry.lock_for(tmp_path / "y.json")
    assert a is b
    assert a is not c


def test_concurrent_saves_leave_valid_document(tmp_path: Path):
    store = DiskJsonDocumentStore(tmp_path / "doc.json")

    def _writer(n: int) -> None:
        for i in range(20):
            store.save({"writer": n, "i": i})

    threads = [threading.Thread(target=_writer, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    doc = store.load()
    assert doc["i"] == 19
    assert GLOBAL_PATH_LOCKS.lock_for(store.path) is GLOBAL_PATH_LOCKS.lock_for(store.path)


def test_lone_surrogate_is_escaped_and_written(tmp_path: Path):
    target = tmp_path / "doc.json"
    atomic_write_json(target, {"s": "\ud800"})
    assert target.read_text(encoding="utf-8") == '{"s":"\\ud800"}'
    assert read_json(target) == {"s": "\ud800"}
    assert not (tmp_path / "doc.json.tmp").exists()


def test_failed_write_removes_temp_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    target = tmp_path / "doc.json"

    def _fail(self, dst):
        raise PermissionError("replace denied")

    monkeypatch.setattr(Path, "replace", _fail)
    with pytest.raises(PermissionError):
        atomic_write_json(target, {"a": 1})
    assert not (tmp_path / "doc.json.tmp").exists()
    assert not target.exists()
