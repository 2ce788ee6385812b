from __future__ import annotations

from pathlib import Path

import pytest

from pyharmony.backends import MemoryStore, get_backend_for_path
from pyharmony.backends.ini_backend import IniFileStore
from pyharmony.backends.json_backend import JsonFileStore
from pyharmony.backends.yaml_backend import YamlFileStore
from pyharmony.errors import StoreLoadError, StoreWriteError


def require_pyyaml():
    try:
        import yaml  # type: ignore  # noqa: F401
    except ModuleNotFoundError:
        pytest.skip("PyYAML not installed")


def test_backend_for_suffix(tmp_path: Path):
    assert isinstance(get_backend_for_path(tmp_path / "t.json"), JsonFileStore)
    assert isinstance(get_backend_for_path(tmp_path / "t.YML"), YamlFileStore)
    assert isinstance(get_backend_for_path(tmp_path / "t.ini"), IniFileStore)
    with pytest.raises(ValueError):
        get_backend_for_path(tmp_path / "t.toml")


@pytest.mark.parametrize("name", ["store.json", "store.ini", "store.yaml"])
def test_file_store_roundtrip(tmp_path: Path, name: str):
    if name.endswith(".yaml"):
        require_pyyaml()
    store = get_backend_for_path(tmp_path / "nested" / name)
    assert store.get("pm-theme") is None
    store.set("pm-theme", "dark")
    store.set("pm-color-settings", '{"shared": {"bgSat": 50}, "lightness": {}}')
    reopened = get_backend_for_path(tmp_path / "nested" / name)
    assert reopened.get("pm-theme") == "dark"
    assert reopened.get("pm-color-settings") == '{"shared": {"bgSat": 50}, "lightness": {}}'
    assert sorted(reopened.keys()) == ["pm-color-settings", "pm-theme"]
    reopened.remove("pm-theme")
    reopened.remove("pm-theme")
    assert store.get("pm-theme") is None


def test_json_empty_file(tmp_path: Path):
    path = tmp_path / "empty.json"
    path.write_text("", encoding="utf-8")
    assert JsonFileStore(path).get("x") is None


def test_invalid_json(tmp_path: Path):
    path = tmp_path / "bad.json"
    path.write_text("{ invalid", encoding="utf-8")
    with pytest.raises(StoreLoadError):
        JsonFileStore(path).get("x")


def test_json_root_must_be_object(tmp_path: Path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(StoreLoadError):
        JsonFileStore(path).get("x")


def test_invalid_yaml(tmp_path: Path):
    require_pyyaml()
    path = tmp_path / "bad.yaml"
    path.write_text("[invalid", encoding="utf-8")
    with pytest.raises(StoreLoadError):
        YamlFileStore(path).get("x")


def test_ini_keeps_case_and_percent(tmp_path: Path):
    store = IniFileStore(tmp_path / "t.ini")
    store.set("PM-Key", "50%")
    assert IniFileStore(tmp_path / "t.ini").get("PM-Key") == "50%"


def test_write_failure_raises(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = JsonFileStore(blocker / "store.json")
    with pytest.raises(StoreWriteError):
        store.set("pm-theme", "dark")


def test_memory_store_quota():
    store = MemoryStore(quota=20)
    store.set("a", "1234")
    with pytest.raises(StoreWriteError):
        store.set("b", "x" * 30)
    assert store.get("b") is None
    assert store.get("a") == "1234"


def test_memory_store_remove_is_idempotent():
    store = MemoryStore({"a": "1"})
    store.remove("a")
    store.remove("a")
    assert list(store.keys()) == []
