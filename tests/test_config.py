from __future__ import annotations
import pytest
from tableui.config import TableSettings, load_settings, get_settings, reset_settings
from tableui.errors import SettingsError
from tableui.column import Column
from tableserver.context import RequestContext

def test_defaults():
    s = load_settings()
    assert (s.key_field, s.key_direction, s.default_direction) == ("sort", "direction", "asc")

def test_yaml_file(tmp_path):
    p = tmp_path / "tables.yaml"
    p.write_text("key_field: order\ndefault_direction: desc\n", encoding="utf-8")
    s = load_settings(str(p))
    assert s == TableSettings(key_field="order", key_direction="direction", default_direction="desc")

def test_env_file_and_overrides(tmp_path, monkeypatch):
    p = tmp_path / "tables.yaml"
    p.write_text("key_field: order\n", encoding="utf-8")
    monkeypatch.setenv("TABLES_CONFIG", str(p))
    monkeypatch.setenv("TABLES_KEY_DIRECTION", "dir")
    s = load_settings()
    assert (s.key_field, s.key_direction) == ("order", "dir")

def test_missing_env_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("TABLES_CONFIG", str(tmp_path / "nope.yaml"))
    assert load_settings() == TableSettings()

def test_missing_explicit_file_fails(tmp_path):
    with pytest.raises(SettingsError):
        load_settings(str(tmp_path / "nope.yaml"))

@pytest.mark.parametrize("text", ["bogus: 1\n", "default_direction: up\n", "- a\n- b\n", "key_field: [\n"])
def test_invalid_files_fail(tmp_path, text):
    p = tmp_path / "bad.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(str(p))

def test_cached_settings_drive_columns(monkeypatch):
    monkeypatch.setenv("TABLES_KEY_FIELD", "by")
    reset_settings()
    assert get_settings() is get_settings()
    assert Column("id").get_sort_url(RequestContext(path="/x")) == "/x?by=id&direction=asc"
