import json
from pathlib import Path

import pytest

from paperfold.config import EditorSettings, get_config_dir, load_settings, save_settings
from paperfold.model import Orientation


def test_defaults():
    settings = EditorSettings()
    assert settings.grid_size == 10
    assert settings.bound == 5
    assert settings.cell_size == 1.0
    assert settings.center_orientation == Orientation.XZ


@pytest.mark.parametrize("kwargs", [{"grid_size": 1}, {"cell_size": 0.0}])
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        EditorSettings(**kwargs)


def test_save_and_load(tmp_path):
    path = tmp_path / "settings.json"
    settings = EditorSettings(grid_size=16, cell_size=0.5, default_orientation=Orientation.YZ)

    save_settings(settings, path)
    loaded = load_settings(path)

    assert loaded == settings
    assert json.loads(path.read_text())["default_orientation"] == "YZ"


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "absent.json") == EditorSettings()


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"grid_size": 6, "theme": "dark"}))
    assert load_settings(path) == EditorSettings(grid_size=6)


@pytest.mark.parametrize("content", [
    "{not json",
    json.dumps([1, 2, 3]),
    json.dumps({"grid_size": 1}),
    json.dumps({"center_orientation": "ZZ"}),
])
def test_invalid_file_falls_back_to_defaults(tmp_path, caplog, content):
    path = tmp_path / "settings.json"
    path.write_text(content)
    assert load_settings(path) == EditorSettings()
    assert "using defaults" in caplog.text


def test_default_location_under_home(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert get_config_dir() == tmp_path / ".config" / "paperfold"
    path = save_settings(EditorSettings())
    assert path == tmp_path / ".config" / "paperfold" / "settings.json"
    assert load_settings() == EditorSettings()
