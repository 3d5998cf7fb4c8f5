import json

import pytest
from pydantic import ValidationError
from funcplay.core import config
from funcplay.core.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("FUNCPLAY_CONFIG", "FUNCPLAY_MIN_DISTANCE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", tmp_path / "missing.json")


def test_defaults():
    settings = Settings()
    assert settings.min_distance == 2.0
    assert settings.log_level == "INFO"


def test_load_without_file_uses_defaults():
    assert Settings.load() == Settings()


def test_load_from_explicit_path(tmp_path):
    path = tmp_path / "funcplay.json"
    path.write_text(json.dumps({"min_distance": 3.5, "log_level": "debug"}))

    settings = Settings.load(path)
    assert settings.min_distance == 3.5
    assert settings.log_level == "DEBUG"


def test_load_from_env_path(tmp_path, monkeypatch):
    path = tmp_path / "funcplay.json"
    path.write_text(json.dumps({"min_distance": 1.0}))
    monkeypatch.setenv("FUNCPLAY_CONFIG", str(path))

    assert Settings.load().min_distance == 1.0


def test_load_from_default_path(tmp_path, monkeypatch):
    path = tmp_path / "home.json"
    path.write_text(json.dumps({"min_distance": 0.5}))
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", path)

    assert Settings.load().min_distance == 0.5


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "funcplay.json"
    path.write_text(json.dumps({"min_distance": 3.5, "log_level": "DEBUG"}))
    monkeypatch.setenv("FUNCPLAY_MIN_DISTANCE", "4.25")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    settings = Settings.load(path)
    assert settings.min_distance == 4.25
    assert settings.log_level == "WARNING"


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Settings.load(tmp_path / "nope.json")


def test_negative_min_distance_rejected():
    with pytest.raises(ValidationError):
        Settings(min_distance=-1.0)


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")
