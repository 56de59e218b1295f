"""Shared fixtures for configuration tests."""
from pathlib import Path

import pytest
from loguru import logger

from config.paths import CONFIG_FILE_SUFFIX


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    """Point HOME (and USERPROFILE) at an empty temporary directory."""
    home_path = tmp_path / "home"
    home_path.mkdir()
    monkeypatch.setenv("HOME", str(home_path))
    monkeypatch.setenv("USERPROFILE", str(home_path))
    return home_path


@pytest.fixture
def user_config(home) -> Path:
    """Conventional config path inside the temporary home (not created)."""
    return home / CONFIG_FILE_SUFFIX


@pytest.fixture
def write_toml(tmp_path):
    """Write TOML text to a file under tmp_path and return its path."""
    def _write(text: str, name: str = "custom.toml") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop loguru sinks added during a test (they may hold captured streams)."""
    yield
    logger.remove()
