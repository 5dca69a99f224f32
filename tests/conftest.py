"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from labelmaker.config import get_settings
from labelmaker.connection import ConnectionSettings, SettingsStore
from labelmaker.history import HistoryStore
from labelmaker.preferences import Preferences
from labelmaker.service import PrintService


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch) -> Generator[Path, None, None]:
    """Point the application config dir at a temporary directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("LABELMAKER_CONFIG_DIR", str(config_dir))
    get_settings.cache_clear()
    yield config_dir
    get_settings.cache_clear()


@pytest.fixture
def prefs_path(isolated_config_dir: Path) -> Path:
    """Path of the preference group file."""
    return isolated_config_dir / "default.json"


@pytest.fixture
def preferences(prefs_path: Path) -> Preferences:
    """Preferences backed by a temporary file."""
    return Preferences(prefs_path)


@pytest.fixture
def history(preferences: Preferences) -> HistoryStore:
    """Empty history store."""
    return HistoryStore(preferences)


@pytest.fixture
def settings_store(preferences: Preferences) -> SettingsStore:
    """Settings store with a configured endpoint and token."""
    store = SettingsStore(preferences)
    store.save(ConnectionSettings(endpoint="https://printer.test/print", auth_token="tok-1234"))
    return store


@pytest.fixture
def print_service(settings_store: SettingsStore, history: HistoryStore) -> PrintService:
    """PrintService wired to temporary stores."""
    return PrintService(settings_store, history)
