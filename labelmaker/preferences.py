"""Persisted key/value preferences backed by a JSON file.

All keys of one preference group live in a single JSON object on disk.
A missing key reads as an empty string, never as an error.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from labelmaker.config import get_settings

logger = logging.getLogger(__name__)

PREF_ENDPOINT = "pref_endpoint"
PREF_AUTH_TOKEN = "pref_auth_token"
PREF_HISTORY = "pref_history"


class Preferences:
    """A named group of string preferences stored in one file.

    Every write replaces the whole file atomically, so readers never
    observe a partially written group.
    """

    def __init__(self, path: Path):
        """Initialize preferences.

        Args:
            path: Path to the JSON file holding the group.
        """
        self.path = path

    def _read(self) -> dict[str, str]:
        """Read the whole group from disk.

        Returns:
            dict[str, str]: Stored values, empty if the file does not exist.
        """
        if not self.path.exists():
            return {}

        with open(self.path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                logger.warning(f"Ignoring corrupted preferences file {self.path}: {e}")
                return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file {self.path}: not a JSON object")
            return {}
        return data

    def _write(self, data: dict[str, str]) -> None:
        """Atomically replace the group on disk.

        Args:
            data: Full set of values to store.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".prefs-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            # Secure the file (contains the auth token)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_string(self, key: str, default: str = "") -> str:
        """Get a string preference.

        Args:
            key: Preference key.
            default: Value returned when the key is absent.

        Returns:
            str: Stored value or default.
        """
        value = self._read().get(key)
        if value is None:
            return default
        return str(value)

    def put_strings(self, values: dict[str, str]) -> None:
        """Store several preferences in a single write.

        Args:
            values: Keys and values to set.
        """
        data = self._read()
        data.update(values)
        self._write(data)

    def put_string(self, key: str, value: str) -> None:
        """Store one string preference.

        Args:
            key: Preference key.
            value: Value to store.
        """
        self.put_strings({key: value})


def get_preferences(path: Path | None = None) -> Preferences:
    """Factory function for Preferences.

    Args:
        path: Optional custom file path (default: from application settings).

    Returns:
        Preferences: Preferences for the configured group.
    """
    return Preferences(path or get_settings().preferences_file)
