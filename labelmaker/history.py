"""History of previously printed labels.

The history is a most-recently-used list of distinct label texts, capped at
MAX_HISTORY_ITEMS entries. It is persisted as one string, entries joined by
HISTORY_DELIMITER, so every change is a single preference write.
"""

import logging
import threading

from labelmaker.preferences import PREF_HISTORY, Preferences, get_preferences

logger = logging.getLogger(__name__)

HISTORY_DELIMITER = "~"
MAX_HISTORY_ITEMS = 10


class HistoryStore:
    """Bounded, duplicate-free, most-recent-first list of label texts.

    The store is the only writer of the persisted history. The in-memory
    list is never changed without the new state also being written.
    """

    def __init__(self, preferences: Preferences | None = None):
        """Initialize the store.

        Args:
            preferences: Preferences group holding the history (default: configured group).
        """
        self.preferences = preferences if preferences is not None else get_preferences()
        self._items: list[str] = []
        self._loaded = False
        self._lock = threading.Lock()

    def _load(self) -> None:
        history = self.preferences.get_string(PREF_HISTORY)
        self._items = history.split(HISTORY_DELIMITER) if history else []
        self._loaded = True

    def get_all(self) -> list[str]:
        """Reload the history from storage.

        Returns:
            list[str]: Entries, most recent first.
        """
        with self._lock:
            self._load()
            return list(self._items)

    def save(self, value: str) -> None:
        """Move value to the front of the history and persist it.

        Args:
            value: Label text. Must be non-empty; not re-validated here.
        """
        with self._lock:
            # A store that was never read must not overwrite what is persisted
            if not self._loaded:
                self._load()

            if value in self._items:
                self._items.remove(value)

            self._items.insert(0, value)
            del self._items[MAX_HISTORY_ITEMS:]

            self.preferences.put_string(PREF_HISTORY, HISTORY_DELIMITER.join(self._items))
            logger.debug(f"History now holds {len(self._items)} entries")

    def delete_all(self) -> None:
        """Clear the history, both persisted and in memory."""
        with self._lock:
            self.preferences.put_string(PREF_HISTORY, "")
            self._items = []
            self._loaded = True
            logger.info("History cleared")
