"""
score_store.py
--------------
Persistent key-value storage for the high score.

Provides:
- KeyValueStore interface: get(key) -> str | None, set(key, value)
- JsonFileStore: values kept in a small JSON object on disk
- MemoryStore: in-process dict, for tests and for running without disk access
- HighScoreTracker: loads the high score once and re-persists it when beaten

Store failures never propagate. A store that cannot be read or written logs a
warning, marks itself unavailable, and behaves as if the key were absent.
"""

import json
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional

from dodger.core.debug.debug_logger import DebugLogger


# ===========================================================
# Store Interface
# ===========================================================

class KeyValueStore(ABC):
    """String key-value store contract."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored string, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key."""


class MemoryStore(KeyValueStore):
    """Dict-backed store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = str(value)
        self.writes += 1


class JsonFileStore(KeyValueStore):
    """
    Store backed by a JSON object file.

    The file is read once on construction and rewritten on every set().
    """

    def __init__(self, path: str):
        self.path = path
        self.available = True
        self._values = self._load()

    def get(self, key):
        value = self._values.get(key)
        return None if value is None else str(value)

    def set(self, key, value):
        if not self.available:
            return

        self._values[key] = str(value)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2)
            DebugLogger.system(f"Saved '{key}' to {self.path}", category="storage")
        except (OSError, TypeError) as e:
            self.available = False
            DebugLogger.warn(f"Failed to write {self.path}: {e} - persistence disabled", category="storage")

    def _load(self):
        """Read the store file. Missing file is an empty store."""
        if not os.path.exists(self.path):
            DebugLogger.system(f"No store at {self.path}, starting empty", category="storage")
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            self.available = False
            DebugLogger.warn(f"Failed to read {self.path}: {e} - persistence disabled", category="storage")
            return {}

        if not isinstance(data, dict):
            self.available = False
            DebugLogger.warn(f"Unexpected content in {self.path} - persistence disabled", category="storage")
            return {}

        DebugLogger.system(f"Loaded store from {self.path}", category="storage")
        return data


# ===========================================================
# High Score
# ===========================================================

class HighScoreTracker:
    """In-memory copy of the persisted high score."""

    def __init__(self, store: Optional[KeyValueStore], key: str = "highScore"):
        self.store = store
        self.key = key
        self.value = self._read()

    def submit(self, score: int) -> bool:
        """
        Offer a score. Persists and returns True only when it beats the stored value.
        """
        if score <= self.value:
            return False

        self.value = score
        if self.store is not None:
            self.store.set(self.key, str(score))
        DebugLogger.state(f"New high score: {score}", category="score")
        return True

    def _read(self) -> int:
        if self.store is None:
            return 0

        raw = self.store.get(self.key)
        if raw is None:
            return 0

        try:
            value = int(str(raw).strip())
        except ValueError:
            DebugLogger.warn(f"Ignoring non-integer high score {raw!r}", category="storage")
            return 0

        if value < 0:
            DebugLogger.warn(f"Ignoring negative high score {value}", category="storage")
            return 0
        return value
