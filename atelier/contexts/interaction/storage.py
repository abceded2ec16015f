"""
Persisted key-value store.

String-keyed, string-valued store standing in for the browser's local storage.
Reads never raise: absent or corrupt state degrades to defaults. Writes are
fire-and-forget: failures are logged and dropped.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from atelier.contexts.interaction.logger import _log_debug, _log_warning

load_dotenv()
STORAGE_PATH = Path(os.getenv("ATELIER_STORAGE_PATH", "outs/state/storage.json"))

# Key suffixes under the configured prefix ("portfolio." by default)
THEME_KEY = "theme"
GALLERY_FILTER_KEY = "galleryFilter."
MULTI_FILTER_KEY = "multiFilter."
AUDIO_STATE_KEY = "audioState"


class KeyValueStore:
    """In-memory store; base class for persistent stores."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def get_json(self, key: str, default: Any = None) -> Any:
        """Decode a JSON value, returning ``default`` when absent or corrupt."""
        raw = self.get_item(key)
        if raw is None or raw == "":
            return default
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            _log_debug(f"Ignoring corrupt stored value for {key}")
            return default

    def set_json(self, key: str, value: Any) -> None:
        try:
            encoded = json.dumps(value)
        except (TypeError, ValueError) as e:
            _log_warning(f"Could not encode value for {key}: {e}")
            return
        self.set_item(key, encoded)

    def keys(self):
        return list(self._data.keys())


class JsonFileStore(KeyValueStore):
    """
    Store persisted as a single JSON object on disk.

    Loaded once at construction and rewritten on every write.
    """

    def __init__(self, path: Path = None):
        self.path = Path(path) if path is not None else STORAGE_PATH
        super().__init__(self._read())

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            _log_warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            _log_warning(f"Ignoring storage file {self.path}: root is not an object")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
        except OSError as e:
            _log_warning(f"Could not write storage file {self.path}: {e}")

    def set_item(self, key: str, value: str) -> None:
        super().set_item(key, value)
        self._flush()

    def remove_item(self, key: str) -> None:
        super().remove_item(key)
        self._flush()
