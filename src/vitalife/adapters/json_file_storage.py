"""JSON file-backed key-value storage."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from vitalife.services.store import KeyValueStorage

logger = logging.getLogger(__name__)


@dataclass
class JsonFileStorage(KeyValueStorage):
    """Stores every key as a string value in a single JSON object on disk."""

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Overwrite the value stored under a key."""
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        """Delete a key if present."""
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed storage file %s", self.path)
            return {}
        return data

    def _write(self, items: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items), encoding="utf-8")
