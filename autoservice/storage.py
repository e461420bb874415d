"""
Persisted key/value store for client-side state.

Plays the role browser local storage plays for the web client: the only
value written today is the opaque ``userId`` returned on sign-in. Values
are strings, the file is plain JSON. Pass ``path=None`` for a purely
in-memory store (tests, one-shot commands).
"""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

USER_ID_KEY = "userId"


class LocalStorage:
    """String key/value store mirrored to a JSON file."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else None
        self._items: dict[str, str] = self._load()

    def _load(self) -> dict[str, str]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: expected an object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._items, indent=2, sort_keys=True), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)
        self._flush()
        logger.debug("Storage key '%s' set", key)

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._flush()
            logger.debug("Storage key '%s' removed", key)

    def clear(self) -> None:
        self._items.clear()
        self._flush()
