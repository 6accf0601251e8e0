# /app/services/database_helpers/key_value_store.py

"""
String key-value stores that hold the serialized collections.

The contract mirrors a browser's local storage: values are opaque strings,
reading a missing key returns None, and writing a key replaces its value
wholesale. Serialization is the caller's job (see `collection_repository`).
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Base contract for every store backend."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]: ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None: ...

    @abstractmethod
    def remove_item(self, key: str) -> None: ...

    @abstractmethod
    def clear(self) -> None: ...


class InMemoryKeyValueStore(KeyValueStore):
    """
    Dict-backed store. Lives as long as the instance does, which makes it the
    substitute of choice for tests.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()


class JsonFileKeyValueStore(KeyValueStore):
    """
    Stores each key as `<data_dir>/<key>.json`. The directory is created on
    first write, so reading from a fresh location simply finds nothing.
    """

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)

    def _path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        os.makedirs(self.data_dir, exist_ok=True)
        self._path_for(key).write_text(value, encoding="utf-8")

    def remove_item(self, key: str) -> None:
        path = self._path_for(key)
        if path.exists():
            path.unlink()

    def clear(self) -> None:
        if not self.data_dir.exists():
            return
        for path in self.data_dir.glob("*.json"):
            path.unlink()
        logger.info("Cleared JSON store at %s", self.data_dir)
