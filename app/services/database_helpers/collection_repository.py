# /app/services/database_helpers/collection_repository.py

"""
Whole-collection persistence for one entity type.

Each collection lives under a single key as a JSON array of record dicts.
Every mutation reads the full array, changes it in memory and writes the full
array back. There is no locking: two writers interleaving their
read-modify-write cycles will lose one of the updates.
"""

import json
import logging
from typing import Dict, List, Optional

from app.core.exceptions import StorageCorruptedError
from .key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEYS = {
    "students": "school_students",
    "classes": "school_classes",
    "grades": "school_grades",
}


class CollectionRepository:
    def __init__(self, store: KeyValueStore, key: str):
        self.store = store
        self.key = key

    def list(self) -> List[Dict]:
        """
        Returns the full persisted collection, or an empty list if nothing
        has been stored under this key yet.
        Raises StorageCorruptedError if the stored value is not valid JSON.
        """
        data = self.store.get_item(self.key)
        if not data:
            return []
        try:
            records = json.loads(data)
        except json.JSONDecodeError as e:
            raise StorageCorruptedError(self.key, str(e)) from e
        if not isinstance(records, list):
            raise StorageCorruptedError(self.key, "expected a JSON array")
        return records

    def replace_all(self, records: List[Dict]) -> None:
        self.store.set_item(self.key, json.dumps(records))

    def add(self, record: Dict) -> None:
        records = self.list()
        records.append(record)
        self.replace_all(records)

    def update_by_id(self, record_id: str, record: Dict) -> bool:
        """
        Replaces the first record whose `id` matches, keeping its position.
        When nothing matches the collection is written back unchanged.
        Returns whether a record was replaced.
        """
        records = self.list()
        index = next((i for i, r in enumerate(records) if r.get("id") == record_id), None)
        if index is not None:
            records[index] = record
        self.replace_all(records)
        return index is not None

    def delete_by_id(self, record_id: str) -> int:
        """Removes every record with the given `id`. Returns how many were removed."""
        records = self.list()
        remaining = [r for r in records if r.get("id") != record_id]
        self.replace_all(remaining)
        return len(records) - len(remaining)

    def get_by_id(self, record_id: str) -> Optional[Dict]:
        return next((r for r in self.list() if r.get("id") == record_id), None)
