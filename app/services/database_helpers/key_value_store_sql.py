# /app/services/database_helpers/key_value_store_sql.py

"""
SQLAlchemy implementation of the key-value store. One row per key in the
`key_value_entries` table; every write commits immediately.
"""

from typing import Optional
from sqlalchemy.orm import Session

from app.db.models.key_value_models import KeyValueEntry
from .key_value_store import KeyValueStore


class SQLKeyValueStore(KeyValueStore):
    def __init__(self, db_session: Session):
        self.db = db_session

    def _get_entry(self, key: str) -> Optional[KeyValueEntry]:
        return self.db.query(KeyValueEntry).filter(KeyValueEntry.key == key).first()

    def get_item(self, key: str) -> Optional[str]:
        entry = self._get_entry(key)
        return entry.value if entry else None

    def set_item(self, key: str, value: str) -> None:
        entry = self._get_entry(key)
        if entry:
            entry.value = value
        else:
            self.db.add(KeyValueEntry(key=key, value=value))
        self.db.commit()

    def remove_item(self, key: str) -> None:
        entry = self._get_entry(key)
        if entry:
            self.db.delete(entry)
            self.db.commit()

    def clear(self) -> None:
        self.db.query(KeyValueEntry).delete()
        self.db.commit()
