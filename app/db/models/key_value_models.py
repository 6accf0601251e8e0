# /app/db/models/key_value_models.py

"""
This module defines the single SQLAlchemy table used by the SQL-backed
key-value store. Each row holds one whole, JSON-serialized collection.
"""

from sqlalchemy import Column, String, Text

from ..database import Base


class KeyValueEntry(Base):
    """
    One key of the key-value store, e.g. `school_students`.
    """
    __tablename__ = "key_value_entries"

    key = Column(String, primary_key=True, index=True)
    value = Column(Text, nullable=False)
