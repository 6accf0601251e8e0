# /app/services/database_service.py

import logging
from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Setup ---
from app.core import config
from app.db.database import get_db

# --- Store & Repository Imports ---
from .database_helpers.key_value_store import KeyValueStore, InMemoryKeyValueStore, JsonFileKeyValueStore
from .database_helpers.key_value_store_sql import SQLKeyValueStore
from .database_helpers.collection_repository import CollectionRepository, STORAGE_KEYS

logger = logging.getLogger(__name__)

# The in-memory backend must outlive a single request, so it is created once.
_memory_store = InMemoryKeyValueStore()


class DatabaseService:
    def __init__(self, store: KeyValueStore):
        """
        Initializes the DatabaseService on top of an already constructed
        key-value store. The caller owns the store's lifetime, which lets tests
        hand in an isolated in-memory store.
        """
        self.store = store
        self.student_repo = CollectionRepository(store, STORAGE_KEYS["students"])
        self.class_repo = CollectionRepository(store, STORAGE_KEYS["classes"])
        self.grade_repo = CollectionRepository(store, STORAGE_KEYS["grades"])

    # --- STUDENT METHODS (DELEGATED) ---
    def get_all_students(self) -> List[Dict]: return self.student_repo.list()
    def get_student_by_id(self, student_id: str) -> Optional[Dict]: return self.student_repo.get_by_id(student_id)
    def save_students(self, students: List[Dict]): self.student_repo.replace_all(students)
    def add_student(self, student_record: Dict): self.student_repo.add(student_record)
    def update_student(self, student_id: str, student_record: Dict) -> bool: return self.student_repo.update_by_id(student_id, student_record)
    def delete_student(self, student_id: str) -> int: return self.student_repo.delete_by_id(student_id)

    # --- CLASS METHODS (DELEGATED) ---
    def get_all_classes(self) -> List[Dict]: return self.class_repo.list()
    def get_class_by_id(self, class_id: str) -> Optional[Dict]: return self.class_repo.get_by_id(class_id)
    def save_classes(self, classes: List[Dict]): self.class_repo.replace_all(classes)
    def add_class(self, class_record: Dict): self.class_repo.add(class_record)
    def update_class(self, class_id: str, class_record: Dict) -> bool: return self.class_repo.update_by_id(class_id, class_record)
    def delete_class(self, class_id: str) -> int: return self.class_repo.delete_by_id(class_id)

    # --- GRADE METHODS (DELEGATED) ---
    def get_all_grades(self) -> List[Dict]: return self.grade_repo.list()
    def get_grade_by_id(self, grade_id: str) -> Optional[Dict]: return self.grade_repo.get_by_id(grade_id)
    def save_grades(self, grades: List[Dict]): self.grade_repo.replace_all(grades)
    def add_grade(self, grade_record: Dict): self.grade_repo.add(grade_record)
    def update_grade(self, grade_id: str, grade_record: Dict) -> bool: return self.grade_repo.update_by_id(grade_id, grade_record)
    def delete_grade(self, grade_id: str) -> int: return self.grade_repo.delete_by_id(grade_id)


def build_store(backend: str, db_session: Optional[Session] = None) -> KeyValueStore:
    """Maps a STORAGE_BACKEND value to a store instance."""
    if backend == "sql":
        if not db_session:
            raise ValueError("A database session is required when STORAGE_BACKEND is 'sql'.")
        return SQLKeyValueStore(db_session)
    if backend == "memory":
        return _memory_store
    if backend == "json":
        return JsonFileKeyValueStore(config.DATA_DIR)
    raise ValueError(f"Unknown STORAGE_BACKEND '{backend}'. Expected one of: json, sql, memory.")


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService instance backed by the
    configured store.
    """
    backend = config.STORAGE_BACKEND
    yield DatabaseService(build_store(backend, db_session=db if backend == "sql" else None))
