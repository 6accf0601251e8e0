# /app/services/student_service.py

"""
Business logic for student records: id stamping on create, whole-record
replacement on update, and the name/email search used by the students list.
"""

import logging
import uuid
from typing import List, Dict, Optional

from ..models import student_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def get_all_students(db: DatabaseService, search: Optional[str] = None) -> List[Dict]:
    students = db.get_all_students()
    if not search:
        return students
    return filter_students(students, search)


def filter_students(students: List[Dict], search: str) -> List[Dict]:
    """Case-insensitive substring match on first name, last name or email."""
    term = search.lower()
    return [
        s for s in students
        if term in (s.get('firstName') or '').lower()
        or term in (s.get('lastName') or '').lower()
        or term in (s.get('email') or '').lower()
    ]


def get_student_by_id(student_id: str, db: DatabaseService) -> Optional[Dict]:
    return db.get_student_by_id(student_id)


def create_student(student_data: student_model.StudentCreate, db: DatabaseService) -> Dict:
    new_student_record = student_data.model_dump()
    new_student_record['id'] = f"stu_{uuid.uuid4().hex[:12]}"
    db.add_student(new_student_record)
    logger.info("Added student %s", new_student_record['id'])
    return new_student_record


def update_student(student_id: str, student_update: student_model.StudentCreate, db: DatabaseService) -> Optional[Dict]:
    """
    Replaces the stored student with `student_update`. Returns None when no
    student has this id; the stored collection is left as it was.
    """
    updated_record = {'id': student_id, **student_update.model_dump()}
    if not db.update_student(student_id, updated_record):
        logger.warning("Update skipped: student %s not found", student_id)
        return None
    logger.info("Updated student %s", student_id)
    return updated_record


def delete_student(student_id: str, db: DatabaseService) -> bool:
    """Grades that reference the student are kept and will show 'Unknown'."""
    removed = db.delete_student(student_id)
    if not removed:
        logger.warning("Delete skipped: student %s not found", student_id)
        return False
    logger.info("Deleted student %s", student_id)
    return True
