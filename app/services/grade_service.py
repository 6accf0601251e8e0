# /app/services/grade_service.py

"""
Business logic for grade records, plus the assembly of the grades table.

Grades reference a student and a class by id only. Those references are
never validated and never cascaded, so a grade can outlive the records it
points at; the table then shows "Unknown" in place of the missing name.
"""

import logging
import uuid
from typing import List, Dict, Optional

from ..models import grade_model
from .database_service import DatabaseService
from .dashboard_service import grade_percentage, letter_grade, round_half_up

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


def get_term_options() -> List[grade_model.TermOption]:
    return [grade_model.TermOption(value=term.value, label=term.label) for term in grade_model.Term]


def get_grade_by_id(grade_id: str, db: DatabaseService) -> Optional[Dict]:
    return db.get_grade_by_id(grade_id)


def create_grade(grade_data: grade_model.GradeCreate, db: DatabaseService) -> Dict:
    new_grade_record = grade_data.model_dump()
    new_grade_record['id'] = f"grd_{uuid.uuid4().hex[:12]}"
    db.add_grade(new_grade_record)
    logger.info("Added grade %s for student %s", new_grade_record['id'], new_grade_record['studentId'])
    return new_grade_record


def update_grade(grade_id: str, grade_update: grade_model.GradeCreate, db: DatabaseService) -> Optional[Dict]:
    updated_record = {'id': grade_id, **grade_update.model_dump()}
    if not db.update_grade(grade_id, updated_record):
        logger.warning("Update skipped: grade %s not found", grade_id)
        return None
    logger.info("Updated grade %s", grade_id)
    return updated_record


def delete_grade(grade_id: str, db: DatabaseService) -> bool:
    if not db.delete_grade(grade_id):
        logger.warning("Delete skipped: grade %s not found", grade_id)
        return False
    logger.info("Deleted grade %s", grade_id)
    return True


# --- Data Assembly ---

def resolve_student_name(student_id: str, students: List[Dict]) -> str:
    student = next((s for s in students if s.get('id') == student_id), None)
    return f"{student.get('firstName', '')} {student.get('lastName', '')}" if student else UNKNOWN


def resolve_class_name(class_id: str, classes: List[Dict]) -> str:
    class_item = next((c for c in classes if c.get('id') == class_id), None)
    return class_item.get('name', '') if class_item else UNKNOWN


def _row_percentage(grade: Dict) -> Optional[int]:
    """Rounded percentage, or None when the stored scores cannot produce one."""
    try:
        return round_half_up(grade_percentage(float(grade.get('score', 0)), float(grade.get('maxScore', 100))))
    except (TypeError, ValueError, ZeroDivisionError, OverflowError):
        return None


def build_grade_rows(grades: List[Dict], students: List[Dict], classes: List[Dict]) -> List[Dict]:
    rows = []
    for grade in grades:
        percentage = _row_percentage(grade)
        rows.append({
            **grade,
            "studentName": resolve_student_name(grade.get('studentId'), students),
            "className": resolve_class_name(grade.get('classId'), classes),
            "percentage": percentage,
            "letter": letter_grade(percentage) if percentage is not None else None,
        })
    return rows


def get_grade_rows(db: DatabaseService) -> List[Dict]:
    """Loads all three collections and returns the enriched grades table."""
    return build_grade_rows(db.get_all_grades(), db.get_all_students(), db.get_all_classes())
