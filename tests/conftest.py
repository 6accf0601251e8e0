# /tests/conftest.py

import pytest

from app.services.database_helpers.key_value_store import InMemoryKeyValueStore
from app.services.database_service import DatabaseService


@pytest.fixture
def store():
    """A fresh, empty in-memory store for each test."""
    return InMemoryKeyValueStore()


@pytest.fixture
def db_service(store):
    """A DatabaseService wired to the isolated in-memory store."""
    return DatabaseService(store)


@pytest.fixture
def student_record():
    return {
        "id": "stu_ana", "firstName": "Ana", "lastName": "Lee", "email": "ana.lee@example.com",
        "phone": "555-0100", "dateOfBirth": "2010-04-02", "grade": "9", "classId": "cls_math",
        "enrollmentDate": "2024-09-01", "guardianName": "Min Lee", "guardianPhone": "555-0101",
        "address": "12 Elm Street",
    }


@pytest.fixture
def class_record():
    return {
        "id": "cls_math", "name": "Mathematics A", "teacherName": "Dr. John Smith", "grade": "9",
        "academicYear": "2024-2025", "capacity": 30, "schedule": "Mon/Wed/Fri 9:00-10:30",
    }


@pytest.fixture
def grade_records():
    return [
        {"id": "grd_1", "studentId": "stu_ana", "classId": "cls_math", "subject": "Mathematics",
         "score": 90, "maxScore": 100, "date": "2024-10-01", "term": "Q1"},
        {"id": "grd_2", "studentId": "stu_ana", "classId": "cls_math", "subject": "History",
         "score": 50, "maxScore": 100, "date": "2024-10-02", "term": "Q1"},
    ]
