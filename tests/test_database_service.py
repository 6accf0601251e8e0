# /tests/test_database_service.py

import pytest

from app.core import config
from app.services.database_service import DatabaseService, build_store
from app.services.database_helpers.key_value_store import InMemoryKeyValueStore, JsonFileKeyValueStore


@pytest.fixture
def file_db_service(tmp_path):
    """
    Creates a NEW, CLEAN DatabaseService for EACH test function, with its
    file I/O redirected to a temporary directory.
    """
    return DatabaseService(JsonFileKeyValueStore(str(tmp_path / "data")))


def test_add_and_get_class(file_db_service, class_record):
    """Tests that a class can be added and then retrieved successfully."""
    file_db_service.add_class(class_record)
    retrieved_class = file_db_service.get_class_by_id("cls_math")
    assert retrieved_class is not None
    assert retrieved_class["name"] == "Mathematics A"


def test_get_non_existent_class(file_db_service):
    """Tests that getting a non-existent class returns None from an empty store."""
    assert file_db_service.get_class_by_id("cls_no_exist") is None


def test_get_all_classes(file_db_service):
    """Tests that get_all_classes returns ONLY the classes added in this test, in order."""
    file_db_service.add_class({"id": "cls_1", "name": "Class 1"})
    file_db_service.add_class({"id": "cls_2", "name": "Class 2"})

    all_classes = file_db_service.get_all_classes()

    assert isinstance(all_classes, list)
    assert len(all_classes) == 2
    assert all_classes[0]['name'] == 'Class 1'
    assert all_classes[1]['name'] == 'Class 2'


def test_student_scenario_add_then_delete(file_db_service, student_record):
    """Starting from empty storage: add one student, list it, delete it, list nothing."""
    file_db_service.add_student(student_record)
    assert file_db_service.get_all_students() == [student_record]

    file_db_service.delete_student(student_record["id"])
    assert file_db_service.get_all_students() == []


def test_collections_are_independent(db_service, student_record, class_record, grade_records):
    db_service.add_student(student_record)
    db_service.add_class(class_record)
    db_service.save_grades(grade_records)

    db_service.save_students([])

    assert db_service.get_all_students() == []
    assert db_service.get_all_classes() == [class_record]
    assert db_service.get_all_grades() == grade_records


def test_deleting_a_class_does_not_cascade_to_grades(db_service, class_record, grade_records):
    db_service.add_class(class_record)
    db_service.save_grades(grade_records)

    db_service.delete_class("cls_math")

    assert db_service.get_all_classes() == []
    assert db_service.get_all_grades() == grade_records


def test_update_grade_reports_whether_it_matched(db_service, grade_records):
    db_service.save_grades(grade_records)
    changed = {**grade_records[0], "score": 75}

    assert db_service.update_grade("grd_1", changed) is True
    assert db_service.update_grade("grd_missing", changed) is False
    assert db_service.get_all_grades()[0]["score"] == 75


def test_build_store_selects_backend(tmp_path, mocker):
    mocker.patch.object(config, "DATA_DIR", str(tmp_path))
    assert isinstance(build_store("memory"), InMemoryKeyValueStore)
    json_store = build_store("json")
    assert isinstance(json_store, JsonFileKeyValueStore)
    assert str(json_store.data_dir) == str(tmp_path)


def test_build_store_requires_session_for_sql():
    with pytest.raises(ValueError):
        build_store("sql")


def test_build_store_rejects_unknown_backend():
    with pytest.raises(ValueError, match="Unknown STORAGE_BACKEND"):
        build_store("redis")
