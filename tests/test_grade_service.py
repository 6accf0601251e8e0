# /tests/test_grade_service.py

from app.models.grade_model import GradeCreate
from app.services import grade_service, class_service, student_service


def test_grade_rows_resolve_names(student_record, class_record, grade_records):
    rows = grade_service.build_grade_rows(grade_records, [student_record], [class_record])

    assert rows[0]["studentName"] == "Ana Lee"
    assert rows[0]["className"] == "Mathematics A"
    assert rows[0]["percentage"] == 90
    assert rows[0]["letter"] == "A"
    assert rows[1]["letter"] == "F"


def test_deleted_class_resolves_to_unknown_without_cascade(db_service, student_record, class_record, grade_records):
    """Deleting a referenced class keeps its grades; their class name becomes 'Unknown'."""
    db_service.add_student(student_record)
    db_service.add_class(class_record)
    db_service.save_grades(grade_records)

    assert class_service.delete_class_by_id("cls_math", db_service) is True

    rows = grade_service.get_grade_rows(db_service)
    assert len(rows) == 2
    assert all(row["className"] == "Unknown" for row in rows)
    assert all(row["studentName"] == "Ana Lee" for row in rows)


def test_deleted_student_resolves_to_unknown(db_service, student_record, class_record, grade_records):
    db_service.add_student(student_record)
    db_service.add_class(class_record)
    db_service.save_grades(grade_records)

    student_service.delete_student("stu_ana", db_service)

    rows = grade_service.get_grade_rows(db_service)
    assert [row["studentName"] for row in rows] == ["Unknown", "Unknown"]


def test_row_percentage_is_rounded_before_lettering():
    # 89.5% rounds to 90 and is shown as an A.
    rows = grade_service.build_grade_rows(
        [{"id": "g", "studentId": "s", "classId": "c", "score": 179, "maxScore": 200}], [], []
    )
    assert rows[0]["percentage"] == 90
    assert rows[0]["letter"] == "A"


def test_create_update_delete_grade(db_service):
    created = grade_service.create_grade(
        GradeCreate(studentId="stu_ana", classId="cls_math", subject="Physics", score=18, maxScore=20, term="Midterm"),
        db_service,
    )
    assert created["id"].startswith("grd_")
    assert db_service.get_all_grades() == [created]

    updated = grade_service.update_grade(
        created["id"],
        GradeCreate(studentId="stu_ana", classId="cls_math", subject="Physics", score=20, maxScore=20, term="Final"),
        db_service,
    )
    assert updated["score"] == 20
    assert db_service.get_grade_by_id(created["id"])["term"] == "Final"

    assert grade_service.delete_grade(created["id"], db_service) is True
    assert grade_service.delete_grade(created["id"], db_service) is False


def test_update_missing_grade_returns_none(db_service, grade_records):
    db_service.save_grades(grade_records)
    result = grade_service.update_grade(
        "grd_missing",
        GradeCreate(studentId="s", classId="c", subject="Art", score=1, term="Q2"),
        db_service,
    )
    assert result is None
    assert db_service.get_all_grades() == grade_records


def test_grade_defaults_follow_the_form():
    grade = GradeCreate(studentId="s", classId="c", subject="Art", term="Q3")
    assert grade.score == 0
    assert grade.maxScore == 100
    assert len(grade.date) == 10


def test_free_entry_term_is_accepted():
    assert GradeCreate(studentId="s", classId="c", subject="Art", term="Summer School").term == "Summer School"


def test_term_options():
    options = grade_service.get_term_options()
    assert [o.value for o in options] == ["Q1", "Q2", "Q3", "Q4", "Midterm", "Final"]
    assert options[0].label == "Quarter 1"


def test_row_with_zero_max_score_has_no_percentage():
    rows = grade_service.build_grade_rows(
        [{"id": "g", "studentId": "s", "classId": "c", "score": 5, "maxScore": 0}], [], []
    )
    assert rows[0]["percentage"] is None
    assert rows[0]["letter"] is None
    assert rows[0]["studentName"] == "Unknown"


def test_student_and_class_selection_is_optional():
    grade = GradeCreate(subject="Art", term="Q1")
    assert grade.studentId == ""
    assert grade.classId == ""
