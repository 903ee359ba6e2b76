from __future__ import annotations

from datetime import date, datetime

from student_tracker.models.student import Student
from student_tracker.services.projection import to_detail_view, to_list_view, to_student


def _student() -> Student:
    return Student(
        student_id=7,
        first_name="Jane",
        last_name="Smith",
        email="jane.smith@example.com",
        phone="+267 71234567",
        grade="11B",
        enrollment_date=date(2023, 9, 1),
        assessment1=15,
        assessment2=16,
        assessment3=14,
        created_date=datetime(2024, 1, 15, 8, 30, 0),
    )


def test_list_view_keeps_only_identity_and_names() -> None:
    assert to_list_view(_student()) == {"studentId": 7, "firstName": "Jane", "lastName": "Smith"}


def test_student_shape_has_every_stored_field() -> None:
    assert to_student(_student()) == {
        "studentId": 7,
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane.smith@example.com",
        "phone": "+267 71234567",
        "grade": "11B",
        "enrollmentDate": "2023-09-01",
        "assessment1": 15,
        "assessment2": 16,
        "assessment3": 14,
        "createdDate": "2024-01-15T08:30:00",
    }


def test_detail_view_adds_derived_fields() -> None:
    detail = to_detail_view(_student())
    assert detail["total"] == 45
    assert detail["average"] == 15.0
    assert detail["percentage"] == 75.0
    assert detail["performanceLevel"] == "Good"
    assert set(to_student(_student())) < set(detail)
