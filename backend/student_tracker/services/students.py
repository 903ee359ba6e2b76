"""
Students Service - the five student operations behind the REST API.

Each operation is a thin composition of validation, phone normalization,
one record store round trip and (for reads) projection:

- list_students: fetch all, sort by a fixed key, project to ListView
- get_student: fetch by id, project to DetailView
- create_student: validate, prefix phone, stamp created_date, insert
- update_student: existence check, validate, normalize phone, overwrite
- delete_student: existence check, hard delete

Existence checks and validation always complete before any store write,
so a failed operation never leaves a partial mutation behind.
"""

import time
from datetime import date
from typing import List, Optional

from student_tracker.models.student import Student, utcnow
from student_tracker.schemas import StudentPayload
from student_tracker.services.phone import add_country_code, ensure_country_code, strip_country_code
from student_tracker.services.projection import to_detail_view, to_list_view
from student_tracker.services.validation import ensure_valid
from student_tracker.logging_config import get_logger, log_with_context

# Channel logger for student operations
logger = get_logger("students")


class StudentNotFound(Exception):
    """No student exists with the requested identity."""

    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__("Student {} not found".format(student_id))


# ──────────────────────────────────────────────────────────────
# Sort keys: name -> (key function, descending)
# ──────────────────────────────────────────────────────────────
# Names compare case-insensitively: "amy" sorts before "Bob"
_BY_FIRST_NAME = (lambda s: (s.first_name or "").casefold(), False)
_BY_LAST_NAME = (lambda s: (s.last_name or "").casefold(), False)
_BY_TOTAL = (lambda s: s.total, True)
_BY_PERCENTAGE = (lambda s: s.percentage, True)

SORT_KEYS = {
    "fname": _BY_FIRST_NAME,
    "first-name": _BY_FIRST_NAME,
    "lname": _BY_LAST_NAME,
    "last-name": _BY_LAST_NAME,
    "total": _BY_TOTAL,
    "percent": _BY_PERCENTAGE,
    "percentage": _BY_PERCENTAGE,
}


def sort_students(students: List[Student], sort_key: Optional[str]) -> List[Student]:
    """
    Order students by one of SORT_KEYS.

    Absent or unrecognized keys keep the store's natural order. The sort
    is stable, so ties keep their natural order too.
    """
    if not sort_key:
        return list(students)
    order = SORT_KEYS.get(sort_key.strip().lower())
    if order is None:
        return list(students)
    key, descending = order
    return sorted(students, key=key, reverse=descending)


def list_students(store, sort_key: Optional[str] = None) -> List[dict]:
    start_time = time.time()

    students = sort_students(store.list_all(), sort_key)

    duration_ms = (time.time() - start_time) * 1000
    log_with_context(logger, "INFO",
        "Listed {} students".format(len(students)),
        context={"sort_key": sort_key or ""},
        extra_data={"duration_ms": round(duration_ms, 2)})

    return [to_list_view(s) for s in students]


def get_student(store, student_id: int) -> dict:
    student = store.find_by_id(student_id)
    if student is None:
        raise StudentNotFound(student_id)
    return to_detail_view(student)


def create_student(store, payload: StudentPayload) -> Student:
    """
    Validate and insert a new student.

    The phone is validated as 8 local digits and then stored with the
    country code prefix. Identity and created_date are assigned here and
    by the store; any client-supplied values for them are ignored.

    Raises:
        ValidationFailed: one or more field rules were violated
        StoreFailure: the record store could not insert the row
    """
    ensure_valid(payload)

    student = Student(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        phone=add_country_code(payload.phone),
        grade=payload.grade,
        enrollment_date=payload.enrollment_date or date.today(),
        assessment1=payload.assessment1,
        assessment2=payload.assessment2,
        assessment3=payload.assessment3,
        created_date=utcnow()
    )
    created = store.insert(student)

    log_with_context(logger, "INFO",
        "Created student: {} {}".format(created.first_name, created.last_name),
        context={"student_id": created.student_id},
        extra_data={"total": created.total, "performance_level": created.performance_level})
    return created


def update_student(store, student_id: int, payload: StudentPayload) -> Student:
    """
    Overwrite every mutable field of an existing student.

    The client may send the phone back as stored ("+267 71234567") or as
    local digits; either way the local digits are validated and the
    stored value carries the prefix exactly once. student_id and
    created_date are never changed. enrollment_date is kept when the
    payload omits it.

    Raises:
        StudentNotFound: no student with this id
        ValidationFailed: one or more field rules were violated
    """
    existing = store.find_by_id(student_id)
    if existing is None:
        raise StudentNotFound(student_id)

    ensure_valid(payload.model_copy(update={"phone": strip_country_code(payload.phone)}))

    existing.first_name = payload.first_name
    existing.last_name = payload.last_name
    existing.email = payload.email
    existing.phone = ensure_country_code(payload.phone)
    existing.grade = payload.grade
    if payload.enrollment_date is not None:
        existing.enrollment_date = payload.enrollment_date
    existing.assessment1 = payload.assessment1
    existing.assessment2 = payload.assessment2
    existing.assessment3 = payload.assessment3

    store.update(existing)

    log_with_context(logger, "INFO",
        "Updated student {}".format(student_id),
        context={"student_id": student_id},
        extra_data={"total": existing.total, "performance_level": existing.performance_level})
    return existing


def delete_student(store, student_id: int) -> None:
    if store.find_by_id(student_id) is None:
        raise StudentNotFound(student_id)

    store.delete(student_id)

    log_with_context(logger, "INFO", "Deleted student {}".format(student_id),
                     context={"student_id": student_id})
