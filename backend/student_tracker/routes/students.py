"""
Students API routes - CRUD endpoints for student records.

Provides endpoints for:
- Listing students (ListView) with an optional sort key
- Viewing a student's details with derived performance metrics
- Creating, updating and deleting students
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response

from student_tracker.schemas import StudentPayload
from student_tracker.store import get_store
from student_tracker.services import students as service
from student_tracker.services.projection import to_student
from student_tracker.services.validation import ValidationFailed
from student_tracker.logging_config import get_logger, log_with_context

router = APIRouter()
logger = get_logger("http")

# Identities are positive and must fit a 64-bit INTEGER primary key
MAX_STUDENT_ID = 2 ** 63 - 1


def validation_error(errors) -> HTTPException:
    """Build the 400 response carrying the ordered field errors."""
    return HTTPException(
        status_code=400,
        detail={
            "message": "Validation failed",
            "errors": [e.to_dict() for e in errors]
        }
    )


def not_found(student_id: int) -> HTTPException:
    log_with_context(logger, "WARNING", "Student {} not found".format(student_id),
                     context={"student_id": student_id})
    return HTTPException(status_code=404, detail="Student not found")


@router.get("/api/students")
def list_students(
    sort: Optional[str] = Query(None, description="Sort key: fname, lname, total, percent"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description="Alias for sort"),
    store=Depends(get_store)
):
    """List students as ListView entries, optionally sorted."""
    return service.list_students(store, sort or sort_order)


@router.get("/api/students/{student_id}")
def get_student(student_id: int = Path(..., ge=1, le=MAX_STUDENT_ID), store=Depends(get_store)):
    """Get a student's details including total, average, percentage and performance level."""
    try:
        return service.get_student(store, student_id)
    except service.StudentNotFound:
        raise not_found(student_id)


@router.post("/api/students", status_code=201)
def create_student(payload: StudentPayload, response: Response, store=Depends(get_store)):
    """Create a student. The phone is entered as 8 digits and stored with +267."""
    try:
        student = service.create_student(store, payload)
    except ValidationFailed as e:
        log_with_context(logger, "WARNING", "Create rejected: {} violation(s)".format(len(e.errors)),
                         extra_data={"errors": [err.to_dict() for err in e.errors]})
        raise validation_error(e.errors)

    response.headers["Location"] = "/api/students/{}".format(student.student_id)
    return to_student(student)


@router.put("/api/students/{student_id}")
def update_student(payload: StudentPayload, student_id: int = Path(..., ge=1, le=MAX_STUDENT_ID), store=Depends(get_store)):
    """Replace every mutable field of a student."""
    try:
        student = service.update_student(store, student_id, payload)
    except service.StudentNotFound:
        raise not_found(student_id)
    except ValidationFailed as e:
        log_with_context(logger, "WARNING", "Update rejected: {} violation(s)".format(len(e.errors)),
                         context={"student_id": student_id},
                         extra_data={"errors": [err.to_dict() for err in e.errors]})
        raise validation_error(e.errors)

    return to_student(student)


@router.delete("/api/students/{student_id}", status_code=204)
def delete_student(student_id: int = Path(..., ge=1, le=MAX_STUDENT_ID), store=Depends(get_store)):
    """Hard-delete a student."""
    try:
        service.delete_student(store, student_id)
    except service.StudentNotFound:
        raise not_found(student_id)
    return Response(status_code=204)
