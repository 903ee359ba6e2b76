"""
Projection Service - shapes Student records for the API.

- to_list_view: studentId, firstName, lastName only (list screen, hides
  contact details)
- to_student: the full stored record, returned by create and update
- to_detail_view: the full record plus total, average, percentage and
  performanceLevel (detail screen)
"""

from student_tracker.models.student import Student


def _isoformat(value):
    return value.isoformat() if value else None


def to_list_view(student: Student) -> dict:
    return {
        "studentId": student.student_id,
        "firstName": student.first_name,
        "lastName": student.last_name
    }


def to_student(student: Student) -> dict:
    return {
        "studentId": student.student_id,
        "firstName": student.first_name,
        "lastName": student.last_name,
        "email": student.email,
        "phone": student.phone,
        "grade": student.grade,
        "enrollmentDate": _isoformat(student.enrollment_date),
        "assessment1": student.assessment1,
        "assessment2": student.assessment2,
        "assessment3": student.assessment3,
        "createdDate": _isoformat(student.created_date)
    }


def to_detail_view(student: Student) -> dict:
    metrics = student.metrics
    result = to_student(student)
    result.update({
        "total": metrics.total,
        "average": metrics.average,
        "percentage": metrics.percentage,
        "performanceLevel": metrics.performance_level
    })
    return result
