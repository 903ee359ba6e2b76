"""
Sample students for local development and demos.

Loaded into an empty store at startup when SEED_SAMPLE_DATA is enabled,
and posted to a running server by load_data.py.
"""

from student_tracker.schemas import StudentPayload
from student_tracker.services.students import create_student
from student_tracker.logging_config import get_logger, log_with_context

logger = get_logger("db")

SAMPLE_STUDENTS = [
    {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "phone": "72254856",
        "grade": "10A",
        "enrollmentDate": "2023-09-01",
        "assessment1": 18,
        "assessment2": 19,
        "assessment3": 17
    },
    {
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane.smith@example.com",
        "phone": "71234567",
        "grade": "11B",
        "enrollmentDate": "2023-09-01",
        "assessment1": 15,
        "assessment2": 16,
        "assessment3": 14
    },
    {
        "firstName": "David",
        "lastName": "Johnson",
        "email": "david.johnson@example.com",
        "phone": "73456789",
        "grade": "12C",
        "enrollmentDate": "2023-09-01",
        "assessment1": 12,
        "assessment2": 13,
        "assessment3": 11
    },
]


def seed_sample_students(store) -> int:
    """Insert SAMPLE_STUDENTS if the store is empty. Returns rows inserted."""
    if store.list_all():
        return 0

    for data in SAMPLE_STUDENTS:
        create_student(store, StudentPayload.model_validate(data))

    log_with_context(logger, "INFO", "Seeded {} sample students".format(len(SAMPLE_STUDENTS)))
    return len(SAMPLE_STUDENTS)
