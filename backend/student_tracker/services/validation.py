"""
Validation Service - field rules applied to a student payload before it
is persisted.

Rules are an ordered list of (field, attribute, predicate, message). Every
rule is evaluated; no chain short-circuits, so an empty first name reports
both "required" and "at least 2 characters". The result is the ordered
list of violations, empty when the payload is accepted.

Phone rules check the 8 local digits. The country code is added only after
validation succeeds (see services/phone.py).
"""

import re
from typing import List, NamedTuple
from student_tracker.logging_config import get_logger, log_with_context

logger = get_logger("validation")

# ──────────────────────────────────────────────────────────────
# Constraints
# ──────────────────────────────────────────────────────────────
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 100
PHONE_LENGTH = 8
GRADE_MAX_LENGTH = 10
ASSESSMENT_MIN = 0
ASSESSMENT_MAX = 20

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")
PHONE_PATTERN = re.compile(r"^\d{8}$", re.ASCII)


class FieldError(NamedTuple):
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ValidationFailed(Exception):
    """Raised when a payload violates one or more field rules."""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        super().__init__("Validation failed: " + "; ".join(e.message for e in self.errors))


def _not_empty(value) -> bool:
    return value is not None and str(value).strip() != ""


def _min_length(minimum):
    return lambda value: len(value or "") >= minimum


def _max_length(maximum):
    return lambda value: len(value or "") <= maximum


def _exact_length(length):
    return lambda value: len(value or "") == length


def _matches(pattern):
    return lambda value: bool(pattern.fullmatch(value or ""))


def _between(minimum, maximum):
    return lambda value: value is not None and minimum <= value <= maximum


def _name_rules(field, attribute, label):
    return [
        (field, attribute, _not_empty, f"{label} is required"),
        (field, attribute, _min_length(NAME_MIN_LENGTH),
         f"{label} must be at least {NAME_MIN_LENGTH} characters"),
        (field, attribute, _max_length(NAME_MAX_LENGTH),
         f"{label} cannot exceed {NAME_MAX_LENGTH} characters"),
    ]


def _assessment_rule(number):
    return (f"assessment{number}", f"assessment{number}", _between(ASSESSMENT_MIN, ASSESSMENT_MAX),
            f"Assessment {number} must be between {ASSESSMENT_MIN} and {ASSESSMENT_MAX}")


STUDENT_RULES = (
    _name_rules("firstName", "first_name", "First name")
    + _name_rules("lastName", "last_name", "Last name")
    + [
        ("email", "email", _not_empty, "Email is required"),
        ("email", "email", _matches(EMAIL_PATTERN), "Email must be a valid email address"),
        ("email", "email", _max_length(EMAIL_MAX_LENGTH),
         f"Email cannot exceed {EMAIL_MAX_LENGTH} characters"),
        ("phone", "phone", _not_empty, "Phone is required"),
        ("phone", "phone", _exact_length(PHONE_LENGTH), f"Phone must be exactly {PHONE_LENGTH} digits"),
        ("phone", "phone", _matches(PHONE_PATTERN), "Enter valid Phone number"),
        ("grade", "grade", _not_empty, "Grade is required"),
        ("grade", "grade", _max_length(GRADE_MAX_LENGTH),
         f"Grade cannot exceed {GRADE_MAX_LENGTH} characters"),
    ]
    + [_assessment_rule(n) for n in (1, 2, 3)]
)


def validate_student(payload) -> List[FieldError]:
    """
    Evaluate every rule against the payload.

    Args:
        payload: Object exposing first_name, last_name, email, phone,
                 grade and assessment1..3 attributes (e.g. StudentPayload)

    Returns:
        Ordered list of FieldError; empty when the payload is accepted
    """
    errors = []
    for field, attribute, predicate, message in STUDENT_RULES:
        if not predicate(getattr(payload, attribute, None)):
            errors.append(FieldError(field, message))

    if errors:
        log_with_context(logger, "DEBUG",
            "Payload rejected with {} violation(s)".format(len(errors)),
            extra_data={"errors": [e.to_dict() for e in errors]})
    return errors


def ensure_valid(payload):
    """Raise ValidationFailed if validate_student reports any violation."""
    errors = validate_student(payload)
    if errors:
        raise ValidationFailed(errors)
