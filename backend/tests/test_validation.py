from __future__ import annotations

import pytest

from student_tracker.services.validation import (
    FieldError,
    ValidationFailed,
    ensure_valid,
    validate_student,
)


def _messages(errors):
    return [e.message for e in errors]


def test_valid_payload_is_accepted(make_payload) -> None:
    assert validate_student(make_payload()) == []


def test_two_character_first_name_passes(make_payload) -> None:
    assert validate_student(make_payload(firstName="Jo")) == []


def test_one_character_first_name_fails(make_payload) -> None:
    errors = validate_student(make_payload(firstName="J"))
    assert errors == [FieldError("firstName", "First name must be at least 2 characters")]


def test_empty_name_reports_every_rule_in_chain(make_payload) -> None:
    errors = validate_student(make_payload(lastName=""))
    assert errors == [
        FieldError("lastName", "Last name is required"),
        FieldError("lastName", "Last name must be at least 2 characters"),
    ]


def test_name_length_upper_bound(make_payload) -> None:
    assert validate_student(make_payload(firstName="a" * 50)) == []
    assert _messages(validate_student(make_payload(firstName="a" * 51))) == [
        "First name cannot exceed 50 characters"
    ]


def test_whitespace_only_counts_as_empty(make_payload) -> None:
    errors = validate_student(make_payload(grade="   "))
    assert FieldError("grade", "Grade is required") in errors


@pytest.mark.parametrize("phone", ["7225485", "722548561", "7225485a", "+267 72254856"])
def test_invalid_phones_fail(make_payload, phone: str) -> None:
    errors = validate_student(make_payload(phone=phone))
    assert errors
    assert {e.field for e in errors} == {"phone"}


def test_eight_digit_phone_passes(make_payload) -> None:
    assert validate_student(make_payload(phone="72254856")) == []


def test_seven_digit_phone_reports_length_and_pattern(make_payload) -> None:
    assert _messages(validate_student(make_payload(phone="7225485"))) == [
        "Phone must be exactly 8 digits",
        "Enter valid Phone number",
    ]


def test_non_ascii_digits_are_rejected(make_payload) -> None:
    assert validate_student(make_payload(phone="٧٢٢٥٤٨٥٦")) == [
        FieldError("phone", "Enter valid Phone number")
    ]


@pytest.mark.parametrize("email", ["john", "john@example", "@example.com", "john@@example.com", "jo hn@example.com"])
def test_malformed_emails_fail(make_payload, email: str) -> None:
    assert FieldError("email", "Email must be a valid email address") in validate_student(make_payload(email=email))


def test_email_length_limit(make_payload) -> None:
    email = "a" * 88 + "@example.com"
    assert len(email) == 100
    assert validate_student(make_payload(email=email)) == []
    assert _messages(validate_student(make_payload(email="a" + email))) == [
        "Email cannot exceed 100 characters"
    ]


def test_grade_length_limit(make_payload) -> None:
    assert validate_student(make_payload(grade="1234567890")) == []
    assert _messages(validate_student(make_payload(grade="12345678901"))) == [
        "Grade cannot exceed 10 characters"
    ]


@pytest.mark.parametrize("value", [0, 20])
def test_assessment_bounds_inclusive(make_payload, value: int) -> None:
    assert validate_student(make_payload(assessment1=value, assessment2=value, assessment3=value)) == []


def test_out_of_range_assessments_each_reported(make_payload) -> None:
    errors = validate_student(make_payload(assessment1=-1, assessment2=21, assessment3=20))
    assert errors == [
        FieldError("assessment1", "Assessment 1 must be between 0 and 20"),
        FieldError("assessment2", "Assessment 2 must be between 0 and 20"),
    ]


def test_all_violations_reported_in_rule_order(make_payload) -> None:
    errors = validate_student(make_payload(firstName="J", email="bad", phone="123", assessment3=25))
    assert [e.field for e in errors] == ["firstName", "email", "phone", "phone", "assessment3"]


def test_ensure_valid_raises_with_errors(make_payload) -> None:
    with pytest.raises(ValidationFailed) as exc_info:
        ensure_valid(make_payload(firstName="J"))
    assert exc_info.value.errors == [FieldError("firstName", "First name must be at least 2 characters")]
