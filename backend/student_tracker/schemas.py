"""
Pydantic schemas for the student API request body.

The UI sends camelCase JSON (firstName, enrollmentDate, ...). Key matching
is case-insensitive so FirstName, firstname and firstName all bind to the
same field. Missing values fall back to empty defaults so that the field
rules in services/validation.py report them, not the framework. Assessments
must be JSON integers: booleans and numeric strings are rejected.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

TEXT_FIELDS = ("firstName", "lastName", "email", "phone", "grade")


class StudentPayload(BaseModel):
    """Schema for the body of create and update requests."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    first_name: str = Field("", alias="firstName", description="First name (2-50 characters)")
    last_name: str = Field("", alias="lastName", description="Last name (2-50 characters)")
    email: str = Field("", alias="email", description="Email address (max 100 characters)")
    phone: str = Field("", alias="phone", description="8-digit local phone number, e.g. 72254856")
    grade: str = Field("", alias="grade", description="Grade label (max 10 characters)")
    enrollment_date: Optional[date] = Field(None, alias="enrollmentDate",
                                            description="Enrollment date; defaults to today on create")
    assessment1: int = Field(0, alias="assessment1", strict=True, description="Assessment 1 mark (0-20)")
    assessment2: int = Field(0, alias="assessment2", strict=True, description="Assessment 2 mark (0-20)")
    assessment3: int = Field(0, alias="assessment3", strict=True, description="Assessment 3 mark (0-20)")

    @model_validator(mode="before")
    @classmethod
    def canonicalize_keys(cls, data):
        """Map incoming keys onto the camelCase aliases regardless of case."""
        if not isinstance(data, dict):
            return data

        aliases = {}
        for name, field in cls.model_fields.items():
            aliases[name.lower()] = field.alias
            aliases[field.alias.lower()] = field.alias
        canonical = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            alias = aliases.get(key.lower())
            if alias is None:
                continue
            if value is None and alias in TEXT_FIELDS:
                value = ""
            if alias == "enrollmentDate" and isinstance(value, str) and "T" in value:
                # Date pickers send a full ISO timestamp; keep the date part
                value = value.split("T", 1)[0]
            canonical[alias] = value
        return canonical
