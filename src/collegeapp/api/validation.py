"""Validation rules for student payloads."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Any

from email_validator import EmailNotValidError, validate_email

from collegeapp.api.models import FieldError, StudentDto

MAX_NAME_LENGTH = 30
MIN_AGE = 10
MAX_AGE = 20


def validate_student(dto: StudentDto, today: date | None = None) -> list[FieldError]:
    """Check a student payload against every rule.

    Args:
        dto: The payload to check.
        today: Reference day for the admission date check. Defaults to today.

    Returns:
        One FieldError per failing rule, in field order. Empty if valid.
    """
    if today is None:
        today = date.today()
    errors: list[FieldError] = []

    name = dto.student_name
    if name is None or not name.strip():
        errors.append(FieldError(field="studentName", message="Student name is required"))
    elif len(name) > MAX_NAME_LENGTH:
        errors.append(
            FieldError(
                field="studentName",
                message=f"Student name must be at most {MAX_NAME_LENGTH} characters",
            )
        )

    if dto.email is not None:
        try:
            validate_email(dto.email, check_deliverability=False)
        except EmailNotValidError:
            errors.append(FieldError(field="email", message="Please enter valid email address"))

    if dto.age is not None and not MIN_AGE <= dto.age <= MAX_AGE:
        errors.append(
            FieldError(field="age", message=f"Age must be between {MIN_AGE} and {MAX_AGE}")
        )

    if dto.address is None or not dto.address.strip():
        errors.append(FieldError(field="address", message="Address is required"))

    if (
        dto.password is not None
        and dto.confirm_password is not None
        and dto.password != dto.confirm_password
    ):
        errors.append(
            FieldError(field="confirmPassword", message="Password and confirm password do not match")
        )

    if dto.admission_date is not None and dto.admission_date < today:
        errors.append(
            FieldError(
                field="admissionDate",
                message="Admission date must be greater than or equal to today's date",
            )
        )

    return errors


def field_errors_from_pydantic(errors: Sequence[dict[str, Any]]) -> list[FieldError]:
    """Convert pydantic error dicts into FieldErrors.

    The leading ``body``/``path``/``query`` location segment is dropped so
    the field reads the way the client sent it.
    """
    result = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query"):
            loc = loc[1:]
        result.append(FieldError(field=".".join(loc) or "body", message=error["msg"]))
    return result
