"""Exceptions raised by the REST API layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collegeapp.api.models import FieldError


class APIError(Exception):
    """Base exception for request handling errors."""

    pass


class InvalidRequestError(APIError):
    """Request is malformed (e.g. a non-positive id)."""

    pass


class StudentValidationError(APIError):
    """Student payload failed one or more validation rules."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = errors
        fields = ", ".join(e.field for e in errors)
        super().__init__(f"Validation failed for: {fields}")


class PatchError(APIError):
    """Patch document could not be applied."""

    pass
