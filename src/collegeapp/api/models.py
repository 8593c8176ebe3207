"""Pydantic models for REST API."""

from datetime import date, datetime
from enum import StrEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from collegeapp.student_store import Student

T = TypeVar("T")


class FieldError(BaseModel):
    """A single failed validation rule."""

    field: str
    message: str


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None
    errors: list[FieldError] | None = None


def normalize_field_key(key: str) -> str:
    """Fold a wire key so ``StudentName``, ``studentName`` and ``student_name`` match."""
    return key.replace("_", "").lower()


# Student models


class StudentDto(BaseModel):
    """Transfer representation of a student.

    Only ``id``, ``studentName``, ``address`` and ``email`` are stored. The
    other fields are checked by ``validate_student`` and rendered as null.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = 0
    student_name: str | None = None
    email: str | None = None
    age: int | None = None
    address: str | None = None
    password: str | None = None
    confirm_password: str | None = None
    admission_date: date | None = None

    @model_validator(mode="before")
    @classmethod
    def match_keys(cls, data: Any) -> Any:
        """Bind input keys case-insensitively."""
        if not isinstance(data, dict):
            return data
        aliases = {
            normalize_field_key(name): field.alias or name
            for name, field in cls.model_fields.items()
        }
        return {
            aliases.get(normalize_field_key(key), key) if isinstance(key, str) else key: value
            for key, value in data.items()
        }

    @field_validator("admission_date", mode="before")
    @classmethod
    def date_from_datetime(cls, value: Any) -> Any:
        # Clients may send a full timestamp; only the calendar day matters.
        if isinstance(value, str) and len(value) > 10:
            return datetime.fromisoformat(value).date()
        if isinstance(value, datetime):
            return value.date()
        return value


def student_to_dto(student: Student) -> StudentDto:
    """Convert a stored Student to its transfer representation."""
    return StudentDto(
        id=student.id,
        student_name=student.student_name,
        address=student.address,
        email=student.email,
    )


# Patch models


class PatchOp(StrEnum):
    """Supported patch operation kinds."""

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


class PatchOperation(BaseModel):
    """One field-level instruction in a patch document."""

    model_config = ConfigDict(populate_by_name=True)

    op: PatchOp
    path: str = Field(..., pattern=r"^/")
    value: Any = None
    from_: str | None = Field(default=None, alias="from", pattern=r"^/")

    @field_validator("op", mode="before")
    @classmethod
    def fold_op_case(cls, value: Any) -> Any:
        """Accept ``Replace``, ``REPLACE`` and ``replace`` alike."""
        return value.lower() if isinstance(value, str) else value

    @model_validator(mode="after")
    def check_operands(self) -> "PatchOperation":
        """Require the operands each op needs."""
        if self.op in (PatchOp.ADD, PatchOp.REPLACE, PatchOp.TEST):
            if "value" not in self.model_fields_set:
                raise ValueError(f"'{self.op}' operation requires 'value'")
        if self.op in (PatchOp.MOVE, PatchOp.COPY) and self.from_ is None:
            raise ValueError(f"'{self.op}' operation requires 'from'")
        return self


# Health models


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str
    service: str
    version: str
    students: int
