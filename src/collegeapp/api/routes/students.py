"""Student CRUD endpoints."""

import logging
from dataclasses import replace

from fastapi import APIRouter, Request, Response, status

from collegeapp.api.dependencies import StudentStoreDep
from collegeapp.api.exceptions import InvalidRequestError, StudentValidationError
from collegeapp.api.models import (
    APIResponse,
    PatchOperation,
    StudentDto,
    student_to_dto,
)
from collegeapp.api.patch import apply_patch
from collegeapp.api.validation import validate_student
from collegeapp.student_store import Student

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/student", tags=["students"])


def _require_positive_id(student_id: int) -> None:
    if student_id <= 0:
        raise InvalidRequestError(f"Student id must be a positive integer, got {student_id}")


def _check(dto: StudentDto) -> None:
    errors = validate_student(dto)
    if errors:
        raise StudentValidationError(errors)


@router.get("/All", response_model=APIResponse[list[StudentDto]], name="get_all_students")
def list_students(store: StudentStoreDep) -> APIResponse[list[StudentDto]]:
    """List all students."""
    students = store.list_students()
    return APIResponse(data=[student_to_dto(s) for s in students])


@router.get(
    "/{student_id:int}",
    response_model=APIResponse[StudentDto],
    name="get_student_by_id",
)
def get_student_by_id(student_id: int, store: StudentStoreDep) -> APIResponse[StudentDto]:
    """Get a student by ID."""
    _require_positive_id(student_id)
    student = store.get_student(student_id)
    return APIResponse(data=student_to_dto(student))


@router.get("/{name}", response_model=APIResponse[StudentDto], name="get_student_by_name")
def get_student_by_name(name: str, store: StudentStoreDep) -> APIResponse[StudentDto]:
    """Get a student by exact name."""
    if not name.strip():
        raise InvalidRequestError("Student name must not be empty")
    # Negative numbers miss the int route and land here.
    if name.startswith("-") and name[1:].isdigit():
        raise InvalidRequestError(f"Student id must be a positive integer, got {name}")
    student = store.get_student_by_name(name)
    return APIResponse(data=student_to_dto(student))


@router.post(
    "",
    response_model=APIResponse[StudentDto],
    status_code=status.HTTP_201_CREATED,
    name="create_student",
)
def create_student(
    student: StudentDto, request: Request, response: Response, store: StudentStoreDep
) -> APIResponse[StudentDto]:
    """Create a new student. Any ``id`` in the payload is ignored."""
    _check(student)
    created = store.create_student(
        student_name=student.student_name,
        address=student.address,
        email=student.email,
    )
    response.headers["Location"] = str(request.url_for("get_student_by_id", student_id=created.id))
    return APIResponse(data=student_to_dto(created))


@router.put("/Update", status_code=status.HTTP_204_NO_CONTENT, name="update_student")
def update_student(student: StudentDto, store: StudentStoreDep) -> None:
    """Replace the stored fields of the student identified by the payload's ``id``."""
    _require_positive_id(student.id)

    def overwrite(existing: Student) -> Student:
        _check(student)
        return replace(
            existing,
            student_name=student.student_name,
            address=student.address,
            email=student.email,
        )

    store.update_student(student.id, overwrite)


@router.patch(
    "/{student_id}/UpdatePartial",
    status_code=status.HTTP_204_NO_CONTENT,
    name="update_student_partial",
)
def update_student_partial(
    student_id: int, operations: list[PatchOperation], store: StudentStoreDep
) -> None:
    """Apply a patch document to a student.

    The patch runs against a copy of the stored record and the result is
    validated as a whole before it replaces the original.
    """
    _require_positive_id(student_id)

    def patch(existing: Student) -> Student:
        patched = apply_patch(student_to_dto(existing), operations)
        _check(patched)
        return replace(
            existing,
            student_name=patched.student_name,
            address=patched.address,
            email=patched.email,
        )

    store.update_student(student_id, patch)
    logger.debug("Applied %d patch operations to student %d", len(operations), student_id)


@router.delete("/{student_id}", response_model=APIResponse[StudentDto], name="delete_student")
def delete_student(student_id: int, store: StudentStoreDep) -> APIResponse[StudentDto]:
    """Delete a student and return the removed record."""
    _require_positive_id(student_id)
    removed = store.delete_student(student_id)
    return APIResponse(data=student_to_dto(removed))
