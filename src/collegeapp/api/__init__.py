"""REST API for CollegeApp."""

from collegeapp.api.app import create_app
from collegeapp.api.models import (
    APIResponse,
    FieldError,
    PatchOperation,
    StudentDto,
)

__all__ = [
    "APIResponse",
    "FieldError",
    "PatchOperation",
    "StudentDto",
    "create_app",
]
