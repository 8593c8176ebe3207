"""Student Store - In-memory storage for student records."""

from collegeapp.student_store.exceptions import (
    StudentNotFoundError,
    StudentStoreError,
)
from collegeapp.student_store.models import SEED_STUDENTS, Student
from collegeapp.student_store.store import StudentStore

__all__ = [
    "SEED_STUDENTS",
    "Student",
    "StudentNotFoundError",
    "StudentStore",
    "StudentStoreError",
]
