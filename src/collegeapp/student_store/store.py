"""StudentStore - Main API for Student Store operations."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from dataclasses import replace

from collegeapp.logging import get_logger
from collegeapp.student_store.exceptions import StudentNotFoundError
from collegeapp.student_store.models import SEED_STUDENTS, Student

logger = get_logger("student_store")


class StudentStore:
    """Main API for Student Store operations.

    Holds student records in insertion order for the lifetime of the
    process. Every read and write takes a single lock, and callers only
    ever receive copies of the stored records.
    """

    def __init__(self, seed: bool = True, students: Iterable[Student] | None = None) -> None:
        """Initialize the store.

        Args:
            seed: Load the two sample students when no explicit records are given.
            students: Initial records. Overrides ``seed`` when provided.
        """
        self._lock = threading.Lock()
        if students is None:
            students = SEED_STUDENTS if seed else ()
        self._students: list[Student] = [replace(s) for s in students]

    def _find_index(self, student_id: int) -> int:
        for index, student in enumerate(self._students):
            if student.id == student_id:
                return index
        raise StudentNotFoundError(f"The student with id {student_id} not found")

    def _next_id(self) -> int:
        return max((s.id for s in self._students), default=0) + 1

    # --- Read Operations ---

    def list_students(self) -> list[Student]:
        """List all students in insertion order."""
        with self._lock:
            return [replace(s) for s in self._students]

    def count(self) -> int:
        """Return the number of stored students."""
        with self._lock:
            return len(self._students)

    def get_student(self, student_id: int) -> Student:
        """Get student by ID.

        Args:
            student_id: The student's unique ID

        Returns:
            A copy of the stored Student

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        with self._lock:
            return replace(self._students[self._find_index(student_id)])

    def get_student_by_name(self, name: str) -> Student:
        """Get the first student whose name matches exactly.

        Args:
            name: The student's name (case-sensitive)

        Returns:
            A copy of the stored Student

        Raises:
            StudentNotFoundError: If no student has that name
        """
        with self._lock:
            for student in self._students:
                if student.student_name == name:
                    return replace(student)
        raise StudentNotFoundError(f"The student with name {name} not found")

    # --- Write Operations ---

    def create_student(self, student_name: str, address: str, email: str | None = None) -> Student:
        """Create a new student.

        Args:
            student_name: Display name
            address: Postal address
            email: Email address (optional)

        Returns:
            The created Student with its assigned ID
        """
        with self._lock:
            student = Student(
                id=self._next_id(),
                student_name=student_name,
                address=address,
                email=email,
            )
            self._students.append(student)
            created = replace(student)
        logger.info("Created student %d (%s)", created.id, created.student_name)
        return created

    def update_student(self, student_id: int, transform: Callable[[Student], Student]) -> Student:
        """Replace a student with a transformed copy.

        The lookup, the transform and the swap happen under the store lock,
        so a transform that validates its result sees a consistent record.
        If ``transform`` raises, the store is left unchanged.

        Args:
            student_id: The student's unique ID
            transform: Receives a copy of the stored record and returns the new one

        Returns:
            The updated Student

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        with self._lock:
            index = self._find_index(student_id)
            updated = replace(transform(replace(self._students[index])), id=student_id)
            self._students[index] = updated
            result = replace(updated)
        logger.info("Updated student %d", student_id)
        return result

    def delete_student(self, student_id: int) -> Student:
        """Delete a student.

        Args:
            student_id: The student's unique ID

        Returns:
            The removed Student

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        with self._lock:
            removed = self._students.pop(self._find_index(student_id))
        logger.info("Deleted student %d", student_id)
        return removed
