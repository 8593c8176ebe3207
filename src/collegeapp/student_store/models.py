"""Record types held by the Student Store."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Student:
    """A stored student record."""

    id: int
    student_name: str
    address: str
    email: str | None = None


SEED_STUDENTS: tuple[Student, ...] = (
    Student(
        id=1,
        student_name="Student 1",
        email="studentemail1@gmail.com",
        address="Hyd, soksoks , soksoks",
    ),
    Student(
        id=2,
        student_name="Student 2",
        email="studentemail2@gmail.com",
        address="Banglore, INDIA",
    ),
)
