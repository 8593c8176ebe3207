"""Custom exceptions for Student Store."""


class StudentStoreError(Exception):
    """Base exception for Student Store errors."""


class StudentNotFoundError(StudentStoreError):
    """Student with given ID or name does not exist."""
