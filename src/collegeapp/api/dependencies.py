"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from collegeapp.student_store import StudentStore


def get_student_store(request: Request) -> StudentStore:
    """Dependency that provides the app's StudentStore instance."""
    store = getattr(request.app.state, "student_store", None)
    if store is None:
        raise RuntimeError("StudentStore not initialized. Build the app with create_app().")
    return store


# Type alias for dependency injection
StudentStoreDep = Annotated[StudentStore, Depends(get_student_store)]
