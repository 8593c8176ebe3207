"""FastAPI application setup."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from collegeapp import __version__
from collegeapp.api.exceptions import (
    InvalidRequestError,
    PatchError,
    StudentValidationError,
)
from collegeapp.api.models import APIResponse
from collegeapp.api.routes import health, students
from collegeapp.api.validation import field_errors_from_pydantic
from collegeapp.student_store import (
    StudentNotFoundError,
    StudentStore,
    StudentStoreError,
)

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int, error: str, errors: list | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=error, errors=errors).model_dump(),
    )


def create_app(seed: bool = True, store: StudentStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        seed: Load the sample students into a new store.
        store: Store to serve. A fresh StudentStore is created when omitted.
    """
    app = FastAPI(
        title="CollegeApp API",
        description="REST API for managing student records",
        version=__version__,
    )

    app.state.student_store = store if store is not None else StudentStore(seed=seed)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(
        request: Request, exc: StudentNotFoundError
    ) -> JSONResponse:
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return _error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(StudentStoreError)
    async def student_store_error_handler(
        request: Request, exc: StudentStoreError
    ) -> JSONResponse:
        logger.error("Student store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError) -> JSONResponse:
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(PatchError)
    async def patch_error_handler(request: Request, exc: PatchError) -> JSONResponse:
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(StudentValidationError)
    async def student_validation_handler(
        request: Request, exc: StudentValidationError
    ) -> JSONResponse:
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "One or more validation errors occurred",
            [e.model_dump() for e in exc.errors],
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = field_errors_from_pydantic(exc.errors())
        logger.warning(
            "%s %s: invalid request (%s)",
            request.method,
            request.url.path,
            ", ".join(e.field for e in errors),
        )
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "One or more validation errors occurred",
            [e.model_dump() for e in errors],
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    # Include routers
    app.include_router(students.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    return app
