"""Health check endpoint."""

from fastapi import APIRouter

from collegeapp import __version__
from collegeapp.api.dependencies import StudentStoreDep
from collegeapp.api.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(store: StudentStoreDep) -> HealthResponse:
    """Report that the API is up and how many students it holds."""
    return HealthResponse(
        status="ok",
        service="CollegeApp API",
        version=__version__,
        students=store.count(),
    )
