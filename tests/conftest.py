"""Shared pytest fixtures and configuration."""

import logging

import pytest

from collegeapp.logging import SERVER_LOGGERS
from collegeapp.student_store import StudentStore


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def store() -> StudentStore:
    """Create a StudentStore holding the two sample students."""
    return StudentStore()


@pytest.fixture
def empty_store() -> StudentStore:
    """Create a StudentStore with no students."""
    return StudentStore(seed=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers added by setup_logging after each test."""
    yield
    for name in ("collegeapp", *SERVER_LOGGERS):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
