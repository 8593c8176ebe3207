"""Centralized logging configuration for CollegeApp.

Provides rotating file logs with consistent formatting across all components.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Default configuration
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "collegeapp.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# Third-party loggers routed into the CollegeApp log file
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
    capture: tuple[str, ...] = SERVER_LOGGERS,
) -> logging.Logger:
    """Set up logging with rotating file handler.

    The ``collegeapp`` logger and every logger named in ``capture`` share
    the same handlers, so request logs from the server and record changes
    from the store land in one file. Captured loggers stop propagating to
    the root logger to avoid printing twice.

    Args:
        log_dir: Directory for log files. Defaults to 'logs' in current directory.
                 Can be overridden with COLLEGEAPP_LOG_DIR environment variable.
        log_file: Log file name. Defaults to 'collegeapp.log'.
        max_bytes: Maximum size per log file before rotation. Defaults to 10MB.
        backup_count: Number of backup files to keep. Defaults to 5.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
               Can be overridden with COLLEGEAPP_LOG_LEVEL environment variable.
        console: Whether to also log to console. Defaults to True.
        capture: Names of other loggers to attach the same handlers to.

    Returns:
        The root collegeapp logger.
    """
    if log_dir is None:
        log_dir = os.environ.get("COLLEGEAPP_LOG_DIR", DEFAULT_LOG_DIR)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    if level is None:
        level = os.environ.get("COLLEGEAPP_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    log_path = log_dir / log_file

    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)

    logger = logging.getLogger("collegeapp")
    targets = [logger] + [logging.getLogger(name) for name in capture]
    for target in targets:
        _reset_handlers(target)
        target.setLevel(log_level)
        for handler in handlers:
            target.addHandler(handler)
    for target in targets[1:]:
        target.propagate = False

    logger.info("CollegeApp logging initialized (level=%s, file=%s)", level, log_path)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'student_store', 'api.students').
              Will be prefixed with 'collegeapp.'.

    Returns:
        Logger instance for the component.
    """
    if not name.startswith("collegeapp."):
        name = f"collegeapp.{name}"
    return logging.getLogger(name)

