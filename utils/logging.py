# utils/logging.py

"""Logging helpers for the narrative engine runner."""

from __future__ import annotations

import logging
import logging.handlers
import os

import structlog
from config import settings
from rich.logging import RichHandler

logger = structlog.get_logger(__name__)

__all__ = ["setup_logging"]

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5
QUIET_LOGGERS = ("httpx", "httpcore")


def _log_file_path() -> str | None:
    if not settings.LOG_FILE:
        return None
    if os.path.isabs(settings.LOG_FILE):
        return settings.LOG_FILE
    return os.path.join(settings.LOG_DIR, settings.LOG_FILE)


def _plain_formatter() -> logging.Formatter:
    return logging.Formatter(settings.LOG_FORMAT, datefmt=settings.LOG_DATE_FORMAT)


def _file_handler(file_path: str) -> logging.Handler:
    log_dir = os.path.dirname(file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        file_path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(_plain_formatter())
    return handler


def _console_handler() -> logging.Handler:
    if settings.ENABLE_RICH_PROGRESS:
        return RichHandler(rich_tracebacks=True, show_path=False, markup=False)
    handler = logging.StreamHandler()
    handler.setFormatter(_plain_formatter())
    return handler


def setup_logging() -> None:
    """Route structlog events through stdlib handlers (file plus console)."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.format_exc_info,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(settings.LOG_LEVEL_STR)

    file_path = _log_file_path()
    if file_path:
        try:
            root_logger.addHandler(_file_handler(file_path))
        except OSError as e:
            logger.error("Error setting up file logger: %s", e)

    root_logger.addHandler(_console_handler())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger().info(
        "Engine logging setup complete.",
        log_level=logging.getLevelName(root_logger.level),
    )
