"""
Logging setup for the service layer.
"""

import logging
import sys

from entity_services.core.config import settings


def setup_logging() -> None:
    """
    Configure the root logger with a stdout handler.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    # Set log levels for specific libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured",
        extra={
            "storage_backend": settings.STORAGE_BACKEND,
            "service_trace": settings.SERVICE_TRACE_ENABLED,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(name)


def trace(logger: logging.Logger, message: str, *args) -> None:
    """Emit a debug trace line when service tracing is enabled."""
    if settings.SERVICE_TRACE_ENABLED:
        logger.debug(message, *args)
