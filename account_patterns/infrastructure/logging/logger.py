"""Structured logging built on structlog and the stdlib logging tree."""
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from account_patterns.config.schemas import LoggingConfig

LOGGER_NAMESPACE = "account_patterns"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller information to each record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, schema defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from account_patterns.config.schemas import LoggingConfig

        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    destination = config.destination.value

    handlers: List[logging.Handler] = []

    if destination in ("file", "both"):
        log_dir = os.path.dirname(os.path.expandvars(config.file_path))
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.expandvars(config.file_path),
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(file_handler)

    if destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = get_logger(LOGGER_NAMESPACE)
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to a stdlib logger of the given name."""
    return structlog.get_logger(name)


_configure_structlog()
