"""
Structured logging configuration using structlog.

The package never configures logging on import. Applications that want to
see the package's debug events set ``OUTCOME_LOG_EVENTS`` and call
``configure_logging()`` once at startup, or configure structlog themselves.
Context bound with ``structlog.contextvars`` is merged into every event.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

from outcome.config import get_settings

if TYPE_CHECKING:
    from structlog.typing import Processor


def configure_logging(
    *,
    json_format: bool | None = None,
    log_level: str | None = None,
) -> None:
    """
    Configure structlog.

    Args:
        json_format: Use JSON format instead of console format.
            Defaults to ``OutcomeSettings.json_logs``.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``OutcomeSettings.log_level``.
    """
    settings = get_settings()
    if json_format is None:
        json_format = settings.json_logs
    if log_level is None:
        log_level = settings.log_level
    level = logging.getLevelName(log_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger.

    Args:
        name: Optional logger name (typically __name__).

    Returns:
        A bound structlog logger instance.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
