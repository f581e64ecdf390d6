"""
Structured logging for lifecycle-manager.

Orchestrators obtain loggers with :func:`get_logger` and emit snake_case
events (``async_init_selected``, ``async_dispose_skipped``) with key/value
fields. :func:`configure_logging` decides once how those events render; it
is called by :meth:`LifecycleManagerConfig.from_settings` with the
``LIFECYCLE_LOG_LEVEL`` / ``LIFECYCLE_LOG_JSON`` values, or directly by an
application that builds its config by hand.

Examples:
    >>> from lifecycle_manager.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=False)
    >>> logger = get_logger(__name__)
    >>> logger.debug("async_init_selected", names=["db", "cache"])

Tags:
    logging, structlog, observability
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

SERVICE_NAME = "lifecycle-manager"


def _add_service_name(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict.setdefault("service.name", SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    add_timestamp: bool = True,
) -> None:
    """Configure structlog for lifecycle events.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: True for JSON lines, False for console, None for JSON when stdout is not a tty
        add_timestamp: Prefix events with an ISO timestamp
    """
    if json_format is None:
        json_format = not sys.stdout.isatty()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.dev.set_exc_info,
        _add_service_name,
    ]
    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    processors.append(
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


__all__ = ["configure_logging", "get_logger", "SERVICE_NAME"]
