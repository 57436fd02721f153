"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def setup_logging(log_level: str = "INFO"):
    """Configure structlog with JSON output to stdout.

    Should be called once at application startup.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)


class EventLogger:
    """Reporting sink handed to the engine for its fallback paths.

    Every call emits one structlog event carrying the module, action and data
    context.
    """

    def __init__(self, logger: Any | None = None):
        self._logger = logger or get_logger("money_tracker")

    def log_exception(
        self,
        error: BaseException,
        *,
        module: str,
        action: str,
        data: dict[str, Any] | None = None,
    ) -> None:
        self._logger.error(
            "engine_exception",
            module=module,
            action=action,
            error=str(error),
            error_type=type(error).__name__,
            data=data or {},
        )

    def log_warning(
        self,
        message: str,
        *,
        module: str,
        action: str,
        data: dict[str, Any] | None = None,
    ) -> None:
        self._logger.warning(
            "engine_warning",
            module=module,
            action=action,
            message=message,
            data=data or {},
        )


default_event_logger = EventLogger()
