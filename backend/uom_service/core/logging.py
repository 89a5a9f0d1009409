"""
Structured logging configuration using structlog.
Console output while developing, JSON lines everywhere else.
"""

import logging
import sys
from typing import cast

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from uom_service.core.config import Settings, get_settings

# Libraries whose INFO output drowns the service's own events.
_QUIET_LOGGERS = ("sqlalchemy.pool", "uvicorn.access")


def service_context(settings: Settings) -> Processor:
    """Processor stamping every event with the service name, version and environment."""
    static = {
        "service": settings.project_name,
        "version": settings.version,
        "environment": settings.environment,
    }

    def add_service_context(
        _logger: WrappedLogger, _method_name: str, event_dict: EventDict
    ) -> EventDict:
        for key, value in static.items():
            event_dict.setdefault(key, value)
        return event_dict

    return add_service_context


def build_processors(settings: Settings) -> list[Processor]:
    """
    Processor chain for ``settings``.

    Request-scoped values bound with ``structlog.contextvars`` (request id,
    method, path) are merged into every event emitted while a request runs.
    """
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        service_context(settings),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.environment == "development":
        return shared + [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]
    return shared + [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging() -> None:
    """Configure structlog and route the standard library through it."""
    settings = get_settings()

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=settings.effective_log_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, settings.effective_log_level))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance with the given name."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
