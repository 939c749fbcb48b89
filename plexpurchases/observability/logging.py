"""
Structured Logging with Structlog.

Console-formatted logs by default, JSON when PLEX_PURCHASES_LOG_FORMAT=json.
Components never reach for a global logger: they receive a LogSink when
constructed, so tests can hand in a capturing logger instead.
"""

import logging
import sys
from typing import Any, Protocol

import structlog
from structlog.types import EventDict, Processor

from plexpurchases.config import Settings, get_settings


class LogSink(Protocol):
    """Leveled structured logger accepted by the loading components."""

    def debug(self, event: str, **kw: Any) -> Any: ...

    def info(self, event: str, **kw: Any) -> Any: ...

    def warning(self, event: str, **kw: Any) -> Any: ...

    def error(self, event: str, **kw: Any) -> Any: ...


def _app_context(settings: Settings) -> Processor:
    def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        """Add plugin-level context to all log entries."""
        event_dict["service"] = settings.service_name
        event_dict["version"] = settings.plugin_version
        return event_dict

    return add_app_context


def setup_logging(settings: Settings | None = None) -> None:
    """
    Configure structured logging with structlog.

    In json mode entries look like:
    {
        "event": "purchases_loaded",
        "level": "info",
        "timestamp": "2025-01-08T12:00:00.123456Z",
        "logger": "plexpurchases.services.purchase_holder",
        "service": "plex-purchases",
        "version": "1.0.0",
        "count": 12,
        ...additional context
    }
    """
    settings = settings or get_settings()

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper()),
    )

    # Processors for structlog
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _app_context(settings),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    # Add exception info
    if settings.log_level.upper() == "DEBUG":
        processors.append(structlog.processors.ExceptionRenderer())
    else:
        processors.append(structlog.processors.format_exc_info)

    # Choose renderer based on format
    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("purchase_loaded", product_id="sword", file="sword.yml")
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
