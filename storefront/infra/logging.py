"""Structured logging for the storefront using structlog.

Every log line carries the storefront's service fields (store name,
environment and, once loaded, the catalog version). Request handlers
add per-request fields such as the path and page mode through
contextvars.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from storefront.config import settings

_service_context: dict[str, Any] = {}


def bind_service_context(**values: Any) -> None:
    """Attach fields to every log line of this process.

    Usage:
        bind_service_context(catalog_version="2024.06", products=15)
    """
    _service_context.update(values)


def add_service_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor adding the service fields; per-event values take precedence."""
    for key, value in _service_context.items():
        event_dict.setdefault(key, value)
    return event_dict


def setup_logging() -> None:
    """Configure structlog for the storefront.

    JSON lines outside development, colored console output locally.
    """
    bind_service_context(
        service="storefront",
        store=settings.store_name,
        environment=settings.environment,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_service_context,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if settings.log_json and not settings.is_dev:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    level = logging.getLevelName(settings.log_level)
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    # Request lines are logged by the storefront middleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def bind_request_context(**values: Any) -> None:
    """Start a fresh per-request context (path, page mode, product id)."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)


def clear_request_context() -> None:
    """Drop the per-request context once the response is sent."""
    structlog.contextvars.clear_contextvars()


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Get a logger, optionally bound to initial context."""
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
