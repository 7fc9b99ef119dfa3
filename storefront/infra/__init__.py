"""Infrastructure module - logging."""

from storefront.infra.logging import (
    bind_request_context,
    bind_service_context,
    clear_request_context,
    get_logger,
    setup_logging,
)

__all__ = [
    "bind_request_context",
    "bind_service_context",
    "clear_request_context",
    "get_logger",
    "setup_logging",
]
