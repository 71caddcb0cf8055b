"""Observability for the warden services.

- structlog configuration shared with the stdlib store loggers
- correlation IDs carried across await points

Usage:
    from warden.infrastructure.observability import (
        configure_structlog,
        correlation_scope,
    )

    configure_structlog(environment="production")
    with correlation_scope(request_correlation_id):
        ...
"""

from warden.infrastructure.observability.correlation import (
    correlation_id_processor,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from warden.infrastructure.observability.logging import (
    configure_structlog,
    stringify_ids,
)

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    "stringify_ids",
]
