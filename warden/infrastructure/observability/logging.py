"""Structured logging for the warden services.

Services log through structlog with an ``operation`` bound per call;
the in-memory stores log through stdlib ``logging``. ``configure_structlog``
sets up both so they share one level and one output stream.

Production entry:
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "warning",
        "event": "add_warden_rejected",
        "operation": "add_warden",
        "organization_id": "2f1c...",
        "correlation_id": "9b7e...",
        "reason": "Warden 'api' already exists in organization 2f1c..."
    }
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, cast
from uuid import UUID

import structlog
from structlog.typing import Processor

from warden.infrastructure.observability.correlation import correlation_id_processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Read LOG_LEVEL, falling back to INFO for unknown names."""
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def stringify_ids(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Render UUID values (organization, owner, user ids) as strings."""
    for key, value in event_dict.items():
        if isinstance(value, UUID):
            event_dict[key] = str(value)
    return event_dict


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog and the stdlib loggers used by the stores.

    Args:
        environment: 'development' for colored console output, anything
            else for one JSON object per line.
    """
    level = _get_log_level()
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, correlation_id_processor),
        cast(Processor, stringify_ids),
        structlog.processors.StackInfoRenderer(),
    ]

    if environment == "development":
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        force=True,
    )
