"""Bootstrap wiring for logging configuration.

The rendering mode comes from ``WARDEN_ENV`` unless given explicitly:
``development`` selects console output, anything else JSON.
"""

from __future__ import annotations

import os

from warden.infrastructure.observability import configure_structlog

ENVIRONMENT_ENV = "WARDEN_ENV"
DEFAULT_ENVIRONMENT = "production"


def configure_logging(environment: str | None = None) -> str:
    """Configure structlog once at startup.

    Args:
        environment: 'production' or 'development'; read from WARDEN_ENV if None.

    Returns:
        The environment that was applied.
    """
    if environment is None:
        environment = os.environ.get(ENVIRONMENT_ENV, "").strip().lower()
    environment = environment or DEFAULT_ENVIRONMENT
    configure_structlog(environment=environment)
    return environment


__all__ = ["configure_logging"]
