"""Correlation IDs for tracing one unit of work through the services.

A caller (a request handler, a scheduler tick of a warden) opens a
``correlation_scope``; every log entry emitted inside it, across await
points, carries the same ``correlation_id``.

Usage:
    with correlation_scope(incoming_id):
        await organization_service.add_warden(organization_id, "api")
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("warden_correlation_id", default="")


def generate_correlation_id() -> str:
    """Return a fresh UUID4 string."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the current correlation ID, or "" outside any scope."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the rest of the current context."""
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Bind a correlation ID for the duration of a block.

    Args:
        correlation_id: ID to bind; a new one is generated if None or empty.

    Yields:
        The bound correlation ID. The previous one is restored on exit.
    """
    token = _correlation_id.set(correlation_id or generate_correlation_id())
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id to every log entry.

    An explicitly bound correlation_id wins over the context one; entries
    logged outside any correlation context get no field at all.
    """
    correlation_id = get_correlation_id()
    if correlation_id and "correlation_id" not in event_dict:
        event_dict["correlation_id"] = correlation_id
    return event_dict
