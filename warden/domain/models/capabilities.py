"""Capability protocols for iteration ledger entries.

The ledger reads check results only through these capabilities so new
kinds of check results can be recorded without changing the ledger.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class Validatable(Protocol):
    """Anything that reports whether it is valid."""

    @property
    def is_valid(self) -> bool:
        """Whether the object is valid."""
        ...


@runtime_checkable
class Timestampable(Protocol):
    """Anything that ran between two points in time."""

    @property
    def started_at(self) -> datetime: ...

    @property
    def completed_at(self) -> datetime: ...

    @property
    def execution_time(self) -> timedelta: ...
