"""Warden check result domain model.

A check result is the outcome of evaluating one watcher during one
iteration. How the watcher performs its check is not modelled here; the
factories below turn the possible outcomes (passed, failed, raised)
into the same immutable record.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True, eq=True)
class WardenCheckResult:
    """Outcome of one watcher check.

    Attributes:
        watcher_name: Name of the watcher that ran the check.
        is_valid: Whether the checked resource was healthy.
        started_at: When the check started.
        completed_at: When the check completed.
        description: Human-readable summary of the outcome.
        error: Message of the exception the check raised, if any.
    """

    watcher_name: str
    is_valid: bool
    started_at: datetime
    completed_at: datetime
    description: str = ""
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate check result fields."""
        if not self.watcher_name:
            raise ValueError("Watcher name cannot be empty")

    @property
    def execution_time(self) -> timedelta:
        """Time spent running the check."""
        return self.completed_at - self.started_at

    @classmethod
    def valid(
        cls,
        watcher_name: str,
        started_at: datetime,
        completed_at: datetime,
        description: str = "",
    ) -> WardenCheckResult:
        """Create a result for a check that passed."""
        return cls(
            watcher_name=watcher_name,
            is_valid=True,
            started_at=started_at,
            completed_at=completed_at,
            description=description,
        )

    @classmethod
    def invalid(
        cls,
        watcher_name: str,
        started_at: datetime,
        completed_at: datetime,
        description: str = "",
    ) -> WardenCheckResult:
        """Create a result for a check that failed."""
        return cls(
            watcher_name=watcher_name,
            is_valid=False,
            started_at=started_at,
            completed_at=completed_at,
            description=description,
        )

    @classmethod
    def from_exception(
        cls,
        watcher_name: str,
        exception: BaseException,
        started_at: datetime,
        completed_at: datetime,
    ) -> WardenCheckResult:
        """Create an invalid result for a check that raised.

        The exception itself is not kept, only its type and message, so
        the result stays immutable and serializable.
        """
        return cls(
            watcher_name=watcher_name,
            is_valid=False,
            started_at=started_at,
            completed_at=completed_at,
            description=f"Watcher '{watcher_name}' raised {type(exception).__name__}.",
            error=str(exception) or type(exception).__name__,
        )
