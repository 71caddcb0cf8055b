"""Warden iteration ledger entry.

A warden iteration is one execution pass: its ordinal within the
organization's execution stream (1, 2, 3 ... N), when it started and
completed, and the check results it produced. For example, a warden
with 3 watchers produces iterations holding 3 results each.

Iterations are immutable once created and are only ever appended to a
history, never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from warden.domain.errors.iteration import InvalidIterationOrdinalError
from warden.domain.models.capabilities import Validatable


@dataclass(frozen=True)
class WardenIteration:
    """Immutable record of one execution pass.

    Use ``WardenIteration.create`` rather than the constructor so the
    results iterable is captured exactly once.

    Attributes:
        ordinal: Number of the iteration, non-negative.
        results: Check results produced during the iteration.
        started_at: When the iteration started.
        completed_at: When the iteration completed.
    """

    ordinal: int
    results: tuple[Validatable, ...]
    started_at: datetime
    completed_at: datetime

    def __post_init__(self) -> None:
        """Validate the ordinal."""
        if self.ordinal < 0:
            raise InvalidIterationOrdinalError(self.ordinal)

    @classmethod
    def create(
        cls,
        ordinal: int,
        results: Iterable[Validatable],
        started_at: datetime,
        completed_at: datetime,
    ) -> WardenIteration:
        """Create a new iteration.

        ``completed_at`` is not checked against ``started_at``; a reversed
        pair yields a negative execution time.

        Args:
            ordinal: Number of the executed iteration.
            results: Check results created during the iteration. Any
                iterable is accepted and consumed once.
            started_at: Date and time at which the iteration started.
            completed_at: Date and time at which the iteration completed.

        Returns:
            The new iteration.

        Raises:
            InvalidIterationOrdinalError: If ordinal is less than 0.
        """
        if ordinal < 0:
            raise InvalidIterationOrdinalError(ordinal)
        return cls(
            ordinal=ordinal,
            results=tuple(results),
            started_at=started_at,
            completed_at=completed_at,
        )

    @property
    def execution_time(self) -> timedelta:
        """Time between start and completion."""
        return self.completed_at - self.started_at

    @property
    def is_valid(self) -> bool:
        """True iff every result is valid.

        An iteration without results is valid: nothing failed.
        """
        return all(result.is_valid for result in self.results)

    @property
    def invalid_results(self) -> tuple[Validatable, ...]:
        """Results that are not valid, in their original order."""
        return tuple(result for result in self.results if not result.is_valid)
