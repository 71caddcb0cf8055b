"""Iteration history port.

The history is the append-only log of warden iterations per
organization. Ordinals are strictly increasing per organization.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from uuid import UUID

from warden.domain.models.warden_iteration import WardenIteration


@runtime_checkable
class IterationHistoryProtocol(Protocol):
    """Protocol for iteration history persistence."""

    async def append(
        self,
        organization_id: UUID,
        warden_name: str,
        iteration: WardenIteration,
    ) -> None:
        """Append an iteration to the organization's history.

        Args:
            organization_id: The organization that ran the iteration.
            warden_name: The warden that produced the results.
            iteration: The iteration to append.

        Raises:
            IterationOrdinalConflictError: If the ordinal is not greater
                than the latest ordinal of the organization.
        """
        ...

    async def get_latest_ordinal(self, organization_id: UUID) -> int | None:
        """Get the ordinal of the latest appended iteration.

        Returns:
            The latest ordinal or None if the history is empty.
        """
        ...

    async def list_for_organization(
        self,
        organization_id: UUID,
        warden_name: str | None = None,
    ) -> list[WardenIteration]:
        """List iterations, ordered by ordinal.

        Args:
            organization_id: The organization to list.
            warden_name: When given, only iterations of this warden.

        Returns:
            The iterations, oldest first.
        """
        ...
