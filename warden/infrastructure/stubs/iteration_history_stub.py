"""Iteration history stub.

In-memory implementation of IterationHistoryProtocol for testing.
The history is append-only and enforces strictly increasing ordinals
per organization.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from uuid import UUID

from warden.application.ports.iteration_history import IterationHistoryProtocol
from warden.domain.errors.iteration import IterationOrdinalConflictError
from warden.domain.models.warden_iteration import WardenIteration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _HistoryEntry:
    warden_name: str
    iteration: WardenIteration


class IterationHistoryStub(IterationHistoryProtocol):
    """In-memory implementation of IterationHistoryProtocol.

    Attributes:
        _entries: Map of organization id to its entries, in append order.
        _lock: Async lock serializing appends.
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._entries: dict[UUID, list[_HistoryEntry]] = {}
        self._lock = asyncio.Lock()

    async def append(
        self,
        organization_id: UUID,
        warden_name: str,
        iteration: WardenIteration,
    ) -> None:
        """Append an iteration to the organization's history.

        Raises:
            IterationOrdinalConflictError: If the ordinal does not advance.
        """
        async with self._lock:
            entries = self._entries.setdefault(organization_id, [])
            if entries and iteration.ordinal <= entries[-1].iteration.ordinal:
                raise IterationOrdinalConflictError(
                    organization_id, iteration.ordinal, entries[-1].iteration.ordinal
                )
            entries.append(_HistoryEntry(warden_name=warden_name, iteration=iteration))
            logger.debug(
                "Appended iteration %d for organization %s (warden=%s)",
                iteration.ordinal,
                organization_id,
                warden_name,
            )

    async def get_latest_ordinal(self, organization_id: UUID) -> int | None:
        entries = self._entries.get(organization_id)
        return entries[-1].iteration.ordinal if entries else None

    async def list_for_organization(
        self,
        organization_id: UUID,
        warden_name: str | None = None,
    ) -> list[WardenIteration]:
        return [
            entry.iteration
            for entry in self._entries.get(organization_id, [])
            if warden_name is None or entry.warden_name == warden_name
        ]

    def clear(self) -> None:
        """Clear all stored data for test cleanup."""
        self._entries.clear()
