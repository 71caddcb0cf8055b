"""Iteration Recorder Service.

This service is the ingestion side of the iteration ledger: an
execution driver runs a warden's watchers, then hands the check results
here to be turned into a WardenIteration and appended to the
organization's history.

Ordinals are strictly increasing per organization. They are assigned
here, under the per-organization lock shared with OrganizationService,
so a single process is a single writer per organization. Drivers in
several processes must still be coordinated externally; the history
rejects a non-increasing ordinal.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from structlog import get_logger
from structlog.typing import FilteringBoundLogger

from warden.application.ports.iteration_history import IterationHistoryProtocol
from warden.application.ports.organization_repository import (
    OrganizationRepositoryProtocol,
)
from warden.application.services.organization_locks import OrganizationLocks
from warden.domain.errors.iteration import WardenDisabledError
from warden.domain.errors.organization import (
    OrganizationNotFoundError,
    WardenNotFoundError,
)
from warden.domain.models.capabilities import Validatable
from warden.domain.models.organization import Organization, Warden
from warden.domain.models.warden_iteration import WardenIteration

logger = get_logger()

# Ordinal of the first iteration in an empty history
FIRST_ORDINAL: int = 1


class IterationRecorderService:
    """Records warden iterations for organizations.

    This service provides:
    1. Warden resolution, with on-the-fly registration for organizations
       that enable auto_register_new_warden
    2. Monotonic ordinal assignment per organization
    3. Append to the iteration history
    4. History queries
    """

    def __init__(
        self,
        organization_repository: OrganizationRepositoryProtocol,
        iteration_history: IterationHistoryProtocol,
        locks: OrganizationLocks | None = None,
    ) -> None:
        """Initialize the Iteration Recorder Service.

        Args:
            organization_repository: Store for organization documents.
            iteration_history: Append-only iteration log.
            locks: Lock registry shared with OrganizationService; a
                private, enabled one is created if None.
        """
        self._organizations = organization_repository
        self._history = iteration_history
        self._locks = OrganizationLocks() if locks is None else locks

    async def record_iteration(
        self,
        organization_id: UUID,
        warden_name: str,
        results: Iterable[Validatable],
        started_at: datetime,
        completed_at: datetime,
    ) -> WardenIteration:
        """Record one execution pass of a warden.

        Args:
            organization_id: The organization owning the warden.
            warden_name: The warden that ran the watchers.
            results: Check results of the pass; consumed once.
            started_at: When the pass started.
            completed_at: When the pass completed.

        Returns:
            The appended iteration.

        Raises:
            OrganizationNotFoundError: If the organization does not exist.
            WardenNotFoundError: If the warden does not exist and the
                organization does not auto-register wardens.
            WardenDisabledError: If the warden is disabled.
            IterationOrdinalConflictError: If another writer appended a
                later ordinal first. An unknown warden is then left
                unregistered.
            ConcurrentModificationError: If the organization changed
                while a new warden was being registered. The iteration
                is already appended at that point.
        """
        log = logger.bind(
            operation="record_iteration",
            organization_id=str(organization_id),
            warden_name=warden_name,
        )
        # Captured before taking the lock so a generator is consumed once.
        captured = tuple(results)

        async with self._locks.hold(organization_id):
            organization = await self._organizations.get_by_id(organization_id)
            if organization is None:
                log.warning("record_iteration_rejected", reason="organization_not_found")
                raise OrganizationNotFoundError(organization_id)

            expected_revision = organization.revision
            warden, registered = self._resolve_warden(organization, warden_name, log)
            if not warden.enabled:
                log.warning("record_iteration_rejected", reason="warden_disabled")
                raise WardenDisabledError(organization_id, warden_name)

            latest = await self._history.get_latest_ordinal(organization_id)
            ordinal = FIRST_ORDINAL if latest is None else latest + 1
            iteration = WardenIteration.create(
                ordinal, captured, started_at, completed_at
            )
            await self._history.append(organization_id, warden_name, iteration)

            if registered:
                organization.mark_updated()
                await self._organizations.replace_one(organization, expected_revision)
                log.info("warden_auto_registered", warden_id=str(warden.id))

        log.info(
            "iteration_recorded",
            ordinal=iteration.ordinal,
            result_count=len(iteration.results),
            invalid_count=len(iteration.invalid_results),
            is_valid=iteration.is_valid,
            execution_time_ms=iteration.execution_time.total_seconds() * 1000,
        )
        return iteration

    async def get_history(
        self,
        organization_id: UUID,
        warden_name: str | None = None,
    ) -> list[WardenIteration]:
        """List recorded iterations, oldest first.

        Returns:
            The iterations; empty for unknown organizations.
        """
        return await self._history.list_for_organization(organization_id, warden_name)

    def _resolve_warden(
        self,
        organization: Organization,
        warden_name: str,
        log: FilteringBoundLogger,
    ) -> tuple[Warden, bool]:
        """Find the warden, adding it to the aggregate if auto-registration is on.

        Returns:
            The warden and whether it was added (not yet persisted).
        """
        warden = organization.get_warden_by_name(warden_name)
        if warden is not None:
            return warden, False

        if not organization.auto_register_new_warden:
            log.warning("record_iteration_rejected", reason="warden_not_found")
            raise WardenNotFoundError(organization.id, warden_name)

        return organization.add_warden(warden_name), True
