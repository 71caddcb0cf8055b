"""Organization repository stub.

In-memory implementation of OrganizationRepositoryProtocol for testing
and development. It behaves like a document store: documents are copied
on the way in and on the way out, so an organization is only changed
in the store by replacing it.

Developer Golden Rules:
1. In-memory storage - no persistence across restarts
2. (name, owner_id) is a unique index, like in the real store
3. replace_one is conditional on the stored revision
"""

from __future__ import annotations

import asyncio
import copy
import logging
from uuid import UUID

from warden.application.dtos.paging import BrowseOrganizations, PagedResult
from warden.application.ports.organization_repository import (
    OrganizationRepositoryProtocol,
)
from warden.domain.errors.concurrent_modification import ConcurrentModificationError
from warden.domain.errors.organization import (
    OrganizationAlreadyExistsError,
    OrganizationNotFoundError,
)
from warden.domain.models.organization import Organization

logger = logging.getLogger(__name__)


class OrganizationRepositoryStub(OrganizationRepositoryProtocol):
    """In-memory implementation of OrganizationRepositoryProtocol.

    Attributes:
        _organizations: Map of organization id to stored document.
        _lock: Async lock serializing store access.
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._organizations: dict[UUID, Organization] = {}
        self._lock = asyncio.Lock()

    async def get_by_id(self, organization_id: UUID) -> Organization | None:
        """Get a copy of the organization with the given id.

        Args:
            organization_id: The organization id.

        Returns:
            The organization or None if not found.
        """
        async with self._lock:
            stored = self._organizations.get(organization_id)
            return copy.deepcopy(stored) if stored is not None else None

    async def get_by_name_for_owner(
        self, name: str, owner_id: UUID
    ) -> Organization | None:
        """Get a copy of the organization with the given (name, owner) pair.

        Args:
            name: The organization name (exact match).
            owner_id: The owner's user id.

        Returns:
            The organization or None if not found.
        """
        async with self._lock:
            stored = self._find_by_name_for_owner(name, owner_id)
            return copy.deepcopy(stored) if stored is not None else None

    async def insert_one(self, organization: Organization) -> None:
        """Insert a new organization document.

        Args:
            organization: The organization to insert.

        Raises:
            OrganizationAlreadyExistsError: If (name, owner_id) is taken.
            ValueError: If the id is already stored.
        """
        async with self._lock:
            if organization.id in self._organizations:
                raise ValueError(f"Organization {organization.id} already stored")
            if self._find_by_name_for_owner(organization.name, organization.owner_id):
                raise OrganizationAlreadyExistsError(
                    organization.name, organization.owner_id
                )
            self._organizations[organization.id] = copy.deepcopy(organization)
            logger.debug(
                "Inserted organization %s (name=%s, owner=%s)",
                organization.id,
                organization.name,
                organization.owner_id,
            )

    async def replace_one(
        self, organization: Organization, expected_revision: int
    ) -> None:
        """Replace the stored organization if its revision is unchanged.

        Args:
            organization: The mutated organization.
            expected_revision: The revision read before mutating.

        Raises:
            OrganizationNotFoundError: If the organization is not stored.
            ConcurrentModificationError: If the stored revision differs.
        """
        async with self._lock:
            stored = self._organizations.get(organization.id)
            if stored is None:
                raise OrganizationNotFoundError(organization.id)
            if stored.revision != expected_revision:
                raise ConcurrentModificationError(
                    organization.id, expected_revision, stored.revision
                )
            self._organizations[organization.id] = copy.deepcopy(organization)
            logger.debug(
                "Replaced organization %s (revision %d -> %d)",
                organization.id,
                expected_revision,
                organization.revision,
            )

    async def browse(
        self, query: BrowseOrganizations
    ) -> PagedResult[Organization]:
        """Get one page of matching organizations, ordered by name.

        Args:
            query: Filter and pagination.

        Returns:
            The requested page.
        """
        async with self._lock:
            matching = [
                o for o in self._organizations.values() if self._matches(o, query)
            ]
        matching.sort(key=lambda o: (o.name, str(o.id)))

        page = matching[query.offset : query.offset + query.page_size]
        return PagedResult.create(
            items=[copy.deepcopy(o) for o in page],
            current_page=query.page,
            results_per_page=query.page_size,
            total_results=len(matching),
        )

    def clear(self) -> None:
        """Clear all stored data for test cleanup.

        This is a synchronous method (not async) for convenience in test
        fixtures.
        """
        self._organizations.clear()

    def _find_by_name_for_owner(self, name: str, owner_id: UUID) -> Organization | None:
        return next(
            (
                o
                for o in self._organizations.values()
                if o.name == name and o.owner_id == owner_id
            ),
            None,
        )

    @staticmethod
    def _matches(organization: Organization, query: BrowseOrganizations) -> bool:
        if query.user_id is not None and not organization.has_user(query.user_id):
            return False
        if query.owner_id is not None and organization.owner_id != query.owner_id:
            return False
        if query.name and query.name.lower() not in organization.name.lower():
            return False
        return True
