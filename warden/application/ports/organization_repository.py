"""Organization repository port.

This module defines the protocol for organization document persistence.
One organization is one document; wardens and memberships are embedded
and always written together with the organization.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from uuid import UUID

from warden.application.dtos.paging import BrowseOrganizations, PagedResult
from warden.domain.models.organization import Organization


@runtime_checkable
class OrganizationRepositoryProtocol(Protocol):
    """Protocol for organization persistence.

    Implementations must return copies: mutating a returned organization
    has no effect until it is passed to ``replace_one``.
    """

    async def get_by_id(self, organization_id: UUID) -> Organization | None:
        """Get an organization by id.

        Args:
            organization_id: The organization id.

        Returns:
            The organization or None if not found.
        """
        ...

    async def get_by_name_for_owner(
        self, name: str, owner_id: UUID
    ) -> Organization | None:
        """Get an organization by its (name, owner) pair.

        Args:
            name: The organization name (exact match).
            owner_id: The owner's user id.

        Returns:
            The organization or None if not found.
        """
        ...

    async def insert_one(self, organization: Organization) -> None:
        """Insert a new organization document.

        Args:
            organization: The organization to insert.
        """
        ...

    async def replace_one(
        self, organization: Organization, expected_revision: int
    ) -> None:
        """Replace the stored organization document as a whole.

        The replace only succeeds if the stored revision still equals
        ``expected_revision``.

        Args:
            organization: The mutated organization.
            expected_revision: The revision read before mutating.

        Raises:
            OrganizationNotFoundError: If the organization is not stored.
            ConcurrentModificationError: If the stored revision differs.
        """
        ...

    async def browse(
        self, query: BrowseOrganizations
    ) -> PagedResult[Organization]:
        """Get one page of organizations matching the query, ordered by name.

        Args:
            query: Filter and pagination, with results_per_page resolved
                (see BrowseOrganizations.with_page_size).

        Returns:
            The requested page.
        """
        ...
