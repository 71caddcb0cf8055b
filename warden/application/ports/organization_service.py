"""Organization service port.

The service interface consumed by a transport layer. Every operation
returns OrganizationDto projections, never the aggregate.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from uuid import UUID

from warden.application.dtos.organization import OrganizationDto
from warden.application.dtos.paging import BrowseOrganizations, PagedResult
from warden.domain.models.organization import OrganizationRole


@runtime_checkable
class OrganizationServiceProtocol(Protocol):
    """Protocol for organization management operations."""

    async def get(self, organization_id: UUID) -> OrganizationDto | None:
        """Get an organization with its API keys, or None."""
        ...

    async def get_by_name(self, name: str, owner_id: UUID) -> OrganizationDto | None:
        """Get an organization by (name, owner) with its API keys, or None."""
        ...

    async def get_default(self, owner_id: UUID) -> OrganizationDto | None:
        """Get the owner's default organization, or None."""
        ...

    async def create_default(self, owner_id: UUID) -> OrganizationDto:
        """Create the owner's default organization."""
        ...

    async def create(
        self,
        name: str,
        owner_id: UUID,
        auto_register_new_warden: bool = True,
    ) -> OrganizationDto:
        """Create an organization owned by the given user."""
        ...

    async def add_warden(
        self, organization_id: UUID, name: str, enabled: bool = True
    ) -> OrganizationDto:
        """Register a warden in the organization."""
        ...

    async def add_user(
        self,
        organization_id: UUID,
        email: str,
        role: OrganizationRole = OrganizationRole.USER,
    ) -> OrganizationDto:
        """Add the user with the given email as a member."""
        ...

    async def enable_warden(self, organization_id: UUID, name: str) -> OrganizationDto:
        """Enable the named warden."""
        ...

    async def disable_warden(self, organization_id: UUID, name: str) -> OrganizationDto:
        """Disable the named warden."""
        ...

    async def is_user_in_organization(
        self, organization_id: UUID, user_id: UUID
    ) -> bool:
        """Check membership; False when the organization does not exist."""
        ...

    async def browse(
        self, query: BrowseOrganizations | None
    ) -> PagedResult[OrganizationDto]:
        """Get one page of organizations; empty page for no query."""
        ...
