"""API key repository port.

Key issuance happens elsewhere; organizations only list their keys.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from uuid import UUID

from warden.domain.models.api_key import ApiKey


@runtime_checkable
class ApiKeyRepositoryProtocol(Protocol):
    """Protocol for read-only API key lookups."""

    async def get_all_for_organization(self, organization_id: UUID) -> list[ApiKey]:
        """Get all API keys issued for an organization.

        Returns:
            The keys, oldest first. Empty if there are none.
        """
        ...
