"""API key repository stub.

In-memory implementation of ApiKeyRepositoryProtocol for testing.
Keys are seeded with ``add_api_key``; issuance is not part of this core.
"""

from __future__ import annotations

from uuid import UUID

from warden.application.ports.api_key_repository import ApiKeyRepositoryProtocol
from warden.domain.models.api_key import ApiKey


class ApiKeyRepositoryStub(ApiKeyRepositoryProtocol):
    """In-memory implementation of ApiKeyRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._api_keys: list[ApiKey] = []

    def add_api_key(self, api_key: ApiKey) -> None:
        """Seed an API key."""
        self._api_keys.append(api_key)

    async def get_all_for_organization(self, organization_id: UUID) -> list[ApiKey]:
        """Get the organization's keys, oldest first."""
        keys = [k for k in self._api_keys if k.organization_id == organization_id]
        keys.sort(key=lambda k: k.created_at)
        return keys

    def clear(self) -> None:
        """Clear all seeded keys."""
        self._api_keys.clear()
