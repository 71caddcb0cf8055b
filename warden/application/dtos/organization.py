"""Organization DTOs for the service boundary.

Services return these projections, never the Organization aggregate,
so callers can not mutate the aggregate behind the service's back.
Pydantic models are used so a transport layer can serialize them as-is.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from warden.domain.models.organization import (
    Organization,
    OrganizationRole,
    UserInOrganization,
    Warden,
)


class WardenDto(BaseModel):
    """Projection of a warden."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    enabled: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, warden: Warden) -> WardenDto:
        return cls(
            id=warden.id,
            name=warden.name,
            enabled=warden.enabled,
            created_at=warden.created_at,
            updated_at=warden.updated_at,
        )


class OrganizationUserDto(BaseModel):
    """Projection of a membership."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: str
    role: OrganizationRole
    created_at: datetime

    @classmethod
    def from_domain(cls, membership: UserInOrganization) -> OrganizationUserDto:
        return cls(
            id=membership.user_id,
            email=membership.email,
            role=membership.role,
            created_at=membership.created_at,
        )


class OrganizationDto(BaseModel):
    """Projection of an organization with its API key secrets.

    Attributes:
        id: Organization id.
        name: Organization name.
        owner_id: Owning user's id.
        auto_register_new_warden: Whether unknown wardens are registered
            when they first report an iteration.
        wardens: Wardens in registration order.
        users: Members in joining order.
        api_keys: Secrets of the API keys issued for the organization.
            Empty for browse results.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "0b7e7c1e-3f2a-4d47-9a0f-5f2f5d8c1a11",
                "name": "My organization",
                "owner_id": "8f14e45f-ceea-467e-9a0f-5f2f5d8c1a22",
                "auto_register_new_warden": True,
                "wardens": [],
                "users": [],
                "api_keys": [],
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z",
            }
        },
    )

    id: UUID
    name: str
    owner_id: UUID
    auto_register_new_warden: bool
    wardens: list[WardenDto] = Field(default_factory=list)
    users: list[OrganizationUserDto] = Field(default_factory=list)
    api_keys: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(
        cls, organization: Organization, api_keys: Iterable[str] = ()
    ) -> OrganizationDto:
        """Project an organization and the given API key secrets."""
        return cls(
            id=organization.id,
            name=organization.name,
            owner_id=organization.owner_id,
            auto_register_new_warden=organization.auto_register_new_warden,
            wardens=[WardenDto.from_domain(w) for w in organization.wardens],
            users=[OrganizationUserDto.from_domain(u) for u in organization.users],
            api_keys=list(api_keys),
            created_at=organization.created_at,
            updated_at=organization.updated_at,
        )

    def get_warden(self, name: str) -> WardenDto | None:
        """Return the projected warden with the given name, or None."""
        return next((w for w in self.wardens if w.name == name), None)
