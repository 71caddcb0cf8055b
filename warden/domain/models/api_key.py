"""API key domain model.

API keys are issued outside this core. Organizations only read them to
expose the secrets associated with an organization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID


@dataclass(frozen=True, eq=True)
class ApiKey:
    """Opaque credential associated with an organization.

    Attributes:
        key: The secret value handed to API clients.
        organization_id: Organization the key grants access to.
        user_id: User the key was issued for.
        created_at: Issuance timestamp (UTC).
    """

    key: str
    organization_id: UUID
    user_id: UUID
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
