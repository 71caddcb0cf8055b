"""User domain model.

Users are managed outside the organization core; this model is the
read-only projection organizations need for ownership and membership.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class User:
    """A registered user that can own or join organizations.

    Attributes:
        id: Unique user identifier.
        email: Email address, unique per user.
        name: Optional display name.
        created_at: Registration timestamp (UTC).
    """

    id: UUID
    email: str
    name: str | None = field(default=None)
    created_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        """Validate user fields."""
        if not self.email or not self.email.strip():
            raise ValueError("User email cannot be empty")
