"""User repository port.

Users are owned by the account subsystem; organizations only read them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from uuid import UUID

from warden.domain.models.user import User


@runtime_checkable
class UserRepositoryProtocol(Protocol):
    """Protocol for read-only user lookups."""

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get a user by id.

        Returns:
            The user or None if not found.
        """
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email, compared case-insensitively.

        Returns:
            The user or None if not found.
        """
        ...
