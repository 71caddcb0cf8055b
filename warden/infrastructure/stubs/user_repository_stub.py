"""User repository stub.

In-memory implementation of UserRepositoryProtocol for testing.
Users are seeded with ``add_user``; the organization core never writes
them.
"""

from __future__ import annotations

from uuid import UUID

from warden.application.ports.user_repository import UserRepositoryProtocol
from warden.domain.models.user import User


class UserRepositoryStub(UserRepositoryProtocol):
    """In-memory implementation of UserRepositoryProtocol."""

    def __init__(self, users: list[User] | None = None) -> None:
        """Initialize storage, optionally seeded with users."""
        self._users: dict[UUID, User] = {}
        for user in users or []:
            self.add_user(user)

    def add_user(self, user: User) -> None:
        """Seed a user.

        Raises:
            ValueError: If another user already has the same email.
        """
        existing = self._find_by_email(user.email)
        if existing is not None and existing.id != user.id:
            raise ValueError(f"Email {user.email} is already registered")
        self._users[user.id] = user

    async def get_by_id(self, user_id: UUID) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return self._find_by_email(email)

    def clear(self) -> None:
        """Clear all seeded users."""
        self._users.clear()

    def _find_by_email(self, email: str) -> User | None:
        normalized = email.strip().lower()
        return next(
            (u for u in self._users.values() if u.email.lower() == normalized),
            None,
        )
