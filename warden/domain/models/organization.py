"""Organization aggregate root.

An organization is the tenant boundary: it owns its wardens and its
membership list and is persisted and replaced as one document.

Invariants enforced here (never by callers):
- No two wardens share a name within one organization (case-sensitive)
- No duplicate user membership
- The owner is always a member with the OWNER role
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from warden.domain.errors.organization import (
    InvalidOrganizationNameError,
    InvalidOrganizationRoleError,
    InvalidWardenNameError,
    UserAlreadyInOrganizationError,
    WardenAlreadyExistsError,
    WardenNotFoundError,
)
from warden.domain.models.user import User


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


class OrganizationRole(str, Enum):
    """Role of a member within an organization.

    Roles are stored for later authorization; this core does not enforce
    permissions.

    Values:
        USER: Regular member.
        ADMIN: Member allowed to manage the organization.
        OWNER: The creator of the organization (implicit, unique).
    """

    USER = "user"
    ADMIN = "admin"
    OWNER = "owner"


@dataclass
class Warden:
    """A named, toggleable monitored unit belonging to an organization.

    Attributes:
        name: Unique (within the organization) warden name.
        enabled: Whether the warden's iterations are accepted.
        id: Unique warden identifier.
        created_at: Creation timestamp (UTC).
        updated_at: Last time the enabled flag changed (UTC).
    """

    name: str
    enabled: bool = True
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)

    def enable(self) -> None:
        """Enable the warden. Enabling an enabled warden is a no-op."""
        if self.enabled:
            return
        self.enabled = True
        self.updated_at = _utc_now()

    def disable(self) -> None:
        """Disable the warden. Disabling a disabled warden is a no-op."""
        if not self.enabled:
            return
        self.enabled = False
        self.updated_at = _utc_now()


@dataclass(frozen=True, eq=True)
class UserInOrganization:
    """Membership of a user in an organization.

    Attributes:
        user_id: The member's user id.
        email: The member's email at the time of joining.
        role: The member's role.
        created_at: When the user joined (UTC).
    """

    user_id: UUID
    email: str
    role: OrganizationRole = OrganizationRole.USER
    created_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def from_user(cls, user: User, role: OrganizationRole) -> UserInOrganization:
        """Create a membership for the given user."""
        return cls(user_id=user.id, email=user.email, role=role)


@dataclass
class Organization:
    """Aggregate root owning wardens and memberships.

    The aggregate is mutated in memory and then persisted as a whole;
    there is no field-level update. ``revision`` is the value the store
    compares on conditional replace.

    Attributes:
        name: Organization name, unique per owner.
        owner_id: The owning user's id.
        auto_register_new_warden: Whether iterations reported for an
            unknown warden register that warden on the fly.
        wardens: Owned wardens, in registration order.
        users: Memberships, in joining order (owner first).
        id: Unique organization identifier.
        created_at: Creation timestamp (UTC).
        updated_at: Last persisted modification timestamp (UTC).
        revision: Number of persisted modifications.
    """

    name: str
    owner_id: UUID
    auto_register_new_warden: bool = True
    wardens: list[Warden] = field(default_factory=list)
    users: list[UserInOrganization] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)
    revision: int = 0

    @classmethod
    def create(
        cls,
        name: str,
        owner: User,
        auto_register_new_warden: bool = True,
        default_warden_name: str | None = None,
    ) -> Organization:
        """Create a new organization owned by the given user.

        Args:
            name: Organization name.
            owner: The user creating the organization.
            auto_register_new_warden: Flag stored on the organization.
            default_warden_name: When given, an enabled warden with this
                name is registered right away.

        Returns:
            The new organization, not yet persisted.

        Raises:
            InvalidOrganizationNameError: If the name is empty or blank.
        """
        if not name or not name.strip():
            raise InvalidOrganizationNameError()

        organization = cls(
            name=name,
            owner_id=owner.id,
            auto_register_new_warden=auto_register_new_warden,
        )
        organization.users.append(
            UserInOrganization.from_user(owner, OrganizationRole.OWNER)
        )
        if default_warden_name:
            organization.add_warden(default_warden_name)
        return organization

    def add_warden(self, name: str, enabled: bool = True) -> Warden:
        """Register a new warden.

        Args:
            name: Warden name, compared case-sensitively.
            enabled: Initial enabled flag.

        Returns:
            The registered warden.

        Raises:
            InvalidWardenNameError: If the name is empty or blank.
            WardenAlreadyExistsError: If the name is already used.
        """
        if not name or not name.strip():
            raise InvalidWardenNameError()
        if self.get_warden_by_name(name) is not None:
            raise WardenAlreadyExistsError(self.id, name)

        warden = Warden(name=name, enabled=enabled)
        self.wardens.append(warden)
        return warden

    def add_user(
        self, user: User, role: OrganizationRole = OrganizationRole.USER
    ) -> UserInOrganization:
        """Add a member with the given role.

        Raises:
            InvalidOrganizationRoleError: If role is OWNER.
            UserAlreadyInOrganizationError: If the user is already a member.
        """
        if role == OrganizationRole.OWNER:
            raise InvalidOrganizationRoleError(role.value)
        if self.has_user(user.id):
            raise UserAlreadyInOrganizationError(self.id, user.id, user.email)

        membership = UserInOrganization.from_user(user, role)
        self.users.append(membership)
        return membership

    def get_warden_by_name(self, name: str) -> Warden | None:
        """Return the warden with the given name, or None."""
        return next((w for w in self.wardens if w.name == name), None)

    def get_warden_by_name_or_fail(self, name: str) -> Warden:
        """Return the warden with the given name.

        Raises:
            WardenNotFoundError: If there is no such warden.
        """
        warden = self.get_warden_by_name(name)
        if warden is None:
            raise WardenNotFoundError(self.id, name)
        return warden

    def has_user(self, user_id: UUID) -> bool:
        """Check whether the user is a member (the owner always is)."""
        return user_id == self.owner_id or any(
            u.user_id == user_id for u in self.users
        )

    def get_user_role(self, user_id: UUID) -> OrganizationRole | None:
        """Return the member's role, or None for non-members."""
        if user_id == self.owner_id:
            return OrganizationRole.OWNER
        membership = next((u for u in self.users if u.user_id == user_id), None)
        return membership.role if membership is not None else None

    def mark_updated(self) -> None:
        """Advance revision and modification time before a replace."""
        self.revision += 1
        self.updated_at = _utc_now()
