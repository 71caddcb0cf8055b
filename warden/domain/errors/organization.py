"""Organization domain errors.

This module provides exception classes for organization, warden and
membership operations. Each error subclasses one of the error kinds and
carries the identifiers involved as attributes.
"""

from __future__ import annotations

from uuid import UUID

from warden.domain.errors.kinds import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
)


class InvalidOrganizationNameError(InvalidArgumentError):
    """Raised when an organization name is empty or blank."""

    def __init__(self) -> None:
        super().__init__("Organization name can not be empty.")


class InvalidWardenNameError(InvalidArgumentError):
    """Raised when a warden name is empty or blank."""

    def __init__(self) -> None:
        super().__init__("Warden name can not be empty.")


class InvalidOrganizationRoleError(InvalidArgumentError):
    """Raised when a member is added with a role that can not be assigned.

    The owner role is implicit: it is granted once, to the user that
    creates the organization.
    """

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Role '{role}' can not be assigned to a new member.")


class OrganizationNotFoundError(NotFoundError):
    """Raised when no organization exists for the given id.

    Attributes:
        organization_id: The id that was looked up.
    """

    def __init__(self, organization_id: UUID) -> None:
        self.organization_id = organization_id
        super().__init__(
            f"Organization has not been found for given id: '{organization_id}'."
        )


class UserNotFoundError(NotFoundError):
    """Raised when no user matches the given id or email.

    Attributes:
        user_id: The id that was looked up, if any.
        email: The email that was looked up, if any.
    """

    def __init__(self, user_id: UUID | None = None, email: str | None = None) -> None:
        self.user_id = user_id
        self.email = email
        if email is not None:
            message = f"User has not been found for email: '{email}'."
        else:
            message = f"User has not been found for given id: '{user_id}'."
        super().__init__(message)


class WardenNotFoundError(NotFoundError):
    """Raised when an organization has no warden with the given name.

    Attributes:
        organization_id: The organization that was searched.
        warden_name: The warden name that was looked up.
    """

    def __init__(self, organization_id: UUID, warden_name: str) -> None:
        self.organization_id = organization_id
        self.warden_name = warden_name
        super().__init__(
            f"Warden with name: '{warden_name}' has not been found "
            f"in organization: '{organization_id}'."
        )


class OrganizationAlreadyExistsError(ConflictError):
    """Raised when the owner already has an organization with the same name.

    Attributes:
        name: The duplicated organization name.
        owner_id: The owner of both organizations.
    """

    def __init__(self, name: str, owner_id: UUID) -> None:
        self.name = name
        self.owner_id = owner_id
        super().__init__(
            f"There's already an organization with name: '{name}' "
            f"for owner with id: '{owner_id}'."
        )


class WardenAlreadyExistsError(ConflictError):
    """Raised when a warden name is already used within the organization.

    Names are compared case-sensitively.

    Attributes:
        organization_id: The organization that owns the existing warden.
        warden_name: The duplicated warden name.
    """

    def __init__(self, organization_id: UUID, warden_name: str) -> None:
        self.organization_id = organization_id
        self.warden_name = warden_name
        super().__init__(
            f"There's already a warden with name: '{warden_name}' "
            f"in organization: '{organization_id}'."
        )


class UserAlreadyInOrganizationError(ConflictError):
    """Raised when a user is already a member of the organization.

    Attributes:
        organization_id: The organization the user belongs to.
        user_id: The member's id.
    """

    def __init__(self, organization_id: UUID, user_id: UUID, email: str) -> None:
        self.organization_id = organization_id
        self.user_id = user_id
        self.email = email
        super().__init__(
            f"User with email: '{email}' is already "
            f"in organization: '{organization_id}'."
        )
