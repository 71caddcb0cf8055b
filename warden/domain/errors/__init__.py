"""Domain errors for Warden.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from WardenError through one of the error kinds.
"""

from warden.domain.errors.concurrent_modification import ConcurrentModificationError
from warden.domain.errors.iteration import (
    InvalidIterationOrdinalError,
    IterationOrdinalConflictError,
    WardenDisabledError,
)
from warden.domain.errors.kinds import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
)
from warden.domain.errors.organization import (
    InvalidOrganizationNameError,
    InvalidOrganizationRoleError,
    InvalidWardenNameError,
    OrganizationAlreadyExistsError,
    OrganizationNotFoundError,
    UserAlreadyInOrganizationError,
    UserNotFoundError,
    WardenAlreadyExistsError,
    WardenNotFoundError,
)

__all__: list[str] = [
    "ConcurrentModificationError",
    "ConflictError",
    "InvalidArgumentError",
    "InvalidIterationOrdinalError",
    "InvalidOrganizationNameError",
    "InvalidOrganizationRoleError",
    "InvalidWardenNameError",
    "IterationOrdinalConflictError",
    "NotFoundError",
    "OrganizationAlreadyExistsError",
    "OrganizationNotFoundError",
    "UserAlreadyInOrganizationError",
    "UserNotFoundError",
    "WardenAlreadyExistsError",
    "WardenDisabledError",
    "WardenNotFoundError",
]
