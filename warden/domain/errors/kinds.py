"""Error kinds shared by the organization aggregate and its services.

Callers distinguish failures by kind rather than by message:
- InvalidArgumentError: a caller-supplied value violates a precondition
- NotFoundError: a referenced entity does not exist
- ConflictError: the operation would violate a uniqueness invariant
"""

from warden.domain.exceptions import WardenError


class InvalidArgumentError(WardenError):
    """Raised when a caller-supplied value violates a precondition.

    Examples:
        - Empty organization name
        - Negative iteration ordinal
    """

    pass


class NotFoundError(WardenError):
    """Raised when a referenced organization, user or warden does not exist.

    Lookups never raise this error; they return ``None`` instead. Only
    mutations that expect an existing target do.
    """

    pass


class ConflictError(WardenError):
    """Raised when an operation would violate a uniqueness invariant."""

    pass
