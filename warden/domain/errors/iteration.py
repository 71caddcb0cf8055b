"""Iteration ledger domain errors.

Errors raised while creating warden iterations and recording them in
an organization's execution history.
"""

from __future__ import annotations

from uuid import UUID

from warden.domain.errors.kinds import ConflictError, InvalidArgumentError


class InvalidIterationOrdinalError(InvalidArgumentError):
    """Raised when a warden iteration is created with a negative ordinal.

    Attributes:
        ordinal: The rejected ordinal.
    """

    def __init__(self, ordinal: int) -> None:
        self.ordinal = ordinal
        super().__init__(
            f"Warden iteration ordinal can not be less than 0 ({ordinal})."
        )


class WardenDisabledError(InvalidArgumentError):
    """Raised when results are recorded for a disabled warden.

    Attributes:
        organization_id: The organization that owns the warden.
        warden_name: The disabled warden's name.
    """

    def __init__(self, organization_id: UUID, warden_name: str) -> None:
        self.organization_id = organization_id
        self.warden_name = warden_name
        super().__init__(
            f"Warden with name: '{warden_name}' is disabled "
            f"in organization: '{organization_id}'."
        )


class IterationOrdinalConflictError(ConflictError):
    """Raised when an appended iteration does not advance the ordinal.

    Ordinals are strictly increasing per organization's execution stream.

    Attributes:
        organization_id: The organization whose history was appended to.
        ordinal: The rejected ordinal.
        latest_ordinal: The latest ordinal already in the history.
    """

    def __init__(self, organization_id: UUID, ordinal: int, latest_ordinal: int) -> None:
        self.organization_id = organization_id
        self.ordinal = ordinal
        self.latest_ordinal = latest_ordinal
        super().__init__(
            f"Iteration ordinal {ordinal} must be greater than the latest "
            f"ordinal {latest_ordinal} for organization: '{organization_id}'."
        )
