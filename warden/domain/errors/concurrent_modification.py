"""Concurrent modification error for conditional organization replace.

Organizations are read, mutated in memory and written back as a whole.
The write is conditional on the revision that was read, so a concurrent
writer is detected instead of silently overwritten.
"""

from __future__ import annotations

from uuid import UUID

from warden.domain.errors.kinds import ConflictError


class ConcurrentModificationError(ConflictError):
    """Raised when a conditional replace finds a different revision.

    This is a recoverable error - the caller should re-read the
    organization and decide whether to retry or abort. Nothing is
    retried internally.

    Attributes:
        organization_id: UUID of the organization that was being replaced.
        expected_revision: The revision that was read before mutating.
        actual_revision: The revision currently stored.
    """

    def __init__(
        self,
        organization_id: UUID,
        expected_revision: int,
        actual_revision: int,
    ) -> None:
        """Initialize concurrent modification error.

        Args:
            organization_id: UUID of the organization being replaced.
            expected_revision: The revision expected by the replace.
            actual_revision: The revision found in the store.
        """
        self.organization_id = organization_id
        self.expected_revision = expected_revision
        self.actual_revision = actual_revision
        super().__init__(
            f"Concurrent modification detected for organization {organization_id}. "
            f"Expected revision: {expected_revision}, "
            f"stored revision: {actual_revision}. "
            "Another process has modified this organization."
        )
