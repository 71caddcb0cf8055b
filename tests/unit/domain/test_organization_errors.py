"""Unit tests for the domain error hierarchy.

Every specific error belongs to exactly one error kind, and every kind
derives from WardenError.
"""

from __future__ import annotations

from uuid import uuid4

import pytest

from warden.domain.errors import (
    ConcurrentModificationError,
    ConflictError,
    InvalidArgumentError,
    InvalidIterationOrdinalError,
    InvalidOrganizationNameError,
    IterationOrdinalConflictError,
    NotFoundError,
    OrganizationAlreadyExistsError,
    OrganizationNotFoundError,
    UserAlreadyInOrganizationError,
    UserNotFoundError,
    WardenAlreadyExistsError,
    WardenDisabledError,
    WardenNotFoundError,
)
from warden.domain.exceptions import WardenError


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (InvalidOrganizationNameError(), InvalidArgumentError),
        (InvalidIterationOrdinalError(-1), InvalidArgumentError),
        (WardenDisabledError(uuid4(), "X"), InvalidArgumentError),
        (OrganizationNotFoundError(uuid4()), NotFoundError),
        (UserNotFoundError(user_id=uuid4()), NotFoundError),
        (WardenNotFoundError(uuid4(), "X"), NotFoundError),
        (OrganizationAlreadyExistsError("Acme", uuid4()), ConflictError),
        (WardenAlreadyExistsError(uuid4(), "X"), ConflictError),
        (UserAlreadyInOrganizationError(uuid4(), uuid4(), "a@b.c"), ConflictError),
        (IterationOrdinalConflictError(uuid4(), 1, 2), ConflictError),
        (ConcurrentModificationError(uuid4(), 1, 2), ConflictError),
    ],
)
def test_error_kind(error: WardenError, kind: type[WardenError]) -> None:
    """Errors are distinguishable by kind."""
    assert isinstance(error, kind)
    assert isinstance(error, WardenError)
    assert str(error)


def test_kinds_are_disjoint() -> None:
    """No kind is a subclass of another."""
    kinds = [InvalidArgumentError, NotFoundError, ConflictError]
    for kind in kinds:
        for other in kinds:
            if kind is not other:
                assert not issubclass(kind, other)


def test_user_not_found_message_prefers_email() -> None:
    """Email lookups report the email."""
    error = UserNotFoundError(email="bob@x.com")

    assert "bob@x.com" in str(error)
    assert error.user_id is None


def test_concurrent_modification_attributes() -> None:
    """Revisions are exposed for callers deciding to retry."""
    organization_id = uuid4()
    error = ConcurrentModificationError(organization_id, 3, 4)

    assert error.organization_id == organization_id
    assert error.expected_revision == 3
    assert error.actual_revision == 4
