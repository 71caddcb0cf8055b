"""
Pytest configuration and shared fixtures for Warden tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for port mocking in service unit tests
- Use the in-memory stubs for stub tests and integration scenarios
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from warden.domain.models.user import User


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from warden import __version__

    return __version__


@pytest.fixture
def owner() -> User:
    """A user that owns organizations."""
    return User(id=uuid4(), email="owner@example.com", name="Owner")


@pytest.fixture
def member() -> User:
    """A user that can be added to organizations."""
    return User(id=uuid4(), email="bob@x.com", name="Bob")


@pytest.fixture
def t0() -> datetime:
    """A fixed point in time."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
