"""In-memory stub implementations of the application ports.

These stubs stand in for the document store in tests and local
development.
"""

from warden.infrastructure.stubs.api_key_repository_stub import ApiKeyRepositoryStub
from warden.infrastructure.stubs.iteration_history_stub import IterationHistoryStub
from warden.infrastructure.stubs.organization_repository_stub import (
    OrganizationRepositoryStub,
)
from warden.infrastructure.stubs.user_repository_stub import UserRepositoryStub

__all__: list[str] = [
    "ApiKeyRepositoryStub",
    "IterationHistoryStub",
    "OrganizationRepositoryStub",
    "UserRepositoryStub",
]
