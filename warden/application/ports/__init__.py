"""Application ports - protocols for the external collaborators.

Ports are implemented by infrastructure adapters (and in-memory stubs
for tests and development):
- OrganizationRepositoryProtocol: organization documents
- UserRepositoryProtocol: user lookups
- ApiKeyRepositoryProtocol: API key lookups
- IterationHistoryProtocol: append-only iteration log
- OrganizationServiceProtocol: the service interface for transport layers
"""

from warden.application.ports.api_key_repository import ApiKeyRepositoryProtocol
from warden.application.ports.iteration_history import IterationHistoryProtocol
from warden.application.ports.organization_repository import (
    OrganizationRepositoryProtocol,
)
from warden.application.ports.organization_service import OrganizationServiceProtocol
from warden.application.ports.user_repository import UserRepositoryProtocol

__all__: list[str] = [
    "ApiKeyRepositoryProtocol",
    "IterationHistoryProtocol",
    "OrganizationRepositoryProtocol",
    "OrganizationServiceProtocol",
    "UserRepositoryProtocol",
]
