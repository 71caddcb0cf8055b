"""Bootstrap wiring for organization services.

Services are built on the in-memory stubs and cached as process-wide
singletons; ``reset_organization_services`` drops them for test
isolation.
"""

from __future__ import annotations

from dataclasses import dataclass

from warden.application.ports.organization_service import OrganizationServiceProtocol
from warden.application.services.iteration_recorder_service import (
    IterationRecorderService,
)
from warden.application.services.organization_locks import OrganizationLocks
from warden.application.services.organization_service import OrganizationService
from warden.config.organization_config import OrganizationConfig
from warden.infrastructure.stubs.api_key_repository_stub import ApiKeyRepositoryStub
from warden.infrastructure.stubs.iteration_history_stub import IterationHistoryStub
from warden.infrastructure.stubs.organization_repository_stub import (
    OrganizationRepositoryStub,
)
from warden.infrastructure.stubs.user_repository_stub import UserRepositoryStub


@dataclass(frozen=True)
class OrganizationContainer:
    """Services and the stores they share."""

    organization_service: OrganizationService
    iteration_recorder: IterationRecorderService
    organizations: OrganizationRepositoryStub
    users: UserRepositoryStub
    api_keys: ApiKeyRepositoryStub
    iterations: IterationHistoryStub
    locks: OrganizationLocks


_container: OrganizationContainer | None = None


def build_in_memory_container(
    config: OrganizationConfig | None = None,
    organizations: OrganizationRepositoryStub | None = None,
) -> OrganizationContainer:
    """Build services over in-memory stores.

    Args:
        config: Service configuration; read from the environment if None.
        organizations: Organization store to use instead of a fresh one.
    """
    if config is None:
        config = OrganizationConfig.from_environment()
    if organizations is None:
        organizations = OrganizationRepositoryStub()
    locks = OrganizationLocks(enabled=config.serialize_mutations)
    users = UserRepositoryStub()
    api_keys = ApiKeyRepositoryStub()
    iterations = IterationHistoryStub()
    return OrganizationContainer(
        organization_service=OrganizationService(
            organization_repository=organizations,
            user_repository=users,
            api_key_repository=api_keys,
            config=config,
            locks=locks,
        ),
        iteration_recorder=IterationRecorderService(
            organization_repository=organizations,
            iteration_history=iterations,
            locks=locks,
        ),
        organizations=organizations,
        users=users,
        api_keys=api_keys,
        iterations=iterations,
        locks=locks,
    )


def get_organization_container() -> OrganizationContainer:
    """Get the process-wide container, building it on first use."""
    global _container
    if _container is None:
        _container = build_in_memory_container()
    return _container


def get_organization_service() -> OrganizationServiceProtocol:
    """Get the organization service singleton."""
    return get_organization_container().organization_service


def get_iteration_recorder() -> IterationRecorderService:
    """Get the iteration recorder singleton."""
    return get_organization_container().iteration_recorder


def reset_organization_services() -> None:
    """Reset the singletons."""
    global _container
    _container = None
