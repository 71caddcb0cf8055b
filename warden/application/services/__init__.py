"""Application services - orchestration of the organization use cases."""

from warden.application.services.iteration_recorder_service import (
    IterationRecorderService,
)
from warden.application.services.organization_locks import OrganizationLocks
from warden.application.services.organization_service import OrganizationService

__all__: list[str] = [
    "IterationRecorderService",
    "OrganizationLocks",
    "OrganizationService",
]
