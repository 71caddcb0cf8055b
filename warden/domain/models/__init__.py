"""Domain models for Warden.

Contains the organization aggregate, the value types it carries and the
iteration ledger. These models contain no infrastructure dependencies.
"""

from warden.domain.models.api_key import ApiKey
from warden.domain.models.capabilities import Timestampable, Validatable
from warden.domain.models.organization import (
    Organization,
    OrganizationRole,
    UserInOrganization,
    Warden,
)
from warden.domain.models.user import User
from warden.domain.models.warden_check_result import WardenCheckResult
from warden.domain.models.warden_iteration import WardenIteration

__all__: list[str] = [
    "ApiKey",
    "Organization",
    "OrganizationRole",
    "Timestampable",
    "User",
    "UserInOrganization",
    "Validatable",
    "Warden",
    "WardenCheckResult",
    "WardenIteration",
]
