"""Application DTOs (Data Transfer Objects).

These DTOs are used for data transfer across the service boundary. They
are distinct from:
- Domain models (the aggregate and its value types)
- Infrastructure models (store documents, etc.)

Exports:
1. Dataclass-based paging types - for queries and pages
2. Pydantic models - organization projections returned by services
"""

from warden.application.dtos.organization import (
    OrganizationDto,
    OrganizationUserDto,
    WardenDto,
)
from warden.application.dtos.paging import (
    BrowseOrganizations,
    PagedResult,
)

__all__: list[str] = [
    "BrowseOrganizations",
    "OrganizationDto",
    "OrganizationUserDto",
    "PagedResult",
    "WardenDto",
]
