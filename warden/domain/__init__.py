"""Domain layer - pure organization model with no infrastructure dependencies.

This layer contains:
- models: Organization aggregate, wardens, memberships, iteration ledger
- errors: Error kinds and specific domain errors
- exceptions: The WardenError root

Import rules:
- CAN import: Python stdlib, typing
- CANNOT import: application, infrastructure, config, bootstrap
"""

from warden.domain.exceptions import WardenError

__all__: list[str] = ["WardenError"]
