"""Configuration module for Warden.

Available Configurations:
- OrganizationConfig: Organization defaults, browsing limits, mutation locking
"""

from warden.config.organization_config import (
    DEFAULT_ORGANIZATION_CONFIG,
    TEST_ORGANIZATION_CONFIG,
    OrganizationConfig,
)

__all__ = [
    "OrganizationConfig",
    "DEFAULT_ORGANIZATION_CONFIG",
    "TEST_ORGANIZATION_CONFIG",
]
