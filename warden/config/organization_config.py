"""Organization service configuration.

This module defines configuration for organization defaults, browsing
limits and mutation serialization, with environment variable overrides.

Environment Variables:
- WARDEN_DEFAULT_ORGANIZATION_NAME: Name used by get/create default (default: "My organization")
- WARDEN_DEFAULT_WARDEN_NAME: Warden pre-registered on create (default: "My warden")
- WARDEN_DEFAULT_RESULTS_PER_PAGE: Browse page size when unset (default: 10)
- WARDEN_MAX_RESULTS_PER_PAGE: Upper bound for browse page size (default: 100)
- WARDEN_SERIALIZE_MUTATIONS: Lock mutations per organization (default: true)

Unparseable values fall back to their default. Values that parse but break
the rules checked in OrganizationConfig.__post_init__, such as a maximum
page size below the default one, raise ValueError.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_str_env(key: str, default: str) -> str:
    """Get non-blank string environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        The stripped value or default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or not a recognized boolean.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class OrganizationConfig:
    """Configuration for OrganizationService.

    All values can be overridden via environment variables.

    Attributes:
        default_organization_name: Name of the organization every user
            gets by default. Default: "My organization".
        default_warden_name: Warden pre-registered when an organization is
            created with auto-registration enabled. Default: "My warden".
        default_results_per_page: Browse page size when the query leaves
            it unset. Default: 10.
        max_results_per_page: Browse page sizes above this are clamped.
            Default: 100.
        serialize_mutations: Whether mutations of the same organization
            are serialized through a per-organization lock. Default: True.
    """

    default_organization_name: str = "My organization"
    default_warden_name: str = "My warden"
    default_results_per_page: int = 10
    max_results_per_page: int = 100
    serialize_mutations: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.default_organization_name.strip():
            raise ValueError("default_organization_name must not be blank")
        if not self.default_warden_name.strip():
            raise ValueError("default_warden_name must not be blank")
        if self.default_results_per_page < 1:
            raise ValueError(
                "default_results_per_page must be positive, "
                f"got {self.default_results_per_page}"
            )
        if self.max_results_per_page < self.default_results_per_page:
            raise ValueError(
                f"max_results_per_page ({self.max_results_per_page}) must be at least "
                f"default_results_per_page ({self.default_results_per_page})"
            )

    @classmethod
    def from_environment(cls) -> "OrganizationConfig":
        """Create config from environment variables with defaults.

        Returns:
            OrganizationConfig with values from environment or defaults.

        Raises:
            ValueError: If the resulting values are inconsistent, e.g.
                WARDEN_MAX_RESULTS_PER_PAGE below the default page size.
        """
        return cls(
            default_organization_name=_get_str_env(
                "WARDEN_DEFAULT_ORGANIZATION_NAME", "My organization"
            ),
            default_warden_name=_get_str_env("WARDEN_DEFAULT_WARDEN_NAME", "My warden"),
            default_results_per_page=_get_int_env("WARDEN_DEFAULT_RESULTS_PER_PAGE", 10),
            max_results_per_page=_get_int_env("WARDEN_MAX_RESULTS_PER_PAGE", 100),
            serialize_mutations=_get_bool_env("WARDEN_SERIALIZE_MUTATIONS", True),
        )


# Default config
DEFAULT_ORGANIZATION_CONFIG = OrganizationConfig()

# Testing config with small pages
TEST_ORGANIZATION_CONFIG = OrganizationConfig(
    default_results_per_page=2,
    max_results_per_page=5,
)
