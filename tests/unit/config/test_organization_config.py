"""Unit tests for OrganizationConfig."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from warden.config import (
    DEFAULT_ORGANIZATION_CONFIG,
    TEST_ORGANIZATION_CONFIG,
    OrganizationConfig,
)


class TestDefaults:
    """Default values."""

    def test_default_config(self) -> None:
        assert DEFAULT_ORGANIZATION_CONFIG.default_organization_name == "My organization"
        assert DEFAULT_ORGANIZATION_CONFIG.default_warden_name == "My warden"
        assert DEFAULT_ORGANIZATION_CONFIG.default_results_per_page == 10
        assert DEFAULT_ORGANIZATION_CONFIG.max_results_per_page == 100
        assert DEFAULT_ORGANIZATION_CONFIG.serialize_mutations is True

    def test_test_config_uses_small_pages(self) -> None:
        assert TEST_ORGANIZATION_CONFIG.default_results_per_page == 2
        assert TEST_ORGANIZATION_CONFIG.max_results_per_page == 5

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_ORGANIZATION_CONFIG.max_results_per_page = 1  # type: ignore[misc]


class TestValidation:
    """__post_init__ validation."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_organization_name": "  "},
            {"default_warden_name": ""},
            {"default_results_per_page": 0},
            {"default_results_per_page": 20, "max_results_per_page": 10},
        ],
    )
    def test_invalid_values_rejected(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ValueError):
            OrganizationConfig(**kwargs)  # type: ignore[arg-type]

    def test_max_equal_to_default_allowed(self) -> None:
        config = OrganizationConfig(default_results_per_page=5, max_results_per_page=5)

        assert config.max_results_per_page == 5


class TestFromEnvironment:
    """Environment variable overrides."""

    def test_defaults_without_environment(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert OrganizationConfig.from_environment() == DEFAULT_ORGANIZATION_CONFIG

    def test_overrides(self) -> None:
        env = {
            "WARDEN_DEFAULT_ORGANIZATION_NAME": " Main ",
            "WARDEN_DEFAULT_WARDEN_NAME": "Primary",
            "WARDEN_DEFAULT_RESULTS_PER_PAGE": "25",
            "WARDEN_MAX_RESULTS_PER_PAGE": "50",
            "WARDEN_SERIALIZE_MUTATIONS": "off",
        }
        with patch.dict(os.environ, env, clear=True):
            config = OrganizationConfig.from_environment()

        assert config.default_organization_name == "Main"
        assert config.default_warden_name == "Primary"
        assert config.default_results_per_page == 25
        assert config.max_results_per_page == 50
        assert config.serialize_mutations is False

    def test_unparseable_values_fall_back(self) -> None:
        env = {
            "WARDEN_DEFAULT_RESULTS_PER_PAGE": "ten",
            "WARDEN_SERIALIZE_MUTATIONS": "maybe",
            "WARDEN_DEFAULT_WARDEN_NAME": "   ",
        }
        with patch.dict(os.environ, env, clear=True):
            config = OrganizationConfig.from_environment()

        assert config.default_results_per_page == 10
        assert config.serialize_mutations is True
        assert config.default_warden_name == "My warden"

    def test_inconsistent_values_raise(self) -> None:
        """Values that parse but break validation are not silently replaced."""
        env = {"WARDEN_MAX_RESULTS_PER_PAGE": "5"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError, match="max_results_per_page"):
                OrganizationConfig.from_environment()
