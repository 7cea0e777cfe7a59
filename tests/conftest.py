"""Pytest configuration and fixtures."""

import pytest
from unittest.mock import MagicMock

from src.core.models import RegistryConstants
from src.registry import ConfigRegistry


@pytest.fixture
def mock_settings():
    """Create mock settings for testing."""
    settings = MagicMock()
    settings.registry_validate_on_load = True
    settings.registry_cache_master_address = True
    return settings


@pytest.fixture
def uncached_settings(mock_settings):
    """Settings that recompute the master address on every call."""
    mock_settings.registry_cache_master_address = False
    return mock_settings


@pytest.fixture
def constants() -> RegistryConstants:
    """Default constant table."""
    return RegistryConstants()


@pytest.fixture
def registry(mock_settings) -> ConfigRegistry:
    """Create a registry over the default constant table."""
    return ConfigRegistry(settings=mock_settings)
