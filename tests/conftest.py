"""
Shared fixtures for all tests
"""
import pytest

from core.config import Settings, get_settings


@pytest.fixture
def test_settings() -> Settings:
    """Default settings, independent of any .env file"""
    get_settings.cache_clear()
    return Settings(_env_file=None, environment="test")
