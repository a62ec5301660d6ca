"""
Root conftest.py for pytest configuration

This file handles:
1. Test environment variables, set before any settings are loaded
2. Marker registration
3. Automatic marker inheritance based on test location
"""
import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from tests.markers import DOMAIN_MARKERS, OTHER_MARKERS, PRIMARY_MARKERS, apply_auto_markers  # noqa: E402


def pytest_configure(config):
    """Register primary, domain and auxiliary markers"""
    for marker_name in PRIMARY_MARKERS:
        config.addinivalue_line("markers", f"{marker_name}: {marker_name} tests")
    for marker_name, description in {**DOMAIN_MARKERS, **OTHER_MARKERS}.items():
        config.addinivalue_line("markers", f"{marker_name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Apply automatic markers to all collected items"""
    for item in items:
        apply_auto_markers(item)
