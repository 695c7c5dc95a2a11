# tests/integration/conftest.py
import pytest


def pytest_collection_modifyitems(items):
    """Add 'integration' marker to all tests in this directory."""
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(pytest.mark.integration)
