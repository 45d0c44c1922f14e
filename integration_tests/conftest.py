"""Pytest configuration for tests against the live services."""

import pytest
from dotenv import load_dotenv

# API keys usually live in a local .env file
load_dotenv()


def pytest_collection_modifyitems(items):
    """Mark every test collected from this directory as an integration test."""
    for item in items:
        if item.path.parent.name == "integration_tests":
            item.add_marker(pytest.mark.integration)
