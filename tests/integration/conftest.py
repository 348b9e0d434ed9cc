"""Integration test configuration: auto-skip unless live credentials are wanted."""

import os

import pytest


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: marks tests that call the live Google and Vapi APIs"
        " (deselect with '-m \"not integration\"')",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless CHECKIN_INTEGRATION=1."""
    if os.environ.get("CHECKIN_INTEGRATION") == "1":
        return
    skip_integration = pytest.mark.skip(
        reason="Set CHECKIN_INTEGRATION=1 to run integration tests"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
