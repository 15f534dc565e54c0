"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the project-wide markers and tags collected tests by location:
tests under ui_testing/ get `ui`, tests under unit/ get `unit`.

================================================================================
"""

import os

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser-driven tests against the storefront"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests of the framework layer"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to login and logout"
    )
    config.addinivalue_line(
        "markers", "cart: Tests related to the shopping cart"
    )
    config.addinivalue_line(
        "markers", "checkout: Tests related to placing orders"
    )


def pytest_collection_modifyitems(config, items):
    """Add location-based markers to collected tests."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        if f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Storefront UI Automation Suite",
        "=" * 60,
        "",
    ]
