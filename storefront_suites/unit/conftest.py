"""
================================================================================
Unit Test Configuration
================================================================================

Fixtures for the offline framework tests: fresh configuration per test,
fake Playwright pages and fast UI settings.

================================================================================
"""

from typing import Callable

import pytest

from storefront_suites.ui_testing.framework.config_loader import ConfigLoader, UISettings
from storefront_suites.unit.fake_storefront import FakePage


@pytest.fixture(autouse=True)
def fresh_config():
    """Every unit test starts and ends with an unloaded configuration."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def make_page() -> Callable[[], FakePage]:
    """Factory for additional pages (e.g. to test rebinding)."""
    return FakePage


@pytest.fixture
def fast_settings() -> UISettings:
    """Settings with short timeouts and the short dialect."""
    return UISettings(
        base_url="https://shop.example.com/",
        default_timeout=50,
        navigation_timeout=50,
        login_timeout=50,
        dialog_timeout=50,
        cart_clear_timeout=500,
        poll_interval=1,
    )
