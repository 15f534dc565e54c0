"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- One browser per session, one context and page per test
- Page Object fixtures bound to the test's page
- Authenticated session with an empty cart as a precondition
- Screenshot, URL and recent XHR capture on failure

Async fixtures run on the session event loop; test modules declare
`pytestmark = pytest.mark.asyncio(loop_scope="session")` to share it.

================================================================================
"""

from typing import AsyncGenerator, Generator

import allure
import pytest
from loguru import logger
from playwright.async_api import Browser, BrowserContext, Page

from storefront_suites.ui_testing.data import Credentials, valid_user
from storefront_suites.ui_testing.framework.browser_manager import BrowserManager
from storefront_suites.ui_testing.framework.config_loader import UISettings, get_ui_settings
from storefront_suites.ui_testing.framework.soft_assert import SoftAssertions
from storefront_suites.ui_testing.pages import (
    CartPage,
    CheckoutPage,
    HomePage,
    LoginPage,
    ProductDetailPage,
)
from storefront_suites.ui_testing.workflows.session import (
    StorefrontSession,
    authenticate,
    reset_cart,
)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings() -> UISettings:
    """UI settings snapshot for the whole run."""
    return get_ui_settings()


@pytest.fixture(scope="session")
async def browser_manager(ui_settings: UISettings) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single browser manager instance for all tests in the session,
    reducing browser launch overhead.
    """
    manager = BrowserManager(settings=ui_settings)
    yield manager
    await manager.close()


@pytest.fixture(scope="session")
async def browser(browser_manager: BrowserManager) -> AsyncGenerator[Browser, None]:
    """Session-scoped browser shared across all tests."""
    browser = await browser_manager.start()
    yield browser


@pytest.fixture(scope="function")
async def context(
    browser: Browser,
    browser_manager: BrowserManager,
) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = await browser_manager.new_context()
    yield context
    await browser_manager.release_context(context)


@pytest.fixture(scope="function")
async def page(context: BrowserContext) -> AsyncGenerator[Page, None]:
    """Function-scoped page inside the test's context."""
    page = await context.new_page()
    yield page
    if not page.is_closed():
        await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
async def storefront(
    request: pytest.FixtureRequest,
    page: Page,
    ui_settings: UISettings,
) -> AsyncGenerator[StorefrontSession, None]:
    """
    Page objects bound to the test's page.

    Captures failure details (screenshot, URL, recent XHR responses) into
    the Allure report when the test body fails.
    """
    session = StorefrontSession.for_page(page, settings=ui_settings)
    yield session

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and not page.is_closed():
        await session.home.capture_failure(request.node.name)


@pytest.fixture
def home_page(storefront: StorefrontSession) -> HomePage:
    return storefront.home


@pytest.fixture
def login_page(storefront: StorefrontSession) -> LoginPage:
    return storefront.login


@pytest.fixture
def product_page(storefront: StorefrontSession) -> ProductDetailPage:
    return storefront.product


@pytest.fixture
def cart_page(storefront: StorefrontSession) -> CartPage:
    return storefront.cart


@pytest.fixture
def checkout_page(storefront: StorefrontSession) -> CheckoutPage:
    return storefront.checkout


# ================================================================================
# Authentication Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def credentials() -> Credentials:
    """Account used by authenticated scenarios."""
    return valid_user()


@pytest.fixture
async def authenticated_session(
    storefront: StorefrontSession,
    credentials: Credentials,
) -> AsyncGenerator[StorefrontSession, None]:
    """
    Logged-in session with an empty cart, positioned on the home page.

    Setup failures (SessionSetupError, ConvergenceTimeout) abort the test.
    """
    with allure.step("Precondition: authenticated session with empty cart"):
        await authenticate(storefront, credentials)
        await reset_cart(storefront)
    yield storefront


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def soft(request: pytest.FixtureRequest) -> Generator[SoftAssertions, None, None]:
    """
    Soft assertion collector named after the test.

    Tests call `soft.assert_all()` at the end; unreported failures are
    logged at teardown.
    """
    collector = SoftAssertions(request.node.name)
    yield collector
    if collector.failed:
        logger.warning(collector.summary())


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item (rep_setup / rep_call / rep_teardown)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
