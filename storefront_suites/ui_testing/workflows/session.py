"""
================================================================================
Storefront Session
================================================================================

Orchestrates the page objects of one browser page into reusable
preconditions for the scenarios:

    session = await open_authenticated_session(page, valid_user())
    await reset_cart(session)
    await add_products_to_cart(session, [SAMSUNG_GALAXY_S6, MACBOOK_PRO])

Setup failures are fatal: a login that does not reach the authenticated
state raises SessionSetupError, a cart that cannot be emptied raises
ConvergenceTimeout.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from loguru import logger
from playwright.async_api import Page

from storefront_suites.ui_testing.data.models import Credentials, ProductInfo
from storefront_suites.ui_testing.framework.config_loader import UISettings, get_ui_settings
from storefront_suites.ui_testing.framework.errors import SessionSetupError, WaitTimeout
from storefront_suites.ui_testing.framework.steps import run_step
from storefront_suites.ui_testing.pages.cart_page import CartPage
from storefront_suites.ui_testing.pages.checkout_page import CheckoutPage
from storefront_suites.ui_testing.pages.home_page import HomePage
from storefront_suites.ui_testing.pages.login_page import LoginPage
from storefront_suites.ui_testing.pages.product_detail_page import ProductDetailPage
from storefront_suites.ui_testing.workflows.cart_convergence import ConvergenceReport


@dataclass
class StorefrontSession:
    """The page objects of one storefront page, bound to the same surface."""
    page: Page
    home: HomePage
    login: LoginPage
    product: ProductDetailPage
    cart: CartPage
    checkout: CheckoutPage

    @classmethod
    def for_page(
        cls,
        page: Page,
        base_url: Optional[str] = None,
        settings: Optional[UISettings] = None,
    ) -> "StorefrontSession":
        """Build every page object on one Playwright page."""
        settings = settings or get_ui_settings()
        base_url = base_url or settings.base_url
        return cls(
            page=page,
            home=HomePage(page, base_url, settings),
            login=LoginPage(page, base_url, settings),
            product=ProductDetailPage(page, base_url, settings),
            cart=CartPage(page, base_url, settings),
            checkout=CheckoutPage(page, base_url, settings),
        )

    def page_objects(self) -> List:
        return [self.home, self.login, self.product, self.cart, self.checkout]

    def rebind(self, page: Page) -> None:
        """Move every page object to a new surface."""
        self.page = page
        for page_object in self.page_objects():
            page_object.rebind(page)


async def open_authenticated_session(
    page: Page,
    credentials: Credentials,
    base_url: Optional[str] = None,
    timeout: Optional[int] = None,
) -> StorefrontSession:
    """
    Open the storefront and log in.

    Args:
        page: Playwright page to drive
        credentials: Account to log in with
        base_url: Storefront URL (default: ui.base_url)
        timeout: Authenticated marker timeout in ms (default: ui.timeouts.login)

    Returns:
        StorefrontSession whose welcome banner is visible

    Raises:
        SessionSetupError: If the authenticated state is not reached
    """
    return await authenticate(
        StorefrontSession.for_page(page, base_url), credentials, timeout
    )


async def authenticate(
    session: StorefrontSession,
    credentials: Credentials,
    timeout: Optional[int] = None,
) -> StorefrontSession:
    """Log an existing session in from the home page (see open_authenticated_session)."""
    await run_step("Open storefront", session.home.open)
    try:
        await run_step(
            f"Login as {credentials.username}",
            lambda: session.login.login(credentials, timeout=timeout),
        )
    except WaitTimeout as e:
        raise SessionSetupError(
            f"Login as {credentials.username!r} did not reach the "
            f"authenticated state: {e}"
        ) from e

    welcome = await session.home.welcome_text()
    if credentials.username not in welcome:
        raise SessionSetupError(
            f"Welcome banner {welcome!r} does not name {credentials.username!r}"
        )

    logger.info(f"Authenticated session ready for {credentials.username}")
    return session


async def reset_cart(session: StorefrontSession) -> ConvergenceReport:
    """Empty the cart and return to the home page."""
    await run_step("Open cart", session.home.navigate_to_cart)
    await session.cart.wait_until_loaded()
    report = await run_step("Clear cart", session.cart.clear_cart)
    await run_step("Return to home", session.home.navigate_to_home)
    return report


async def add_products_to_cart(
    session: StorefrontSession,
    products: Iterable[ProductInfo],
) -> List[str]:
    """
    Add each product from its category listing.

    Returns:
        The add-to-cart dialog message of each product, in order
    """
    messages = []
    for product in products:
        async def add(product: ProductInfo = product) -> str:
            await session.home.navigate_to_home()
            await session.home.select_category(product.category)
            await session.home.select_product(product.name)
            return await session.product.add_to_cart()

        messages.append(await run_step(f"Add {product.name} to cart", add))
    return messages


__all__ = [
    "StorefrontSession",
    "open_authenticated_session",
    "authenticate",
    "reset_cart",
    "add_products_to_cart",
]
