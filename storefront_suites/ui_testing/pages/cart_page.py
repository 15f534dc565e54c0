"""
================================================================================
Cart Page Object
================================================================================

Line item table, rendered total and the "Place Order" entry point.

Cart rows are rendered client-side after the page loads; call
`wait_until_loaded()` after navigating here before reading the table.

Removal is positional by default: `clear_cart()` always removes the first
row and confirms each removal by the row count dropping by exactly one.
`remove_line_item(name)` is the name-based variant for scenarios that
remove a specific product.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List, Optional

import allure
from loguru import logger

from storefront_suites.ui_testing.data.models import CartLineItem
from storefront_suites.ui_testing.framework.locator_registry import MatchPolicy
from storefront_suites.ui_testing.framework.text_parsing import PRICE_SENTINEL, parse_price
from storefront_suites.ui_testing.framework.waits import count_is
from storefront_suites.ui_testing.locators.cart_locators import CART_LOCATORS
from storefront_suites.ui_testing.workflows.cart_convergence import (
    ConvergenceReport,
    converge_to_empty,
)

from .storefront_page import StorefrontPage


# Column positions in a cart row: image, title, price, delete link
NAME_COLUMN = 1
PRICE_COLUMN = 2


class CartPage(StorefrontPage):
    """Cart page object."""

    LOCATORS = CART_LOCATORS
    URL_PATH = "/cart.html"

    @allure.step("Wait for cart to load")
    async def wait_until_loaded(self) -> None:
        """Wait for the cart view and its line item requests to settle."""
        await self.wait_visible("place_order_button", timeout=self.settings.navigation_timeout)
        await self.wait_for_page_load("networkidle")

    # =========================================================================
    # Reads
    # =========================================================================

    async def line_item_count(self) -> int:
        return await self.count("cart_rows")

    async def is_empty(self) -> bool:
        return await self.line_item_count() == 0

    async def cart_items(self) -> List[CartLineItem]:
        """Line items in display order."""
        rows = self.element("cart_rows", match=MatchPolicy.ALL)
        items = []
        for index in range(await rows.count()):
            cells = rows.nth(index).locator("td")
            name = (await cells.nth(NAME_COLUMN).text_content() or "").strip()
            price = parse_price(await cells.nth(PRICE_COLUMN).text_content())
            items.append(CartLineItem(name=name, price=price))
        return items

    async def item_names(self) -> List[str]:
        return [item.name for item in await self.cart_items()]

    async def has_line_item(self, name: str) -> bool:
        return await self.count("line_item_name", name) > 0

    async def line_item_price(self, name: str, strict: bool = False) -> float:
        """Price of the first row named `name`."""
        return parse_price(await self.get_text("line_item_price", name), strict=strict)

    async def total_price(self, strict: bool = False) -> float:
        """
        Rendered cart total.

        The total element is empty while the cart is empty; that reads as
        0.0 without a parse warning.
        """
        text = await self.get_text("total_price", require_visible=False)
        if not text:
            return PRICE_SENTINEL
        return parse_price(text, strict=strict)

    # =========================================================================
    # Removal
    # =========================================================================

    async def _click_first_delete(self) -> None:
        await self.click("delete_links")

    async def _wait_removed(self, before: int) -> None:
        await self.wait_count("cart_rows", count_is(before - 1))

    @allure.step("Remove first line item")
    async def remove_first_line_item(self) -> None:
        before = await self.line_item_count()
        await self._click_first_delete()
        await self._wait_removed(before)

    @allure.step("Remove line item {name}")
    async def remove_line_item(self, name: str) -> None:
        """Remove the first row whose name cell equals `name`."""
        before = await self.line_item_count()
        await self.click("line_item_delete", name)
        await self._wait_removed(before)
        logger.info(f"Removed line item: {name}")

    @allure.step("Clear cart")
    async def clear_cart(self, timeout: Optional[int] = None) -> ConvergenceReport:
        """
        Remove line items until the cart is observed empty.

        Args:
            timeout: Overall deadline in ms (default: ui.timeouts.cart_clear)

        Raises:
            ConvergenceTimeout: If the cart cannot be emptied
        """
        return await converge_to_empty(
            self.line_item_count,
            self._click_first_delete,
            removal_timeout=self.settings.default_timeout,
            total_timeout=self.settings.cart_clear_timeout if timeout is None else timeout,
            poll_interval=self.settings.poll_interval,
        )

    # =========================================================================
    # Checkout entry
    # =========================================================================

    @allure.step("Place order")
    async def place_order(self) -> None:
        """Open the order form (awaited by CheckoutPage.fill_checkout_form)."""
        await self.click("place_order_button")


__all__ = ["CartPage"]
