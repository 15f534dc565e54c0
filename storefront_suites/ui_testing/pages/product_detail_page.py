"""
================================================================================
Product Detail Page Object
================================================================================

Adding to cart is confirmed by the storefront with a native alert; the
alert is awaited, accepted and its message returned so scenarios can
verify it.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from storefront_suites.ui_testing.framework.errors import WaitTimeout
from storefront_suites.ui_testing.framework.text_parsing import parse_price
from storefront_suites.ui_testing.locators.product_detail_locators import (
    PRODUCT_DETAIL_LOCATORS,
)

from .storefront_page import StorefrontPage


class ProductDetailPage(StorefrontPage):
    """Product detail page object."""

    LOCATORS = PRODUCT_DETAIL_LOCATORS

    @allure.step("Add product to cart")
    async def add_to_cart(self, timeout: Optional[int] = None) -> str:
        """
        Click "Add to cart" and accept the confirmation alert.

        Args:
            timeout: Alert timeout in ms (default: ui.timeouts.dialog)

        Returns:
            The alert message (e.g. "Product added.")

        Raises:
            WaitTimeout: If no alert appears
        """
        timeout = self.settings.dialog_timeout if timeout is None else timeout
        await self.wait_visible("add_to_cart_button")

        try:
            async with self.page.expect_event("dialog", timeout=timeout) as dialog_info:
                await self.click("add_to_cart_button")
            dialog = await dialog_info.value
        except PlaywrightTimeoutError as e:
            raise WaitTimeout("add-to-cart confirmation alert", timeout) from e

        message = dialog.message
        await dialog.accept()
        logger.info(f"Add to cart alert: {message}")
        return message

    async def product_name(self) -> str:
        return await self.get_text("product_name", timeout=self.settings.navigation_timeout)

    async def product_price(self, strict: bool = False) -> float:
        """Displayed price, e.g. "$360 *includes tax" -> 360.0."""
        return parse_price(await self.get_text("product_price"), strict=strict)

    async def product_description(self) -> str:
        return await self.get_text("product_description")

    @allure.step("Navigate back")
    async def navigate_back(self) -> None:
        self._ensure_live()
        await self.page.go_back(timeout=self.settings.navigation_timeout)
        await self.wait_for_page_load()


__all__ = ["ProductDetailPage"]
