"""
================================================================================
Storefront Page
================================================================================

Base for every storefront page: injects the navbar locator set and
provides the navigation and authentication-marker operations available
from any page.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from storefront_suites.ui_testing.framework.page_base import PageBase
from storefront_suites.ui_testing.locators.common_locators import COMMON_LOCATORS


class StorefrontPage(PageBase):
    """Page object with the shared navbar."""

    COMMON_LOCATORS = COMMON_LOCATORS

    @allure.step("Navigate to cart")
    async def navigate_to_cart(self) -> None:
        await self.click("navbar_cart")
        await self.wait_for_page_load()

    @allure.step("Navigate to home")
    async def navigate_to_home(self) -> None:
        await self.click("navbar_home")
        await self.wait_for_page_load()

    @allure.step("Logout")
    async def logout(self) -> None:
        """Log out and wait until the login link is back."""
        await self.click("navbar_logout")
        await self.wait_visible("navbar_login")
        logger.info("Logged out")

    async def welcome_text(self, timeout: Optional[int] = None) -> str:
        """Text of the "Welcome <username>" banner."""
        return await self.get_text("welcome_message", timeout=timeout)

    async def is_authenticated(self) -> bool:
        """Whether the welcome banner and logout link are shown right now."""
        return (
            await self.is_visible("welcome_message")
            and await self.is_visible("navbar_logout")
        )

    async def is_logged_out(self) -> bool:
        """Whether the login link is shown and the logout link is not."""
        return (
            await self.is_visible("navbar_login")
            and not await self.is_visible("navbar_logout")
        )


__all__ = ["StorefrontPage"]
