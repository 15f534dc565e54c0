"""
================================================================================
Login Page Object
================================================================================

The login modal opened from the navbar.

A successful login is proven by the modal closing and the welcome banner
becoming visible; both waits use `ui.timeouts.login`.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from storefront_suites.ui_testing.data.models import Credentials
from storefront_suites.ui_testing.locators.login_locators import LOGIN_LOCATORS

from .storefront_page import StorefrontPage


class LoginPage(StorefrontPage):
    """Login modal page object."""

    LOCATORS = LOGIN_LOCATORS

    @allure.step("Open login modal")
    async def open_login_modal(self) -> None:
        await self.click("navbar_login")
        await self.wait_visible("login_modal")

    @allure.step("Login")
    async def login(
        self,
        credentials: Credentials,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Log in through the modal.

        Args:
            credentials: Username and password, both non-empty
            timeout: Authenticated marker timeout in ms
                (default: ui.timeouts.login)

        Raises:
            ValueError: If a credential field is empty
            WaitTimeout: If the modal stays open or no welcome banner appears
        """
        missing = [
            name for name in ("username", "password")
            if not getattr(credentials, name)
        ]
        if missing:
            raise ValueError(f"Credentials missing: {', '.join(missing)}")

        timeout = self.settings.login_timeout if timeout is None else timeout

        await self.open_login_modal()
        await self.fill("username_input", credentials.username)
        await self.fill("password_input", credentials.password)
        await self.click("login_button")

        await self.wait_hidden("login_modal", timeout=timeout)
        await self.wait_visible("welcome_message", timeout=timeout)
        logger.info(f"Logged in as {credentials.username}")

    @allure.step("Close login modal")
    async def close_login_modal(self) -> None:
        await self.click("close_modal_button")
        await self.wait_hidden("login_modal")

    async def is_login_modal_visible(self) -> bool:
        return await self.is_visible("login_modal")


__all__ = ["LoginPage"]
