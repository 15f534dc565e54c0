"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser instance per test session
    - Isolated contexts for test independence
    - Browser type and headless mode from configuration (ui.browser,
      ui.headless; UI_BROWSER / UI_HEADLESS override)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Playwright,
)

from .config_loader import UISettings, get_ui_settings


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """Manages the browser instance and contexts for UI testing."""

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        settings: Optional[UISettings] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (default: ui.headless)
            browser_type: 'chromium', 'firefox' or 'webkit' (default: ui.browser)
            settings: UI settings snapshot (default: loaded from config)
        """
        settings = settings or get_ui_settings()
        self.headless = settings.headless if headless is None else headless
        self.browser_type = (browser_type or settings.browser).lower()
        if self.browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser {self.browser_type!r}; "
                f"expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )
        self.navigation_timeout = settings.navigation_timeout

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def start(self) -> Browser:
        """Start Playwright and launch the configured browser."""
        if self._browser is not None:
            return self._browser

        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)
        self._browser = await browser_launcher.launch(headless=self.headless)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )
        return self._browser

    async def close(self) -> None:
        """Close all contexts and the browser."""
        for context in self._contexts:
            try:
                await context.close()
            except PlaywrightError as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(
            **{**self.DEFAULT_CONTEXT_OPTIONS, **options}
        )
        context.set_default_navigation_timeout(self.navigation_timeout)
        self._contexts.append(context)
        return context

    async def release_context(self, context: BrowserContext) -> None:
        """Close a context created by this manager."""
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
