"""
================================================================================
Base Page Object
================================================================================

Foundation class for the storefront Page Object Model.

Provides:
    - Locator registry binding (page set + injected common set)
    - Key-based element interactions (click / fill / text / count)
    - Condition-based wait helpers (visible / hidden / count)
    - Surface rebinding with stale-page protection
    - Screenshot and failure-capture utilities
    - XHR/fetch response capture for debugging

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, ClassVar, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page, Response

from storefront_tools.common import ensure_directory, sanitize_file_name
from storefront_tools.report_tools.allure_utils import attach_json, attach_png, attach_text

from . import waits
from .config_loader import UISettings, get_ui_settings
from .errors import StaleSurfaceError
from .locator_registry import LocatorRegistry, LocatorSet, MatchPolicy


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).resolve().parents[3] / "reports" / "screenshots"

# Keep only the most recent responses
MAX_CAPTURED_RESPONSES = 20


class PageBase:
    """
    Base class for all page objects.

    Subclasses declare their locator set and, optionally, the shared set
    injected as the registry's common part:

        class CartPage(PageBase):
            LOCATORS = CART_LOCATORS
            COMMON_LOCATORS = COMMON_LOCATORS

            async def total_price(self) -> float:
                return parse_price(await self.get_text("total_price"))

    Page objects are not re-entrant: await one operation before starting
    the next on the same page.
    """

    LOCATORS: ClassVar[LocatorSet]
    COMMON_LOCATORS: ClassVar[Optional[LocatorSet]] = None
    URL_PATH: ClassVar[str] = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        settings: Optional[UISettings] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Storefront base URL (default: ui.base_url)
            settings: UI settings snapshot (default: loaded from config)
        """
        self.settings = settings or get_ui_settings()
        self.base_url = (base_url or self.settings.base_url).rstrip("/")
        self.page = page

        dialect = self.settings.selector_dialect
        common = (
            LocatorRegistry(page, self.COMMON_LOCATORS, dialect=dialect)
            if self.COMMON_LOCATORS is not None
            else None
        )
        self.locators = LocatorRegistry(page, self.LOCATORS, common=common, dialect=dialect)

        self._captured_responses: List[Dict[str, Any]] = []
        self._setup_response_capture()

    def _setup_response_capture(self) -> None:
        """Record recent XHR/fetch responses for failure diagnostics."""

        async def capture_response(response: Response) -> None:
            if response.request.resource_type not in ("xhr", "fetch"):
                return
            self._captured_responses.append({
                "timestamp": datetime.now().isoformat(),
                "method": response.request.method,
                "url": response.url,
                "status": response.status,
            })
            if len(self._captured_responses) > MAX_CAPTURED_RESPONSES:
                self._captured_responses.pop(0)

        self.page.on("response", capture_response)

    @property
    def url(self) -> str:
        """Full URL of this page."""
        return f"{self.base_url}{self.URL_PATH}"

    def rebind(self, page: Page) -> None:
        """
        Point this page object at a new browser surface.

        All locators are rebuilt; nothing from the old page is reused.
        """
        if page is self.page:
            return
        logger.debug(f"{type(self).__name__} rebound to a new page")
        self.page = page
        self.locators.bind(page)
        self._captured_responses.clear()
        self._setup_response_capture()

    def _ensure_live(self) -> None:
        if self.page.is_closed():
            raise StaleSurfaceError(
                f"{type(self).__name__} is bound to a closed page; rebind() it first"
            )

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate(self, wait_until: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_until: 'load', 'domcontentloaded' or 'networkidle'
        """
        self._ensure_live()
        with allure.step(f"Navigate to {self.url}"):
            await self.page.goto(
                self.url,
                wait_until=wait_until,
                timeout=self.settings.navigation_timeout,
            )
            logger.debug(f"Navigated to: {self.url}")

    async def wait_for_page_load(
        self,
        state: str = "load",
        timeout: Optional[int] = None,
    ) -> None:
        """Wait for the page to reach a load state."""
        self._ensure_live()
        await self.page.wait_for_load_state(
            state,
            timeout=self.settings.navigation_timeout if timeout is None else timeout,
        )

    # =========================================================================
    # Element Access
    # =========================================================================

    def element(
        self,
        key: str,
        param: Optional[str] = None,
        match: Optional[MatchPolicy] = None,
    ) -> Locator:
        """Playwright locator for a registry key (see LocatorRegistry.locator)."""
        self._ensure_live()
        return self.locators.locator(key, param, match)

    def _describe(self, key: str, param: Optional[str] = None) -> str:
        return self.locators.describe(key, param)

    # =========================================================================
    # Interactions
    # =========================================================================

    async def click(
        self,
        key: str,
        param: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> None:
        """Wait for the first matching element to be visible, then click it."""
        timeout = self.settings.default_timeout if timeout is None else timeout
        locator = self.element(key, param, MatchPolicy.FIRST)
        await waits.wait_visible(locator, timeout, self._describe(key, param))
        await locator.click(timeout=timeout)
        logger.debug(f"Clicked: {key}" + (f" [{param}]" if param else ""))

    async def fill(
        self,
        key: str,
        value: str,
        timeout: Optional[int] = None,
    ) -> None:
        """Wait for an input to be visible, then fill it."""
        timeout = self.settings.default_timeout if timeout is None else timeout
        locator = self.element(key, match=MatchPolicy.FIRST)
        await waits.wait_visible(locator, timeout, self._describe(key))
        await locator.fill(value, timeout=timeout)
        shown = "*" * len(value) if "password" in key else value
        logger.debug(f"Filled {key}: {shown}")

    async def get_text(
        self,
        key: str,
        param: Optional[str] = None,
        timeout: Optional[int] = None,
        require_visible: bool = True,
    ) -> str:
        """
        Text content of the first matching element, whitespace-trimmed.

        Args:
            key: Locator key
            param: Parameter for dynamic keys
            timeout: Timeout in milliseconds
            require_visible: Wait for visibility first; pass False for
                elements that may legitimately render empty (zero size)
        """
        timeout = self.settings.default_timeout if timeout is None else timeout
        locator = self.element(key, param, MatchPolicy.FIRST)
        if require_visible:
            await waits.wait_visible(locator, timeout, self._describe(key, param))
        text = await locator.text_content(timeout=timeout)
        return (text or "").strip()

    async def count(self, key: str, param: Optional[str] = None) -> int:
        """Number of elements currently matching a key."""
        return await self.element(key, param, MatchPolicy.ALL).count()

    async def is_visible(self, key: str, param: Optional[str] = None) -> bool:
        """Whether the first matching element is visible right now (no waiting)."""
        return await self.element(key, param, MatchPolicy.FIRST).is_visible()

    # =========================================================================
    # Waits
    # =========================================================================

    async def wait_visible(
        self,
        key: str,
        param: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> None:
        await waits.wait_visible(
            self.element(key, param, MatchPolicy.FIRST),
            self.settings.default_timeout if timeout is None else timeout,
            self._describe(key, param),
        )

    async def wait_hidden(
        self,
        key: str,
        param: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> None:
        await waits.wait_hidden(
            self.element(key, param, MatchPolicy.FIRST),
            self.settings.default_timeout if timeout is None else timeout,
            self._describe(key, param),
        )

    async def wait_count(
        self,
        key: str,
        predicate: Callable[[int], bool],
        timeout: Optional[int] = None,
    ) -> int:
        return await waits.wait_count(
            self.element(key, match=MatchPolicy.ALL),
            predicate,
            timeout=self.settings.default_timeout if timeout is None else timeout,
            description=self._describe(key),
            poll_interval=self.settings.poll_interval,
        )

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take a screenshot and optionally attach it to Allure.

        Returns:
            Path to the saved PNG
        """
        self._ensure_live()
        ensure_directory(str(SCREENSHOT_DIR))

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{sanitize_file_name(name)}_{timestamp}.png"

        content = await self.page.screenshot(path=str(filepath), full_page=full_page)
        if attach_to_allure:
            attach_png(content, name=name)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """Attach screenshot, current URL and recent responses to the report."""
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            attach_text(self.page.url, name="Current URL")
            if self._captured_responses:
                attach_json(self._captured_responses[-10:], name="Recent XHR Responses")


__all__ = [
    "PageBase",
]
