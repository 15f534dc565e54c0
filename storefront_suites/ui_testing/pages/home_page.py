"""
================================================================================
Home Page Object
================================================================================

Product listing with category filter.

The listing is rendered client-side after the page loads, so every
operation that changes it waits for product cards rather than for a
load state alone.

================================================================================
"""

from __future__ import annotations

from typing import List, Union

import allure

from storefront_suites.ui_testing.data.models import Category
from storefront_suites.ui_testing.locators.home_locators import HOME_LOCATORS

from .storefront_page import StorefrontPage


CATEGORY_KEYS = {
    Category.PHONES: "category_phones",
    Category.LAPTOPS: "category_laptops",
    Category.MONITORS: "category_monitors",
}


class HomePage(StorefrontPage):
    """Storefront home page object."""

    LOCATORS = HOME_LOCATORS
    URL_PATH = "/"

    @allure.step("Open storefront home")
    async def open(self) -> "HomePage":
        await self.navigate()
        await self.wait_visible("product_cards", timeout=self.settings.navigation_timeout)
        return self

    @allure.step("Select category {category}")
    async def select_category(self, category: Union[Category, str]) -> None:
        """
        Filter the listing by category.

        Args:
            category: Category member or its label ("Phones", ...)

        Raises:
            ValueError: Unknown category label
        """
        category = Category(category)
        await self.click(CATEGORY_KEYS[category])
        await self.wait_for_page_load("domcontentloaded")
        await self.wait_visible("product_cards", timeout=self.settings.navigation_timeout)

    @allure.step("Select product {name}")
    async def select_product(self, name: str) -> None:
        """Open the detail page of the first product card named `name`."""
        # The listing refreshes asynchronously after a category switch
        await self.wait_visible("product_card", name, timeout=self.settings.navigation_timeout)
        await self.click("product_card", name)
        await self.wait_for_page_load()

    async def product_names(self) -> List[str]:
        """Names of the product cards currently listed."""
        await self.wait_visible("product_cards", timeout=self.settings.navigation_timeout)
        names = await self.element("product_cards").all_text_contents()
        return [name.strip() for name in names]


__all__ = ["HomePage", "CATEGORY_KEYS"]
