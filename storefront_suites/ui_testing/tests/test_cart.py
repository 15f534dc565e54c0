"""
================================================================================
Shopping Cart UI Tests
================================================================================

TC002: products added from different categories all appear in the cart
with their prices, and the total is their sum.

TC004: deleting one line item leaves the other and recalculates the total.

Each test starts from an authenticated session with an empty cart.

================================================================================
"""

import allure
import pytest

from storefront_suites.ui_testing.data.messages import PRODUCT_ADDED
from storefront_suites.ui_testing.data.products import (
    MACBOOK_AIR,
    MACBOOK_PRO,
    SAMSUNG_GALAXY_S6,
    SONY_XPERIA_Z5,
)
from storefront_suites.ui_testing.framework.soft_assert import SoftAssertions
from storefront_suites.ui_testing.workflows.session import (
    StorefrontSession,
    add_products_to_cart,
)


pytestmark = pytest.mark.asyncio(loop_scope="session")


@allure.epic("UI Testing")
@allure.feature("Shopping Cart")
class TestCart:
    """Cart management UI test suite."""

    @allure.story("Add Items")
    @allure.title("TC002 - Products from different categories appear in the cart")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.cart
    async def test_add_multiple_products(
        self,
        authenticated_session: StorefrontSession,
        soft: SoftAssertions,
    ):
        session = authenticated_session
        products = [SAMSUNG_GALAXY_S6, MACBOOK_PRO]

        messages = await add_products_to_cart(session, products)
        for product, message in zip(products, messages):
            soft.text_contains(message, PRODUCT_ADDED, f"add-to-cart alert for {product.name}")

        with allure.step("Open cart"):
            await session.home.navigate_to_cart()
            await session.cart.wait_until_loaded()
            await session.cart.wait_count("cart_rows", lambda n: n >= len(products))

        with allure.step("Verify line items and total"):
            names = await session.cart.item_names()
            for product in products:
                soft.contains(names, product.name, "cart items")
                soft.equal(
                    await session.cart.line_item_price(product.name),
                    product.price,
                    f"price of {product.name}",
                )
            soft.equal(
                await session.cart.total_price(),
                sum(product.price for product in products),
                "cart total",
            )

        soft.assert_all()

    @allure.story("Remove Item")
    @allure.title("TC004 - Removing one item updates the cart and total")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.cart
    async def test_remove_single_item(
        self,
        authenticated_session: StorefrontSession,
        soft: SoftAssertions,
    ):
        session = authenticated_session
        await add_products_to_cart(session, [SONY_XPERIA_Z5, MACBOOK_AIR])

        await session.home.navigate_to_cart()
        await session.cart.wait_until_loaded()
        await session.cart.wait_count("cart_rows", lambda n: n >= 2)

        with allure.step("Both items are listed"):
            assert await session.cart.has_line_item(SONY_XPERIA_Z5.name)
            assert await session.cart.has_line_item(MACBOOK_AIR.name)

        await session.cart.remove_line_item(SONY_XPERIA_Z5.name)

        with allure.step("Verify remaining item and total"):
            names = await session.cart.item_names()
            soft.not_contains(names, SONY_XPERIA_Z5.name, "removed item gone")
            soft.contains(names, MACBOOK_AIR.name, "remaining item")
            soft.equal(len(names), 1, "line item count")
            soft.equal(await session.cart.total_price(), MACBOOK_AIR.price, "cart total")

        soft.assert_all()

    @allure.story("Clear Cart")
    @allure.title("Clearing a cart with duplicate products empties it")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression
    @pytest.mark.cart
    async def test_clear_cart_with_duplicates(self, authenticated_session: StorefrontSession):
        session = authenticated_session
        await add_products_to_cart(session, [SAMSUNG_GALAXY_S6, SAMSUNG_GALAXY_S6])

        await session.home.navigate_to_cart()
        await session.cart.wait_until_loaded()
        await session.cart.wait_count("cart_rows", lambda n: n >= 2)

        report = await session.cart.clear_cart()

        assert report.removed >= 2
        assert await session.cart.is_empty()
        assert await session.cart.total_price() == 0.0
