"""
================================================================================
Checkout UI Tests
================================================================================

TC003: purchasing a cart with valid customer information shows the
confirmation with an order id and amount, returns to the home page and
empties the cart.

================================================================================
"""

import allure
import pytest

from storefront_suites.ui_testing.data.checkout_data import JOHN_DOE
from storefront_suites.ui_testing.data.messages import CHECKOUT_SUCCESS
from storefront_suites.ui_testing.data.models import CheckoutInfo
from storefront_suites.ui_testing.data.products import SAMSUNG_GALAXY_S6
from storefront_suites.ui_testing.framework.soft_assert import SoftAssertions
from storefront_suites.ui_testing.pages import CheckoutPage
from storefront_suites.ui_testing.workflows.session import (
    StorefrontSession,
    add_products_to_cart,
)


pytestmark = pytest.mark.asyncio(loop_scope="session")


@allure.epic("UI Testing")
@allure.feature("Checkout")
class TestCheckout:
    """Checkout UI test suite."""

    @allure.story("Place Order")
    @allure.title("TC003 - Order with valid customer information is confirmed")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.checkout
    async def test_checkout_with_valid_info(
        self,
        authenticated_session: StorefrontSession,
        soft: SoftAssertions,
    ):
        session = authenticated_session
        await add_products_to_cart(session, [SAMSUNG_GALAXY_S6])

        with allure.step("Verify cart before ordering"):
            await session.home.navigate_to_cart()
            await session.cart.wait_until_loaded()
            await session.cart.wait_count("cart_rows", lambda n: n >= 1)
            soft.truthy(
                await session.cart.has_line_item(SAMSUNG_GALAXY_S6.name),
                "product in cart",
            )
            soft.equal(
                await session.cart.line_item_price(SAMSUNG_GALAXY_S6.name),
                SAMSUNG_GALAXY_S6.price,
                "line item price",
            )

        await session.cart.place_order()
        await session.checkout.fill_checkout_form(JOHN_DOE)
        await session.checkout.submit_purchase()

        with allure.step("Verify confirmation"):
            soft.text_contains(
                await session.checkout.confirmation_message(),
                CHECKOUT_SUCCESS,
                "confirmation message",
            )
            soft.truthy(await session.checkout.order_id(), "order id")
            soft.greater_than(await session.checkout.order_amount(), 0, "order amount")

        await session.checkout.confirm_order()

        with allure.step("Verify redirect and empty cart"):
            soft.equal(
                session.page.url.rstrip("/").replace("/index.html", ""),
                session.home.url.rstrip("/"),
                "redirected to home page",
            )
            await session.home.navigate_to_cart()
            await session.cart.wait_until_loaded()
            soft.truthy(await session.cart.is_empty(), "cart emptied by the order")

        soft.assert_all()

    @allure.story("Validation")
    @allure.title("Incomplete checkout information is rejected before typing")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.regression
    @pytest.mark.checkout
    async def test_incomplete_checkout_info_rejected(self, checkout_page: CheckoutPage):
        incomplete = CheckoutInfo(
            name="John Doe", country="", city="New York",
            credit_card=" ", month="12", year="2025",
        )

        with pytest.raises(ValueError, match="country, credit_card"):
            await checkout_page.fill_checkout_form(incomplete)
