"""
================================================================================
Checkout Page Object
================================================================================

Order form modal and the purchase confirmation dialog.

The confirmation dialog shows the order details as one text block:

    Id: 8217364
    Amount: 1460 USD
    Card Number: 4111111111111111
    ...

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from storefront_suites.ui_testing.data.models import CheckoutInfo, OrderConfirmation
from storefront_suites.ui_testing.framework.text_parsing import (
    parse_order_amount,
    parse_order_id,
)
from storefront_suites.ui_testing.locators.checkout_locators import CHECKOUT_LOCATORS

from .storefront_page import StorefrontPage


FORM_FIELDS = {
    "name": "name_input",
    "country": "country_input",
    "city": "city_input",
    "credit_card": "credit_card_input",
    "month": "month_input",
    "year": "year_input",
}


class CheckoutPage(StorefrontPage):
    """Checkout page object."""

    LOCATORS = CHECKOUT_LOCATORS

    @allure.step("Fill checkout form")
    async def fill_checkout_form(self, info: CheckoutInfo) -> None:
        """
        Fill every order form field.

        Raises:
            ValueError: If a field of `info` is empty
        """
        missing = info.missing_fields()
        if missing:
            raise ValueError(f"Checkout info missing: {', '.join(missing)}")

        await self.wait_visible("checkout_modal")
        for field_name, key in FORM_FIELDS.items():
            await self.fill(key, getattr(info, field_name))

    @allure.step("Submit purchase")
    async def submit_purchase(self) -> None:
        await self.click("purchase_button")
        await self.wait_visible("confirmation_modal")

    async def confirmation_message(self) -> str:
        return await self.get_text("confirmation_message")

    async def order_details(self) -> str:
        return await self.get_text("order_details")

    async def order_id(self, strict: bool = False) -> str:
        return parse_order_id(await self.order_details(), strict=strict)

    async def order_amount(self, strict: bool = False) -> int:
        return parse_order_amount(await self.order_details(), strict=strict)

    @allure.step("Confirm order")
    async def confirm_order(self) -> None:
        """Acknowledge the confirmation dialog; the storefront returns home."""
        await self.click("confirm_ok_button")
        await self.wait_hidden("confirmation_modal")
        await self.wait_for_page_load()

    @allure.step("Close checkout form")
    async def close_checkout(self) -> None:
        await self.click("close_checkout_button")
        await self.wait_hidden("checkout_modal")

    @allure.step("Complete checkout")
    async def complete_checkout(
        self,
        info: CheckoutInfo,
        confirm: bool = True,
    ) -> OrderConfirmation:
        """
        Fill the form, purchase, read the confirmation and acknowledge it.

        Args:
            info: Order form values
            confirm: Click OK on the confirmation dialog afterwards

        Returns:
            OrderConfirmation read before the dialog was acknowledged
        """
        await self.fill_checkout_form(info)
        await self.submit_purchase()

        details = await self.order_details()
        confirmation = OrderConfirmation(
            message=await self.confirmation_message(),
            order_id=parse_order_id(details),
            amount=parse_order_amount(details),
        )
        logger.info(
            f"Order {confirmation.order_id} placed: amount {confirmation.amount}"
        )

        if confirm:
            await self.confirm_order()
        return confirmation


__all__ = ["CheckoutPage"]
