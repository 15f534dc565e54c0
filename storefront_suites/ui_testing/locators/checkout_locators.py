"""Order modal and purchase confirmation dialog."""

from storefront_suites.ui_testing.framework.locator_registry import LocatorSet


CHECKOUT_LOCATORS = LocatorSet(
    name="checkout",
    static={
        # Order form modal
        "checkout_modal": {
            "short": "#orderModal",
            "structural": '//div[@id="orderModal"]',
        },
        "name_input": {"short": "#name", "structural": '//input[@id="name"]'},
        "country_input": {"short": "#country", "structural": '//input[@id="country"]'},
        "city_input": {"short": "#city", "structural": '//input[@id="city"]'},
        "credit_card_input": {"short": "#card", "structural": '//input[@id="card"]'},
        "month_input": {"short": "#month", "structural": '//input[@id="month"]'},
        "year_input": {"short": "#year", "structural": '//input[@id="year"]'},
        "purchase_button": {
            "short": '#orderModal button:has-text("Purchase")',
            "structural": '//div[@id="orderModal"]//button[text()="Purchase"]',
        },
        "close_checkout_button": {
            "short": "#orderModal .close",
            "structural": '//div[@id="orderModal"]//button[@class="close"]',
        },

        # Confirmation (sweet-alert) dialog
        "confirmation_modal": {
            "short": ".sweet-alert",
            "structural": '//div[contains(@class, "sweet-alert")]',
        },
        "confirmation_message": {
            "short": ".sweet-alert h2",
            "structural": '//div[contains(@class, "sweet-alert")]/h2',
        },
        # "Id: ... Amount: ... USD Card Number: ... Name: ... Date: ..."
        "order_details": {
            "short": ".sweet-alert p.lead",
            "structural": '//div[contains(@class, "sweet-alert")]/p[contains(@class, "lead")]',
        },
        "confirm_ok_button": {
            "short": ".sweet-alert button.confirm",
            "structural": '//div[contains(@class, "sweet-alert")]//button[text()="OK"]',
        },
    },
)
