"""Product detail page."""

from storefront_suites.ui_testing.framework.locator_registry import LocatorSet


PRODUCT_DETAIL_LOCATORS = LocatorSet(
    name="product_detail",
    static={
        "product_name": {
            "short": "h2.name",
            "structural": '//h2[@class="name"]',
        },
        "product_price": {
            "short": "h3.price-container",
            "structural": '//h3[@class="price-container"]',
        },
        "product_description": {
            "short": "#more-information",
            "structural": '//div[@id="more-information"]',
        },
        "add_to_cart_button": {
            "short": 'a:has-text("Add to cart")',
            "structural": '//a[contains(text(), "Add to cart")]',
        },
    },
)
