"""Home page: category filters and product cards."""

from storefront_suites.ui_testing.framework.locator_registry import LocatorSet


HOME_LOCATORS = LocatorSet(
    name="home",
    static={
        "category_phones": {
            "short": 'a.list-group-item:has-text("Phones")',
            "structural": '//a[@id="itemc" and text()="Phones"]',
        },
        "category_laptops": {
            "short": 'a.list-group-item:has-text("Laptops")',
            "structural": '//a[@id="itemc" and text()="Laptops"]',
        },
        "category_monitors": {
            "short": 'a.list-group-item:has-text("Monitors")',
            "structural": '//a[@id="itemc" and text()="Monitors"]',
        },
        "product_cards": {
            "short": ".card-title a",
            "structural": '//h4[@class="card-title"]/a',
        },
    },
    dynamic={
        "product_card": {
            "short": ".card-title a:has-text({value})",
            "structural": '//h4[@class="card-title"]/a[contains(text(), {value})]',
        },
    },
)
