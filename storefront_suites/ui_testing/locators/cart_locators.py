"""Cart page: line item table, total and order button."""

from storefront_suites.ui_testing.framework.locator_registry import LocatorSet


CART_LOCATORS = LocatorSet(
    name="cart",
    static={
        "cart_table": {
            "short": "#tbodyid",
            "structural": '//tbody[@id="tbodyid"]',
        },
        "cart_rows": {
            "short": "#tbodyid > tr",
            "structural": '//tbody[@id="tbodyid"]/tr',
        },
        # One per line item; removal always targets the first one
        "delete_links": {
            "short": '#tbodyid a:has-text("Delete")',
            "structural": '//tbody[@id="tbodyid"]//a[contains(text(), "Delete")]',
        },
        "total_price": {
            "short": "#totalp",
            "structural": '//h3[@id="totalp"]',
        },
        "place_order_button": {
            "short": 'button:has-text("Place Order")',
            "structural": '//button[text()="Place Order"]',
        },
    },
    dynamic={
        "line_item_name": {
            "short": "#tbodyid > tr:has(td:nth-child(2):text-is({value})) > td:nth-child(2)",
            "structural": '//tbody[@id="tbodyid"]/tr[td[2][normalize-space()={value}]]/td[2]',
        },
        "line_item_price": {
            "short": "#tbodyid > tr:has(td:nth-child(2):text-is({value})) > td:nth-child(3)",
            "structural": '//tbody[@id="tbodyid"]/tr[td[2][normalize-space()={value}]]/td[3]',
        },
        "line_item_delete": {
            "short": '#tbodyid > tr:has(td:nth-child(2):text-is({value})) a:has-text("Delete")',
            "structural": (
                '//tbody[@id="tbodyid"]/tr[td[2][normalize-space()={value}]]'
                '//a[text()="Delete"]'
            ),
        },
    },
)
