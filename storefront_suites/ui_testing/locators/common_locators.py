"""Navbar elements shared by every storefront page."""

from storefront_suites.ui_testing.framework.locator_registry import LocatorSet


COMMON_LOCATORS = LocatorSet(
    name="common",
    static={
        "navbar_home": {
            "short": 'a.nav-link:has-text("Home")',
            "structural": '//a[contains(@class, "nav-link") and contains(., "Home")]',
        },
        "navbar_cart": {
            "short": "a#cartur",
            "structural": '//a[@id="cartur"]',
        },
        "navbar_login": {
            "short": "a#login2",
            "structural": '//a[@id="login2"]',
        },
        "navbar_logout": {
            "short": "a#logout2",
            "structural": '//a[@id="logout2"]',
        },
        # "Welcome <username>" banner, only shown when authenticated
        "welcome_message": {
            "short": "a#nameofuser",
            "structural": '//a[@id="nameofuser"]',
        },
    },
)
