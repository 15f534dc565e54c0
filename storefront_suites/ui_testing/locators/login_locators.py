"""Login modal elements."""

from storefront_suites.ui_testing.framework.locator_registry import LocatorSet


LOGIN_LOCATORS = LocatorSet(
    name="login",
    static={
        "login_modal": {
            "short": "#logInModal",
            "structural": '//div[@id="logInModal"]',
        },
        "username_input": {
            "short": "#loginusername",
            "structural": '//input[@id="loginusername"]',
        },
        "password_input": {
            "short": "#loginpassword",
            "structural": '//input[@id="loginpassword"]',
        },
        # The navbar link carries the same label, so scope to the modal
        "login_button": {
            "short": '#logInModal button:has-text("Log in")',
            "structural": '//div[@id="logInModal"]//button[text()="Log in"]',
        },
        "close_modal_button": {
            "short": "#logInModal .close",
            "structural": '//div[@id="logInModal"]//button[@class="close"]',
        },
    },
)
