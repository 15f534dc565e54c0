"""
================================================================================
Login Feature UI Tests
================================================================================

TC001: login with a valid account updates the navbar (welcome banner,
logout link shown, login link hidden) and keeps the user on the home page.

================================================================================
"""

import allure
import pytest

from storefront_suites.ui_testing.data import Credentials
from storefront_suites.ui_testing.data.messages import WELCOME_PREFIX
from storefront_suites.ui_testing.framework.soft_assert import SoftAssertions
from storefront_suites.ui_testing.pages import HomePage, LoginPage


pytestmark = pytest.mark.asyncio(loop_scope="session")


@allure.epic("UI Testing")
@allure.feature("Authentication")
class TestLogin:
    """Login UI test suite."""

    @allure.story("Happy Path")
    @allure.title("TC001 - Login succeeds with valid credentials")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.auth
    async def test_login_success(
        self,
        home_page: HomePage,
        login_page: LoginPage,
        credentials: Credentials,
        soft: SoftAssertions,
    ):
        """Valid login closes the modal and shows the authenticated navbar."""
        with allure.step("Open storefront"):
            await home_page.open()

        with allure.step("Login"):
            await login_page.login(credentials)

        with allure.step("Verify authenticated navbar"):
            soft.check(
                not await login_page.is_login_modal_visible(),
                "login modal closed",
            )
            soft.equal(
                login_page.page.url.rstrip("/"),
                home_page.url.rstrip("/"),
                "user stays on home page",
            )
            soft.equal(
                await home_page.welcome_text(),
                f"{WELCOME_PREFIX} {credentials.username}",
                "welcome banner",
            )
            soft.truthy(await home_page.is_visible("navbar_logout"), "logout link shown")
            soft.check(
                not await home_page.is_visible("navbar_login"),
                "login link hidden",
            )

        soft.assert_all()

    @allure.story("Modal")
    @allure.title("Login modal can be dismissed without logging in")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression
    @pytest.mark.auth
    async def test_close_login_modal(self, home_page: HomePage, login_page: LoginPage):
        await home_page.open()
        await login_page.open_login_modal()
        assert await login_page.is_login_modal_visible()

        await login_page.close_login_modal()

        assert not await login_page.is_login_modal_visible()
        assert await home_page.is_logged_out()

    @allure.story("Logout")
    @allure.title("Logout restores the anonymous navbar")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.auth
    async def test_logout(self, home_page: HomePage, login_page: LoginPage, credentials: Credentials):
        await home_page.open()
        await login_page.login(credentials)
        assert await home_page.is_authenticated()

        await home_page.logout()

        assert await home_page.is_logged_out()
