"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

SauceDemo login page. Atomic actions only (one field, one click); the
composition and the assertions live in `ui_testing/flows/auth_flow.py`.

Every interaction goes through ElementActions, so each one is retried,
highlighted, logged with its label and screenshotted on failure.

================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import expect

from storefront_tests.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/"
    PAGE_TITLE = "Swag Labs"

    # Selectors
    USERNAME_INPUT = '[data-test="username"]'
    PASSWORD_INPUT = '[data-test="password"]'
    LOGIN_BUTTON = '[data-test="login-button"]'
    INVENTORY_CONTAINER = "#inventory_container"
    ERROR_MESSAGE = '[data-test="error"]'

    @allure.step("Open login page")
    async def goto(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.open(log="all", log_label="goto-login")
        return self

    async def fill_username(self, username: str) -> None:
        await self.actions.fill(self.USERNAME_INPUT, username, clear=True, log="all", log_label="username")

    async def fill_password(self, password: str) -> None:
        await self.actions.fill(self.PASSWORD_INPUT, password, log="all", log_label="password")

    async def click_login(self) -> None:
        await self.actions.click(self.LOGIN_BUTTON, log="all", log_label="loginButton")

    @allure.step("Verify inventory is displayed")
    async def wait_for_inventory_visible(self) -> None:
        await expect(self.page.locator(self.INVENTORY_CONTAINER)).to_be_visible()

    @allure.step("Read login error")
    async def get_error_text(self) -> str:
        """Trimmed text of the error banner (waits for it to be visible)."""
        await expect(self.page.locator(self.ERROR_MESSAGE)).to_be_visible()
        return await self.read_text(self.ERROR_MESSAGE)
