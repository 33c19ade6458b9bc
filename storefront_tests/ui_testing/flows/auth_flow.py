"""
================================================================================
Authentication Flow
================================================================================

Business-level login helpers shared by the pytest e2e tests and the BDD
steps:

    login_do               actions only (When)
    assert_login_success   inventory is shown (Then)
    assert_login_error     error banner is shown, optionally with a text (Then)

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from playwright.async_api import Page, expect

from storefront_tests.ui_testing.data.models import LoginCredentials
from storefront_tests.ui_testing.pages.login_page import LoginPage


@allure.step("Login with provided credentials")
async def login_do(page: Page, creds: LoginCredentials) -> None:
    """Open the login page, type the credentials and submit. No assertions."""
    login = LoginPage(page)
    await login.goto()
    await login.fill_username(creds.username)
    await login.fill_password(creds.password)
    await login.click_login()


async def assert_login_success(page: Page) -> None:
    """The user landed on the inventory."""
    login = LoginPage(page)
    await login.wait_for_inventory_visible()
    await expect(page).to_have_url(f"{login.base_url}/inventory.html")


async def assert_login_error(page: Page, expected_message: Optional[str] = None) -> str:
    """
    An error banner is shown and, when given, contains `expected_message`.

    Returns:
        The banner text
    """
    text = await LoginPage(page).get_error_text()
    assert len(text) > 0, "Login error banner is empty"
    if expected_message:
        assert expected_message in text, f"Expected error containing {expected_message!r}, got {text!r}"
    return text
