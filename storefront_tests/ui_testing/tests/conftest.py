"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for the SauceDemo e2e tests, providing fixtures
for browser management, page objects, and test setup/teardown.

Key Features:
- One browser per test case (HEADLESS / SLOWMO_MS / KEEP_BROWSER_OPEN)
- Login page fixture
- Full-page screenshot attached to Allure when a test fails

================================================================================
"""

from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import BrowserContext, Page

from storefront_tests.ui_testing.framework.browser_manager import BrowserManager
from storefront_tests.ui_testing.pages.login_page import LoginPage
from storefront_tools.report_tools import attach_screenshot, attach_text


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser manager.

    Each test gets its own browser, so async fixtures never outlive the
    event loop of the test that created them.
    """
    manager = BrowserManager.from_env()
    await manager.start()
    yield manager
    await manager.close()


@pytest.fixture
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """Isolated browser context (cookies, storage) for one test."""
    context = await browser_manager.new_context()
    yield context


@pytest.fixture
async def page(request, context: BrowserContext) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    On a failed test the final page state is attached to the Allure report
    before the page goes away.
    """
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            attach_screenshot(await page.screenshot(full_page=True), name="failure_screenshot")
            attach_text(page.url, name="failure_url")
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page) -> LoginPage:
    """Provides a LoginPage bound to the test's page."""
    return LoginPage(page)

