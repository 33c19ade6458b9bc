"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Base URL handling (UI_BASE_URL / ui.base_url)
    - A shared ElementActions instance (retries, highlight, logging,
      failure screenshots)
    - Text reading helper for assertions
    - Document title assertion (PAGE_TITLE)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from typing import Optional

from playwright.async_api import Page, expect

from storefront_tools.common import get_config

from .action_settings import ActionSettings
from .element_actions import ActionTarget, ElementActions


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"

            async def login(self, username: str, password: str):
                await self.actions.fill("#user-name", username)
                await self.actions.fill("#password", password)
                await self.actions.click("#login-button")
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: Optional[str] = None,
        settings: Optional[ActionSettings] = None,
        actions: Optional[ElementActions] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (UI_BASE_URL / config when omitted)
            settings: Action settings shared by this page's actions
            actions: Pre-built ElementActions (takes precedence over `settings`)
        """
        self.page = page
        if not base_url:
            base_url = os.getenv("UI_BASE_URL") or get_config("ui.base_url", "https://www.saucedemo.com/")
        self.base_url = base_url.rstrip("/")
        self.actions = actions or ElementActions(page, settings=settings)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def open(self, **options) -> None:
        """
        Navigate to this page.

        Args:
            **options: NavigateOptions overrides (wait_until, log, log_label, ...)
        """
        await self.actions.navigate(self.url, **options)

    async def assert_title(self, timeout: Optional[int] = None) -> None:
        """Assert the document title equals PAGE_TITLE."""
        await expect(self.page).to_have_title(self.PAGE_TITLE, timeout=timeout)

    async def read_text(self, target: ActionTarget, timeout: Optional[int] = None) -> str:
        """
        Wait for an element to be visible and return its trimmed text.

        Args:
            target: CSS selector or Locator object
            timeout: Wait timeout in milliseconds
        """
        overrides = {"highlight": False}
        if timeout is not None:
            overrides["timeout"] = timeout
        locator = await self.actions.wait_for_state(target, **overrides)
        return ((await locator.text_content()) or "").strip()


__all__ = [
    "BasePage",
]
