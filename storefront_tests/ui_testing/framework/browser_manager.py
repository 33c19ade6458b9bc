"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser per manager, one isolated context + page per test case
    - Headless / slow-motion switches from the environment
    - Keep-open mode for manual inspection after a run

Environment:
    HEADLESS            "false" shows the browser (default: headless)
    SLOWMO_MS           Slow-motion delay for every Playwright call
    KEEP_BROWSER_OPEN   "1" skips closing contexts and the browser
    BROWSER             chromium | firefox | webkit

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from storefront_tools.common import env_flag, env_int, get_config


def _config_flag(key: str, default: bool) -> bool:
    # Values set through SECTION__KEY overrides arrive as strings.
    return str(get_config(key, default)).lower() in ("true", "1", "yes", "on")


class BrowserManager:
    """
    Manages browser instances and contexts for UI testing.

    Usage:
        async with BrowserManager.from_env() as manager:
            page = await manager.new_page()
            await page.goto("https://www.saucedemo.com/")
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
        slow_mo_ms: int = 0,
        keep_open: bool = False,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
            slow_mo_ms: Delay applied by Playwright to every operation
            keep_open: Leave browser and contexts open on close()
        """
        self.headless = headless
        self.browser_type = browser_type
        self.slow_mo_ms = slow_mo_ms
        self.keep_open = keep_open

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: list[BrowserContext] = []

    @classmethod
    def from_env(cls) -> "BrowserManager":
        """
        Build a manager from HEADLESS / SLOWMO_MS / KEEP_BROWSER_OPEN / BROWSER.

        Unset variables fall back to the `browser.*` configuration keys.
        """
        return cls(
            headless=env_flag("HEADLESS", _config_flag("browser.headless", True)),
            browser_type=os.getenv("BROWSER") or get_config("browser.name", "chromium"),
            slow_mo_ms=max(0, env_int("SLOWMO_MS", int(get_config("browser.slowmo_ms", 0) or 0))),
            keep_open=env_int("KEEP_BROWSER_OPEN", 1 if _config_flag("browser.keep_open", False) else 0) == 1,
        )

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()

        if self.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
            "slow_mo": self.slow_mo_ms,
        }

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless}, slow_mo={self.slow_mo_ms}ms)"
        )

    async def close(self) -> None:
        """Close all contexts and browser (unless keep-open is set)."""
        if self.keep_open:
            logger.info("KEEP_BROWSER_OPEN=1: leaving the browser open for manual inspection.")
            return

        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context close failed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context
        """
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
]
