"""
================================================================================
BDD Step Definitions and World
================================================================================

pytest-bdd steps are synchronous, the page objects are async. Each scenario
gets a `ScenarioWorld` that owns a private event loop, its own browser and
page, and runs every async step to completion on that loop.

================================================================================
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Iterator, List, Optional

import pytest
from loguru import logger
from playwright.async_api import Page
from pytest_bdd import given, parsers, then, when

from storefront_tests.ui_testing.data import LoginCredentials, login_provider
from storefront_tests.ui_testing.flows import assert_login_error, assert_login_success
from storefront_tests.ui_testing.framework.browser_manager import BrowserManager
from storefront_tests.ui_testing.pages.login_page import LoginPage
from storefront_tools.report_tools import attach_screenshot


class ScenarioWorld:
    """Per-scenario state: event loop, browser, page and the login page object."""

    def __init__(self, manager: Optional[BrowserManager] = None):
        self.loop = asyncio.new_event_loop()
        self.manager = manager or BrowserManager.from_env()
        self.page: Optional[Page] = None
        self.login_page: Optional[LoginPage] = None

    def run(self, coro: Awaitable[Any]) -> Any:
        """Run one coroutine to completion on the scenario loop."""
        return self.loop.run_until_complete(coro)

    def start(self) -> None:
        self.run(self.manager.start())
        self.page = self.run(self.manager.new_page())
        self.login_page = LoginPage(self.page)

    def stop(self) -> None:
        try:
            self.run(self.manager.close())
        finally:
            self.loop.close()

    def submit(self, creds: LoginCredentials) -> None:
        """Type the credentials into the open login form and submit."""
        self.run(self.login_page.fill_username(creds.username))
        self.run(self.login_page.fill_password(creds.password))
        self.run(self.login_page.click_login())


@pytest.fixture
def world(request) -> Iterator[ScenarioWorld]:
    world = ScenarioWorld()
    try:
        world.start()
    except Exception:
        world.stop()
        raise
    yield world

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and world.page is not None:
        try:
            attach_screenshot(world.run(world.page.screenshot(full_page=True)), name="failure_screenshot")
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")
    world.stop()


# ================================================================================
# Given
# ================================================================================

@given("I am on the login page")
def on_login_page(world: ScenarioWorld):
    world.run(world.login_page.goto())


# ================================================================================
# When
# ================================================================================

@when(parsers.parse('I log in as "{alias}"'))
def log_in_as(world: ScenarioWorld, alias: str):
    world.submit(login_provider.get_creds(alias))


@when(parsers.re(r'I log in with username "(?P<username>[^"]*)" and password "(?P<password>[^"]*)"'))
def log_in_inline(world: ScenarioWorld, username: str, password: str):
    world.submit(LoginCredentials(username, password))


@when("I log in with the credentials:")
def log_in_from_table(world: ScenarioWorld, datatable: List[List[str]]):
    header, row = datatable[0], datatable[1]
    values = dict(zip(header, row))
    world.submit(LoginCredentials.from_dict(values))


# ================================================================================
# Then
# ================================================================================

@then("I see the product list")
def see_product_list(world: ScenarioWorld):
    world.run(assert_login_success(world.page))


@then(parsers.parse('I see the error message "{message}"'))
def see_error_message(world: ScenarioWorld, message: str):
    world.run(assert_login_error(world.page, message))
