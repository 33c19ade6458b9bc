# ================================================================================
# Element Actions Module
# ================================================================================
#
# Resilient wrappers around raw Playwright element actions, used by every
# page object in the suite.
#
# Key Features:
#   - Bounded retries for click/fill with a fixed pause between attempts
#   - Per-attempt timeouts and a visibility check before acting
#   - Transient element highlight (magenta, red on failure)
#   - Colour-coded action log lines (start / ok / retry / failed)
#   - Full-page screenshot on terminal failure, attached to Allure
#   - Allure step per action
#
# Operations:
#   navigate        single attempt, errors propagate unchanged
#   click / fill    retried; exhaustion raises ActionFailedError
#   wait_for_state  single attempt, returns the Locator for chaining
#
# ================================================================================

from __future__ import annotations

from typing import Any, Callable, Awaitable, NoReturn, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Locator, Page, expect

from .action_logger import ActionLogger
from .action_settings import (
    ActionOptions,
    ActionSettings,
    NavigateOptions,
    WaitOptions,
    WaitState,
)
from .artifacts import FailureArtifactCapturer
from .result import Result
from .retry import run_with_retries
from .visual_marker import MarkKind, VisualMarker


ActionTarget = Union[str, Locator]

# States in which there is an element to outline.
_MARKABLE_STATES = (WaitState.VISIBLE, WaitState.ATTACHED)


class ActionFailedError(Exception):
    """
    Raised when click/fill has exhausted its retries.

    Attributes:
        action: Operation name ("click", "fill")
        label: Caller supplied log label, if any
        cause: Error of the last attempt
    """

    def __init__(self, action: str, cause: BaseException, label: Optional[str] = None):
        self.action = action
        self.label = label
        self.cause = cause
        message = f"[{action}] failed"
        if label:
            message += f" ({label})"
        super().__init__(f"{message}: {cause}")


class ElementActions:
    """
    Resilient element interactions for page objects.

    Example:
        actions = ElementActions(page)
        await actions.navigate("https://www.saucedemo.com/", log="all")
        await actions.fill('[data-test="username"]', "standard_user", clear=True, log_label="username")
        await actions.click('[data-test="login-button"]', retries=2, log_label="loginButton")
        await actions.wait_for_state("#inventory_container", expect_enabled=True)

    Options are given either as an options object, as keyword overrides,
    or both (keywords win). Each call builds its own options.
    """

    def __init__(
        self,
        page: Page,
        settings: Optional[ActionSettings] = None,
        marker: Optional[VisualMarker] = None,
        capturer: Optional[FailureArtifactCapturer] = None,
        action_logger: Optional[ActionLogger] = None,
    ):
        """
        Initialize ElementActions with a Playwright page.

        Args:
            page: Playwright Page object
            settings: Process-wide tunables (defaults to ActionSettings.from_env())
            marker: Element highlighter (VisualMarker or NullMarker)
            capturer: Failure screenshot writer
            action_logger: Console line writer
        """
        self.page = page
        self.settings = settings or ActionSettings.from_env()
        self.marker = marker or VisualMarker()
        self.capturer = capturer or FailureArtifactCapturer(self.settings.screenshot_dir)
        self.log = action_logger or ActionLogger()

    # =========================================================================
    # Public operations
    # =========================================================================

    async def navigate(
        self,
        url: str,
        options: Optional[NavigateOptions] = None,
        **overrides: Any,
    ) -> None:
        """
        Navigate the page to `url`.

        No retries and no screenshot: a half-loaded page is not worth
        capturing and navigation errors surface immediately.

        Args:
            url: Absolute URL
            options: NavigateOptions (timeout, wait_until, delay_after_ms, log_label, log)
            **overrides: Field overrides applied on top of `options`
        """
        opts = self._resolve(options, overrides, self.settings.navigate_options)
        with allure.step(f"Navigate to {url}"):
            if opts.log.logs_start:
                self.log.start("navigate", opts.log_label)
            await self.page.goto(url, timeout=opts.timeout, wait_until=opts.wait_until)
            if opts.log.logs_success:
                self.log.success("navigate", opts.log_label)
            await self._pause(opts.pause_ms(self.settings))

    async def click(
        self,
        target: ActionTarget,
        options: Optional[ActionOptions] = None,
        **overrides: Any,
    ) -> None:
        """
        Click an element once it is visible.

        Args:
            target: CSS selector or Locator object
            options: ActionOptions
            **overrides: Field overrides applied on top of `options`

        Raises:
            ActionFailedError: When every attempt failed
        """
        opts = self._resolve(options, overrides, self.settings.action_options)

        async def do_click(locator: Locator) -> None:
            await locator.click(timeout=opts.timeout)

        with allure.step(f"Click: {opts.log_label or target}"):
            await self._perform("click", target, opts, do_click)

    async def fill(
        self,
        target: ActionTarget,
        value: str,
        options: Optional[ActionOptions] = None,
        **overrides: Any,
    ) -> None:
        """
        Fill an input once it is visible.

        Args:
            target: CSS selector or Locator object
            value: Text to enter
            options: ActionOptions; `clear=True` empties the field first
            **overrides: Field overrides applied on top of `options`

        Raises:
            ActionFailedError: When every attempt failed
        """
        opts = self._resolve(options, overrides, self.settings.action_options)

        async def do_fill(locator: Locator) -> None:
            if opts.clear:
                await locator.fill("", timeout=opts.timeout)
            await locator.fill(value, timeout=opts.timeout)

        with allure.step(f"Fill: {opts.log_label or target}"):
            await self._perform("fill", target, opts, do_fill)

    async def wait_for_state(
        self,
        target: ActionTarget,
        options: Optional[WaitOptions] = None,
        **overrides: Any,
    ) -> Locator:
        """
        Wait for an element to reach a state, then run optional assertions.

        Not retried: it is a wait already. Callers that want another round
        retry at their own level.

        Args:
            target: CSS selector or Locator object
            options: WaitOptions (state, expect_enabled, expect_editable, has_text, ...)
            **overrides: Field overrides applied on top of `options`

        Returns:
            The Locator, for chaining
        """
        opts = self._resolve(options, overrides, self.settings.wait_options)
        action = "wait_for_state"

        with allure.step(f"Wait for {opts.log_label or target} to be {opts.state.value}"):
            if opts.log.logs_start:
                self.log.start(action, opts.log_label)

            locator = self._get_locator(target)
            await locator.wait_for(state=opts.state.value, timeout=opts.timeout)

            if opts.expect_enabled:
                await expect(locator).to_be_enabled(timeout=opts.timeout)
            if opts.expect_editable:
                await expect(locator).to_be_editable(timeout=opts.timeout)
            if opts.has_text is not None:
                await expect(locator).to_have_text(opts.has_text, timeout=opts.timeout)

            if opts.highlight and opts.state in _MARKABLE_STATES:
                await self.marker.mark(locator, MarkKind.NORMAL)
            await self._pause(opts.pause_ms(self.settings))

            if opts.log.logs_success:
                self.log.success(action, opts.log_label)
            return locator

    # =========================================================================
    # Internals
    # =========================================================================

    async def _perform(
        self,
        action: str,
        target: ActionTarget,
        opts: ActionOptions,
        body: Callable[[Locator], Awaitable[None]],
    ) -> None:
        """Shared retry/log/mark/capture envelope of click and fill."""
        if opts.log.logs_start:
            self.log.start(action, opts.log_label)

        async def attempt() -> None:
            # Re-resolved per attempt; the element may re-render in between.
            locator = self._get_locator(target)
            await locator.wait_for(state="visible", timeout=opts.timeout)
            if opts.highlight:
                await self.marker.mark(locator, MarkKind.NORMAL)
            await body(locator)
            await self._pause(opts.pause_ms(self.settings))

        async def on_retry(retry_number: int, error: Exception) -> None:
            self.log.retry(action, opts.log_label, error)
            await self._pause(self.settings.retry_pause_ms)

        try:
            await run_with_retries(attempt, opts.retries, on_retry)
        except Exception as e:
            await self._fail(action, target, opts, e)

        if opts.log.logs_success:
            self.log.success(action, opts.log_label)

    async def _fail(
        self,
        action: str,
        target: ActionTarget,
        opts: ActionOptions,
        error: Exception,
    ) -> NoReturn:
        screenshot = Result.skip()
        if opts.screenshot_on_error:
            screenshot = await self._diagnose(
                "screenshot", lambda: self.capturer.capture(self.page, opts.log_label or action)
            )
        # Post-mortem marker; `highlight` only governs the per-attempt one.
        await self._diagnose(
            "error highlight", lambda: self.marker.mark(self._get_locator(target), MarkKind.ERROR)
        )

        screenshot_path = screenshot.value_or(None)
        self.log.failure(
            action,
            opts.log_label,
            error,
            screenshot_path=str(screenshot_path) if screenshot_path else None,
        )
        raise ActionFailedError(action, error, opts.log_label) from error

    @staticmethod
    async def _diagnose(what: str, call: Callable[[], Awaitable[Result]]) -> Result:
        """Await a diagnostic call; its errors never replace the action's error."""
        try:
            return await call()
        except Exception as e:
            logger.debug(f"Failure {what} skipped: {e}")
            return Result.failure(e)

    async def _pause(self, ms: int) -> None:
        if ms and ms > 0:
            await self.page.wait_for_timeout(ms)

    @staticmethod
    def _resolve(options, overrides, factory):
        base = options if options is not None else factory()
        return base.with_overrides(**overrides)

    def _get_locator(self, target: ActionTarget) -> Locator:
        """Convert selector to Locator if needed."""
        if isinstance(target, str):
            return self.page.locator(target)
        return target


__all__ = [
    "ActionFailedError",
    "ActionTarget",
    "ElementActions",
]
