"""
================================================================================
Failure Artifact Capturer
================================================================================

Full-page screenshot taken when a click/fill has used up its retries.

Files land in `ActionSettings.screenshot_dir` as
`{epoch_millis}_{name}.png` and are attached to the Allure report. Capture
is best-effort: the outcome is returned as a `Result`, nothing is raised,
so the action's own error is always the one the test sees.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
import time
from pathlib import Path
from typing import Callable, Union

from loguru import logger
from playwright.async_api import Page

from storefront_tools.report_tools import attach_screenshot

from .result import Result


_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def epoch_millis() -> int:
    return int(time.time() * 1000)


def screenshot_filename(name: str, timestamp_ms: int) -> str:
    """`{timestamp}_{name}.png` with path-hostile characters replaced."""
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", name).strip("_") or "screenshot"
    return f"{timestamp_ms}_{safe_name}.png"


class FailureArtifactCapturer:
    """
    Takes the post-mortem screenshot for a failed action.

    Usage:
        capturer = FailureArtifactCapturer(Path("reports/screenshots"))
        result = await capturer.capture(page, "loginButton")
        if result.ok:
            print(result.value)  # reports/screenshots/1700000000000_loginButton.png
    """

    def __init__(
        self,
        screenshot_dir: Union[Path, str] = Path("reports") / "screenshots",
        clock: Callable[[], int] = epoch_millis,
        attach_to_allure: bool = True,
    ):
        """
        Args:
            screenshot_dir: Output directory (created on demand)
            clock: Returns the current time in epoch milliseconds
            attach_to_allure: Attach captured files to the Allure report
        """
        self.screenshot_dir = Path(screenshot_dir)
        self.clock = clock
        self.attach_to_allure = attach_to_allure

    def ensure_dir(self) -> Result:
        try:
            self.screenshot_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Result.failure(e)
        return Result.success(self.screenshot_dir)

    async def capture(self, page: Page, name: str) -> Result:
        """
        Save a full-page screenshot.

        Args:
            page: Page to capture
            name: Label of the failed action (or the action name)

        Returns:
            Result whose value is the screenshot Path on success.
        """
        # A failed mkdir still lets the screenshot call report its own error.
        self.ensure_dir()
        path = self.screenshot_dir / screenshot_filename(name, self.clock())
        try:
            await page.screenshot(path=str(path), full_page=True)
        except Exception as e:
            logger.debug(f"Failure screenshot not captured: {e}")
            return Result.failure(e)

        if self.attach_to_allure:
            self._attach(path, name)
        return Result.success(path)

    def _attach(self, path: Path, name: str) -> Result:
        try:
            attach_screenshot(path, name=f"failure_{name}")
        except Exception as e:
            logger.debug(f"Screenshot not attached to Allure: {e}")
            return Result.failure(e)
        return Result.success(path)


__all__ = [
    "FailureArtifactCapturer",
    "epoch_millis",
    "screenshot_filename",
]
