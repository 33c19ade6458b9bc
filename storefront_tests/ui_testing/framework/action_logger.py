"""
================================================================================
Action Logger
================================================================================

One colour-coded console line per action event:

    [click] start (loginButton)                      cyan
    [click] ok (loginButton)                         green
    [click] retry (loginButton): Timeout 10000ms...   yellow
    [click] failed (loginButton): Timeout ...         red
      screenshot: reports/screenshots/1700000000000_loginButton.png

Logging is diagnostic only and never raises into the caller.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from loguru import logger


class ActionEvent(str, Enum):
    """Kinds of events an action reports."""
    START = "start"
    SUCCESS = "ok"
    RETRY = "retry"
    FAILURE = "failed"


# event -> (loguru level, colour markup)
_STYLES = {
    ActionEvent.START: ("INFO", "cyan"),
    ActionEvent.SUCCESS: ("INFO", "green"),
    ActionEvent.RETRY: ("WARNING", "yellow"),
    ActionEvent.FAILURE: ("ERROR", "red"),
}


def format_action_line(
    action: str,
    event: ActionEvent,
    label: Optional[str] = None,
    error: Union[BaseException, str, None] = None,
    screenshot_path: Optional[str] = None,
) -> str:
    """Build the plain-text line for an action event."""
    line = f"[{action}] {event.value}"
    if label:
        line += f" ({label})"
    if error is not None:
        line += f": {error}"
    if screenshot_path:
        line += f"\n  screenshot: {screenshot_path}"
    return line


class ActionLogger:
    """
    Structured console logging keyed by action name and optional label.

    Usage:
        log = ActionLogger()
        log.start("fill", "username")
        log.retry("fill", "username", err)
        log.failure("fill", "username", err, screenshot_path="reports/...png")
    """

    def __init__(self, sink_logger=None):
        """
        Args:
            sink_logger: Loguru logger to write to (defaults to the global one)
        """
        self._logger = sink_logger or logger

    def emit(
        self,
        action: str,
        event: ActionEvent,
        label: Optional[str] = None,
        error: Union[BaseException, str, None] = None,
        screenshot_path: Optional[str] = None,
    ) -> None:
        """Write one line for `event`. Swallows every logging error."""
        try:
            level, colour = _STYLES[event]
            line = format_action_line(action, event, label, error, screenshot_path)
            # Markup is applied to the template only, never to `line`.
            self._logger.opt(colors=True).log(level, f"<{colour}>{{}}</{colour}>", line)
        except Exception:
            pass

    def start(self, action: str, label: Optional[str] = None) -> None:
        self.emit(action, ActionEvent.START, label)

    def success(self, action: str, label: Optional[str] = None) -> None:
        self.emit(action, ActionEvent.SUCCESS, label)

    def retry(self, action: str, label: Optional[str], error: BaseException) -> None:
        self.emit(action, ActionEvent.RETRY, label, error)

    def failure(
        self,
        action: str,
        label: Optional[str],
        error: BaseException,
        screenshot_path: Optional[str] = None,
    ) -> None:
        self.emit(action, ActionEvent.FAILURE, label, error, screenshot_path)


__all__ = [
    "ActionEvent",
    "ActionLogger",
    "format_action_line",
]
