"""
================================================================================
Action Settings and Options
================================================================================

Process-wide settings for the interaction layer plus the per-call option
objects accepted by `ElementActions`.

    - ActionSettings: built once (usually `ActionSettings.from_env()`) and
      injected into ElementActions
    - ActionOptions: click / fill
    - WaitOptions: wait_for_state
    - NavigateOptions: navigate

Option objects are frozen. Per-call overrides produce a new object through
`with_overrides()`; unspecified fields keep their defaults.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import dataclasses
import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from storefront_tools.common import env_int, get_config


class LogMode(str, Enum):
    """Console verbosity of an action."""
    NONE = "none"
    START = "start"
    SUCCESS = "success"
    ALL = "all"

    @property
    def logs_start(self) -> bool:
        return self in (LogMode.START, LogMode.ALL)

    @property
    def logs_success(self) -> bool:
        return self in (LogMode.SUCCESS, LogMode.ALL)


class WaitState(str, Enum):
    """Element states accepted by `Locator.wait_for`."""
    VISIBLE = "visible"
    ATTACHED = "attached"
    HIDDEN = "hidden"
    DETACHED = "detached"


class _Options:
    """Shared override/coercion behaviour of the option dataclasses."""

    def with_overrides(self, **overrides: Any):
        """
        Return a copy with the given fields replaced.

        Raises:
            TypeError: If an override names an unknown option
        """
        if not overrides:
            return self
        return dataclasses.replace(self, **overrides)

    def _coerce_log(self) -> None:
        if not isinstance(self.log, LogMode):
            object.__setattr__(self, "log", LogMode(self.log))

    def pause_ms(self, settings: "ActionSettings") -> int:
        """Post-action pause: explicit value, else the process-wide delay."""
        if self.delay_after_ms is None:
            return settings.action_delay_ms
        return self.delay_after_ms


@dataclass(frozen=True)
class ActionOptions(_Options):
    """
    Options for click and fill.

    Attributes:
        timeout: Max wait per attempt in milliseconds
        retries: Additional attempts after the first failure
        highlight: Outline the element before each attempt (the red post-mortem mark is always applied)
        clear: Empty the input before filling (fill only)
        delay_after_ms: Pause after success; None uses ActionSettings.action_delay_ms
        screenshot_on_error: Capture a full-page screenshot on terminal failure
        log_label: Free-text tag for log correlation and screenshot naming
        log: Which of start/success lines to print
    """
    timeout: int = 10_000
    retries: int = 1
    highlight: bool = True
    clear: bool = False
    delay_after_ms: Optional[int] = None
    screenshot_on_error: bool = True
    log_label: Optional[str] = None
    log: LogMode = LogMode.NONE

    def __post_init__(self) -> None:
        self._coerce_log()
        if self.retries < 0:
            raise ValueError(f"retries must be >= 0, got {self.retries}")


@dataclass(frozen=True)
class WaitOptions(_Options):
    """
    Options for wait_for_state.

    `has_text` accepts an exact string or a compiled regular expression.
    """
    timeout: int = 10_000
    state: WaitState = WaitState.VISIBLE
    expect_enabled: bool = False
    expect_editable: bool = False
    has_text: Optional[Union[str, re.Pattern]] = None
    highlight: bool = True
    delay_after_ms: Optional[int] = None
    log_label: Optional[str] = None
    log: LogMode = LogMode.NONE

    def __post_init__(self) -> None:
        self._coerce_log()
        if not isinstance(self.state, WaitState):
            object.__setattr__(self, "state", WaitState(self.state))


@dataclass(frozen=True)
class NavigateOptions(_Options):
    """Options for navigate. `wait_until` is passed to `page.goto`."""
    timeout: int = 30_000
    wait_until: str = "domcontentloaded"
    delay_after_ms: Optional[int] = None
    log_label: Optional[str] = None
    log: LogMode = LogMode.NONE

    def __post_init__(self) -> None:
        self._coerce_log()
        if self.wait_until not in ("load", "domcontentloaded", "networkidle", "commit"):
            raise ValueError(f"Unknown wait_until: {self.wait_until}")


@dataclass(frozen=True)
class ActionSettings:
    """
    Process-wide tunables of the interaction layer.

    Attributes:
        action_delay_ms: Default pause after every successful action
        retry_pause_ms: Fixed pause between retry attempts
        default_timeout_ms: Default per-attempt timeout for click/fill/wait
        navigation_timeout_ms: Default navigation timeout
        screenshot_dir: Directory for failure screenshots
    """
    action_delay_ms: int = 0
    retry_pause_ms: int = 200
    default_timeout_ms: int = 10_000
    navigation_timeout_ms: int = 30_000
    screenshot_dir: Path = Path("reports") / "screenshots"

    @classmethod
    def from_env(cls) -> "ActionSettings":
        """
        Build settings from the environment and the YAML configuration.

        ACTION_DELAY_MS wins over `actions.delay_ms`; invalid numbers fall
        back to the configured value.
        """
        configured_delay = int(get_config("actions.delay_ms", 0) or 0)
        screenshot_dir = os.getenv("SCREENSHOT_DIR") or get_config(
            "actions.screenshot_dir", "reports/screenshots"
        )
        return cls(
            action_delay_ms=max(0, env_int("ACTION_DELAY_MS", configured_delay)),
            retry_pause_ms=int(get_config("actions.retry_pause_ms", 200)),
            default_timeout_ms=int(get_config("actions.default_timeout_ms", 10_000)),
            navigation_timeout_ms=int(get_config("actions.navigation_timeout_ms", 30_000)),
            screenshot_dir=Path(screenshot_dir),
        )

    def action_options(self, **overrides: Any) -> ActionOptions:
        """Fresh ActionOptions seeded with these settings."""
        return ActionOptions(timeout=self.default_timeout_ms).with_overrides(**overrides)

    def wait_options(self, **overrides: Any) -> WaitOptions:
        """Fresh WaitOptions seeded with these settings."""
        return WaitOptions(timeout=self.default_timeout_ms).with_overrides(**overrides)

    def navigate_options(self, **overrides: Any) -> NavigateOptions:
        """Fresh NavigateOptions seeded with these settings."""
        return NavigateOptions(timeout=self.navigation_timeout_ms).with_overrides(**overrides)


__all__ = [
    "ActionOptions",
    "ActionSettings",
    "LogMode",
    "NavigateOptions",
    "WaitOptions",
    "WaitState",
]
