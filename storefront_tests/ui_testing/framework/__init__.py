"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework with a resilient interaction layer.

Components:
    - element_actions: navigate / click / fill / wait_for_state with retries,
      highlight, logging and failure screenshots
    - retry: bounded retry engine
    - action_logger: colour-coded action log lines
    - visual_marker: transient element outline
    - artifacts: failure screenshot capture
    - action_settings: settings and per-call options
    - page_base: base page object
    - browser_manager: browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .action_logger import ActionEvent, ActionLogger
from .action_settings import ActionOptions, ActionSettings, LogMode, NavigateOptions, WaitOptions, WaitState
from .artifacts import FailureArtifactCapturer
from .browser_manager import BrowserManager
from .element_actions import ActionFailedError, ActionTarget, ElementActions
from .page_base import BasePage
from .result import Result
from .retry import run_with_retries
from .visual_marker import MarkKind, NullMarker, VisualMarker

__all__ = [
    "ActionEvent",
    "ActionFailedError",
    "ActionLogger",
    "ActionOptions",
    "ActionSettings",
    "ActionTarget",
    "BasePage",
    "BrowserManager",
    "ElementActions",
    "FailureArtifactCapturer",
    "LogMode",
    "MarkKind",
    "NavigateOptions",
    "NullMarker",
    "Result",
    "VisualMarker",
    "WaitOptions",
    "WaitState",
    "run_with_retries",
]
