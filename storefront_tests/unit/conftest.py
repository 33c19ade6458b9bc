"""
Unit-test fixtures: fake Playwright objects wired into ElementActions.
"""

import pytest

from storefront_tests.ui_testing.framework.action_settings import ActionSettings
from storefront_tests.ui_testing.framework.element_actions import ElementActions

from .fakes import FakePage, RecordingActionLogger, RecordingCapturer, RecordingMarker


@pytest.fixture
def settings() -> ActionSettings:
    """Deterministic settings: no global pause, the standard 200 ms retry pause."""
    return ActionSettings(action_delay_ms=0, retry_pause_ms=200)


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def marker() -> RecordingMarker:
    return RecordingMarker()


@pytest.fixture
def capturer() -> RecordingCapturer:
    return RecordingCapturer()


@pytest.fixture
def action_log() -> RecordingActionLogger:
    return RecordingActionLogger()


@pytest.fixture
def actions(fake_page, settings, marker, capturer, action_log) -> ElementActions:
    return ElementActions(
        fake_page,
        settings=settings,
        marker=marker,
        capturer=capturer,
        action_logger=action_log,
    )
