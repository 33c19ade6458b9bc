"""
In-memory stand-ins for the Playwright objects the framework touches.

Only the async methods ElementActions / VisualMarker / FailureArtifactCapturer
call are implemented. Every call is appended to `calls` so tests can assert
on order and count.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from storefront_tests.ui_testing.framework.action_logger import ActionEvent, ActionLogger
from storefront_tests.ui_testing.framework.result import Result
from storefront_tests.ui_testing.framework.visual_marker import MarkKind


class FakeHandle:
    def __init__(self, evaluate_error: Optional[Exception] = None):
        self.evaluations: List[Tuple[str, Any]] = []
        self.evaluate_error = evaluate_error
        self.disposed = False

    async def evaluate(self, script: str, arg: Any = None) -> None:
        self.evaluations.append((script, arg))
        if self.evaluate_error:
            raise self.evaluate_error

    async def dispose(self) -> None:
        self.disposed = True


class FakeLocator:
    """
    Fake Locator.

    Args:
        selector: Selector it was created from
        click_errors / fill_errors / wait_errors: Exceptions raised by the
            first calls of that method, one per call, in order
        handle: What element_handle() returns (None = detached)
    """

    def __init__(
        self,
        selector: str = "#target",
        click_errors: Optional[List[Exception]] = None,
        fill_errors: Optional[List[Exception]] = None,
        wait_errors: Optional[List[Exception]] = None,
        handle: Optional[FakeHandle] = None,
        text: str = "",
    ):
        self.selector = selector
        self.click_errors = list(click_errors or [])
        self.fill_errors = list(fill_errors or [])
        self.wait_errors = list(wait_errors or [])
        self.handle = handle if handle is not None else FakeHandle()
        self.text = text
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def _called(self, name: str, **kwargs: Any) -> None:
        self.calls.append((name, kwargs))

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self._called("wait_for", state=state, timeout=timeout)
        if self.wait_errors:
            raise self.wait_errors.pop(0)

    async def click(self, timeout: Optional[float] = None) -> None:
        self._called("click", timeout=timeout)
        if self.click_errors:
            raise self.click_errors.pop(0)

    async def fill(self, value: str, timeout: Optional[float] = None) -> None:
        self._called("fill", value=value, timeout=timeout)
        if self.fill_errors:
            raise self.fill_errors.pop(0)

    async def element_handle(self, timeout: Optional[float] = None) -> Optional[FakeHandle]:
        self._called("element_handle", timeout=timeout)
        return self.handle

    async def scroll_into_view_if_needed(self, timeout: Optional[float] = None) -> None:
        self._called("scroll_into_view_if_needed", timeout=timeout)

    async def text_content(self, timeout: Optional[float] = None) -> str:
        self._called("text_content", timeout=timeout)
        return self.text


class FakePage:
    """
    Fake Page.

    `locator()` hands out the locator registered for a selector (creating a
    plain one on first use) and counts how often each selector was resolved.
    """

    def __init__(self, goto_error: Optional[Exception] = None, screenshot_error: Optional[Exception] = None):
        self.locators: Dict[str, FakeLocator] = {}
        self.resolutions: List[str] = []
        self.pauses: List[float] = []
        self.gotos: List[Dict[str, Any]] = []
        self.screenshots: List[Dict[str, Any]] = []
        self.goto_error = goto_error
        self.screenshot_error = screenshot_error

    def register(self, locator: FakeLocator) -> FakeLocator:
        self.locators[locator.selector] = locator
        return locator

    def locator(self, selector: str) -> FakeLocator:
        self.resolutions.append(selector)
        if selector not in self.locators:
            self.locators[selector] = FakeLocator(selector)
        return self.locators[selector]

    async def goto(self, url: str, timeout: Optional[float] = None, wait_until: Optional[str] = None) -> None:
        self.gotos.append({"url": url, "timeout": timeout, "wait_until": wait_until})
        if self.goto_error:
            raise self.goto_error

    async def wait_for_timeout(self, timeout: float) -> None:
        self.pauses.append(timeout)

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        self.screenshots.append({"path": path, "full_page": full_page})
        if self.screenshot_error:
            raise self.screenshot_error
        data = b"\x89PNG fake"
        if path:
            Path(path).write_bytes(data)
        return data


class RecordingMarker:
    """Marker that records (locator, kind) and does nothing else."""

    def __init__(self):
        self.marks: List[Tuple[Any, MarkKind]] = []

    async def mark(self, locator: Any, kind: MarkKind = MarkKind.NORMAL) -> Result:
        self.marks.append((locator, MarkKind(kind)))
        return Result.success()

    def kinds(self) -> List[MarkKind]:
        return [kind for _, kind in self.marks]


class RecordingCapturer:
    """Capturer that records the requested names instead of touching disk."""

    def __init__(self, result: Optional[Result] = None):
        self.names: List[str] = []
        self.result = result

    async def capture(self, page: Any, name: str) -> Result:
        self.names.append(name)
        if self.result is not None:
            return self.result
        return Result.success(Path("reports") / "screenshots" / f"1700000000000_{name}.png")


class RecordingActionLogger(ActionLogger):
    """ActionLogger that keeps the events it was asked to emit."""

    def __init__(self):
        super().__init__()
        self.events: List[Dict[str, Any]] = []

    def emit(self, action, event, label=None, error=None, screenshot_path=None) -> None:
        self.events.append(
            {
                "action": action,
                "event": event,
                "label": label,
                "error": error,
                "screenshot_path": screenshot_path,
            }
        )

    def of(self, event: ActionEvent) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["event"] is event]
