"""
================================================================================
Visual Marker
================================================================================

Transient outline on the element an action is about to touch, so headed
runs and traces show what the suite interacted with. The outline reverts
on its own inside the page; the caller never waits for it.

Marking is diagnostic only: every failure is reported as a `Result` and
never raised.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from loguru import logger
from playwright.async_api import Locator

from .result import Result


class MarkKind(str, Enum):
    NORMAL = "normal"
    ERROR = "error"


@dataclass(frozen=True)
class MarkStyle:
    outline: str
    revert_after_ms: int


MARK_STYLES: Dict[MarkKind, MarkStyle] = {
    MarkKind.NORMAL: MarkStyle(outline="3px solid magenta", revert_after_ms=300),
    MarkKind.ERROR: MarkStyle(outline="3px solid red", revert_after_ms=800),
}

# Restores the previous outline from a page-side timer.
_OUTLINE_SCRIPT = """
(node, [outline, revertAfterMs]) => {
    const previous = node.style.outline;
    node.style.outline = outline;
    setTimeout(() => { node.style.outline = previous; }, revertAfterMs);
}
"""


class VisualMarker:
    """
    Outlines elements via Playwright.

    Usage:
        marker = VisualMarker()
        await marker.mark(page.locator("#login"))                  # magenta, 300 ms
        await marker.mark(page.locator("#login"), MarkKind.ERROR)  # red, 800 ms
    """

    def __init__(self, resolve_timeout_ms: int = 2000):
        """
        Args:
            resolve_timeout_ms: How long to wait for the element handle
        """
        self.resolve_timeout_ms = resolve_timeout_ms

    async def mark(self, locator: Locator, kind: MarkKind = MarkKind.NORMAL) -> Result:
        style = MARK_STYLES[MarkKind(kind)]
        try:
            handle = await locator.element_handle(timeout=self.resolve_timeout_ms)
            if handle is None:
                return Result.skip()
            try:
                await locator.scroll_into_view_if_needed(timeout=self.resolve_timeout_ms)
                await handle.evaluate(_OUTLINE_SCRIPT, [style.outline, style.revert_after_ms])
            finally:
                await handle.dispose()
        except Exception as e:
            logger.debug(f"Highlight failed: {e}")
            return Result.failure(e)
        return Result.success()


class NullMarker:
    """Marker that does nothing; used when highlighting is switched off."""

    async def mark(self, locator: Locator, kind: MarkKind = MarkKind.NORMAL) -> Result:
        return Result.skip()


__all__ = [
    "MARK_STYLES",
    "MarkKind",
    "MarkStyle",
    "NullMarker",
    "VisualMarker",
]
