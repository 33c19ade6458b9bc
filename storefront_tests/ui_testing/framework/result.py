"""
================================================================================
Diagnostic Result
================================================================================

Return value of best-effort diagnostic work (highlighting, failure
screenshots). These paths never raise: they report what happened and the
caller decides to inspect or discard the outcome.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Result:
    """
    Outcome of a diagnostic operation.

    Attributes:
        ok: True when the operation did its work
        value: Produced value (e.g. screenshot path), if any
        error: Exception that was caught, if any
        skipped: True when there was nothing to do (e.g. element detached)
    """
    ok: bool
    value: Any = None
    error: Optional[BaseException] = None
    skipped: bool = False

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "Result":
        return cls(ok=False, error=error)

    @classmethod
    def skip(cls) -> "Result":
        return cls(ok=False, skipped=True)

    def value_or(self, default: Any = None) -> Any:
        """Return the value on success, `default` otherwise."""
        return self.value if self.ok else default
