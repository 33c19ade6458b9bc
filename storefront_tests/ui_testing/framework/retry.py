"""
================================================================================
Retry Engine
================================================================================

Bounded retry of an async attempt. Knows nothing about browsers or logging:
whatever should happen between attempts (warning line, pacing pause) is
passed in as `on_retry`.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import inspect
from typing import Awaitable, Callable, Optional, TypeVar, Union

from loguru import logger


T = TypeVar("T")

OnRetry = Callable[[int, Exception], Union[None, Awaitable[None]]]


async def run_with_retries(
    attempt: Callable[[], Awaitable[T]],
    max_retries: int,
    on_retry: Optional[OnRetry] = None,
) -> T:
    """
    Run `attempt` until it succeeds, at most `max_retries + 1` times.

    Args:
        attempt: Zero-argument callable returning an awaitable
        max_retries: Additional attempts after the first failure (>= 0)
        on_retry: Called as `on_retry(retry_number, error)` before each
            retry; retry_number counts 1..max_retries. May be sync or async.
            Its own failures are logged and ignored.

    Returns:
        The result of the first successful attempt.

    Raises:
        The exception of the last attempt, unchanged.
    """
    if max_retries < 0:
        raise ValueError(f"max_retries must be >= 0, got {max_retries}")

    last_exception: Optional[Exception] = None
    for attempt_index in range(max_retries + 1):
        try:
            return await attempt()
        except Exception as e:
            last_exception = e
            if attempt_index < max_retries and on_retry is not None:
                await _notify(on_retry, attempt_index + 1, e)

    raise last_exception


async def _notify(on_retry: OnRetry, retry_number: int, error: Exception) -> None:
    try:
        outcome = on_retry(retry_number, error)
        if inspect.isawaitable(outcome):
            await outcome
    except Exception as callback_error:
        logger.debug(f"on_retry callback failed (retry {retry_number}): {callback_error}")


__all__ = [
    "OnRetry",
    "run_with_retries",
]
