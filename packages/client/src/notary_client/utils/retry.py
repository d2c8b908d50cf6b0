"""
utils/retry.py — Backoff for idempotent API reads.

GET requests that fail with a transport error or a 5xx are re-sent with
exponential backoff (tenacity). Mutations never go through here: a
duplicated POST could create a second record or consultation.

Usage:
    from notary_client.utils.retry import retry_read

    data = await retry_read(
        lambda: client.request("GET", "/records"),
        attempts=3,
        base_delay=0.5,
        label="/records",
    )
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from notary_client.errors import is_retryable_read_error

log = structlog.get_logger(__name__)

T = TypeVar("T")

MAX_BACKOFF_SECONDS = 8.0


def _log_before_sleep(label: str, attempts: int) -> Callable[[RetryCallState], None]:
    def _before_sleep(state: RetryCallState) -> None:
        exc = state.outcome.exception() if state.outcome else None
        log.warning(
            "read_retry",
            target=label,
            attempt=state.attempt_number,
            max_attempts=attempts,
            error=repr(exc),
        )

    return _before_sleep


async def retry_read(
    call: Callable[[], Awaitable[T]],
    *,
    attempts: int = 3,
    base_delay: float = 0.5,
    label: str = "read",
    should_retry: Callable[[BaseException], bool] = is_retryable_read_error,
) -> T:
    """
    Await ``call()`` until it succeeds or ``attempts`` runs out.

    Waits base_delay, 2*base_delay, 4*base_delay ... between tries, capped
    at MAX_BACKOFF_SECONDS. The last exception is re-raised unchanged so
    callers see the same NotaryApiError they would without retries.
    """
    result: Any = None
    try:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max(attempts, 1)),
            wait=wait_exponential(multiplier=base_delay, max=MAX_BACKOFF_SECONDS),
            retry=retry_if_exception(should_retry),
            before_sleep=_log_before_sleep(label, attempts),
            reraise=True,
        ):
            with attempt:
                result = await call()
    except Exception as exc:
        if should_retry(exc):
            log.error("read_retry_exhausted", target=label, max_attempts=attempts, error=repr(exc))
        raise
    return result
