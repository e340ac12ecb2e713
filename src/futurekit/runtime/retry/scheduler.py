"""Retry-with-backoff scheduler for async operations.

Drives an operation supplier through bounded attempts, asking a
caller-supplied backoff function how long to wait after each failure.

Semantics:
    - Attempts are strictly sequential: attempt N+1 starts only after
      attempt N failed and its backoff delay fully elapsed.
    - The backoff function sees every non-final failure, in order, with the
      1-based index of the attempt that failed. It is never called after
      the last allowed attempt or after a success.
    - The terminal error is the final attempt's exception, re-raised as-is.
    - An exception from the backoff function aborts the run immediately.
    - Cancellation (asyncio.CancelledError) is never retried.

Example:
    >>> async def fetch(attempt: int) -> bytes:
    ...     return await client.get("/chain/height")
    >>>
    >>> scheduler = RetryScheduler()
    >>> body = await scheduler.run(fetch, 5, lambda attempt, err: 0.5 * attempt)
"""

from __future__ import annotations

import asyncio
import inspect
import math
from collections.abc import Awaitable, Callable, Coroutine
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias, TypeVar

from futurekit.foundation.errors import InvalidDelayError, InvalidPolicyError
from futurekit.runtime.concurrency import checkpoint
from futurekit.runtime.observability import BoundLogger, get_logger

from .policy import build_policy, validate_max_attempts

if TYPE_CHECKING:
    from .backoff import BackoffFunction
    from .policy import RetryPolicy

T = TypeVar("T")

OperationSupplier: TypeAlias = Callable[[int], Awaitable[T]]
Sleep: TypeAlias = Callable[[float], Awaitable[object]]


class RetryState(StrEnum):
    """Lifecycle of a single run."""
    ATTEMPTING = "attempting"
    WAITING_TO_RETRY = "waiting_to_retry"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RetryScheduler:
    """Runs async operations with bounded retries and caller-defined backoff.

    A scheduler holds no per-run state, so one instance can serve any number
    of concurrent runs. Each run keeps its attempt counter in local variables.

    Args:
        sleep: Awaitable sleep used for backoff delays (default: asyncio.sleep)
        logger_name: Name bound into structured log events
    """

    __slots__ = ("_sleep", "_log")

    def __init__(self, *, sleep: Sleep = asyncio.sleep, logger_name: str = "futurekit.retry") -> None:
        self._sleep = sleep
        self._log = get_logger(logger_name)

    async def run(
        self,
        operation_supplier: OperationSupplier[T],
        max_attempts: int,
        backoff: BackoffFunction,
    ) -> T:
        """Invoke ``operation_supplier`` until it succeeds or ``max_attempts`` is used up.

        Args:
            operation_supplier: Called with the 1-based attempt index, returns an awaitable
            max_attempts: Ceiling on supplier invocations (>= 1)
            backoff: Called as ``backoff(attempt, error)`` after each non-final
                failure; returns a delay in seconds or an awaitable of one

        Returns:
            The first successful value

        Raises:
            InvalidPolicyError: If max_attempts is not an int >= 1 or backoff is not callable
            InvalidDelayError: If backoff returns a negative, non-finite or non-numeric delay
            Exception: The final attempt's error, or the backoff function's error
        """
        validate_max_attempts(max_attempts)
        if not callable(backoff):
            raise InvalidPolicyError("backoff must be callable as backoff(attempt, error)")

        log = self._log.bind(operation=_describe(operation_supplier), max_attempts=max_attempts)
        attempt = 1
        while True:
            try:
                value = await operation_supplier(attempt)
            except Exception as exc:
                log.debug("attempt failed", attempt=attempt, error=exc, state=RetryState.ATTEMPTING.value)
                if attempt == max_attempts:
                    log.warning("retry exhausted", attempts=attempt, error=exc, state=RetryState.FAILED.value)
                    raise
                error = exc
            else:
                if attempt > 1:
                    log.debug("attempt succeeded", attempt=attempt, state=RetryState.SUCCEEDED.value)
                return value

            delay = await self._next_delay(backoff, attempt, error, log)
            log.info("retry scheduled", attempt=attempt, delay=delay, state=RetryState.WAITING_TO_RETRY.value)
            await self._sleep(delay)
            await checkpoint()  # Cooperative cancellation point before the next attempt
            attempt += 1

    async def execute(self, operation_supplier: OperationSupplier[T], policy: RetryPolicy) -> T:
        """Run with the attempt ceiling and backoff taken from a RetryPolicy."""
        return await self.run(operation_supplier, policy.max_attempts, policy.backoff)

    async def _next_delay(
        self,
        backoff: BackoffFunction,
        attempt: int,
        error: Exception,
        log: BoundLogger,
    ) -> float:
        try:
            delay = backoff(attempt, error)
            if inspect.isawaitable(delay):
                delay = await delay
            return _check_delay(delay, attempt)
        except Exception as exc:
            log.warning("retry aborted", attempt=attempt, error=exc)
            raise


def _check_delay(delay: object, attempt: int) -> float:
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        raise InvalidDelayError(
            f"Backoff for attempt {attempt} returned {type(delay).__name__}, expected seconds as a number",
            attempt=attempt, value=delay,
        )
    if not math.isfinite(delay) or delay < 0:
        raise InvalidDelayError(
            f"Backoff for attempt {attempt} returned {delay!r}, expected a finite non-negative delay",
            attempt=attempt, value=delay,
        )
    return float(delay)


def _describe(fn: object) -> str:
    return getattr(fn, "__qualname__", None) or type(fn).__name__


_default_scheduler = RetryScheduler()


def make_retryable(
    operation_supplier: OperationSupplier[T],
    max_attempts: int,
    backoff: BackoffFunction,
) -> Coroutine[object, object, T]:
    """Validate arguments now and return the coroutine of a retry run.

    Unlike awaiting RetryScheduler.run() directly, a bad policy is reported
    at the call site rather than when the coroutine is first awaited.

    Example:
        >>> pending = make_retryable(fetch, 3, ConstantBackoff(0.1))
        >>> value = await pending
    """
    policy = build_policy(max_attempts, backoff)
    return _default_scheduler.execute(operation_supplier, policy)
