"""Backoff strategies for retry runs.

Deterministic delay calculation for retry attempts:
- ExponentialBackoff: Exponential growth with cap
- LinearBackoff: Linear growth with cap
- ConstantBackoff: Fixed delay

Every strategy is itself a backoff function: calling it with
``(attempt, error)`` returns the delay, so it can be passed straight to
RetryScheduler.run(). Attempt numbers are 1-based (the attempt that just
failed).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

BackoffFunction: TypeAlias = Callable[[int, BaseException], float | Awaitable[float]]


@runtime_checkable
class Backoff(Protocol):
    """Protocol for backoff delay calculation."""

    def delay(self, attempt: int) -> float:
        """Calculate delay in seconds after the given failed attempt.

        Args:
            attempt: 1-based index of the attempt that just failed

        Returns:
            Delay in seconds before the next attempt
        """
        ...

    def __call__(self, attempt: int, error: BaseException) -> float: ...


@dataclass(frozen=True, slots=True)
class ExponentialBackoff:
    """Exponential backoff with cap.

    Delay = min(base * (multiplier ^ (attempt - 1)), max_delay)

    Attributes:
        base: Delay after the first failure in seconds (default: 1.0)
        multiplier: Exponential growth factor (default: 2.0)
        max_delay: Maximum delay cap in seconds (default: 30.0)
    """

    base: float = 1.0
    multiplier: float = 2.0
    max_delay: float = 30.0

    def delay(self, attempt: int) -> float:
        return min(self.base * (self.multiplier ** (attempt - 1)), self.max_delay)

    def __call__(self, attempt: int, error: BaseException) -> float:
        return self.delay(attempt)


@dataclass(frozen=True, slots=True)
class LinearBackoff:
    """Linear backoff with cap.

    Delay = min(base + (increment * (attempt - 1)), max_delay)
    """

    base: float = 1.0
    increment: float = 1.0
    max_delay: float = 30.0

    def delay(self, attempt: int) -> float:
        return min(self.base + (self.increment * (attempt - 1)), self.max_delay)

    def __call__(self, attempt: int, error: BaseException) -> float:
        return self.delay(attempt)


@dataclass(frozen=True, slots=True)
class ConstantBackoff:
    """Fixed delay between attempts.

    Simple strategy for rate-limited APIs with known cooldown.
    """

    delay_seconds: float = 1.0

    def delay(self, attempt: int) -> float:
        return self.delay_seconds

    def __call__(self, attempt: int, error: BaseException) -> float:
        return self.delay_seconds


NO_DELAY = ConstantBackoff(0.0)
