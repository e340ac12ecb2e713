"""Retry scheduling for async operations.

Provides a sequential retry loop with a caller-supplied backoff function,
plus deterministic backoff strategies and a validated policy model.

Example:
    >>> from futurekit.runtime.retry import RetryScheduler, ExponentialBackoff
    >>>
    >>> async def fetch(attempt: int) -> dict:
    ...     return await api.get_node_info()
    >>>
    >>> info = await RetryScheduler().run(fetch, 5, ExponentialBackoff(base=0.5, max_delay=8.0))
"""

from .backoff import (
    NO_DELAY,
    Backoff,
    BackoffFunction,
    ConstantBackoff,
    ExponentialBackoff,
    LinearBackoff,
)
from .policy import RetryPolicy, build_policy, validate_max_attempts
from .scheduler import (
    OperationSupplier,
    RetryScheduler,
    RetryState,
    Sleep,
    make_retryable,
)

__all__ = [
    # Backoff strategies
    "Backoff",
    "BackoffFunction",
    "ExponentialBackoff",
    "LinearBackoff",
    "ConstantBackoff",
    "NO_DELAY",
    # Policy
    "RetryPolicy",
    "build_policy",
    "validate_max_attempts",
    # Execution
    "RetryScheduler",
    "RetryState",
    "OperationSupplier",
    "Sleep",
    "make_retryable",
]
