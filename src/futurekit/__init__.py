"""futurekit - Retryable async operations and channel subscription bookkeeping.

Quick Start:
    >>> from futurekit import RetryScheduler, ExponentialBackoff
    >>>
    >>> async def fetch(attempt: int) -> dict:
    ...     return await api.get_chain_info()
    >>>
    >>> info = await RetryScheduler().run(fetch, 5, ExponentialBackoff(base=0.5))

Custom backoff (sees each failure, in order):
    >>> def backoff(attempt: int, error: BaseException) -> float:
    ...     log.info("retrying", attempt=attempt, error=str(error))
    ...     return attempt * 0.25
    >>>
    >>> value = await make_retryable(fetch, 3, backoff)

Racing independent runs (losers are cancelled):
    >>> from futurekit import race
    >>> fastest = await race(
    ...     scheduler.run(fetch_primary, 5, ConstantBackoff(1.0)),
    ...     scheduler.run(fetch_replica, 5, LinearBackoff(0.5)),
    ... )

Subscriptions:
    >>> from futurekit import SubscriptionManager, ChannelCallbacks
    >>> manager = SubscriptionManager(ChannelCallbacks(new_channel=open_feed, remove_channel=close_feed))
    >>> manager.add("block", client)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Foundation
from .foundation import (
    ErrorCode,
    FuturekitError,
    FuturekitSettings,
    InvalidDelayError,
    InvalidPolicyError,
    clear_settings_cache,
    get_settings,
)

# Retry
from .runtime.retry import (
    NO_DELAY,
    Backoff,
    BackoffFunction,
    ConstantBackoff,
    ExponentialBackoff,
    LinearBackoff,
    RetryPolicy,
    RetryScheduler,
    RetryState,
    make_retryable,
)

# Concurrency
from .runtime.concurrency import RaceResult, checkpoint, race, race_with_index

# Observability
from .runtime.observability import configure_from_settings, configure_logging, get_logger

# Subscriptions
from .pubsub import ChannelCallbacks, SubscriptionCallbacks, SubscriptionManager

__all__ = [
    "__version__",
    # Foundation
    "ErrorCode",
    "FuturekitError",
    "FuturekitSettings",
    "InvalidDelayError",
    "InvalidPolicyError",
    "clear_settings_cache",
    "get_settings",
    # Retry
    "NO_DELAY",
    "Backoff",
    "BackoffFunction",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "RetryPolicy",
    "RetryScheduler",
    "RetryState",
    "make_retryable",
    # Concurrency
    "RaceResult",
    "checkpoint",
    "race",
    "race_with_index",
    # Observability
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    # Subscriptions
    "ChannelCallbacks",
    "SubscriptionCallbacks",
    "SubscriptionManager",
]
