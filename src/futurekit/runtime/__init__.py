"""Runtime layer: retry scheduling, concurrency combinators and observability."""

from .concurrency import RaceResult, cancel_and_wait, checkpoint, race, race_with_index
from .observability import configure_from_settings, configure_logging, get_logger
from .retry import (
    NO_DELAY,
    Backoff,
    ConstantBackoff,
    ExponentialBackoff,
    LinearBackoff,
    RetryPolicy,
    RetryScheduler,
    RetryState,
    make_retryable,
)

__all__ = [
    "RaceResult",
    "cancel_and_wait",
    "checkpoint",
    "race",
    "race_with_index",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "NO_DELAY",
    "Backoff",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "RetryPolicy",
    "RetryScheduler",
    "RetryState",
    "make_retryable",
]
