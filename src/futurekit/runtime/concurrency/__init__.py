"""Concurrency primitives used around retry runs.

    - race / race_with_index: first-to-settle combinators that cancel losers
    - checkpoint: cooperative cancellation point
    - cancel_and_wait: cancel tasks and wait for them to unwind

Example:
    >>> from futurekit.runtime.concurrency import race
    >>> fastest = await race(fetch_a(), fetch_b(), fetch_c())
"""

from __future__ import annotations

from .task import cancel_and_wait, checkpoint
from .wait import RaceResult, race, race_with_index

__all__ = [
    "checkpoint",
    "cancel_and_wait",
    "race",
    "race_with_index",
    "RaceResult",
]
