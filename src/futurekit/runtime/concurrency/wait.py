"""First-to-settle wait strategies.

    - race: First to settle wins, cancel others
    - race_with_index: Same, with metadata about the winner

Losers are cancelled and awaited before returning, so no attempt of a losing
retry run keeps executing once the race is decided.

Example:
    >>> value = await race(
    ...     scheduler.run(primary, 5, ExponentialBackoff()),
    ...     scheduler.run(replica, 5, ConstantBackoff(0.2)),
    ... )
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .task import cancel_and_wait

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class RaceResult(Generic[T]):
    """Outcome of race_with_index().

    Attributes:
        value: Result of the winning awaitable
        index: Position of the winner in the argument list
        elapsed: Seconds from start until the winner settled
        cancelled: Number of losers that were still running and got cancelled
    """

    value: T
    index: int
    elapsed: float
    cancelled: int


async def _first_settled(
    aws: tuple[Awaitable[T], ...],
    timeout: float | None,
) -> tuple[asyncio.Future[T], int, int]:
    """Run awaitables concurrently until one settles. Returns (winner, index, cancelled)."""
    tasks: list[asyncio.Future[T]] = [asyncio.ensure_future(a) for a in aws]
    try:
        done, pending = await asyncio.wait(tasks, timeout=timeout, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        await cancel_and_wait(tasks)
        raise
    if not done:
        await cancel_and_wait(tasks)
        raise TimeoutError(f"No awaitable settled within {timeout}s")

    # Ties resolve to the earliest argument position
    winner = min(done, key=tasks.index)
    cancelled = await cancel_and_wait(pending)
    # Other finishers in the same tick lose; retrieve their exceptions so asyncio doesn't warn
    for task in done:
        if task is not winner and not task.cancelled():
            task.exception()
    return winner, tasks.index(winner), cancelled


async def race(*aws: Awaitable[T], timeout: float | None = None) -> T:
    """Race awaitables - first to settle wins.

    If the first to settle raised, that exception propagates unchanged.

    Raises:
        ValueError: If no awaitables provided
        TimeoutError: If timeout expires before any awaitable settles
    """
    if not aws:
        raise ValueError("race() requires at least one awaitable")
    winner, _, _ = await _first_settled(aws, timeout)
    return winner.result()


async def race_with_index(*aws: Awaitable[T], timeout: float | None = None) -> RaceResult[T]:
    """Like race() but reports which awaitable won and how many were cancelled."""
    if not aws:
        raise ValueError("race_with_index() requires at least one awaitable")
    start = time.monotonic()
    winner, index, cancelled = await _first_settled(aws, timeout)
    return RaceResult(value=winner.result(), index=index, elapsed=time.monotonic() - start, cancelled=cancelled)
