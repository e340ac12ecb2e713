"""Task helpers for cooperative cancellation.

Example:
    >>> async def drain(items):
    ...     for item in items:
    ...         handle(item)
    ...         await checkpoint()  # Allow cancellation here
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable


async def checkpoint() -> None:
    """Cooperative cancellation checkpoint.

    Yields control to the event loop so a pending cancel() on the current
    task is delivered before more work starts.
    """
    await asyncio.sleep(0)


async def cancel_and_wait(tasks: Iterable[asyncio.Future[object]]) -> int:
    """Cancel every unfinished task and wait until each has actually stopped.

    Returns:
        Number of tasks that were still running and got cancelled
    """
    pending = [t for t in tasks if not t.done()]
    for task in pending:
        task.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)
    return len(pending)
