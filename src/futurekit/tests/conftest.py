"""Shared fixtures: silent logging, log capture, recorded sleeps."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from futurekit.foundation.config import clear_settings_cache
from futurekit.runtime.observability import LogEntry, NoOpRenderer, use_renderer


class CaptureRenderer:
    """Collects rendered log entries in memory."""

    def __init__(self) -> None:
        self.entries: list[LogEntry] = []

    def render(self, entry: LogEntry) -> None:
        self.entries.append(entry)

    @property
    def events(self) -> list[str]:
        return [e.event for e in self.entries]

    def find(self, event: str) -> list[LogEntry]:
        return [e for e in self.entries if e.event == event]


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays and returns immediately."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)

    @property
    def total(self) -> float:
        return sum(self.delays)


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[None]:
    """Keep test output clean and isolate global logging config."""
    use_renderer(NoOpRenderer(), level="INFO")
    yield
    use_renderer(NoOpRenderer(), level="INFO")


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def log_capture() -> CaptureRenderer:
    renderer = CaptureRenderer()
    use_renderer(renderer, level="DEBUG")
    return renderer


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()
