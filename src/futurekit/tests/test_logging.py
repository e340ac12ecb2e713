"""Tests for structured logging renderers and configuration."""

from __future__ import annotations

import io

import orjson
import pytest

from futurekit.foundation.config import LoggingSettings
from futurekit.runtime.observability import (
    ConsoleRenderer,
    JsonRenderer,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    get_logger,
    log_context,
)


def test_console_renderer_output() -> None:
    out = io.StringIO()
    configure_logging("console", "INFO", output=out, colors=False)

    get_logger("futurekit.retry").info("retry scheduled", attempt=2, delay=0.5)

    line = out.getvalue().strip()
    assert "[info] retry scheduled" in line
    assert "attempt=2" in line
    assert "delay=0.5" in line
    assert 'logger="futurekit.retry"' in line
    assert "\033[" not in line


def test_console_renderer_formats_exceptions() -> None:
    out = io.StringIO()
    configure_logging("console", "DEBUG", output=out, colors=False)

    get_logger().debug("attempt failed", error=RuntimeError("bad future 1"))
    assert 'error=RuntimeError("bad future 1")' in out.getvalue()


def test_json_renderer_output() -> None:
    out = io.StringIO()
    configure_logging("json", "INFO", output=out)

    get_logger("futurekit.retry").warning("retry exhausted", attempts=3, error=ValueError("nope"))

    record = orjson.loads(out.getvalue().strip())
    assert record["event"] == "retry exhausted"
    assert record["level"] == "warning"
    assert record["attempts"] == 3
    assert record["logger"] == "futurekit.retry"
    assert "nope" in record["error"]
    assert "timestamp" in record


def test_level_filtering() -> None:
    out = io.StringIO()
    configure_logging("console", "WARNING", output=out, colors=False)

    log = get_logger()
    log.info("hidden")
    log.debug("hidden too")
    log.warning("shown")
    assert out.getvalue().count("\n") == 1
    assert "shown" in out.getvalue()


def test_module_level_logger_follows_reconfiguration() -> None:
    log = get_logger("created-early")
    out = io.StringIO()
    configure_logging("console", "DEBUG", output=out, colors=False)

    log.debug("now visible")
    assert "now visible" in out.getvalue()


def test_bind_and_unbind() -> None:
    log = get_logger("svc").bind(run="fetch", attempt=1)
    assert log.context == {"logger": "svc", "run": "fetch", "attempt": 1}
    assert log.bind(attempt=2).context["attempt"] == 2
    assert "run" not in log.unbind("run").context


def test_log_context_scope() -> None:
    out = io.StringIO()
    configure_logging("json", "INFO", output=out)
    log = get_logger()

    with log_context(request_id="abc123"):
        log.info("inside")
    log.info("outside")

    inside, outside = (orjson.loads(line) for line in out.getvalue().splitlines())
    assert inside["request_id"] == "abc123"
    assert "request_id" not in outside


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging("xml")


@pytest.mark.parametrize(
    ("fmt", "renderer_type"),
    [("console", ConsoleRenderer), ("json", JsonRenderer), ("none", NoOpRenderer)],
)
def test_configure_from_settings(fmt: str, renderer_type: type) -> None:
    renderer = configure_from_settings(LoggingSettings(format=fmt, level="DEBUG"))
    assert isinstance(renderer, renderer_type)


def test_configure_from_global_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FUTUREKIT_LOG_FORMAT", "none")
    assert isinstance(configure_from_settings(), NoOpRenderer)
