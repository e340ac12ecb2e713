"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from futurekit.foundation.config import FuturekitSettings, LoggingSettings, RetrySettings, get_settings
from futurekit.runtime.retry import LinearBackoff, RetryPolicy


def test_defaults() -> None:
    settings = FuturekitSettings()
    assert settings.retry.max_attempts == 3
    assert settings.retry.strategy == "exponential"
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert not settings.is_production


def test_retry_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FUTUREKIT_RETRY_MAX_ATTEMPTS", "7")
    monkeypatch.setenv("FUTUREKIT_RETRY_STRATEGY", "linear")
    monkeypatch.setenv("FUTUREKIT_RETRY_BASE_DELAY", "0.25")

    settings = get_settings()
    assert settings.retry.max_attempts == 7
    assert settings.retry.strategy == "linear"
    assert settings.retry.base_delay == 0.25


def test_logging_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FUTUREKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("FUTUREKIT_LOG_FORMAT", "json")

    settings = get_settings()
    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"


def test_environment_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FUTUREKIT_ENVIRONMENT", "Production")
    assert get_settings().is_production


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


@pytest.mark.parametrize("kwargs", [{"max_attempts": 0}, {"max_attempts": 101}, {"base_delay": 0}])
def test_retry_settings_bounds(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        RetrySettings(**kwargs)


def test_base_delay_cannot_exceed_max_delay() -> None:
    with pytest.raises(ValidationError):
        RetrySettings(base_delay=5.0, max_delay=1.0)


def test_unknown_log_format_rejected() -> None:
    with pytest.raises(ValidationError):
        LoggingSettings(format="xml")  # type: ignore[arg-type]


def test_policy_from_global_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FUTUREKIT_RETRY_MAX_ATTEMPTS", "4")
    monkeypatch.setenv("FUTUREKIT_RETRY_STRATEGY", "linear")
    monkeypatch.setenv("FUTUREKIT_RETRY_BASE_DELAY", "0.5")
    monkeypatch.setenv("FUTUREKIT_RETRY_MULTIPLIER", "0.5")

    policy = RetryPolicy.from_settings()
    assert policy.max_attempts == 4
    assert policy.backoff == LinearBackoff(base=0.5, increment=0.5, max_delay=30.0)
