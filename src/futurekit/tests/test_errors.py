"""Tests for the package error hierarchy."""

from __future__ import annotations

from futurekit.foundation.errors import ErrorCode, FuturekitError, InvalidDelayError, InvalidPolicyError


def test_codes() -> None:
    assert InvalidPolicyError("x").code is ErrorCode.INVALID_POLICY
    assert InvalidDelayError("x", attempt=1, value=-1).code is ErrorCode.INVALID_DELAY
    assert FuturekitError("x").code is ErrorCode.UNKNOWN
    assert FuturekitError("x", code=ErrorCode.INVALID_DELAY).code is ErrorCode.INVALID_DELAY


def test_hierarchy() -> None:
    for exc in (InvalidPolicyError("x"), InvalidDelayError("x", attempt=2, value=None)):
        assert isinstance(exc, FuturekitError)
        assert isinstance(exc, ValueError)


def test_message_and_repr() -> None:
    exc = InvalidDelayError("negative delay", attempt=3, value=-0.5)
    assert str(exc) == "negative delay"
    assert (exc.attempt, exc.value) == (3, -0.5)
    assert repr(exc) == "InvalidDelayError('negative delay', code=INVALID_DELAY)"
