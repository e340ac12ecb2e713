"""Exception hierarchy for futurekit.

Operation failures are never wrapped: the scheduler re-raises whatever the
supplier raised. The types here only describe misuse of the package itself
(bad policies, unusable backoff delays).
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable classification for package errors."""
    INVALID_POLICY = "INVALID_POLICY"
    INVALID_DELAY = "INVALID_DELAY"
    UNKNOWN = "UNKNOWN"


class FuturekitError(Exception):
    """Base class for errors raised by futurekit itself."""

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code.value})"


class InvalidPolicyError(FuturekitError, ValueError):
    """Retry policy rejected before any attempt was made."""

    code = ErrorCode.INVALID_POLICY


class InvalidDelayError(FuturekitError, ValueError):
    """Backoff function produced a delay that cannot be slept on.

    Carries the attempt index whose backoff produced the value.
    """

    code = ErrorCode.INVALID_DELAY

    def __init__(self, message: str, *, attempt: int, value: object) -> None:
        super().__init__(message)
        self.attempt = attempt
        self.value = value
