"""Error types for futurekit.

- ErrorCode: classification of package errors
- FuturekitError: base exception
- InvalidPolicyError / InvalidDelayError: argument and backoff validation failures
"""

from .errors import ErrorCode, FuturekitError, InvalidDelayError, InvalidPolicyError

__all__ = ["ErrorCode", "FuturekitError", "InvalidDelayError", "InvalidPolicyError"]
