"""Foundation layer: configuration and error types shared by the runtime."""

from .config import FuturekitSettings, LoggingSettings, RetrySettings, clear_settings_cache, get_settings
from .errors import ErrorCode, FuturekitError, InvalidDelayError, InvalidPolicyError

__all__ = [
    "FuturekitSettings",
    "LoggingSettings",
    "RetrySettings",
    "clear_settings_cache",
    "get_settings",
    "ErrorCode",
    "FuturekitError",
    "InvalidDelayError",
    "InvalidPolicyError",
]
