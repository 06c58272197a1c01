"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the chat service, the prober and
the classification helpers. Values are lowercase snake_case and are
considered a stable public contract for logging and callers.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    AUTH = "auth"
    FORBIDDEN = "forbidden"
    RATE_LIMIT = "rate_limit"
    HTTP_ERROR = "http_error"
    CANCELLED = "cancelled"
    DECODE = "decode"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
