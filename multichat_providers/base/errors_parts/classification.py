"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, and exception type
checks for the ``httpx`` transport and cooperative cancellation.
"""
from __future__ import annotations

from typing import Dict, Optional

import httpx

from ..cancellation_parts.cancelled_error import CancelledError
from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: object) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception-like object.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    401: ErrorCode.AUTH,
    403: ErrorCode.FORBIDDEN,
    429: ErrorCode.RATE_LIMIT,
}


def classify_http_status(status: int) -> ErrorCode:
    """Map a non-2xx HTTP status to an :class:`ErrorCode`.

    401, 403 and 429 have dedicated codes; every other status is a generic
    ``HTTP_ERROR``.
    """
    return _HTTP_STATUS_MAP.get(status, ErrorCode.HTTP_ERROR)


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Cooperative cancellation.
        3. Unparseable request URL (a bad configured base URL).
        4. Timeout exceptions (``httpx`` and builtin).
        5. Other ``httpx`` transport failures.
        6. HTTP status mapping.
        7. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, CancelledError):
        return ErrorCode.CANCELLED
    if isinstance(exc, httpx.InvalidURL):
        return ErrorCode.CONFIGURATION
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.TransportError, ConnectionError)):
        return ErrorCode.TRANSPORT
    status = _extract_status(exc)
    if status is not None and status >= 400:
        return classify_http_status(status)
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "classify_http_status",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
