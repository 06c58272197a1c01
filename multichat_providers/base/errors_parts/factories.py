"""
Constructors for the user-facing failure categories.

Each helper returns (never raises) a :class:`ProviderError` whose ``message``
is ready to show to an end user. The chat service and the prober raise these
at their boundaries so message wording stays in one place.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..constants import HTTP_ERROR_BODY_LIMIT
from .classification import classify_exception, classify_http_status
from .error_code import ErrorCode
from .provider_error import ProviderError

if TYPE_CHECKING:
    from ..registry import ProviderDialect


_RETRYABLE = (ErrorCode.RATE_LIMIT, ErrorCode.TRANSPORT, ErrorCode.TIMEOUT)


def _truncate(text: str, limit: int = HTTP_ERROR_BODY_LIMIT) -> str:
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def configuration_error(dialect: "ProviderDialect", model: Optional[str] = None) -> ProviderError:
    """Missing or placeholder credential detected before any network call."""
    return ProviderError(
        code=ErrorCode.CONFIGURATION,
        message=f"API key required for {dialect.display_name}. Please enter your API key.",
        provider=dialect.name,
        model=model,
    )


def invalid_url_error(
    dialect: "ProviderDialect",
    base_url: str,
    exc: BaseException,
    model: Optional[str] = None,
) -> ProviderError:
    """The configured base URL cannot be parsed into a request URL."""
    return ProviderError(
        code=ErrorCode.CONFIGURATION,
        message=f"Invalid base URL for {dialect.display_name}: {base_url}",
        provider=dialect.name,
        model=model,
        raw=exc,
    )


def transport_error(
    dialect: "ProviderDialect",
    base_url: str,
    exc: BaseException,
    model: Optional[str] = None,
) -> ProviderError:
    """Connection refused, DNS failure or a dropped connection.

    Local dialects get a hint that the daemon may not be running; hosted
    dialects keep the transport detail.
    """
    if dialect.local:
        message = f"Cannot reach {dialect.display_name} at {base_url}. Is the local server running?"
    else:
        message = f"Network error while contacting {dialect.display_name}: {exc}"
    return ProviderError(
        code=ErrorCode.TRANSPORT,
        message=message,
        provider=dialect.name,
        model=model,
        retryable=True,
        raw=exc,
    )


def timeout_error(dialect: "ProviderDialect", exc: BaseException, model: Optional[str] = None) -> ProviderError:
    return ProviderError(
        code=ErrorCode.TIMEOUT,
        message=f"{dialect.display_name} did not respond in time",
        provider=dialect.name,
        model=model,
        retryable=True,
        raw=exc,
    )


def http_error(
    dialect: "ProviderDialect",
    status: int,
    body: str,
    model: Optional[str] = None,
) -> ProviderError:
    """Non-2xx response, sub-classified by status code."""
    code = classify_http_status(status)
    name = dialect.display_name
    if code is ErrorCode.AUTH:
        message = f"Invalid API key for {name} (HTTP {status})"
    elif code is ErrorCode.FORBIDDEN:
        message = f"Access forbidden for {name} (HTTP {status})"
    elif code is ErrorCode.RATE_LIMIT:
        message = f"Rate limited by {name} (HTTP {status})"
    else:
        message = f"{name} API error ({status}): {_truncate(body)}"
    return ProviderError(
        code=code,
        message=message,
        provider=dialect.name,
        model=model,
        status_code=status,
        retryable=code in _RETRYABLE,
    )


def cancelled_error(
    dialect: "ProviderDialect",
    exc: Optional[BaseException] = None,
    model: Optional[str] = None,
) -> ProviderError:
    return ProviderError(
        code=ErrorCode.CANCELLED,
        message="Request cancelled",
        provider=dialect.name,
        model=model,
        raw=exc,
    )


def decode_error(dialect: "ProviderDialect", exc: BaseException, model: Optional[str] = None) -> ProviderError:
    """A complete (non-streamed) response body that is not valid JSON."""
    return ProviderError(
        code=ErrorCode.DECODE,
        message=f"{dialect.display_name} returned an unreadable response",
        provider=dialect.name,
        model=model,
        raw=exc,
    )


def failure_from_exception(
    dialect: "ProviderDialect",
    base_url: str,
    exc: BaseException,
    model: Optional[str] = None,
) -> ProviderError:
    """Wrap a raw transport-layer exception in the matching category."""
    code = classify_exception(exc)
    if code is ErrorCode.CANCELLED:
        return cancelled_error(dialect, exc, model)
    if code is ErrorCode.CONFIGURATION:
        return invalid_url_error(dialect, base_url, exc, model)
    if code is ErrorCode.TIMEOUT:
        return timeout_error(dialect, exc, model)
    return transport_error(dialect, base_url, exc, model)


__all__ = [
    "configuration_error",
    "invalid_url_error",
    "transport_error",
    "timeout_error",
    "http_error",
    "cancelled_error",
    "decode_error",
    "failure_from_exception",
]
