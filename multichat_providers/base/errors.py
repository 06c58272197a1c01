"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``multichat_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception, classify_http_status
from .errors_parts.factories import (
    cancelled_error,
    configuration_error,
    decode_error,
    failure_from_exception,
    http_error,
    invalid_url_error,
    timeout_error,
    transport_error,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "classify_http_status",
    "cancelled_error",
    "configuration_error",
    "decode_error",
    "failure_from_exception",
    "http_error",
    "invalid_url_error",
    "timeout_error",
    "transport_error",
]
