"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable cancellation constructs via the canonical
``multichat_providers.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` signals cancellation to an in-flight chat call. The
  chat service polls it between chunks and registers a callback that closes
  the live HTTP response so a blocked read is aborted.
- ``CancelledError`` is raised by operations that observe a cancellation request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
