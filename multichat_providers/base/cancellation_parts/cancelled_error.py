"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinguishes caller-initiated cancellation from transport failures so the
    chat service can map it to ``ErrorCode.CANCELLED`` and skip error logging.
    """

__all__ = ["CancelledError"]
