"""Timeout configuration for provider HTTP traffic.

All timeout values used by the HTTP client pool and the chat service come
from :func:`get_timeout_config`. Streaming reads are unbounded by default:
a slow model that keeps the connection open is not treated as a failure
unless an explicit stream read timeout is configured.

Environment overrides (optional, positive floats):
    MULTICHAT_TIMEOUT_HTTP_SECONDS
    MULTICHAT_TIMEOUT_STREAM_SECONDS

The configuration is cached per process and refreshed automatically when
the environment overrides change, so tests can adjust them at runtime.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Timeout for non-streaming calls (probe,
            model listing, full-body chat) covering connect, write and read.
        stream_read_timeout_seconds: Per-read timeout while waiting for the
            next body chunk of a streamed response. ``None`` disables it.
    """

    http_timeout_seconds: float = 30.0
    stream_read_timeout_seconds: float | None = None

    def request_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.http_timeout_seconds)

    def stream_timeout(self) -> httpx.Timeout:
        """Connect/write bounded, read bounded only when configured."""
        return httpx.Timeout(self.http_timeout_seconds, read=self.stream_read_timeout_seconds)


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None

_ENV_HTTP = "MULTICHAT_TIMEOUT_HTTP_SECONDS"
_ENV_STREAM = "MULTICHAT_TIMEOUT_STREAM_SECONDS"


def _parse_env_float(name: str, default: float | None) -> float | None:
    """Read ``name`` as a positive float, returning ``default`` otherwise."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
        return val if val > 0 else default
    except ValueError:
        return default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    cur_guard = "/".join([os.getenv(_ENV_HTTP, ""), os.getenv(_ENV_STREAM, "")])
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    http = _parse_env_float(_ENV_HTTP, 30.0)
    stream = _parse_env_float(_ENV_STREAM, None)
    _CACHED = TimeoutConfig(
        http_timeout_seconds=float(http),
        stream_read_timeout_seconds=float(stream) if stream is not None else None,
    )
    _ENV_GUARD = cur_guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
