"""Shared HTTP client pool for providers.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so chat calls, probes and model listings share connections.
    Timeouts derive exclusively from :func:`get_timeout_config`.

Timeout strategy:
    - The client default is the non-streaming request timeout. Streaming
      calls pass ``TimeoutConfig.stream_timeout()`` per request so reads
      stay unbounded unless configured otherwise.

Lifecycle & cleanup:
    - Clients are cached by ``purpose`` ("chat", "probe" ...). They carry no
      base URL because one client serves every provider.
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      also call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[str, httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(purpose: str = "default") -> httpx.Client:
    """Return a pooled ``httpx.Client`` for ``purpose``.

    The first request for a purpose creates a client configured with the
    request timeout from :func:`get_timeout_config`; later calls reuse it.
    Safe for concurrent use.
    """
    client = _CLIENTS.get(purpose)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(purpose)
        if client is not None and not client.is_closed:
            return client
        cfg = get_timeout_config()
        client = httpx.Client(timeout=cfg.request_timeout())
        _CLIENTS[purpose] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            # Pool teardown failures at shutdown are not actionable.
            with contextlib.suppress(Exception):
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
