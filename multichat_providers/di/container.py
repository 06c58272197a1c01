"""Minimal dependency injection container for the chat core.

Goals:
- Centralize construction of the settings store, HTTP client, prober and
  chat service.
- Let tests and embedders swap any piece (e.g. an ``httpx.MockTransport``
  client or a file-backed store) without touching call sites.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..base.http import get_httpx_client
from ..base.timeouts import TimeoutConfig, get_timeout_config
from ..persistence import InMemorySettingsStore, JsonFileSettingsStore, SettingsStore
from ..service import ChatService, ConnectionProber


class ProvidersContainer:
    """Lazily builds and caches the shared services.

    Args:
        settings: Settings store to use; when omitted a JSON store is built if
            ``settings_path`` is given, otherwise an in-memory store.
        client: ``httpx.Client`` shared by chat and probe calls; defaults to
            the pooled client.
        timeouts: Timeout values; defaults to the environment-derived config.
        settings_path: Location of the JSON settings file.
    """

    def __init__(
        self,
        *,
        settings: Optional[SettingsStore] = None,
        client: Optional[httpx.Client] = None,
        timeouts: Optional[TimeoutConfig] = None,
        settings_path: Optional[str] = None,
    ) -> None:
        self._settings = settings
        self._client = client
        self._timeouts = timeouts
        self._settings_path = settings_path
        self._singletons: Dict[str, Any] = {}

    def timeouts(self) -> TimeoutConfig:
        if self._timeouts is None:
            self._timeouts = get_timeout_config()
        return self._timeouts

    def http_client(self) -> httpx.Client:
        if self._client is None:
            self._client = get_httpx_client("chat")
        return self._client

    def settings(self) -> SettingsStore:
        if self._settings is None:
            if self._settings_path:
                self._settings = JsonFileSettingsStore(self._settings_path)
            else:
                self._settings = InMemorySettingsStore()
        return self._settings

    def prober(self) -> ConnectionProber:
        if "prober" not in self._singletons:
            self._singletons["prober"] = ConnectionProber(self.http_client(), timeouts=self.timeouts())
        return self._singletons["prober"]

    def chat_service(self) -> ChatService:
        if "chat_service" not in self._singletons:
            self._singletons["chat_service"] = ChatService(
                self.settings(),
                client=self.http_client(),
                prober=self.prober(),
                timeouts=self.timeouts(),
            )
        return self._singletons["chat_service"]

    def clear(self) -> None:
        """Drop cached services (the store and client are kept)."""
        self._singletons.clear()


def build_container(**kwargs: Any) -> ProvidersContainer:
    """Construct a :class:`ProvidersContainer`; see its arguments."""
    return ProvidersContainer(**kwargs)


__all__ = ["ProvidersContainer", "build_container"]
