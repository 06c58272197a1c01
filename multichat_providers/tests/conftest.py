"""Pytest configuration for the chat core test suite.

Every test runs with provider credentials and config-file variables removed
from the environment so results never depend on the developer's shell.
HTTP traffic goes through ``httpx.MockTransport``; nothing touches the
network.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Dict, Iterator, List

import httpx
import pytest

import multichat_providers.config as config_module
from multichat_providers.base.http import close_all_clients
from multichat_providers.base.logging import get_logger
from multichat_providers.config.env import ENV_ALIASES, ENV_MAP
from multichat_providers.persistence import InMemorySettingsStore
from multichat_providers.service import ChatService

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Strip provider env vars and point the .env loader at nothing."""
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for provider in ("openai", "grok", "openrouter", "qwen", "ollama", "deepseek", "mistral", "together", "lmstudio"):
        names.update({f"{provider.upper()}_MODEL", f"{provider.upper()}_BASE_URL"})
    names.update(
        {
            "PROVIDERS_CONFIG_FILE",
            "PROVIDERS_LOG_LEVEL",
            "MULTICHAT_TIMEOUT_HTTP_SECONDS",
            "MULTICHAT_TIMEOUT_STREAM_SECONDS",
        }
    )
    for name in names:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))
    monkeypatch.setattr(config_module, "_DOTENV_LOADED", False)
    config_module.reset_config_cache()
    yield
    config_module.reset_config_cache()


@pytest.fixture(scope="session", autouse=True)
def close_clients_after_session() -> Iterator[None]:
    yield
    close_all_clients()


class _EventCollector(logging.Handler):
    """Collect JSON event payloads emitted on the shared providers logger."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[Dict] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            return
        if isinstance(payload, dict):
            payload.setdefault("level", record.levelname)
            self.events.append(payload)

    def named(self, event: str) -> List[Dict]:
        return [e for e in self.events if e.get("event") == event]


@pytest.fixture()
def events() -> Iterator[_EventCollector]:
    """Capture structured events (``providers`` logger, all children)."""
    logger = get_logger("providers")
    collector = _EventCollector()
    logger.addHandler(collector)
    try:
        yield collector
    finally:
        logger.removeHandler(collector)


@pytest.fixture()
def mock_client() -> Iterator[Callable[[Handler], httpx.Client]]:
    """Factory for ``httpx.Client`` instances backed by a handler function."""
    clients: List[httpx.Client] = []

    def _make(handler: Handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture()
def make_service(mock_client) -> Callable[..., ChatService]:
    """Build a ``ChatService`` over a mock transport and an in-memory store."""

    def _make(handler: Handler, settings=None) -> ChatService:
        return ChatService(settings or InMemorySettingsStore(), client=mock_client(handler))

    return _make
