"""In-memory settings store.

Seeded with the defaults on construction; nothing survives the process.
Used by tests and by callers that manage persistence themselves.
"""
from __future__ import annotations

import threading
from typing import Any, Optional

from ..base.models_parts.provider_config import ProviderConfig
from ..base.registry import get_dialect
from .settings_dto import AppSettingsDTO, ProviderConfigDTO, default_settings

_WRITABLE_FIELDS = ("api_key", "base_url", "model")


class InMemorySettingsStore:
    """Thread-safe dict-backed implementation of ``SettingsStore``."""

    def __init__(self, settings: Optional[AppSettingsDTO] = None) -> None:
        self._settings = (settings or default_settings()).with_defaults()
        self._lock = threading.Lock()

    @property
    def settings(self) -> AppSettingsDTO:
        with self._lock:
            return self._settings.model_copy(deep=True)

    def get_provider_config(self, provider: str) -> ProviderConfig:
        name = get_dialect(provider).name
        with self._lock:
            return self._settings.providers[name].to_config(name)

    def set_provider_config(self, provider: str, **changes: Any) -> ProviderConfig:
        name = get_dialect(provider).name
        unknown = set(changes) - set(_WRITABLE_FIELDS)
        if unknown:
            raise TypeError(f"unsupported provider config fields: {sorted(unknown)}")
        with self._lock:
            current = self._settings.providers[name].to_config(name)
            updated = current.with_changes(**changes)
            self._settings.providers[name] = ProviderConfigDTO.from_config(updated)
            self._changed()
        return updated

    def get_default_provider(self) -> str:
        with self._lock:
            return self._settings.default_provider

    def set_default_provider(self, provider: str) -> None:
        name = get_dialect(provider).name
        with self._lock:
            self._settings.default_provider = name
            self._changed()

    def _changed(self) -> None:
        """Hook called under the lock after every mutation."""


__all__ = ["InMemorySettingsStore"]
