"""Settings store protocol consumed by the chat service.

The chat core never owns settings: it reads one :class:`ProviderConfig` per
call and the UI layer writes changes back. Concrete stores live beside this
package (in-memory and JSON file); anything satisfying the protocol can be
injected.

Provider identifiers are normalized to lowercase by implementations.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ...base.models_parts.provider_config import ProviderConfig


@runtime_checkable
class SettingsStore(Protocol):
    """Per-provider configuration and default-provider preference."""

    def get_provider_config(self, provider: str) -> ProviderConfig:
        """Return the saved configuration for ``provider``.

        Implementations return a default (placeholder key, default model)
        configuration for providers that were never saved.
        """
        ...

    def set_provider_config(self, provider: str, **changes: Any) -> ProviderConfig:
        """Apply ``changes`` (``api_key``, ``base_url``, ``model``) and return the result."""
        ...

    def get_default_provider(self) -> str:
        ...

    def set_default_provider(self, provider: str) -> None:
        ...


__all__ = ["SettingsStore"]
