"""
Per-provider user configuration.

One `ProviderConfig` exists per provider id, owned by the settings store. The
chat service and the prober only read it.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ProviderConfig:
    """Credential and endpoint overrides for one provider.

    Attributes:
        provider: Provider id (e.g. ``"openrouter"``).
        api_key: Bearer credential; empty for local servers.
        base_url: Optional endpoint override (local servers on a custom port).
        model: Saved model preference used when a call gives none.
    """

    provider: str
    api_key: str = ""
    base_url: Optional[str] = None
    model: Optional[str] = None

    def with_changes(self, **changes: Any) -> "ProviderConfig":
        """Return a copy with ``changes`` applied (``None`` values ignored)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider": self.provider,
            "api_key": self.api_key,
            "base_url": self.base_url,
            "model": self.model,
        }


__all__ = ["ProviderConfig"]
