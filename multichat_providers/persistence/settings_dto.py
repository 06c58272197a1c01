"""Pydantic models for the persisted settings document.

The document mirrors what the settings screen edits: one entry per provider
plus the default provider id. Validation happens on load so a hand-edited or
truncated file is caught before any value reaches the chat service.
"""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from ..base.models_parts.provider_config import ProviderConfig
from ..base.registry import PROVIDERS
from ..config import get_provider_config
from ..config.defaults import DEFAULT_PROVIDER
from ..config.env import placeholder_key


class ProviderConfigDTO(BaseModel):
    """Persisted configuration for one provider."""

    api_key: str = ""
    base_url: Optional[str] = None
    model: Optional[str] = None

    def to_config(self, provider: str) -> ProviderConfig:
        return ProviderConfig(provider=provider, api_key=self.api_key, base_url=self.base_url, model=self.model)

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "ProviderConfigDTO":
        return cls(api_key=config.api_key, base_url=config.base_url, model=config.model)


class AppSettingsDTO(BaseModel):
    """Whole settings document.

    Attributes
    ----------
    default_provider:
        Provider preselected by the UI.
    providers:
        Provider id (lowercase) to saved configuration.
    """

    default_provider: str = DEFAULT_PROVIDER
    providers: Dict[str, ProviderConfigDTO] = Field(default_factory=dict)

    @field_validator("default_provider")
    @classmethod
    def _known_default(cls, value: str) -> str:
        name = value.lower().strip()
        return name if name in PROVIDERS else DEFAULT_PROVIDER

    @field_validator("providers")
    @classmethod
    def _normalize_keys(cls, value: Dict[str, ProviderConfigDTO]) -> Dict[str, ProviderConfigDTO]:
        return {k.lower().strip(): v for k, v in value.items()}

    def with_defaults(self) -> "AppSettingsDTO":
        """Return a copy with every registered provider present."""
        providers = dict(self.providers)
        for name in PROVIDERS:
            providers.setdefault(name, default_provider_settings(name))
        return self.model_copy(update={"providers": providers})


def default_provider_settings(provider: str) -> ProviderConfigDTO:
    """Seed entry for ``provider``.

    Hosted providers start with the ``YOUR_<PROVIDER>_API_KEY`` placeholder,
    local servers with no key. Environment variables and the optional config
    file replace the seeded values.
    """
    dialect = PROVIDERS[provider]
    merged = get_provider_config(provider)
    api_key = merged.get("api_key") or (placeholder_key(provider) if dialect.requires_auth else "")
    return ProviderConfigDTO(
        api_key=str(api_key),
        base_url=merged.get("base_url") or dialect.base_url,
        model=merged.get("model") or dialect.default_model,
    )


def default_settings() -> AppSettingsDTO:
    return AppSettingsDTO().with_defaults()


__all__ = [
    "ProviderConfigDTO",
    "AppSettingsDTO",
    "default_provider_settings",
    "default_settings",
]
