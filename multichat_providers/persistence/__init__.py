"""Settings persistence: protocol, pydantic document and concrete stores."""

from .interfaces import SettingsStore
from .settings_dto import AppSettingsDTO, ProviderConfigDTO, default_provider_settings, default_settings
from .memory_store import InMemorySettingsStore
from .json_store import JsonFileSettingsStore

__all__ = [
    "SettingsStore",
    "AppSettingsDTO",
    "ProviderConfigDTO",
    "default_provider_settings",
    "default_settings",
    "InMemorySettingsStore",
    "JsonFileSettingsStore",
]
