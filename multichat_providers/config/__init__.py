"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (models, base URLs).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by PROVIDERS_CONFIG_FILE
    3. Environment variables (e.g. OPENAI_MODEL, OPENROUTER_API_KEY)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_provider_config(provider)``.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_BASE_URL, plus the API key names listed in
``config.env.ENV_MAP`` (e.g. OPENAI_API_KEY, XAI_API_KEY for grok).

External Config File (Optional)
-------------------------------
If PROVIDERS_CONFIG_FILE is set to a path, JSON is tried first, then YAML::

    openrouter:
      model: openai/gpt-4o-mini
      api_key: sk-or-...
    ollama:
      base_url: http://gpu-box:11434

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* load_provider_config(provider: str, overrides: dict | None = None) -> ProviderConfig
* get_model(provider: str) -> str | None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..base.models_parts.provider_config import ProviderConfig
from .env import is_placeholder, resolve_provider_key
from .defaults import (
    DEEPSEEK_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_MODEL,
    GROK_DEFAULT_BASE_URL,
    GROK_DEFAULT_MODEL,
    LMSTUDIO_DEFAULT_BASE_URL,
    LMSTUDIO_DEFAULT_MODEL,
    MISTRAL_DEFAULT_BASE_URL,
    MISTRAL_DEFAULT_MODEL,
    OLLAMA_DEFAULT_HOST,
    OLLAMA_DEFAULT_MODEL,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MODEL,
    OPENROUTER_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_MODEL,
    QWEN_DEFAULT_BASE_URL,
    QWEN_DEFAULT_MODEL,
    TOGETHER_DEFAULT_BASE_URL,
    TOGETHER_DEFAULT_MODEL,
)


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL, "base_url": OPENAI_DEFAULT_BASE_URL},
    "grok": {"model": GROK_DEFAULT_MODEL, "base_url": GROK_DEFAULT_BASE_URL},
    "openrouter": {"model": OPENROUTER_DEFAULT_MODEL, "base_url": OPENROUTER_DEFAULT_BASE_URL},
    "qwen": {"model": QWEN_DEFAULT_MODEL, "base_url": QWEN_DEFAULT_BASE_URL},
    "ollama": {"model": OLLAMA_DEFAULT_MODEL, "base_url": OLLAMA_DEFAULT_HOST},
    "deepseek": {"model": DEEPSEEK_DEFAULT_MODEL, "base_url": DEEPSEEK_DEFAULT_BASE_URL},
    "mistral": {"model": MISTRAL_DEFAULT_MODEL, "base_url": MISTRAL_DEFAULT_BASE_URL},
    "together": {"model": TOGETHER_DEFAULT_MODEL, "base_url": TOGETHER_DEFAULT_BASE_URL},
    "lmstudio": {"model": LMSTUDIO_DEFAULT_MODEL, "base_url": LMSTUDIO_DEFAULT_BASE_URL},
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Existing
    environment variables win unless they hold a placeholder value.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def reset_config_cache() -> None:
    """Forget the cached external config file (tests and reload hooks)."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None:
            out[field] = val
    key, _ = resolve_provider_key(provider)
    if key:
        out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def load_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> ProviderConfig:
    """Return the merged configuration as a :class:`ProviderConfig`."""
    cfg = get_provider_config(provider, overrides)
    return ProviderConfig(
        provider=(provider or "").lower().strip(),
        api_key=str(cfg.get("api_key") or ""),
        base_url=cfg.get("base_url"),
        model=cfg.get("model"),
    )


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "load_provider_config",
    "reset_config_cache",
    "get_model",
    "DEFAULTS",
]
