"""multichat_providers.config.env
==============================

Environment variable mapping and credential helpers.

Purpose
-------
- Single source of truth for provider id → API key environment variable.
- Placeholder detection shared by the configuration layer, the settings
  stores and the chat service's pre-flight credential check.

Failure Modes
-------------
Helpers return ``None``/``False`` for unknown providers or unset variables and
never raise; callers decide how to proceed.
"""

from __future__ import annotations

import os
import re
from typing import Dict, Iterable, Optional, Tuple

# Canonical provider → env var mapping (local servers need no key)
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "grok": "XAI_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
    "qwen": "DASHSCOPE_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "mistral": "MISTRAL_API_KEY",
    "together": "TOGETHER_API_KEY",
}

# Provider → ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "grok": ("XAI_API_KEY", "GROK_API_KEY"),
    "qwen": ("DASHSCOPE_API_KEY", "QWEN_API_KEY"),
}

# Seeded settings ship keys like ``YOUR_OPENAI_API_KEY``.
_SEEDED_KEY = re.compile(r"^your_[a-z0-9_]*_?api_key$")


def placeholder_key(provider: str) -> str:
    """Return the placeholder credential seeded for ``provider``."""
    return f"YOUR_{provider.upper()}_API_KEY"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder/test credential.

    Heuristics (case-insensitive): seeded ``YOUR_<PROVIDER>_API_KEY`` values,
    or values containing 'placeholder', 'changeme', 'example', or starting
    with 'test_'.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        bool(_SEEDED_KEY.match(v))
        or "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def is_key_configured(val: Optional[str]) -> bool:
    """True when ``val`` is a non-empty, non-placeholder credential."""
    return bool(val and val.strip()) and not is_placeholder(val)


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical environment variable name for a provider."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable environment variable names, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty candidate, or
        ``(None, None)`` when nothing is set.
    """
    for name in get_env_var_candidates(provider):
        if val := os.environ.get(name):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "placeholder_key",
    "is_placeholder",
    "is_key_configured",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
