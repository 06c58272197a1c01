"""Static table of supported provider dialects.

The table is built once at import and never mutated. Lookup helpers accept a
provider id (case-insensitive) or an existing :class:`ProviderDialect` so call
sites can pass whichever they hold.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

from ...config.defaults import (
    APP_REFERER,
    APP_TITLE,
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
from .dialect import ExtractionRule, Framing, ProviderDialect


class UnknownProviderError(KeyError):
    """Raised when a provider id is not present in the registry."""

    def __str__(self) -> str:
        return f"Unknown provider '{self.args[0] if self.args else ''}'"


_DIALECTS: Tuple[ProviderDialect, ...] = (
    ProviderDialect(
        name="openai",
        display_name="OpenAI",
        base_url=OPENAI_DEFAULT_BASE_URL,
        default_model=OPENAI_DEFAULT_MODEL,
    ),
    ProviderDialect(
        name="grok",
        display_name="Grok (xAI)",
        base_url=GROK_DEFAULT_BASE_URL,
        default_model=GROK_DEFAULT_MODEL,
    ),
    ProviderDialect(
        name="openrouter",
        display_name="OpenRouter",
        base_url=OPENROUTER_DEFAULT_BASE_URL,
        default_model=OPENROUTER_DEFAULT_MODEL,
        extra_headers=MappingProxyType({"HTTP-Referer": APP_REFERER, "X-Title": APP_TITLE}),
    ),
    ProviderDialect(
        name="qwen",
        display_name="Qwen (Alibaba)",
        base_url=QWEN_DEFAULT_BASE_URL,
        default_model=QWEN_DEFAULT_MODEL,
    ),
    ProviderDialect(
        name="ollama",
        display_name="Ollama (Local)",
        base_url=OLLAMA_DEFAULT_HOST,
        default_model=OLLAMA_DEFAULT_MODEL,
        chat_path="/api/chat",
        requires_auth=False,
        local=True,
        framing=Framing.CONCATENATED_JSON,
        extraction=ExtractionRule.LOCAL_MESSAGE,
        omit_sampling_params=True,
        probe_path="/api/tags",
        models_path="/api/tags",
    ),
    ProviderDialect(
        name="deepseek",
        display_name="DeepSeek",
        base_url=DEEPSEEK_DEFAULT_BASE_URL,
        default_model=DEEPSEEK_DEFAULT_MODEL,
    ),
    ProviderDialect(
        name="mistral",
        display_name="Mistral AI",
        base_url=MISTRAL_DEFAULT_BASE_URL,
        default_model=MISTRAL_DEFAULT_MODEL,
    ),
    ProviderDialect(
        name="together",
        display_name="Together AI",
        base_url=TOGETHER_DEFAULT_BASE_URL,
        default_model=TOGETHER_DEFAULT_MODEL,
    ),
    # LM Studio serves the OpenAI-compatible API: SSE framing, choices deltas.
    ProviderDialect(
        name="lmstudio",
        display_name="LM Studio",
        base_url=LMSTUDIO_DEFAULT_BASE_URL,
        default_model=LMSTUDIO_DEFAULT_MODEL,
        requires_auth=False,
        local=True,
    ),
)

PROVIDERS: Mapping[str, ProviderDialect] = MappingProxyType({d.name: d for d in _DIALECTS})

DialectLike = Union[str, ProviderDialect]


def get_dialect(provider: str) -> ProviderDialect:
    """Return the dialect registered under ``provider``.

    Raises:
        UnknownProviderError: if the id is not registered.
    """
    name = (provider or "").lower().strip()
    try:
        return PROVIDERS[name]
    except KeyError:
        raise UnknownProviderError(provider) from None


def resolve_dialect(provider: DialectLike) -> ProviderDialect:
    """Accept a provider id or a dialect and return the dialect."""
    if isinstance(provider, ProviderDialect):
        return provider
    return get_dialect(provider)


def list_providers() -> Tuple[str, ...]:
    """Provider ids in registry order."""
    return tuple(PROVIDERS.keys())


def display_names() -> Dict[str, str]:
    return {name: d.display_name for name, d in PROVIDERS.items()}


__all__ = [
    "PROVIDERS",
    "DialectLike",
    "UnknownProviderError",
    "get_dialect",
    "resolve_dialect",
    "list_providers",
    "display_names",
]
