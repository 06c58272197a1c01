"""Build the HTTP request for one chat call.

Every supported provider accepts the same chat-completions style body; the
differences (auth header, attribution headers, sampling params, chat path)
are driven entirely by the :class:`ProviderDialect`. The builder is pure: it
performs no I/O and never mutates its inputs.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from .constants import JSON_CONTENT_TYPE
from .models_parts.chat_request import ChatRequest, PreparedRequest
from .models_parts.message import Message
from .models_parts.provider_config import ProviderConfig
from .registry import DialectLike, ProviderDialect, resolve_dialect

MessageLike = Union[Message, Mapping[str, Any]]


def _coerce_message(msg: MessageLike) -> Message:
    if isinstance(msg, Message):
        return msg
    return Message(role=msg.get("role", "user"), content=str(msg.get("content") or ""))


def resolve_model(dialect: ProviderDialect, config: Optional[ProviderConfig], model: Optional[str] = None) -> str:
    """Explicit override, then the saved config model, then the dialect default."""
    if model:
        return model
    if config is not None and config.model:
        return config.model
    return dialect.default_model


def build_headers(dialect: ProviderDialect, config: Optional[ProviderConfig]) -> Dict[str, str]:
    headers = {"Content-Type": JSON_CONTENT_TYPE}
    if dialect.requires_auth:
        api_key = config.api_key if config is not None else ""
        headers["Authorization"] = f"Bearer {api_key}"
    headers.update(dialect.extra_headers)
    return headers


def build_request(
    dialect_or_provider: DialectLike,
    config: Optional[ProviderConfig],
    messages: Iterable[MessageLike],
    *,
    model: Optional[str] = None,
    temperature: Optional[float] = DEFAULT_TEMPERATURE,
    max_tokens: Optional[int] = DEFAULT_MAX_TOKENS,
    stream: bool = False,
) -> PreparedRequest:
    """Return the URL, headers and JSON body for a chat call.

    Args:
        dialect_or_provider: Provider id or dialect record.
        config: Per-provider configuration (credential, base URL, model).
        messages: Ordered conversation; only ``role`` and ``content`` are sent.
        model: Explicit model override.
        temperature: Sampling temperature (dropped for dialects that omit it).
        max_tokens: Output cap (dropped for dialects that omit it).
        stream: Ask the provider for a streamed reply.

    Raises:
        UnknownProviderError: only when given an unregistered provider id.
    """
    dialect = resolve_dialect(dialect_or_provider)
    request = ChatRequest(
        messages=[_coerce_message(m) for m in messages],
        model=resolve_model(dialect, config, model),
        temperature=None if dialect.omit_sampling_params else temperature,
        max_tokens=None if dialect.omit_sampling_params else max_tokens,
        stream=stream,
    )
    base_url = dialect.resolve_base_url(config.base_url if config is not None else None)
    return PreparedRequest(
        url=base_url + dialect.chat_path,
        headers=build_headers(dialect, config),
        body=request.to_payload(),
    )


__all__ = ["build_request", "build_headers", "resolve_model"]
