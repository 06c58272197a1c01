"""Pull incremental text out of decoded provider events.

Two response shapes are supported, selected by the dialect's extraction
rule:

* ``CHAT_DELTA``: ``{"choices": [{"delta": {"content": "..."}}], "model": ...}``
* ``LOCAL_MESSAGE``: ``{"message": {"content": "..."}, "model": ...}`` or the
  generate-style ``{"response": "..."}``

Extraction never raises: unexpected shapes yield an empty delta.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..models_parts.token_usage import TokenUsage
from ..registry import DialectLike, ExtractionRule, resolve_dialect


@dataclass(frozen=True)
class Delta:
    """Text and metadata carried by one decoded event."""

    text: str = ""
    model_name: Optional[str] = None
    usage: Optional[TokenUsage] = None


_EMPTY = Delta()


def _first_choice(obj: dict) -> dict:
    choices = obj.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        return choices[0]
    return {}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _local_text(obj: dict) -> str:
    message = obj.get("message")
    if isinstance(message, dict):
        content = _text(message.get("content"))
        if content:
            return content
    return _text(obj.get("response"))


def _chat_text(obj: dict, key: str) -> str:
    part = _first_choice(obj).get(key)
    if isinstance(part, dict):
        return _text(part.get("content"))
    return ""


def _model_name(obj: dict) -> Optional[str]:
    model = obj.get("model")
    return model if isinstance(model, str) and model else None


def extract_delta(obj: Any, dialect_or_provider: DialectLike) -> Delta:
    """Return the incremental text, model name and usage carried by ``obj``."""
    if not isinstance(obj, dict):
        return _EMPTY
    dialect = resolve_dialect(dialect_or_provider)
    if dialect.extraction is ExtractionRule.LOCAL_MESSAGE:
        text = _local_text(obj)
    else:
        text = _chat_text(obj, "delta")
    return Delta(text=text, model_name=_model_name(obj), usage=TokenUsage.from_payload(obj.get("usage")))


def extract_full_response(obj: Any, dialect_or_provider: DialectLike) -> Delta:
    """Non-streamed counterpart of :func:`extract_delta`."""
    if not isinstance(obj, dict):
        return _EMPTY
    dialect = resolve_dialect(dialect_or_provider)
    if dialect.extraction is ExtractionRule.LOCAL_MESSAGE:
        text = _local_text(obj)
    else:
        text = _chat_text(obj, "message")
    return Delta(text=text, model_name=_model_name(obj), usage=TokenUsage.from_payload(obj.get("usage")))


__all__ = ["Delta", "extract_delta", "extract_full_response"]
