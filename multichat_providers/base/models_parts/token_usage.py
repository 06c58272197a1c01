"""
Token usage reported by OpenAI-compatible providers.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


@dataclass(frozen=True)
class TokenUsage:
    """Prompt, completion and total token counts for one call."""

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["TokenUsage"]:
        """Parse a vendor ``usage`` object; ``None`` for anything else.

        A missing total is derived from prompt + completion.
        """
        if not isinstance(payload, dict):
            return None
        prompt = _as_int(payload.get("prompt_tokens"))
        completion = _as_int(payload.get("completion_tokens"))
        total = _as_int(payload.get("total_tokens"))
        if prompt is None and completion is None and total is None:
            return None
        if total is None and prompt is not None and completion is not None:
            total = prompt + completion
        return cls(prompt_tokens=prompt, completion_tokens=completion, total_tokens=total)

    def to_dict(self) -> Dict[str, Optional[int]]:
        return asdict(self)


__all__ = ["TokenUsage"]
