"""
Final result of one chat call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .token_usage import TokenUsage


@dataclass(frozen=True)
class AIResponse:
    """Completed assistant reply.

    Attributes:
        content: Full reply text (the concatenation of every streamed delta).
        provider: Provider id that produced the reply.
        model: Last model name reported by the provider, or the requested one.
        usage: Token usage when the provider reported it.
    """

    content: str
    provider: str
    model: str
    usage: Optional[TokenUsage] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "provider": self.provider,
            "model": self.model,
            "usage": self.usage.to_dict() if self.usage else None,
        }


__all__ = ["AIResponse"]
