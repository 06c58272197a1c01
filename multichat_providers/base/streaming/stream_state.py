"""Per-call accumulator for a streamed chat reply."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..models_parts.token_usage import TokenUsage
from .delta_extractor import Delta
from .frame_decoder import FrameDecoder


@dataclass
class StreamState:
    """Decoder plus accumulated text for one in-flight call.

    Never shared between calls; discarded on cancellation or failure.
    """

    decoder: FrameDecoder
    model_name: str
    parts: List[str] = field(default_factory=list)
    usage: Optional[TokenUsage] = None

    def apply(self, delta: Delta) -> str:
        """Fold ``delta`` in and return the new text fragment ("" if none)."""
        if delta.model_name:
            self.model_name = delta.model_name
        if delta.usage is not None:
            self.usage = delta.usage
        if delta.text:
            self.parts.append(delta.text)
        return delta.text

    @property
    def emitted(self) -> int:
        return len(self.parts)

    @property
    def content(self) -> str:
        return "".join(self.parts)


__all__ = ["StreamState"]
