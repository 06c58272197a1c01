"""
Transient chat request and its prepared HTTP form.

`ChatRequest` is built fresh for every call and never persisted.
`PreparedRequest` is what the request builder hands to the transport.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .message import Message


@dataclass
class ChatRequest:
    """Provider-agnostic generation request.

    Attributes:
        messages: Ordered conversation.
        model: Resolved model id.
        temperature: Sampling temperature; ``None`` omits the field.
        max_tokens: Output token cap; ``None`` omits the field.
        stream: Whether the provider should stream the reply.
    """

    messages: List[Message]
    model: str
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    stream: bool = False

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body shared by every supported dialect."""
        body: Dict[str, Any] = {
            "messages": [m.to_wire() for m in self.messages],
            "model": self.model,
        }
        if self.temperature is not None:
            body["temperature"] = float(self.temperature)
        if self.max_tokens is not None:
            body["max_tokens"] = int(self.max_tokens)
        body["stream"] = self.stream
        return body


@dataclass
class PreparedRequest:
    """Fully resolved POST for one provider call."""

    url: str
    headers: Dict[str, str]
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def model(self) -> str:
        return self.body.get("model", "")


__all__ = ["ChatRequest", "PreparedRequest"]
