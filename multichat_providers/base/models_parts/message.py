"""
Message DTO used across the chat service.

Defines the frozen `Message` dataclass and the `Role` literal. A conversation
is an ordered sequence of messages that is only ever appended to during one
exchange, so messages themselves never change once created.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Literal, Tuple
from uuid import uuid4

from .attachment import Attachment


Role = Literal["system", "user", "assistant"]


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Message:
    """A chat message.

    Attributes:
        role: Author role (``"system"``, ``"user"`` or ``"assistant"``).
        content: Plain text content.
        id: Unique identifier (generated when omitted).
        timestamp: Creation time in epoch milliseconds.
        attachments: Files owned by this message.
    """

    role: Role
    content: str
    id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: int = field(default_factory=_now_ms)
    attachments: Tuple[Attachment, ...] = ()

    def to_wire(self) -> dict:
        """Return the ``{role, content}`` pair sent to providers."""
        return {"role": self.role, "content": self.content}


__all__ = ["Message", "Role"]
