"""
Attachment DTO carried on chat messages.

Conversion of files into attachments happens outside this package; the core
only carries them alongside the message that owns them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal
from uuid import uuid4


AttachmentKind = Literal["text", "image", "pdf", "json"]


@dataclass(frozen=True)
class Attachment:
    """A file attached to a single message.

    Attributes:
        name: Original file name.
        kind: Coarse content category (``text``, ``image``, ``pdf``, ``json``).
        content: Text content, or base64 for binary kinds.
        mime_type: MIME type reported for the file.
        size: Size in bytes of the original file.
        id: Unique identifier (generated when omitted).
    """

    name: str
    kind: AttachmentKind
    content: str
    mime_type: str
    size: int
    id: str = field(default_factory=lambda: uuid4().hex)


__all__ = ["Attachment", "AttachmentKind"]
