"""
Provider-agnostic domain models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``multichat_providers.base.models_parts``.
"""

from .models_parts.attachment import Attachment, AttachmentKind
from .models_parts.message import Message, Role
from .models_parts.provider_config import ProviderConfig
from .models_parts.chat_request import ChatRequest, PreparedRequest
from .models_parts.token_usage import TokenUsage
from .models_parts.ai_response import AIResponse

__all__ = [
    "Attachment",
    "AttachmentKind",
    "Message",
    "Role",
    "ProviderConfig",
    "ChatRequest",
    "PreparedRequest",
    "TokenUsage",
    "AIResponse",
]
