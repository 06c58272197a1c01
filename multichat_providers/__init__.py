"""multichat_providers package

Streaming response normalization core for a multi-provider LLM chat client.

Public API (re-exported):
    - Version: ``__version__``
    - Services: :class:`ChatService`, :class:`ConnectionProber`
    - Composition: :func:`build_container`
    - Models: :class:`Message`, :class:`ProviderConfig`, :class:`AIResponse`
    - Errors: :class:`ProviderError`, :class:`ErrorCode`
    - Cancellation: :class:`CancellationToken`

Typical use::

    from multichat_providers import Message, build_container

    service = build_container().chat_service()
    reply = service.chat(
        "ollama", None, [Message(role="user", content="hi")],
        stream=True, on_chunk=print,
    )
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import ErrorCode, ProviderError
from .base.models import AIResponse, Attachment, Message, ProviderConfig, TokenUsage
from .base.registry import PROVIDERS, ProviderDialect, UnknownProviderError, get_dialect, list_providers
from .base.request_builder import build_request
from .di import ProvidersContainer, build_container
from .persistence import InMemorySettingsStore, JsonFileSettingsStore, SettingsStore
from .service import ChatService, ConnectionProber

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AIResponse",
    "Attachment",
    "CancellationToken",
    "CancelledError",
    "ChatService",
    "ConnectionProber",
    "ErrorCode",
    "InMemorySettingsStore",
    "JsonFileSettingsStore",
    "Message",
    "PROVIDERS",
    "ProviderConfig",
    "ProviderDialect",
    "ProviderError",
    "ProvidersContainer",
    "SettingsStore",
    "TokenUsage",
    "UnknownProviderError",
    "build_container",
    "build_request",
    "get_dialect",
    "list_providers",
]
