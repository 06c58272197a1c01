"""
Providers Base Package

Provider-agnostic building blocks of the chat core:

- Registry: static dialect records for every supported provider
- Models (DTOs): messages, configs, prepared requests, responses
- Request builder: dialect-driven URL, headers and body
- Streaming: frame decoders and delta extraction
- Errors, cancellation, timeouts, logging and the pooled HTTP client
"""

from .models import (
    AIResponse,
    Attachment,
    AttachmentKind,
    ChatRequest,
    Message,
    PreparedRequest,
    ProviderConfig,
    Role,
    TokenUsage,
)
from .registry import (
    PROVIDERS,
    ExtractionRule,
    Framing,
    ProviderDialect,
    UnknownProviderError,
    get_dialect,
    list_providers,
    resolve_dialect,
)
from .request_builder import build_request
from .streaming import (
    Delta,
    FrameDecoder,
    JsonObjectScanner,
    SSELineDecoder,
    StreamState,
    create_frame_decoder,
    extract_delta,
    extract_full_response,
)
from .errors import ErrorCode, ProviderError, classify_exception, classify_http_status
from .timeouts import TimeoutConfig, get_timeout_config
from .cancellation import CancellationToken, CancelledError

__all__ = [
    # Models
    "AIResponse",
    "Attachment",
    "AttachmentKind",
    "ChatRequest",
    "Message",
    "PreparedRequest",
    "ProviderConfig",
    "Role",
    "TokenUsage",
    # Registry
    "PROVIDERS",
    "ExtractionRule",
    "Framing",
    "ProviderDialect",
    "UnknownProviderError",
    "get_dialect",
    "list_providers",
    "resolve_dialect",
    # Request building & streaming
    "build_request",
    "Delta",
    "FrameDecoder",
    "JsonObjectScanner",
    "SSELineDecoder",
    "StreamState",
    "create_frame_decoder",
    "extract_delta",
    "extract_full_response",
    # Errors, timeouts & cancellation
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "classify_http_status",
    "TimeoutConfig",
    "get_timeout_config",
    "CancellationToken",
    "CancelledError",
]
