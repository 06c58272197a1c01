"""Provider dialect record.

A dialect captures everything that differs between supported chat APIs:
endpoint and paths, auth policy, wire framing of streamed replies and the
rule used to pull text out of a decoded event. Dialects are immutable and
shared by every call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class Framing(str, Enum):
    """How a streamed response body is split into JSON events."""

    SSE = "sse"
    CONCATENATED_JSON = "concatenated_json"


class ExtractionRule(str, Enum):
    """Where incremental text lives in a decoded event."""

    CHAT_DELTA = "chat_delta"  # choices[0].delta.content
    LOCAL_MESSAGE = "local_message"  # message.content or response


@dataclass(frozen=True)
class ProviderDialect:
    """Static description of one provider API.

    Attributes:
        name: Provider id (``"openai"``, ``"ollama"`` ...).
        display_name: Human label used in error messages.
        base_url: Default endpoint root, overridable per config.
        chat_path: Path appended to the base URL for chat calls.
        default_model: Model used when neither call nor config names one.
        requires_auth: Whether a bearer credential is sent and required.
        local: Whether the endpoint is a local daemon (affects error hints).
        framing: Streamed body framing.
        extraction: Delta extraction rule.
        omit_sampling_params: Drop ``temperature``/``max_tokens`` from the body.
        extra_headers: Additional static headers (attribution).
        probe_path: Path used by the reachability probe.
        models_path: Path used for model listing.
    """

    name: str
    display_name: str
    base_url: str
    default_model: str
    chat_path: str = "/chat/completions"
    requires_auth: bool = True
    local: bool = False
    framing: Framing = Framing.SSE
    extraction: ExtractionRule = ExtractionRule.CHAT_DELTA
    omit_sampling_params: bool = False
    extra_headers: Mapping[str, str] = field(default_factory=dict, hash=False, compare=False)
    probe_path: str = "/models"
    models_path: str = "/models"

    def resolve_base_url(self, override: str | None = None) -> str:
        """Return ``override`` or the default base URL without a trailing slash."""
        return (override or self.base_url).rstrip("/")


__all__ = ["Framing", "ExtractionRule", "ProviderDialect"]
