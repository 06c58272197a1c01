"""Provider registry: dialect records and lookup helpers."""

from .dialect import ExtractionRule, Framing, ProviderDialect
from .providers import (
    PROVIDERS,
    DialectLike,
    UnknownProviderError,
    display_names,
    get_dialect,
    list_providers,
    resolve_dialect,
)

__all__ = [
    "ExtractionRule",
    "Framing",
    "ProviderDialect",
    "PROVIDERS",
    "DialectLike",
    "UnknownProviderError",
    "display_names",
    "get_dialect",
    "list_providers",
    "resolve_dialect",
]
