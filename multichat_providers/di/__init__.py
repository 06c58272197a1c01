"""DI container for the chat core (composition root)."""
from __future__ import annotations

from .container import ProvidersContainer, build_container

__all__ = ["ProvidersContainer", "build_container"]
