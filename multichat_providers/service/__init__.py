"""Inbound services: chat orchestration and connection probing."""

from .chat_service import ChatService, ChunkCallback
from .prober import ConnectionProber, extract_model_ids

__all__ = ["ChatService", "ChunkCallback", "ConnectionProber", "extract_model_ids"]
