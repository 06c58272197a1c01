"""Streaming response decoding: framing strategies and delta extraction."""

from .sse_decoder import SSELineDecoder
from .json_scanner import JsonObjectScanner
from .frame_decoder import FrameDecoder, FramingStrategy, create_frame_decoder
from .delta_extractor import Delta, extract_delta, extract_full_response
from .stream_state import StreamState

__all__ = [
    "SSELineDecoder",
    "JsonObjectScanner",
    "FrameDecoder",
    "FramingStrategy",
    "create_frame_decoder",
    "Delta",
    "extract_delta",
    "extract_full_response",
    "StreamState",
]
