"""Line-framed (Server-Sent Events) decoder.

OpenAI-compatible providers stream ``data: <json>`` lines terminated by a
``data: [DONE]`` sentinel. Line boundaries are a natural resync point: a
malformed event is logged and skipped, and decoding continues on the next
line.
"""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL
from ..logging import LogContext, get_logger, normalized_log_event

_FRAGMENT_PREVIEW = 200


class SSELineDecoder:
    """Incremental SSE line splitter and JSON parser.

    Text is buffered until a newline arrives, so a line split across chunks
    is reassembled before parsing.
    """

    def __init__(self, *, ctx: Optional[LogContext] = None, logger: Optional[logging.Logger] = None) -> None:
        self._buffer = ""
        self._ctx = ctx
        self._logger = logger or get_logger("providers.streaming")
        self.skipped = 0

    @property
    def pending(self) -> str:
        """Text received after the last newline."""
        return self._buffer

    def feed(self, text: str) -> List[Any]:
        if not text:
            return []
        self._buffer += text
        *lines, self._buffer = self._buffer.split("\n")
        out: List[Any] = []
        for line in lines:
            self._decode_line(line, out)
        return out

    def flush(self) -> List[Any]:
        """Decode a final line that arrived without a trailing newline."""
        tail, self._buffer = self._buffer, ""
        out: List[Any] = []
        self._decode_line(tail, out)
        return out

    def _decode_line(self, line: str, out: List[Any]) -> None:
        trimmed = line.strip()
        if not trimmed or trimmed == SSE_DONE_SENTINEL:
            return
        if not trimmed.startswith(SSE_DATA_PREFIX):
            return
        payload = trimmed[len(SSE_DATA_PREFIX):]
        try:
            out.append(json.loads(payload))
        except ValueError as exc:
            self.skipped += 1
            normalized_log_event(
                self._logger,
                "stream.decode_error",
                self._ctx,
                phase="decode",
                emitted=None,
                tokens=None,
                level=logging.WARNING,
                framing="sse",
                error=str(exc),
                fragment=payload[:_FRAGMENT_PREVIEW],
            )


__all__ = ["SSELineDecoder"]
