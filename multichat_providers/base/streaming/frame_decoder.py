"""Bytes-to-JSON-events decoding for streamed chat responses.

:class:`FrameDecoder` owns an incremental UTF-8 decoder so a multi-byte
character split across transport chunks is carried over instead of being
mangled, then hands whole text to the framing strategy chosen by the
provider dialect.
"""
from __future__ import annotations

import codecs
import logging
from typing import Any, List, Optional, Protocol, Union

from ..logging import LogContext
from ..registry import Framing
from .json_scanner import JsonObjectScanner
from .sse_decoder import SSELineDecoder


class FramingStrategy(Protocol):
    """Text-level decoder contract shared by both framings."""

    @property
    def pending(self) -> str: ...

    def feed(self, text: str) -> List[Any]: ...

    def flush(self) -> List[Any]: ...


def create_frame_decoder(
    framing: Union[Framing, str],
    *,
    ctx: Optional[LogContext] = None,
    logger: Optional[logging.Logger] = None,
) -> FramingStrategy:
    """Return a fresh text-level strategy for ``framing``."""
    framing = Framing(framing)
    if framing is Framing.CONCATENATED_JSON:
        return JsonObjectScanner(ctx=ctx, logger=logger)
    return SSELineDecoder(ctx=ctx, logger=logger)


class FrameDecoder:
    """Stateful bytes-in, JSON-objects-out decoder for one call."""

    def __init__(
        self,
        framing: Union[Framing, str],
        *,
        ctx: Optional[LogContext] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.framing = Framing(framing)
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._strategy = create_frame_decoder(self.framing, ctx=ctx, logger=logger)
        self._closed = False

    @property
    def pending(self) -> str:
        return self._strategy.pending

    def feed(self, chunk: bytes) -> List[Any]:
        """Decode ``chunk`` and return every object it completes."""
        if self._closed:
            raise RuntimeError("FrameDecoder is closed")
        if not chunk:
            return []
        return self._strategy.feed(self._text.decode(chunk))

    def close(self) -> List[Any]:
        """Flush carried-over bytes and the framing buffer at end of stream."""
        if self._closed:
            return []
        self._closed = True
        out = self._strategy.feed(self._text.decode(b"", final=True))
        out.extend(self._strategy.flush())
        return out


__all__ = ["FrameDecoder", "FramingStrategy", "create_frame_decoder"]
