"""Bracket scanner for concatenated JSON objects.

Local model servers (Ollama) stream ``{...}{...}`` with or without newlines
in between, and a chunk may end anywhere, including inside a string value.
The scanner tracks brace depth, the in-string flag and the escape flag so
braces inside strings never look like object boundaries.

Scan state persists across ``feed`` calls, so each character is examined
once on the happy path. The buffer always holds the text not yet resolved
into a complete object.

A candidate span that fails to parse is kept from its opening brace as the
remainder and the pass stops; the next feed rescans it with more text. There
is no line boundary to resync on, so nothing is skipped before end of stream.
"""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from ..logging import LogContext, get_logger, normalized_log_event

_FRAGMENT_PREVIEW = 200


class JsonObjectScanner:
    """Incremental extractor of top-level JSON objects from a text stream."""

    def __init__(self, *, ctx: Optional[LogContext] = None, logger: Optional[logging.Logger] = None) -> None:
        self._ctx = ctx
        self._logger = logger or get_logger("providers.streaming")
        self._buffer = ""
        self._reset_scan()
        self.failures = 0

    def _reset_scan(self) -> None:
        self._pos = 0
        self._depth = 0
        self._in_string = False
        self._escape = False
        self._start = -1

    @property
    def pending(self) -> str:
        """Unresolved text (a partial object, or nothing)."""
        return self._buffer

    def feed(self, text: str) -> List[Any]:
        if text:
            self._buffer += text
        return self._scan()

    def flush(self) -> List[Any]:
        """Scan once more, then discard any unterminated tail."""
        self._reset_scan()
        out = self._scan()
        tail = self._buffer.strip()
        if tail:
            normalized_log_event(
                self._logger,
                "stream.decode_error",
                self._ctx,
                phase="flush",
                emitted=None,
                tokens=None,
                level=logging.WARNING,
                framing="concatenated_json",
                error="unterminated object discarded at end of stream",
                fragment=tail[:_FRAGMENT_PREVIEW],
            )
        self._buffer = ""
        self._reset_scan()
        return out

    def _scan(self) -> List[Any]:
        out: List[Any] = []
        buf = self._buffer
        consumed = 0
        i = self._pos
        n = len(buf)
        while i < n:
            ch = buf[i]
            if self._in_string:
                if self._escape:
                    self._escape = False
                elif ch == "\\":
                    self._escape = True
                elif ch == '"':
                    self._in_string = False
            elif ch == '"':
                if self._depth > 0:
                    self._in_string = True
            elif ch == "{":
                if self._depth == 0:
                    self._start = i
                self._depth += 1
            elif ch == "}" and self._depth > 0:
                self._depth -= 1
                if self._depth == 0:
                    span = buf[self._start:i + 1]
                    try:
                        obj = json.loads(span)
                    except ValueError as exc:
                        self._on_parse_failure(span, exc)
                        # Keep from the object start and wait for more bytes.
                        self._buffer = buf[self._start:]
                        self._reset_scan()
                        return out
                    out.append(obj)
                    consumed = i + 1
                    self._start = -1
            i += 1

        if self._depth > 0:
            # Partial object: keep it whole, scan position relative to its start.
            keep_from = self._start
        else:
            # Text outside any object can never become part of one.
            keep_from = max(consumed, n)
        self._buffer = buf[keep_from:]
        self._pos = i - keep_from
        if self._start >= 0:
            self._start -= keep_from
        return out

    def _on_parse_failure(self, span: str, exc: Exception) -> None:
        self.failures += 1
        normalized_log_event(
            self._logger,
            "stream.decode_error",
            self._ctx,
            phase="decode",
            emitted=None,
            tokens=None,
            level=logging.DEBUG,
            framing="concatenated_json",
            error=str(exc),
            fragment=span[:_FRAGMENT_PREVIEW],
        )


__all__ = ["JsonObjectScanner"]
