"""SSE line decoder: reassembly, sentinels and skip-on-error."""
from __future__ import annotations

from multichat_providers.base.streaming import SSELineDecoder


def test_done_sentinel_alone_yields_nothing():
    decoder = SSELineDecoder()
    assert decoder.feed("data: [DONE]\n") == []
    assert decoder.flush() == []


def test_blank_lines_and_comments_are_ignored():
    decoder = SSELineDecoder()
    out = decoder.feed('\n\n: keep-alive\nevent: message\ndata: {"a":1}\n\n')
    assert out == [{"a": 1}]


def test_line_split_across_chunks_is_reassembled():
    decoder = SSELineDecoder()
    assert decoder.feed('data: {"choices":[{"del') == []
    assert decoder.pending == 'data: {"choices":[{"del'
    assert decoder.feed('ta":{"content":"Hi"}}]}\n') == [{"choices": [{"delta": {"content": "Hi"}}]}]


def test_malformed_line_is_skipped_and_next_line_decoded(events):
    decoder = SSELineDecoder()
    out = decoder.feed('data: {"broken": \ndata: {"ok":true}\n')
    assert out == [{"ok": True}]
    assert decoder.skipped == 1
    logged = events.named("stream.decode_error")
    assert len(logged) == 1
    assert logged[0]["framing"] == "sse"
    assert logged[0]["phase"] == "decode"


def test_crlf_line_endings():
    decoder = SSELineDecoder()
    assert decoder.feed('data: {"a":1}\r\ndata: [DONE]\r\n') == [{"a": 1}]


def test_flush_decodes_final_unterminated_line():
    decoder = SSELineDecoder()
    assert decoder.feed('data: {"a":1}') == []
    assert decoder.flush() == [{"a": 1}]
    assert decoder.pending == ""
