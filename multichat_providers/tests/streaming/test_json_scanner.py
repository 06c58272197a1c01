"""Bracket scanner behavior for concatenated JSON streams (Ollama framing)."""
from __future__ import annotations

import json

import pytest

from multichat_providers.base.streaming import JsonObjectScanner


def _objects(*texts: str) -> list:
    scanner = JsonObjectScanner()
    out = []
    for text in texts:
        out.extend(scanner.feed(text))
    out.extend(scanner.flush())
    return out


def test_back_to_back_objects_without_separator():
    assert _objects('{"a":1}{"b":2}') == [{"a": 1}, {"b": 2}]  # nosec B101


def test_newline_delimited_objects():
    assert _objects('{"a":1}\n{"b":2}\n') == [{"a": 1}, {"b": 2}]  # nosec B101


def test_nested_objects_emit_once():
    assert _objects('{"message":{"content":"x"},"done":false}') == [  # nosec B101
        {"message": {"content": "x"}, "done": False}
    ]


def test_braces_inside_strings_are_not_boundaries():
    payload = '{"message":{"content":"{}{}"}}{"message":{"content":"}"}}'
    assert _objects(payload) == [  # nosec B101
        {"message": {"content": "{}{}"}},
        {"message": {"content": "}"}},
    ]


def test_escaped_quote_does_not_end_string():
    obj = {"response": 'say "{hi}" \\ ok'}
    assert _objects(json.dumps(obj)) == [obj]  # nosec B101


def test_split_inside_string_with_brace():
    scanner = JsonObjectScanner()
    assert scanner.feed('{"response":"a{') == []  # nosec B101
    assert scanner.feed('b}"}') == [{"response": "a{b}"}]  # nosec B101
    assert scanner.pending == ""  # nosec B101


@pytest.mark.parametrize(
    "stream",
    [
        '{"message":{"content":"A"}}{"message":{"content":"B"}}',
        '{"a":"}{\\"}"}\n{"b":[1,{"c":2}]}',
    ],
)
def test_every_split_offset_yields_same_objects(stream):
    expected = _objects(stream)
    for offset in range(len(stream) + 1):
        assert _objects(stream[:offset], stream[offset:]) == expected  # nosec B101


def test_byte_at_a_time_feeding():
    stream = '{"x":"{\\"y\\"}"}{"z":1}'
    assert _objects(*list(stream)) == [{"x": '{"y"}'}, {"z": 1}]  # nosec B101


def test_partial_object_is_retained_between_feeds():
    scanner = JsonObjectScanner()
    assert scanner.feed('{"a":1}{"b":') == [{"a": 1}]  # nosec B101
    assert scanner.pending == '{"b":'  # nosec B101
    assert scanner.feed("2}") == [{"b": 2}]  # nosec B101


def test_stray_closing_brace_at_top_level_is_ignored():
    assert _objects('}} {"a":1} }') == [{"a": 1}]  # nosec B101


def test_unparseable_span_is_kept_for_the_next_feed():
    scanner = JsonObjectScanner()
    assert scanner.feed('{"ok":1}{bad}') == [{"ok": 1}]  # nosec B101
    assert scanner.pending == "{bad}"  # nosec B101
    assert scanner.failures == 1  # nosec B101
    # Still unresolved with more bytes; nothing dropped before end of stream.
    assert scanner.feed('{"later":2}') == []  # nosec B101
    assert scanner.pending.startswith("{bad}")  # nosec B101


def test_flush_discards_unterminated_tail_and_logs(events):
    scanner = JsonObjectScanner()
    assert scanner.feed('{"a":1}{"b":') == [{"a": 1}]  # nosec B101
    assert scanner.flush() == []  # nosec B101
    assert scanner.pending == ""  # nosec B101
    logged = events.named("stream.decode_error")
    assert logged and logged[-1]["framing"] == "concatenated_json"  # nosec B101
    assert logged[-1]["fragment"] == '{"b":'  # nosec B101


def test_flush_with_clean_buffer_logs_nothing(events):
    scanner = JsonObjectScanner()
    scanner.feed('{"a":1}\n')
    assert scanner.flush() == []  # nosec B101
    assert events.named("stream.decode_error") == []  # nosec B101
