"""Focused tests for multichat_providers.base.logging.

Covers:
- _parse_level string parsing
- normalized_log_event emits required keys
- JsonFormatter hoists event fields
- configure_logger attaches a rotating file handler
"""
from __future__ import annotations

import json
import logging

from multichat_providers.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from multichat_providers.base.log_support import JsonFormatter, LogContext


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_normalized_log_event_emits_required_keys():
    logger = get_logger("providers.test.logging")
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        normalized_log_event(
            logger,
            "chat.finalize",
            LogContext(provider="p", model="m"),
            phase="finalize",
            attempt=1,
            emitted=True,
            tokens={"prompt_tokens": 10},
            stream=True,
        )
    finally:
        logger.removeHandler(handler)
    payload = json.loads(handler.messages[-1])
    for key in REQUIRED_NORMALIZED_KEYS:
        if key == "error_code":
            continue
        assert key in payload  # nosec B101
    assert "error_code" not in payload  # nosec B101
    assert payload["provider"] == "p" and payload["model"] == "m"  # nosec B101
    assert payload["tokens"] == {"prompt_tokens": 10}  # nosec B101
    assert payload["stream"] is True  # nosec B101


def test_extra_fields_never_override_normalized_values():
    logger = get_logger("providers.test.override")
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        normalized_log_event(logger, "e", phase="start", attempt=2, error_code="timeout", emitted=False, tokens=None)
    finally:
        logger.removeHandler(handler)
    payload = json.loads(handler.messages[-1])
    assert payload["attempt"] == 2 and payload["error_code"] == "timeout"  # nosec B101
    assert payload["tokens"] is None  # nosec B101


def test_log_event_drops_none_fields_and_respects_level():
    logger = get_logger("providers.test.level")
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        log_event(logger, "quiet", level=logging.DEBUG, a=1)
        log_event(logger, "loud", a=1, b=None)
    finally:
        logger.removeHandler(handler)
    assert len(handler.messages) == 1  # nosec B101
    assert json.loads(handler.messages[0]) == {"event": "loud", "a": 1}  # nosec B101


def test_json_formatter_hoists_payload():
    record = logging.LogRecord("providers.x", logging.INFO, __file__, 1, '{"event": "probe.result", "ok": true}', None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "probe.result" and out["ok"] is True  # nosec B101
    assert out["level"] == "INFO" and out["logger"] == "providers.x"  # nosec B101


def test_base_logger_writes_json_to_stderr(capsys):
    logger = get_logger("providers")
    log_event(logger, "stderr.check", provider="openai")
    err = capsys.readouterr().err.strip().splitlines()
    line = json.loads(err[-1])
    assert line["event"] == "stderr.check" and line["provider"] == "openai"  # nosec B101


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "providers.log"
    logger = configure_logger(file_path=str(path))
    try:
        log_event(logger, "file.check", value=3)
        for h in logger.handlers:
            h.flush()
        lines = path.read_text(encoding="utf-8").strip().splitlines()
        assert json.loads(lines[-1])["event"] == "file.check"  # nosec B101
    finally:
        configure_logger(file_path=None)
    assert not any(getattr(h, "baseFilename", None) for h in logger.handlers)  # nosec B101
