"""Structured logging: JSON formatter surfaces post-specific extras."""

import json
import logging

from app.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services.post_service", logging.WARNING, __file__, 1,
        "Post like failed", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extras():
    line = JSONFormatter().format(
        _record(post_id="p-1", caller="alice", error_code="FORBIDDEN", operation="like"),
    )
    log = json.loads(line)
    assert log["level"] == "WARNING"
    assert log["message"] == "Post like failed"
    assert log["post_id"] == "p-1"
    assert log["caller"] == "alice"
    assert log["error_code"] == "FORBIDDEN"
    assert log["operation"] == "like"


def test_json_formatter_omits_missing_extras():
    log = json.loads(JSONFormatter().format(_record()))
    assert "post_id" not in log
    assert "caller" not in log
