"""Tests for structured logging."""

import json
import logging

from notifyme.observability import JsonFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "notifyme.gateways.campfire", logging.DEBUG, __file__, 1, "POST %s", ("url",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    out = json.loads(JsonFormatter().format(_record()))
    assert out["level"] == "DEBUG"
    assert out["logger"] == "notifyme.gateways.campfire"
    assert out["message"] == "POST url"
    assert "room" not in out


def test_json_formatter_extras():
    out = json.loads(JsonFormatter().format(_record(room="42", status_code=201)))
    assert out["room"] == "42"
    assert out["status_code"] == 201


def test_setup_logging_json():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug", json_output=True)
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
