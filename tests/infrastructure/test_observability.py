"""Structured logging: JSON lines with request/resource extras."""

import json
import logging
import sys

from orders_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "orders_api.test", logging.WARNING, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "orders_api.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    record = _record(
        error_code="RESOURCE_NOT_FOUND", resource="order", resource_id="7",
        secret="nope",
    )
    payload = json.loads(JSONFormatter().format(record))
    assert payload["error_code"] == "RESOURCE_NOT_FOUND"
    assert payload["resource"] == "order"
    assert payload["resource_id"] == "7"
    assert "secret" not in payload


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in payload["exception"]


def test_setup_logging_installs_handler_and_level():
    root_level = logging.root.level
    handler = setup_logging("debug", "text")
    try:
        assert handler in logging.root.handlers
        assert logging.root.level == logging.DEBUG
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(root_level)


def test_setup_logging_json_by_default():
    root_level = logging.root.level
    handler = setup_logging()
    try:
        assert isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(root_level)


def test_json_formatter_surfaces_request_and_delete_extras():
    record = _record(
        path="/api/v1/orders/3", method="DELETE", affected_rows=0,
    )
    payload = json.loads(JSONFormatter().format(record))
    assert payload["path"] == "/api/v1/orders/3"
    assert payload["method"] == "DELETE"
    assert payload["affected_rows"] == 0
