"""Structured Logging — formatter output and setup_logging wiring."""

import json
import logging
import sys

from pizzeria.infrastructure.observability import (
    HANDLER_NAME, JSONFormatter, TextFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="pizzeria.api.routes.orders", level=logging.INFO,
        pathname=__file__, lineno=1, msg="Order %s placed", args=("7",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "pizzeria.api.routes.orders"
    assert payload["message"] == "Order 7 placed"
    assert "timestamp" in payload


def test_json_formatter_surfaces_entity_fields():
    payload = json.loads(JSONFormatter().format(
        _record(entity="order", entity_id="7", error_code=None),
    ))
    assert payload["entity"] == "order"
    assert payload["entity_id"] == "7"
    assert "error_code" not in payload


def test_json_formatter_keeps_non_ascii():
    record = _record()
    record.msg, record.args = "Пица %s", ("Маргарита",)
    assert "Пица Маргарита" in JSONFormatter().format(record)


def test_setup_logging_installs_handler_and_level():
    previous_level = logging.root.level
    handler = setup_logging("debug", "text")
    try:
        assert handler in logging.root.handlers
        assert logging.root.level == logging.DEBUG
        assert isinstance(handler.formatter, TextFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)


def test_setup_logging_json_by_default():
    handler = setup_logging()
    try:
        assert isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)


def test_json_timestamp_is_record_creation_time():
    record = _record()
    record.created = 0.0
    payload = json.loads(JSONFormatter().format(record))
    assert payload["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_json_formatter_ignores_unlisted_extras():
    payload = json.loads(JSONFormatter().format(_record(method="POST")))
    assert "method" not in payload


def test_text_formatter_appends_context_block():
    line = TextFormatter().format(
        _record(entity="order", entity_id="7", error_code=None, path="/api/orders"),
    )
    assert line.endswith("— Order 7 placed [entity=order entity_id=7 path=/api/orders]")


def test_text_formatter_without_context_is_plain():
    assert TextFormatter().format(_record()).endswith("— Order 7 placed")


def test_text_formatter_puts_context_before_traceback():
    try:
        raise RuntimeError("oven on fire")
    except RuntimeError:
        record = _record(entity="pizza")
        record.exc_info = sys.exc_info()
    first, _, rest = TextFormatter().format(record).partition("\n")
    assert first.endswith("[entity=pizza]")
    assert "RuntimeError: oven on fire" in rest


def test_setup_logging_replaces_previous_handler():
    first = setup_logging("info", "json")
    second = setup_logging("info", "text")
    try:
        named = [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]
        assert named == [second]
        assert first not in logging.root.handlers
    finally:
        logging.root.removeHandler(second)
