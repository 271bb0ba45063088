"""Structured logging — JSON formatter fields and idempotent setup."""

import json
import logging

import inventory.infrastructure.observability as observability
from inventory.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "inventory.test", logging.INFO, __file__, 1, "Product %s", ("created",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "inventory.test"
    assert log["message"] == "Product created"


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(
        _record(product_id="abc", operation="create", unrelated="x"),
    ))
    assert log["product_id"] == "abc"
    assert log["operation"] == "create"
    assert "unrelated" not in log


def test_setup_logging_is_idempotent():
    before = len(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        assert len(logging.root.handlers) == before + 1
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(observability._handler)
        observability._handler = None
        logging.root.setLevel(level)
