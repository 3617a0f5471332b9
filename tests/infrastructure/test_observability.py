"""Structured Logging — JSONFormatter output and setup_logging wiring."""

import json
import logging

from catalog.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "catalog.services.product_service", logging.INFO, __file__, 1,
        "Product created: %s", ("Pen",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "catalog.services.product_service"
    assert log["message"] == "Product created: Pen"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(product_id=7, error_code="RESOURCE_NOT_FOUND", unrelated="x"),
    ))
    assert log["product_id"] == 7
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert "unrelated" not in log


def test_json_formatter_skips_none_extras():
    log = json.loads(JSONFormatter().format(_record(product_id=None)))
    assert "product_id" not in log


def test_setup_logging_sets_level_and_formatter():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        setup_logging("warning", "json")
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[-1].formatter, JSONFormatter)
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
