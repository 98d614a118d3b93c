"""Structured Logging: JSON formatter output and setup idempotence."""

import json
import logging

from floormap.infrastructure.observability import JSONFormatter, setup_logging


def test_json_formatter_surfaces_extra_fields():
    record = logging.LogRecord("floormap.test", logging.INFO, __file__, 1, "Pin created", None, None)
    record.pin_id = "p1"
    record.editor_id = "e1"
    data = json.loads(JSONFormatter().format(record))
    assert data["message"] == "Pin created"
    assert data["level"] == "INFO"
    assert data["pin_id"] == "p1"
    assert data["editor_id"] == "e1"
    assert "map_id" not in data


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    before = len(logging.root.handlers)
    setup_logging("INFO", "text")
    assert len(logging.root.handlers) == before
    assert logging.root.level == logging.INFO
