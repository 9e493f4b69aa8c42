"""Structured Logging — JSONFormatter fields and setup_logging handler selection."""

import json
import logging
import sys

import pytest

from arosaje.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "arosaje.test", logging.WARNING, __file__, 1, "guardianship %s", (7,), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "arosaje.test"
    assert log["message"] == "guardianship 7"
    assert "timestamp" in log
    assert "error_code" not in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(_record(
        error_code="GUARDIANSHIP_NOT_FOUND", path="/api/guardianships/7",
        guardianship_id=7, unrelated="ignored",
    )))
    assert log["error_code"] == "GUARDIANSHIP_NOT_FOUND"
    assert log["path"] == "/api/guardianships/7"
    assert log["guardianship_id"] == 7
    assert "unrelated" not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad period")
    except ValueError:
        record = logging.LogRecord(
            "arosaje.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info(),
        )
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad period" in log["exception"]


@pytest.mark.parametrize("fmt, formatter_type", [
    ("json", JSONFormatter),
    ("text", logging.Formatter),
])
def test_setup_logging_selects_formatter(fmt, formatter_type):
    previous_level = logging.root.level
    handler = setup_logging("debug", fmt)
    try:
        assert type(handler.formatter) is formatter_type
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)
