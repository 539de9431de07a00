"""Structured Logging — JSON formatter fields and handler setup."""

import json
import logging
import sys

import pytest

from users_api.infrastructure import observability
from users_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "users_api.test", logging.WARNING, __file__, 1, "user %s gone", (7,), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "users_api.test"
    assert log["message"] == "user 7 gone"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(user_id=7, operation="delete", error_code=None, unrelated="x"),
    ))
    assert log["user_id"] == 7
    assert log["operation"] == "delete"
    assert "error_code" not in log
    assert "unrelated" not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info(),
        )
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log["exception"]


@pytest.fixture
def restore_root_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
    observability._handler = None


def test_setup_logging_does_not_stack_handlers(restore_root_logging):
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "json")
    handler = setup_logging("WARNING", "text")
    assert len(logging.root.handlers) == before + 1
    assert handler in logging.root.handlers
    assert not isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING
