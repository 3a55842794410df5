"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from signup_api.core.logger import JSONFormatter, configure_logging, ensure_request_id


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    configure_logging("DEBUG")
    try:
        assert logging.getLogger().level == logging.DEBUG
    finally:
        configure_logging("WARNING")


def test_json_formatter_includes_extras() -> None:
    record = logging.LogRecord("signup", logging.INFO, __file__, 1, "signup.created", None, None)
    record.username = "alice"
    record.status = 201

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "signup.created"
    assert payload["level"] == "INFO"
    assert payload["username"] == "alice"
    assert payload["status"] == 201


def test_request_id_reuses_correlation_header(app) -> None:
    with app.test_request_context("/signup", headers={"X-Correlation-ID": "abc-123"}):
        assert ensure_request_id() == "abc-123"
        assert ensure_request_id() == "abc-123"


def test_request_id_is_generated_when_missing(app) -> None:
    with app.test_request_context("/signup"):
        first = ensure_request_id()
        assert first
        assert ensure_request_id() == first


def test_request_id_is_scoped_to_the_request(app) -> None:
    # One long-lived app context spanning several requests
    with app.app_context():
        with app.test_request_context("/signup", headers={"X-Request-ID": "first"}):
            assert ensure_request_id() == "first"
        with app.test_request_context("/signup", headers={"X-Request-ID": "second"}):
            assert ensure_request_id() == "second"
        with app.test_request_context("/signup"):
            assert ensure_request_id() not in {"first", "second"}
