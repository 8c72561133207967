"""Structured logging and redaction tests."""

from __future__ import annotations

import json
import logging

from surf_forecast.log_setup import JsonConsoleFormatter, setup_logger
from surf_forecast.redaction import REDACTED, sanitize_for_logging, sanitize_text


def _record(message: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(
        name="surf_forecast.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=args,
        exc_info=None,
    )


def test_formatter_emits_json_with_redacted_message() -> None:
    output = JsonConsoleFormatter().format(_record("sent Authorization: %s", "sg-key-42"))

    event = json.loads(output)
    assert event["level"] == "WARNING"
    assert event["logger"] == "surf_forecast.test"
    assert "sg-key-42" not in event["message"]
    assert REDACTED in event["message"]


def test_sanitize_text_redacts_bearer_tokens() -> None:
    assert sanitize_text("Bearer abc.def") == f"Bearer {REDACTED}"


def test_sanitize_for_logging_redacts_sensitive_keys() -> None:
    payload = {"headers": {"Authorization": "sg-key-42"}, "errors": ["Rate Limit reached"]}

    assert sanitize_for_logging(payload) == {
        "headers": {"Authorization": REDACTED},
        "errors": ["Rate Limit reached"],
    }


def test_setup_logger_is_idempotent() -> None:
    first = setup_logger("surf_forecast.test_idempotent")
    second = setup_logger("surf_forecast.test_idempotent", level="DEBUG")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG


def test_formatter_promotes_extra_fields_and_redacts_sensitive_ones() -> None:
    record = _record("%s returned %d forecast points", "stormglass", 3)
    record.provider = "stormglass"
    record.lat = -33.792726
    record.lng = 151.289824
    record.api_key = "sg-key-42"

    event = json.loads(JsonConsoleFormatter().format(record))

    assert event["provider"] == "stormglass"
    assert event["lat"] == -33.792726
    assert event["lng"] == 151.289824
    assert event["api_key"] == REDACTED
    assert "pathname" not in event
