"""Tests for logging_config module."""

import json
import logging

from dev_certs.lib.logging_config import LOGGER, CustomJsonFormatter


def test_logger_is_configured_once() -> None:
    """Package logger has one JSON handler of its own and does not propagate."""
    assert LOGGER.name == "dev_certs"
    json_handlers = [h for h in LOGGER.handlers if isinstance(h.formatter, CustomJsonFormatter)]
    assert len(json_handlers) == 1
    assert isinstance(json_handlers[0], logging.StreamHandler)
    assert LOGGER.propagate is False


def test_formatter_keeps_only_allowed_fields() -> None:
    """Formatted record contains level and message but not module or thread fields."""
    formatter = CustomJsonFormatter(
        fmt="%(timestamp)s %(levelname)s %(funcName)s %(lineno)d %(message)s",
        timestamp=True,
    )
    record = logging.LogRecord(
        name="dev_certs",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Reusing self signed certificate in %s",
        args=("/tmp/certs",),
        exc_info=None,
        func="provision",
    )

    payload = json.loads(formatter.format(record))

    assert payload["level"] == "INFO"
    assert payload["message"] == "Reusing self signed certificate in /tmp/certs"
    assert payload["funcName"] == "provision"
    assert payload["lineno"] == 10
    assert "timestamp" in payload
    assert "name" not in payload
    assert "levelname" not in payload
