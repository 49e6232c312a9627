"""Tests for logging configuration helpers."""

from __future__ import annotations

import json
import logging

import pytest

from stringmask.logging_utils import JsonFormatter, configure_logging


def _record(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord(
        name="stringmask.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


@pytest.mark.parametrize("fmt", ["plain", "json"])
def test_configure_logging_installs_single_handler(fmt):
    configure_logging("debug", fmt)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, JsonFormatter) is (fmt == "json")


def test_json_formatter_emits_structured_payload():
    formatted = JsonFormatter().format(_record("scan halted at %s", 3))
    payload = json.loads(formatted)

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "stringmask.test"
    assert payload["message"] == "scan halted at 3"
    assert "timestamp" in payload


def test_unknown_level_falls_back_to_warning():
    configure_logging("chatty", "plain")

    assert logging.getLogger().level == logging.WARNING
