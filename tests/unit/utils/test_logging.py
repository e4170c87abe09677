"""Unit tests for structured logging setup."""

from __future__ import annotations

import json
import logging

from asereport.utils.logging import JsonFormatter, configure_logging


def test_json_formatter_merges_extra_fields() -> None:
    record = logging.LogRecord(
        name="asereport.data.loader",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Loaded %d rows",
        args=(3,),
        exc_info=None,
    )
    record.rows = 3

    payload = json.loads(JsonFormatter().format(record))

    assert payload["msg"] == "Loaded 3 rows"
    assert payload["level"] == "INFO"
    assert payload["rows"] == 3


def test_configure_logging_replaces_its_own_handler() -> None:
    logger = logging.getLogger("asereport")

    first = configure_logging(logging.INFO)
    second = configure_logging(logging.DEBUG, json_format=True)

    assert first not in logger.handlers
    assert second in logger.handlers
    assert isinstance(second.formatter, JsonFormatter)
    assert logger.level == logging.DEBUG
    logger.removeHandler(second)


def test_json_formatter_stamps_utc_time() -> None:
    record = logging.LogRecord(
        name="asereport", level=logging.INFO, pathname=__file__,
        lineno=1, msg="tick", args=(), exc_info=None,
    )
    record.created = 0.0

    payload = json.loads(JsonFormatter().format(record))

    assert payload["ts"] == "1970-01-01T00:00:00+00:00"
