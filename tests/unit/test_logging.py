from __future__ import annotations

import json
import logging

from sortbench.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_SIZE = 1000
EXPECTED_RUNS = 3


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.size = EXPECTED_SIZE
    record.operation = "quick_sort"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["size"] == EXPECTED_SIZE
    assert payload["operation"] == "quick_sort"
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"runs": EXPECTED_RUNS}

    payload = json.loads(_json_formatter(record))

    assert payload["runs"] == EXPECTED_RUNS


def test_json_formatter_serializes_non_json_values() -> None:
    record = _record()
    record.path = object()

    payload = json.loads(JsonFormatter().format(record))

    assert payload["path"].startswith("<object object")


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="debug")
    try:
        assert logging.getLogger().level == logging.DEBUG
    finally:
        configure_logging(level="WARNING")
