from __future__ import annotations

import json
import logging

from sortlab.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_SIZE = 10
EXPECTED_DATASET = 3


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
    record.algorithm = "merge_sort"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["size"] == EXPECTED_SIZE
    assert payload["algorithm"] == "merge_sort"
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"dataset_id": EXPECTED_DATASET}

    payload = json.loads(_json_formatter(record))

    assert payload["dataset_id"] == EXPECTED_DATASET


def test_configure_logging_json_installs_json_formatter() -> None:
    configure_logging(level="DEBUG", json_logs=True)
    try:
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    finally:
        configure_logging(level="WARNING")
