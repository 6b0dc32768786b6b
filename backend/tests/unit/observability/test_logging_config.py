"""Unit tests for structured logging configuration."""

import json
import logging
import sys

import pytest

from config import Settings
from observability.correlation import set_correlation_id
from observability.logging_config import (
    CorrelationIDFilter,
    JSONFormatter,
    configure_logging,
    configure_logging_from_settings,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(**extra):
    record = logging.LogRecord(
        name="orders.validator", level=logging.INFO, pathname=__file__,
        lineno=1, msg="Validation verdict for order %s", args=("o-1",), exc_info=None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_formats_core_fields_and_extras(self):
        record = _record(order_id="o-1", event_name="orderValidation")
        set_correlation_id("corr-123")
        CorrelationIDFilter().filter(record)

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "Validation verdict for order o-1"
        assert data["level"] == "INFO"
        assert data["correlation_id"] == "corr-123"
        assert data["order_id"] == "o-1"
        assert data["event_name"] == "orderValidation"
        assert "customer_id" not in data

    def test_includes_exception(self):
        try:
            raise ValueError("bad price")
        except ValueError:
            record = _record(exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        assert data["error"] == "bad price"
        assert "ValueError" in data["traceback"]


class TestConfigureLogging:

    def test_installs_single_json_handler(self, restore_root_logger):
        configure_logging(level="debug", json_format=True)

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert any(isinstance(f, CorrelationIDFilter) for f in root.handlers[0].filters)

    def test_plain_format(self, restore_root_logger):
        configure_logging(level="WARNING", json_format=False)

        assert not isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_from_settings(self, restore_root_logger):
        configure_logging_from_settings(Settings(_env_file=None, LOG_LEVEL="ERROR", LOG_JSON=False))

        assert restore_root_logger.level == logging.ERROR
        assert not isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
