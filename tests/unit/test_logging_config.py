"""
Unit tests for vehicle_value.logging_config.
"""
import json
import logging

from vehicle_value.logging_config import (
    JSONFormatter,
    PrettyJSONFormatter,
    generate_request_id,
    log_with_context,
    setup_logging,
)


def _record(message="hello", **extra):
    record = logging.LogRecord("vehicle_value.test", logging.INFO, __file__, 1, message, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    """Tests for JSON and pretty formatters."""

    def test_json_includes_extra_fields(self):
        line = JSONFormatter().format(_record(request_id="r1", intent_name="VehicleValue"))
        data = json.loads(line)
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["request_id"] == "r1"
        assert data["intent_name"] == "VehicleValue"
        assert data["timestamp"].endswith("Z")

    def test_json_skips_unserializable(self):
        data = json.loads(JSONFormatter().format(_record(obj=object())))
        assert "obj" not in data

    def test_pretty(self):
        line = PrettyJSONFormatter().format(_record(request_id="r1"))
        assert "hello" in line
        assert "request_id=r1" in line


class TestSetupLogging:
    """Tests for setup_logging and helpers."""

    def test_handlers_replaced(self):
        logger = setup_logging("vehicle_value.test_setup", "DEBUG", "pretty")
        logger = setup_logging("vehicle_value.test_setup", "DEBUG", "json")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "hook.log"
        logger = setup_logging("vehicle_value.test_file", "INFO", "json", str(log_file))
        logger.info("written")
        for handler in logger.handlers:
            handler.flush()
        assert "written" in log_file.read_text(encoding="utf-8")

    def test_request_id(self):
        assert len(generate_request_id()) == 8

    def test_log_with_context(self, caplog):
        logger = logging.getLogger("vehicle_value_ctx_test")
        with caplog.at_level(logging.INFO, logger="vehicle_value_ctx_test"):
            log_with_context(logger, logging.INFO, "built", request_id="r9", dialog_action="Delegate")
        record = caplog.records[-1]
        assert record.request_id == "r9"
        assert record.dialog_action == "Delegate"
