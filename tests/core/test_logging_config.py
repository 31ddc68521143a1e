"""
Tests for logging_config module
"""

import json
import logging

import pytest

from clickup_dashboard.core.logging_config import JSONFormatter, get_logger, log_with_context, setup_logging


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJSONFormatter:
    """Tests for JSONFormatter"""

    def test_formats_record_as_json(self):
        record = logging.LogRecord("clickup_dashboard.test", logging.INFO, __file__, 10, "Fetched %d tasks", (3,), None)

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "clickup_dashboard.test"
        assert data["message"] == "Fetched 3 tasks"

    def test_includes_extra_fields(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 10, "msg", (), None)
        record.extra_fields = {"list_id": "901", "task_count": 4}

        data = json.loads(JSONFormatter().format(record))

        assert data["list_id"] == "901"
        assert data["task_count"] == 4


class TestSetupLogging:
    """Tests for setup_logging"""

    def test_sets_level_and_single_console_handler(self, restore_root_logger):
        setup_logging(level="DEBUG")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_log_file_gets_json_handler(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "update.log"

        setup_logging(level="INFO", log_file=log_file)
        get_logger("clickup_dashboard.test").info("hello")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])["message"] == "hello"
        for handler in restore_root_logger.handlers:
            handler.close()


class TestLogWithContext:
    """Tests for log_with_context"""

    def test_passes_context_as_extra_fields(self, caplog):
        logger = get_logger("clickup_dashboard.test")

        with caplog.at_level(logging.INFO):
            log_with_context(logger, "info", "Tasks fetched", list_id="901")

        assert caplog.records[-1].extra_fields == {"list_id": "901"}
