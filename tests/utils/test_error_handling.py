#!/usr/bin/env python3
"""
Tests for Error Handling Utility Module
"""

import logging
from unittest.mock import MagicMock

import pytest

from clickup_dashboard.utils.error_handling import log_and_return_default


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing log calls."""
    return MagicMock(spec=logging.Logger)


class TestLogAndReturnDefault:
    """Test suite for log_and_return_default() function."""

    def test_returns_default_value(self, mock_logger):
        result = log_and_return_default(mock_logger, ValueError("bad"), {"task_id": "t1"}, default_value=[])

        assert result == []

    def test_returns_none_by_default(self, mock_logger):
        assert log_and_return_default(mock_logger, ValueError("bad"), {}) is None

    def test_logs_at_warning_level(self, mock_logger):
        error = ValueError("Invalid epoch timestamp: soon")

        log_and_return_default(mock_logger, error, {"task_id": "t1"}, error_type="Task timestamp parsing")

        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args
        assert "Task timestamp parsing failed" in call_args[0][0]
        assert "Invalid epoch timestamp: soon" in call_args[0][0]

    def test_includes_structured_context(self, mock_logger):
        log_and_return_default(mock_logger, KeyError("id"), {"task_id": "t1"}, default_value=0, error_type="Lookup")

        extra = mock_logger.warning.call_args[1]["extra"]
        assert extra["error_type"] == "Lookup"
        assert extra["exception_class"] == "KeyError"
        assert extra["context"] == {"task_id": "t1"}
        assert extra["default_value"] == "0"
