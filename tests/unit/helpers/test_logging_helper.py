"""Unit tests for architector.helpers.logging_helper."""

import logging

import pytest

from architector.helpers.exceptions import StorageIOError
from architector.helpers.logging_helper import NOISY_LOGGERS, configure_logging, sanitize_exception_message


class TestSanitizeExceptionMessage:
    @pytest.mark.unit
    def test_returns_safe_message_and_logs_details(self, caplog: pytest.LogCaptureFixture) -> None:
        error = StorageIOError("Failed to read /home/me/.mcp-architector/p1/architecture.json")

        with caplog.at_level(logging.ERROR):
            message = sanitize_exception_message(error, "Storage failure")

        assert message == "Storage failure"
        assert "/home/me" not in message
        assert "architecture.json" in caplog.text

    @pytest.mark.unit
    def test_default_message(self) -> None:
        assert sanitize_exception_message(RuntimeError("boom")) == "An error occurred"


class TestConfigureLogging:
    @pytest.mark.unit
    def test_quiets_noisy_loggers(self) -> None:
        configure_logging("debug")
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.ERROR

    @pytest.mark.unit
    def test_unknown_level_name_does_not_raise(self) -> None:
        configure_logging("not-a-level")
