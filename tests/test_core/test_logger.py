"""Tests for package logger setup."""

import logging

from datekit.core.logger import LOG_FORMAT, get_logger


class TestGetLogger:
    def test_name_is_namespaced(self):
        assert get_logger("tests.naming").name == "datekit.tests.naming"

    def test_single_handler_on_repeat_calls(self):
        first = get_logger("tests.repeat")
        second = get_logger("tests.repeat")
        assert first is second
        assert len(second.handlers) == 1
        assert second.handlers[0].formatter._fmt == LOG_FORMAT

    def test_explicit_level(self):
        assert get_logger("tests.debug", level=logging.DEBUG).level == logging.DEBUG

    def test_level_name_accepted(self):
        assert get_logger("tests.warning", level="warning").level == logging.WARNING

    def test_default_level_from_config(self):
        assert get_logger("tests.default").level == logging.INFO
