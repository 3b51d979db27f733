"""Tests for logger setup."""

import logging

from brewcomp.logging_setup import LogObjects, ScreenLogFormatter, get_logger, is_debug


def test_debug_enabled_for_tests():
    assert is_debug() is True


def test_get_logger():
    logger = get_logger("tests.logging")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    for handler in LogObjects.handlers:
        assert handler in logger.handlers


def test_get_logger_twice_adds_no_handler():
    first = list(get_logger("tests.twice").handlers)
    assert get_logger("tests.twice").handlers == first


def test_explicit_level():
    assert get_logger("tests.level", logging.ERROR).level == logging.ERROR


def test_screen_formatter_debug_format():
    record = logging.LogRecord("brewcomp", logging.INFO, "file.py", 12, "hello %s", ("world",), None)
    output = ScreenLogFormatter().format(record)
    assert "hello world" in output
    assert "file.py:12" in output
