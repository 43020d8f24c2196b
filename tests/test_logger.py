"""
Tests for the package logger.
"""

import logging

from lunatic.logger import logger, setup_logger


def test_import_installs_no_output():
    """Importing the package only attaches a NullHandler."""
    assert logger.name == "lunatic"
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert logger.propagate is True


def test_setup_logger_attaches_stdout_handler():
    configured = setup_logger("lunatic.setup_check", level="DEBUG")
    try:
        stream_handlers = [h for h in configured.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
        assert configured.level == logging.DEBUG
        assert configured.propagate is False
    finally:
        for handler in list(configured.handlers):
            configured.removeHandler(handler)


def test_setup_logger_configures_once():
    name = "lunatic.setup_once"
    first = setup_logger(name, level="INFO")
    try:
        second = setup_logger(name, level="DEBUG")
        assert second is first
        assert len(second.handlers) == 1
        assert second.level == logging.INFO
    finally:
        for handler in list(first.handlers):
            first.removeHandler(handler)
