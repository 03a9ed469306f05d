"""Tests for log.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import logging

import pytest
from rich.logging import RichHandler

from mahc.log import LOG_DATE_FORMAT, LOG_FORMAT, setup_logging


@pytest.fixture(autouse=True)
def _cleanup_root_logger():
    """Remove the handlers setup_logging installs after each test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


class TestSetupLogging:
    def test_configures_rich_handler(self):
        setup_logging()
        root = logging.getLogger()

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

        handler = root.handlers[0]
        assert isinstance(handler, RichHandler)
        assert handler.formatter._fmt == LOG_FORMAT
        assert handler.formatter.datefmt == LOG_DATE_FORMAT

    def test_repeated_calls_do_not_duplicate(self):
        setup_logging()
        setup_logging(logging.DEBUG)
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
