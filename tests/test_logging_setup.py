"""Tests for console logging setup."""

import logging

from logging_setup import setup_logging


def test_setup_is_idempotent():
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging('WARNING')
        handlers = list(root.handlers)
        setup_logging('debug')
        assert root.handlers == handlers
        assert root.level == logging.DEBUG
        assert logging.getLogger('PIL').level == logging.WARNING
    finally:
        root.setLevel(previous)
