# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Tests for logging setup."""

import logging
import sys

from jirapr.utils.logging import LOG_FORMAT, setup_logging


class TestSetupLogging:
    def test_default_level_is_warning(self):
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_enables_debug(self):
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_logs_go_to_stderr(self):
        setup_logging()
        handlers = logging.getLogger().handlers

        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr
        assert handlers[0].formatter._fmt == LOG_FORMAT

    def test_urllib3_is_quiet(self):
        setup_logging(verbose=True)
        assert logging.getLogger('urllib3').level == logging.WARNING
