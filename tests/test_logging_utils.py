"""Tests for logging helpers."""

import logging

from DevfileRes.logging_utils import configure_logging, get_logger


class TestGetLogger:
    def test_root(self):
        assert get_logger().name == "DevfileRes"

    def test_module_name_kept(self):
        assert get_logger("DevfileRes.fetcher").name == "DevfileRes.fetcher"

    def test_short_name_prefixed(self):
        assert get_logger("ui").name == "DevfileRes.ui"


class TestConfigureLogging:
    def test_levels(self):
        assert configure_logging().level == logging.INFO
        assert configure_logging(verbose=True).level == logging.DEBUG

    def test_no_duplicate_handlers(self):
        configure_logging()
        logger = configure_logging()
        assert len(logger.handlers) == 1
