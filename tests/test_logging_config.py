"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from go_complexity.logging_config import get_logger, setup_logging


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        logger = setup_logging(verbosity)
        assert logger.name == "go_complexity"
        assert logger.level == level

    def test_rich_handler_installed(self):
        setup_logging()
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)


class TestGetLogger:
    def test_root(self):
        assert get_logger().name == "go_complexity"

    def test_module_name_kept(self):
        assert get_logger("go_complexity.analysis.engine").name == "go_complexity.analysis.engine"

    def test_prefixed(self):
        assert get_logger("scanning").name == "go_complexity.scanning"
