"""Tests for structlog configuration."""

import logging

import pytest
import structlog

from aldrin.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_level_by_name(self, capfd):
        configure_logging("warning")
        logger = structlog.get_logger()
        logger.info("hidden_event")
        logger.warning("shown_event", pool="abc")
        out = capfd.readouterr().out
        assert "hidden_event" not in out
        assert "shown_event" in out

    def test_level_by_number(self, capfd):
        configure_logging(logging.DEBUG)
        structlog.get_logger().debug("debug_event")
        assert "debug_event" in capfd.readouterr().out

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError):
            configure_logging("loud")
