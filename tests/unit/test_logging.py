"""Tests for logging utilities."""

import logging

import pytest
import structlog

from hother.include_code.utils.logging import _renderer, configure_logging, get_logger


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_renderer_selection(self):
        """Test the renderer chosen for each output mode."""
        assert isinstance(_renderer(json_output=True, dev_mode=True), structlog.processors.JSONRenderer)
        assert isinstance(_renderer(json_output=False, dev_mode=True), structlog.dev.ConsoleRenderer)
        assert isinstance(_renderer(json_output=False, dev_mode=False), structlog.processors.KeyValueRenderer)

    def test_json_output(self, caplog, reset_structlog):
        """Test that keyword context reaches the stdlib handlers."""
        configure_logging(json_output=True)

        with caplog.at_level(logging.WARNING):
            get_logger("hother.include_code.test").warning("Unresolved invocation", identifier="foo")

        assert '"identifier": "foo"' in caplog.text
        assert "Unresolved invocation" in caplog.text

    def test_default_name(self):
        """Test that a logger is returned without an explicit name."""
        assert get_logger() is not None
