"""Tests for core logging module."""

import logging

import pytest

from .lib import LOG_FORMAT, get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Named logger is returned."""
        logger = get_logger("shopforge.test")
        assert logger.name == "shopforge.test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Default logger is the package root."""
        assert get_logger().name == "shopforge"

    @pytest.mark.unit
    def test_module_loggers_propagate_to_root(self) -> None:
        """Module loggers are children of the package logger."""
        child = logging.getLogger("shopforge.render.lib")
        assert child.parent is not None
        assert child.parent.name.startswith("shopforge")

    @pytest.mark.unit
    def test_setup_logging_format(self, monkeypatch) -> None:
        """setup_logging forwards the shared format to basicConfig."""
        captured = {}

        def fake_basic_config(**kwargs):
            captured.update(kwargs)

        monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
        setup_logging(level=logging.DEBUG)

        assert captured["level"] == logging.DEBUG
        assert captured["format"] == LOG_FORMAT
