"""Tests for structured logging."""

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from lcovgate.core.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Reset structlog and stdlib logging around each test."""
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestLoggingConfiguration:
    """Logging configuration tests."""

    def test_given_json_format_when_log_then_valid_json_on_stderr(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        # Given
        configure_logging(json_format=True, level="INFO")
        logger = get_logger("test")

        # When
        logger.info("test message", key="value")

        # Then
        captured = capsys.readouterr()
        assert captured.out == ""
        lines = [line for line in captured.err.strip().split("\n") if line]
        data = json.loads(lines[-1])
        assert data["event"] == "test message"
        assert data["key"] == "value"
        assert data["logger"] == "test"
        assert data["level"] == "info"
        assert "timestamp" in data

    def test_given_default_level_when_info_then_suppressed(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        # Given
        configure_logging()
        logger = get_logger("quiet")

        # When
        logger.info("not shown")
        logger.warning("shown")

        # Then
        err = capsys.readouterr().err
        assert "not shown" not in err
        assert "shown" in err

    def test_given_debug_level_when_debug_then_emitted(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(level="debug")

        get_logger("verbose").debug("parsing detail", records=3)

        assert "parsing detail" in capsys.readouterr().err

    def test_given_reconfigure_when_configured_twice_then_single_handler(self) -> None:
        configure_logging()
        configure_logging(level="DEBUG")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_given_unknown_level_when_configure_then_warning(self) -> None:
        configure_logging(level="LOUD")

        assert logging.getLogger().level == logging.WARNING
