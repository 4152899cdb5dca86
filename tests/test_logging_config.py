"""Tests for tictactoe_engine/logging_config.py."""

import logging

import pytest

from tictactoe_engine import config
from tictactoe_engine.logging_config import (
    COMPACT_FORMAT,
    DEFAULT_FORMAT,
    STRUCTURED_FORMAT,
    LogContext,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def default_log_settings(monkeypatch):
    """Pin the environment-driven defaults."""
    monkeypatch.setattr(config, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(config, "LOG_FORMAT", "default")


class TestSetupLogging:
    """Test setup_logging function."""

    def test_returns_logger(self):
        logger = setup_logging("ttt_test_logger_1")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "ttt_test_logger_1"

    def test_level_default(self):
        logger = setup_logging("ttt_test_logger_2")
        assert logger.level == logging.INFO

    def test_level_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "LOG_LEVEL", "DEBUG")
        logger = setup_logging("ttt_test_logger_3")
        assert logger.level == logging.DEBUG

    def test_level_string(self):
        logger = setup_logging("ttt_test_logger_4", level="warning")
        assert logger.level == logging.WARNING

    def test_unknown_level_name_falls_back_to_info(self):
        logger = setup_logging("ttt_test_logger_5", level="LOUD")
        assert logger.level == logging.INFO

    def test_idempotent(self):
        first = setup_logging("ttt_test_logger_6")
        count = len(first.handlers)
        second = setup_logging("ttt_test_logger_6")
        assert first is second
        assert len(second.handlers) == count

    def test_console_disabled(self):
        logger = setup_logging("ttt_test_logger_7", console=False)
        assert logger.handlers == []

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "nested" / "engine.log"
        logger = setup_logging(
            "ttt_test_logger_8", log_file=log_file, console=False
        )
        logger.info("Game started")
        for handler in logger.handlers:
            handler.flush()
        assert "Game started" in log_file.read_text()

    def test_log_dir(self, tmp_path):
        logger = setup_logging(
            "ttt_test_logger_9", log_dir=tmp_path, console=False
        )
        logger.warning("hello")
        for handler in logger.handlers:
            handler.flush()
        assert (tmp_path / "ttt_test_logger_9.log").exists()

    def test_file_handler_not_duplicated(self, tmp_path):
        log_file = tmp_path / "engine.log"
        setup_logging("ttt_test_logger_10", log_file=log_file, console=False)
        logger = setup_logging(
            "ttt_test_logger_10", log_file=log_file, console=False
        )
        file_handlers = [
            h for h in logger.handlers if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1

    @pytest.mark.parametrize("style,fmt", [
        ("default", DEFAULT_FORMAT),
        ("compact", COMPACT_FORMAT),
        ("structured", STRUCTURED_FORMAT),
        ("nonsense", DEFAULT_FORMAT),
    ])
    def test_format_styles(self, style, fmt):
        logger = setup_logging(f"ttt_test_format_{style}", format_style=style)
        assert logger.handlers[0].formatter._fmt == fmt

    def test_propagation_off_by_default(self):
        assert setup_logging("ttt_test_logger_11").propagate is False


class TestGetLogger:
    """Test get_logger function."""

    def test_same_as_logging(self):
        assert get_logger("ttt_test_plain") is logging.getLogger("ttt_test_plain")


class TestLogContext:
    """Test LogContext context manager."""

    def test_temporarily_changes_level(self):
        logger = setup_logging("ttt_test_ctx_1", level=logging.INFO)
        with LogContext(logger, logging.ERROR) as inner:
            assert inner is logger
            assert logger.level == logging.ERROR
        assert logger.level == logging.INFO

    def test_restores_after_exception(self):
        logger = setup_logging("ttt_test_ctx_2", level="DEBUG")
        with pytest.raises(RuntimeError):
            with LogContext(logger, "CRITICAL"):
                raise RuntimeError("boom")
        assert logger.level == logging.DEBUG
